"""
Turns a raw text-generation reply into a bounded list of interview questions.

Parsing runs in two explicit stages: a strict JSON parse of the (fence
stripped) reply, then a recovery parse of the outermost ``[...]`` span when the
strict stage fails. Neither stage raises; each reports its own error so the
caller can tell a malformed reply apart from a well-formed one with the wrong
shape or no usable questions.
"""
import json
import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from mock_interview.core.exceptions import ParseError

logger = logging.getLogger(__name__)

FENCE = "```"
MIN_QUESTION_LENGTH = 10
PARSE_FAILURE_MESSAGE = "Failed to generate valid questions. Please try again."


@dataclass
class NormalizedQuestions:
    questions: List[str] = field(default_factory=list)
    requested: int = 0
    dropped: int = 0

    @property
    def is_partial(self) -> bool:
        return len(self.questions) < self.requested


def strip_code_fence(text: str) -> str:
    """Removes the first and last line when the text is wrapped in a markdown fence."""
    if text.startswith(FENCE) and text.endswith(FENCE):
        return "\n".join(text.split("\n")[1:-1])
    return text


def _reject_constant(name: str):
    raise json.JSONDecodeError(f"Invalid constant {name}", name, 0)


def _parse_strict(text: str) -> Tuple[Any, Optional[json.JSONDecodeError]]:
    try:
        return json.loads(text, parse_constant=_reject_constant), None
    except json.JSONDecodeError as exc:
        return None, exc


def _bracketed_span(text: str) -> Optional[str]:
    start = text.find("[")
    end = text.rfind("]")
    if start == -1 or end == -1 or end <= start:
        return None
    return text[start:end + 1]


def _stringify(item: Any) -> str:
    """String conversion matching what a JavaScript client renders for a JSON value."""
    if isinstance(item, str):
        return item
    if item is None:
        return "null"
    if isinstance(item, bool):
        return "true" if item else "false"
    if isinstance(item, float) and item.is_integer():
        return str(int(item))
    if isinstance(item, list):
        # null elements render as empty strings inside a joined array
        return ",".join("" if element is None else _stringify(element) for element in item)
    if isinstance(item, dict):
        return "[object Object]"
    return str(item)


def _coerce(item: Any) -> str:
    return _stringify(item).strip()


def is_valid_question(text: str) -> bool:
    return len(text) >= MIN_QUESTION_LENGTH and "?" in text


def parse_question_payload(raw: str) -> Any:
    """Decodes the reply, falling back to its bracketed span. Raises ``ParseError`` (malformed)."""
    cleaned = strip_code_fence(raw.strip())

    value, error = _parse_strict(cleaned)
    if error is None:
        return value

    span = _bracketed_span(cleaned)
    if span is not None:
        logger.debug(f"Strict parse failed, retrying on extracted array: {span[:200]}")
        value, recovery_error = _parse_strict(span)
        if recovery_error is None:
            return value

    raise ParseError(ParseError.MALFORMED, PARSE_FAILURE_MESSAGE, details=str(error))


def normalize_questions(raw: str, requested_amount: int) -> NormalizedQuestions:
    """
    Cleans a model reply into at most ``requested_amount`` questions.

    Entries shorter than ten characters or without a ``?`` are dropped and
    counted. A result with fewer questions than requested is returned as is and
    logged; an empty result raises ``ParseError``.
    """
    if requested_amount < 1:
        raise ValueError("requested_amount must be a positive integer")

    payload = parse_question_payload(raw)

    if not isinstance(payload, list):
        logger.error(f"Parsed result is not an array: {str(payload)[:200]}")
        raise ParseError(
            ParseError.NOT_AN_ARRAY,
            PARSE_FAILURE_MESSAGE,
            details="Generated questions must be an array",
        )

    candidates = [_coerce(item) for item in payload]
    questions = [item for item in candidates if is_valid_question(item)]
    dropped = len(candidates) - len(questions)

    if not questions:
        raise ParseError(
            ParseError.NO_VALID_QUESTIONS,
            PARSE_FAILURE_MESSAGE,
            details="No valid questions generated",
        )

    if len(questions) < requested_amount:
        logger.warning(
            f"Only {len(questions)} valid questions generated out of {requested_amount} requested "
            f"({dropped} dropped)"
        )
    elif dropped:
        logger.info(f"Dropped {dropped} invalid entries from generated questions")

    return NormalizedQuestions(
        questions=questions[:requested_amount],
        requested=requested_amount,
        dropped=dropped,
    )
