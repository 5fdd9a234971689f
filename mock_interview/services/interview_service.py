import logging

from sqlalchemy.exc import SQLAlchemyError

from mock_interview.core.exceptions import GenerationError, PersistenceError
from mock_interview.core.prompts import build_question_prompt
from mock_interview.models.interview import Interview
from mock_interview.repositories.interview_repository import InterviewRepository
from mock_interview.schemas.interview import GenerationRequest
from mock_interview.services.llm_service import TextGenerator
from mock_interview.services.question_parser import normalize_questions
from mock_interview.services.request_validation import validate_generation_request

logger = logging.getLogger(__name__)


class InterviewService:
    """validate → generate → normalize → persist. Nothing is written unless every step succeeds."""

    def __init__(self, generator: TextGenerator, repository: InterviewRepository):
        self.generator = generator
        self.repository = repository

    def generate_interview(self, request: GenerationRequest) -> Interview:
        validate_generation_request(request)
        techstack = request.techstack_items

        prompt = build_question_prompt(
            role=request.role,
            level=request.level,
            techstack=techstack,
            interview_type=request.type,
            amount=request.amount,
        )

        try:
            raw = self.generator.generate_text(prompt)
        except Exception as exc:
            logger.error(f"Question generation call failed: {exc}", exc_info=True)
            raise GenerationError("Failed to generate questions", details=str(exc)) from exc

        # ParseError propagates unchanged to the HTTP boundary
        normalized = normalize_questions(raw, request.amount)
        logger.info(
            f"Parsed {len(normalized.questions)}/{normalized.requested} questions "
            f"for {request.role} ({request.level}, {request.type})"
        )

        try:
            interview = self.repository.create(
                user_id=request.user_id,
                role=request.role,
                interview_type=request.type,
                level=request.level,
                techstack=techstack,
                questions=normalized.questions,
            )
        except SQLAlchemyError as exc:
            self.repository.db.rollback()
            logger.error(f"Failed to save interview: {exc}", exc_info=True)
            raise PersistenceError("Failed to save interview", details=str(exc)) from exc

        logger.info(f"Interview created with ID: {interview.id}")
        return interview
