from mock_interview.core.exceptions import ValidationError
from mock_interview.schemas.interview import INTERVIEW_LEVELS, INTERVIEW_TYPES, GenerationRequest


def validate_generation_request(request: GenerationRequest) -> GenerationRequest:
    """Checks presence, then type, then level; the first failing check wins."""
    required = (
        request.type,
        request.role,
        request.level,
        request.techstack,
        request.amount,
        request.user_id,
    )
    if not all(required):
        raise ValidationError("Missing required fields")

    if request.type not in INTERVIEW_TYPES:
        raise ValidationError("Invalid interview type")

    if request.level not in INTERVIEW_LEVELS:
        raise ValidationError("Invalid experience level")

    if request.amount < 1:
        raise ValidationError("Amount must be a positive integer")

    return request
