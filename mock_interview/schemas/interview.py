from datetime import datetime
from typing import Any, List, Optional, Union

from pydantic import AliasChoices, BaseModel, Field

from mock_interview.schemas.base import CamelModel
from mock_interview.schemas.feedback import FeedbackSummary

INTERVIEW_TYPES = ("Technical", "Behavioral", "Mixed")
INTERVIEW_LEVELS = ("Junior", "Mid-Level", "Senior")


class GenerationRequest(BaseModel):
    """
    Raw generation parameters. Every field is optional at the parsing layer so
    that presence and enum checks run in a fixed order afterwards.
    """

    type: Any = None
    role: Optional[str] = None
    level: Any = None
    techstack: Optional[Union[str, List[str]]] = Field(
        default=None, validation_alias=AliasChoices("techstack", "techStack")
    )
    amount: Optional[int] = None
    user_id: Optional[str] = Field(default=None, validation_alias=AliasChoices("userid", "userId", "user_id"))

    @property
    def techstack_items(self) -> List[str]:
        if not self.techstack:
            return []
        items = self.techstack.split(",") if isinstance(self.techstack, str) else self.techstack
        return [str(item).strip() for item in items if str(item).strip()]


class InterviewCreateResponse(CamelModel):
    success: bool = True
    interview_id: str


class LivenessResponse(BaseModel):
    success: bool = True
    message: str


class InterviewItem(CamelModel):
    id: str
    user_id: str
    role: str
    interview_type: str = Field(alias="type")
    level: str
    techstack: List[str]
    questions: List[str]
    finalized: bool
    created_at: datetime

    @classmethod
    def from_record(cls, interview) -> "InterviewItem":
        return cls(
            id=interview.id,
            user_id=interview.user_id,
            role=interview.role,
            interview_type=interview.interview_type,
            level=interview.level,
            techstack=interview.techstack,
            questions=interview.questions,
            finalized=interview.finalized,
            created_at=interview.created_at,
        )


class InterviewWithFeedback(InterviewItem):
    feedback: Optional[FeedbackSummary] = None


class UserInterviewsResponse(CamelModel):
    success: bool
    interviews: List[InterviewWithFeedback]
