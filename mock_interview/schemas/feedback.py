from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from mock_interview.schemas.base import CamelModel

CATEGORY_NAMES = (
    "Communication Skills",
    "Technical Knowledge",
    "Problem-Solving",
    "Cultural Fit",
    "Interview Presence",
)

CategoryName = Literal[
    "Communication Skills",
    "Technical Knowledge",
    "Problem-Solving",
    "Cultural Fit",
    "Interview Presence",
]


class TranscriptTurn(BaseModel):
    role: str
    content: str


class CategoryScore(BaseModel):
    name: CategoryName
    score: int = Field(ge=0, le=100)
    comment: str


class FeedbackAssessment(BaseModel):
    """Shape the model must return when scoring a transcript."""

    total_score: int = Field(ge=0, le=100)
    category_scores: List[CategoryScore] = Field(min_length=5, max_length=5)
    strengths: List[str]
    areas_for_improvement: List[str]
    final_assessment: str

    @field_validator("category_scores")
    @classmethod
    def _one_score_per_category(cls, value: List[CategoryScore]) -> List[CategoryScore]:
        names = {item.name for item in value}
        if len(names) != len(value):
            raise ValueError("category_scores must name each category once")
        return value


class CreateFeedbackRequest(CamelModel):
    interview_id: str
    user_id: str
    transcript: List[TranscriptTurn]
    feedback_id: Optional[str] = None


class CreateFeedbackResponse(CamelModel):
    success: bool
    feedback_id: Optional[str] = None


class FeedbackItem(CamelModel):
    id: str
    interview_id: str
    user_id: str
    total_score: int
    category_scores: List[CategoryScore]
    strengths: List[str]
    areas_for_improvement: List[str]
    final_assessment: str
    created_at: datetime

    @classmethod
    def from_record(cls, feedback) -> "FeedbackItem":
        return cls(
            id=feedback.id,
            interview_id=feedback.interview_id,
            user_id=feedback.user_id,
            total_score=feedback.total_score,
            category_scores=feedback.category_scores,
            strengths=feedback.strengths,
            areas_for_improvement=feedback.areas_for_improvement,
            final_assessment=feedback.final_assessment,
            created_at=feedback.created_at,
        )


class FeedbackSummary(CamelModel):
    total_score: int
    final_assessment: str
    created_at: datetime
