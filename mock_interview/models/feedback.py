from datetime import datetime

from sqlalchemy import JSON, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from mock_interview.db.base import Base
from mock_interview.db.types import UTCDateTime
from mock_interview.models.interview import generate_id, utcnow


class Feedback(Base):
    __tablename__ = "feedback"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=generate_id)
    interview_id: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    user_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    total_score: Mapped[int] = mapped_column(Integer, nullable=False)
    category_scores: Mapped[list[dict]] = mapped_column(JSON, nullable=False, default=list)
    strengths: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    areas_for_improvement: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    final_assessment: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime(), default=utcnow, nullable=False)
