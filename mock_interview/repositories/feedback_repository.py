from typing import Any, Dict

from sqlalchemy import select
from sqlalchemy.orm import Session

from mock_interview.models.feedback import Feedback
from mock_interview.models.interview import generate_id


class FeedbackRepository:
    def __init__(self, db: Session):
        self.db = db

    def set(self, data: Dict[str, Any], feedback_id: str | None = None) -> Feedback:
        """Writes ``data`` at ``feedback_id``, replacing any existing record, or at a new id."""
        feedback = Feedback(id=feedback_id or generate_id(), **data)
        feedback = self.db.merge(feedback)
        self.db.commit()
        self.db.refresh(feedback)
        return feedback

    def get_by_id(self, feedback_id: str) -> Feedback | None:
        return self.db.get(Feedback, feedback_id)

    def find_by_interview(self, interview_id: str, user_id: str) -> Feedback | None:
        stmt = (
            select(Feedback)
            .where(Feedback.interview_id == interview_id, Feedback.user_id == user_id)
            .limit(1)
        )
        return self.db.scalars(stmt).first()
