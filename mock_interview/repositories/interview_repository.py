from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from mock_interview.models.interview import Interview


class InterviewRepository:
    def __init__(self, db: Session):
        self.db = db

    def create(
        self,
        user_id: str,
        role: str,
        interview_type: str,
        level: str,
        techstack: List[str],
        questions: List[str],
    ) -> Interview:
        interview = Interview(
            user_id=user_id,
            role=role,
            interview_type=interview_type,
            level=level,
            techstack=techstack,
            questions=questions,
            finalized=True,
        )
        self.db.add(interview)
        self.db.commit()
        self.db.refresh(interview)
        return interview

    def get_by_id(self, interview_id: str) -> Interview | None:
        return self.db.get(Interview, interview_id)

    def list_by_user(self, user_id: str) -> List[Interview]:
        stmt = (
            select(Interview)
            .where(Interview.user_id == user_id)
            .order_by(Interview.created_at.desc())
        )
        return list(self.db.scalars(stmt).all())

    def list_latest(self, exclude_user_id: str, limit: int) -> List[Interview]:
        stmt = (
            select(Interview)
            .where(Interview.finalized.is_(True), Interview.user_id != exclude_user_id)
            .order_by(Interview.created_at.desc())
            .limit(limit)
        )
        return list(self.db.scalars(stmt).all())
