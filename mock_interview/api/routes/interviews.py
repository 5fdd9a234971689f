from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from mock_interview.core.config import settings
from mock_interview.db.session import get_db
from mock_interview.repositories.feedback_repository import FeedbackRepository
from mock_interview.repositories.interview_repository import InterviewRepository
from mock_interview.schemas.feedback import FeedbackItem
from mock_interview.schemas.interview import (
    GenerationRequest,
    InterviewCreateResponse,
    InterviewItem,
    LivenessResponse,
)
from mock_interview.services.interview_service import InterviewService
from mock_interview.services.llm_service import TextGenerator, get_text_generator

router = APIRouter(prefix="/interviews", tags=["interviews"])


@router.post("/generate", response_model=InterviewCreateResponse)
def generate_interview(
    body: GenerationRequest,
    db: Session = Depends(get_db),
    generator: TextGenerator = Depends(get_text_generator),
):
    service = InterviewService(generator, InterviewRepository(db))
    interview = service.generate_interview(body)
    return InterviewCreateResponse(success=True, interview_id=interview.id)


@router.get("/generate", response_model=LivenessResponse)
def generation_liveness():
    return LivenessResponse(success=True, message="Interview generation API is running")


@router.get("/latest", response_model=list[InterviewItem])
def list_latest_interviews(
    user_id: str,
    limit: int = Query(default=settings.latest_interviews_limit, ge=1),
    db: Session = Depends(get_db),
):
    repo = InterviewRepository(db)
    return [InterviewItem.from_record(item) for item in repo.list_latest(exclude_user_id=user_id, limit=limit)]


@router.get("/{interview_id}", response_model=InterviewItem)
def get_interview(interview_id: str, db: Session = Depends(get_db)):
    interview = InterviewRepository(db).get_by_id(interview_id)
    if not interview:
        raise HTTPException(status_code=404, detail="Interview not found")
    return InterviewItem.from_record(interview)


@router.get("/{interview_id}/feedback", response_model=Optional[FeedbackItem])
def get_interview_feedback(interview_id: str, user_id: str, db: Session = Depends(get_db)):
    feedback = FeedbackRepository(db).find_by_interview(interview_id, user_id)
    if feedback is None:
        return None
    return FeedbackItem.from_record(feedback)
