from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from mock_interview.db.session import get_db
from mock_interview.repositories.feedback_repository import FeedbackRepository
from mock_interview.schemas.feedback import CreateFeedbackRequest, CreateFeedbackResponse
from mock_interview.services.feedback_service import FeedbackService
from mock_interview.services.llm_service import TextGenerator, get_text_generator

router = APIRouter(prefix="/feedback", tags=["feedback"])


@router.post("", response_model=CreateFeedbackResponse, response_model_exclude_none=True)
def create_feedback(
    body: CreateFeedbackRequest,
    db: Session = Depends(get_db),
    generator: TextGenerator = Depends(get_text_generator),
):
    service = FeedbackService(generator, FeedbackRepository(db))
    return service.create_feedback(body)
