import asyncio
import logging
from typing import Awaitable, Callable, List, Optional, Sequence, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from starlette.concurrency import run_in_threadpool

from mock_interview.core.prompts import FEEDBACK_SYSTEM_PROMPT, build_feedback_prompt, format_transcript
from mock_interview.models.interview import Interview, utcnow
from mock_interview.repositories.feedback_repository import FeedbackRepository
from mock_interview.repositories.interview_repository import InterviewRepository
from mock_interview.schemas.feedback import (
    CreateFeedbackRequest,
    CreateFeedbackResponse,
    FeedbackAssessment,
    FeedbackSummary,
)
from mock_interview.schemas.interview import InterviewWithFeedback
from mock_interview.services.llm_service import TextGenerator

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT")
ResultT = TypeVar("ResultT")


class FeedbackService:
    def __init__(self, generator: TextGenerator, repository: FeedbackRepository):
        self.generator = generator
        self.repository = repository

    def create_feedback(self, request: CreateFeedbackRequest) -> CreateFeedbackResponse:
        """
        Scores a transcript and upserts the feedback record.

        Failures are logged and reported only as ``success=False``; unlike
        question generation, no error detail reaches the caller.
        """
        try:
            prompt = build_feedback_prompt(format_transcript(request.transcript))
            assessment = self.generator.generate_structured(prompt, FEEDBACK_SYSTEM_PROMPT, FeedbackAssessment)

            feedback = self.repository.set(
                {
                    "interview_id": request.interview_id,
                    "user_id": request.user_id,
                    "total_score": assessment.total_score,
                    "category_scores": [score.model_dump() for score in assessment.category_scores],
                    "strengths": assessment.strengths,
                    "areas_for_improvement": assessment.areas_for_improvement,
                    "final_assessment": assessment.final_assessment,
                    "created_at": utcnow(),
                },
                feedback_id=request.feedback_id,
            )
        except Exception as exc:
            self.repository.db.rollback()
            logger.error(f"Error saving feedback for interview {request.interview_id}: {exc}", exc_info=True)
            return CreateFeedbackResponse(success=False)

        logger.info(f"Feedback {feedback.id} saved for interview {request.interview_id}")
        return CreateFeedbackResponse(success=True, feedback_id=feedback.id)


async def gather_in_order(
    items: Sequence[ItemT],
    lookup: Callable[[ItemT], Awaitable[ResultT]],
) -> List[ResultT]:
    """Runs ``lookup`` for every item concurrently; results follow input order."""
    return list(await asyncio.gather(*(lookup(item) for item in items)))


def lookup_feedback_summary(session_factory: sessionmaker, interview_id: str, user_id: str) -> Optional[FeedbackSummary]:
    with session_factory() as db:
        feedback = FeedbackRepository(db).find_by_interview(interview_id, user_id)
        if feedback is None:
            return None
        return FeedbackSummary(
            total_score=feedback.total_score,
            final_assessment=feedback.final_assessment,
            created_at=feedback.created_at,
        )


async def attach_feedback_summaries(
    interviews: Sequence[Interview],
    user_id: str,
    session_factory: sessionmaker,
) -> List[InterviewWithFeedback]:
    async def lookup(interview: Interview) -> Optional[FeedbackSummary]:
        return await run_in_threadpool(lookup_feedback_summary, session_factory, interview.id, user_id)

    summaries = await gather_in_order(interviews, lookup)
    return [
        InterviewWithFeedback.from_record(interview).model_copy(update={"feedback": summary})
        for interview, summary in zip(interviews, summaries)
    ]


async def get_user_interviews(user_id: str, session_factory: sessionmaker) -> Optional[List[InterviewWithFeedback]]:
    """A user's interviews, newest first, each with its feedback summary. ``None`` on store failure."""
    try:
        with session_factory() as db:
            interviews = InterviewRepository(db).list_by_user(user_id)
            # Detach loaded rows so lookups can run in their own sessions
            db.expunge_all()
        return await attach_feedback_summaries(interviews, user_id, session_factory)
    except SQLAlchemyError as exc:
        logger.error(f"Error fetching interviews for user {user_id}: {exc}", exc_info=True)
        return None
