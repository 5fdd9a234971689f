from fastapi import APIRouter, Depends
from sqlalchemy.orm import sessionmaker

from mock_interview.db.session import get_session_factory
from mock_interview.schemas.interview import UserInterviewsResponse
from mock_interview.services.feedback_service import get_user_interviews

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}/interviews", response_model=UserInterviewsResponse)
async def list_user_interviews(user_id: str, session_factory: sessionmaker = Depends(get_session_factory)):
    interviews = await get_user_interviews(user_id, session_factory)
    if interviews is None:
        return UserInterviewsResponse(success=False, interviews=[])
    return UserInterviewsResponse(success=True, interviews=interviews)
