from fastapi import APIRouter

from mock_interview.api.routes.feedback import router as feedback_router
from mock_interview.api.routes.interviews import router as interviews_router
from mock_interview.api.routes.users import router as users_router

api_router = APIRouter()
api_router.include_router(interviews_router)
api_router.include_router(feedback_router)
api_router.include_router(users_router)
