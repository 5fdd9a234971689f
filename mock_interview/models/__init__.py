from mock_interview.models.feedback import Feedback
from mock_interview.models.interview import Interview

__all__ = [
    "Feedback",
    "Interview",
]
