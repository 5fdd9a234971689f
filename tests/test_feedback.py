from sqlalchemy import func, select

from main import app
from mock_interview.core.config import settings
from mock_interview.core.prompts import FEEDBACK_SYSTEM_PROMPT
from mock_interview.models.feedback import Feedback
from mock_interview.schemas.feedback import CATEGORY_NAMES
from mock_interview.services.llm_service import get_text_generator

ASSESSMENT = {
    "total_score": 78,
    "category_scores": [{"name": name, "score": 80, "comment": "Solid."} for name in CATEGORY_NAMES],
    "strengths": ["Clear explanations of caching"],
    "areas_for_improvement": ["Discuss trade-offs earlier"],
    "final_assessment": "Ready for mid-level interviews with some practice on system design.",
}

REQUEST = {
    "interviewId": "iv-1",
    "userId": "user-1",
    "transcript": [
        {"role": "assistant", "content": "Tell me about a system you designed?"},
        {"role": "user", "content": "I built a billing API."},
    ],
}


def count_feedback(db) -> int:
    return db.scalar(select(func.count()).select_from(Feedback))


def test_create_feedback_persists_assessment(client, generator, db):
    generator.structured = ASSESSMENT

    response = client.post("/api/feedback", json=REQUEST)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True

    feedback = db.get(Feedback, body["feedbackId"])
    assert feedback.interview_id == "iv-1"
    assert feedback.user_id == "user-1"
    assert feedback.total_score == 78
    assert [score["name"] for score in feedback.category_scores] == list(CATEGORY_NAMES)
    assert feedback.strengths == ["Clear explanations of caching"]
    assert feedback.areas_for_improvement == ["Discuss trade-offs earlier"]


def test_transcript_is_formatted_one_line_per_turn(client, generator):
    generator.structured = ASSESSMENT

    client.post("/api/feedback", json=REQUEST)

    [prompt] = generator.prompts
    assert "- assistant: Tell me about a system you designed?\n- user: I built a billing API.\n" in prompt
    assert generator.systems == [FEEDBACK_SYSTEM_PROMPT]


def test_supplied_feedback_id_is_overwritten_in_place(client, generator, db):
    generator.structured = ASSESSMENT
    first = client.post("/api/feedback", json={**REQUEST, "feedbackId": "fb-1"})

    generator.structured = {**ASSESSMENT, "total_score": 91}
    second = client.post("/api/feedback", json={**REQUEST, "feedbackId": "fb-1"})

    assert first.json() == {"success": True, "feedbackId": "fb-1"}
    assert second.json() == {"success": True, "feedbackId": "fb-1"}
    assert count_feedback(db) == 1
    assert db.get(Feedback, "fb-1").total_score == 91


def test_generation_failure_is_reported_without_details(client, generator, db):
    generator.error = RuntimeError("model unavailable")

    response = client.post("/api/feedback", json=REQUEST)

    assert response.status_code == 200
    assert response.json() == {"success": False}
    assert count_feedback(db) == 0


def test_out_of_range_scores_are_rejected(client, generator, db):
    generator.structured = {**ASSESSMENT, "total_score": 150}

    response = client.post("/api/feedback", json=REQUEST)

    assert response.json() == {"success": False}
    assert count_feedback(db) == 0


def test_get_feedback_for_interview_and_user(client, generator):
    generator.structured = ASSESSMENT
    client.post("/api/feedback", json=REQUEST)

    response = client.get("/api/interviews/iv-1/feedback", params={"user_id": "user-1"})

    assert response.status_code == 200
    body = response.json()
    assert body["interviewId"] == "iv-1"
    assert body["totalScore"] == 78
    assert len(body["categoryScores"]) == 5
    assert body["finalAssessment"] == ASSESSMENT["final_assessment"]


def test_get_feedback_for_other_user_is_null(client, generator):
    generator.structured = ASSESSMENT
    client.post("/api/feedback", json=REQUEST)

    response = client.get("/api/interviews/iv-1/feedback", params={"user_id": "user-2"})

    assert response.status_code == 200
    assert response.json() is None


def test_missing_api_key_reports_plain_failure(client, db, monkeypatch):
    monkeypatch.setattr(settings, "openai_api_key", None)
    app.dependency_overrides.pop(get_text_generator)

    response = client.post("/api/feedback", json=REQUEST)

    assert response.status_code == 200
    assert response.json() == {"success": False}
    assert count_feedback(db) == 0
