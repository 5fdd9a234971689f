from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from main import app
from mock_interview.db.base import Base
from mock_interview.db.session import build_engine, get_db, get_session_factory
from mock_interview.models.interview import Interview
from mock_interview.services.llm_service import get_text_generator


class FakeTextGenerator:
    """Stands in for the hosted model; records every prompt it receives."""

    def __init__(self, text: str = "", structured: dict | None = None, error: Exception | None = None):
        self.text = text
        self.structured = structured
        self.error = error
        self.prompts: list[str] = []
        self.systems: list[str] = []

    def generate_text(self, prompt, model=None):
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.text

    def generate_structured(self, prompt, system, schema, model=None):
        self.prompts.append(prompt)
        self.systems.append(system)
        if self.error:
            raise self.error
        return schema.model_validate(self.structured)


@pytest.fixture
def engine(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'test.db'}")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def generator():
    return FakeTextGenerator()


@pytest.fixture
def client(session_factory, generator):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    app.dependency_overrides[get_text_generator] = lambda: generator
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def seed_interview(db):
    def _seed(user_id: str, created_at: datetime, role: str = "Backend Developer", finalized: bool = True) -> Interview:
        interview = Interview(
            user_id=user_id,
            role=role,
            interview_type="Technical",
            level="Mid-Level",
            techstack=["Python", "PostgreSQL"],
            questions=["How would you index a large table?"],
            finalized=finalized,
            created_at=created_at,
        )
        db.add(interview)
        db.commit()
        db.refresh(interview)
        return interview

    return _seed
