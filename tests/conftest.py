"""Shared fixtures: an in-memory database per test and a client bound to it"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from edugamify.core.database import get_db, init_db
from edugamify.core.security import create_access_token, get_password_hash
from edugamify.main import app
from edugamify.models.quiz import Quiz
from edugamify.models.user import User


def _question(text, correct_answer, points=25):
    return {
        "question": text,
        "options": ["A", "B", "C", "D"],
        "correctAnswer": correct_answer,
        "points": points,
    }


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    """Factory that inserts users in call order"""
    counter = {"n": 0}

    def _make_user(name=None, points=0, email=None):
        counter["n"] += 1
        user = User(
            name=name or f"Player {counter['n']}",
            email=email or f"player{counter['n']}@example.com",
            password_hash=get_password_hash("secret123"),
            points=points,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_quiz(db):
    def _make_quiz(title="General Knowledge", questions=None):
        quiz = Quiz(
            title=title,
            description=f"{title} quiz",
            difficulty="beginner",
            points=100,
            time_limit=300,
            questions=questions
            if questions is not None
            else [
                _question("Q1", 0),
                _question("Q2", 1),
                _question("Q3", 2),
                _question("Q4", 0),
            ],
        )
        db.add(quiz)
        db.commit()
        db.refresh(quiz)
        return quiz

    return _make_quiz


@pytest.fixture
def auth_headers():
    def _auth_headers(user_id):
        return {"Authorization": f"Bearer {create_access_token(user_id)}"}

    return _auth_headers
