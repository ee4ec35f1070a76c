import pytest
from fastapi.testclient import TestClient

from quizhost.config import Settings
from quizhost.db import Database
from quizhost.main import create_app
from quizhost.quiz_store import QuizStore
from quizhost.result_store import ResultStore

ADMIN_KEY = "test-admin-key"

def make_quiz(quiz_id="q1", **overrides):
    quiz = {
        "id": quiz_id,
        "title": "General knowledge",
        "questions": [
            {"prompt": "2 + 2?", "options": ["3", "4", "5"], "correctOptionIndex": 1},
            {"prompt": "Capital of France?", "options": ["Paris", "Rome"], "correctOptionIndex": 0},
            {"prompt": "Largest planet?", "options": ["Mars", "Venus", "Jupiter", "Earth"], "correctOptionIndex": 2},
        ],
        "timePerQuestionSeconds": 20,
        "createdAt": "2024-10-08T10:00:00",
        "isActive": False,
    }
    quiz.update(overrides)
    return quiz

def make_result(**overrides):
    result = {
        "participantName": "Asha",
        "quizId": "q1",
        "score": 7,
        "totalQuestions": 10,
        "completedAt": "2024-10-08T10:05:00Z",
        "totalTimeSpentSeconds": 120,
    }
    result.update(overrides)
    return result

@pytest.fixture
def database():
    db = Database("sqlite://")
    db.create_all()
    yield db
    db.dispose()

@pytest.fixture
def quiz_store(database):
    return QuizStore(database)

@pytest.fixture
def result_store(database):
    return ResultStore(database)

@pytest.fixture
def settings():
    return Settings(database_url="sqlite://", admin_api_key=ADMIN_KEY, seed_demo_quiz=False)

@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as c:
        yield c

@pytest.fixture
def admin_headers():
    return {"x-api-key": ADMIN_KEY}
