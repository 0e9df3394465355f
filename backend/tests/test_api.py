import logging

import pytest
from fastapi.testclient import TestClient

from main import app
from prompts import BASE_WITH_CONTEXT, GENTLE_HINT


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_tutor_prompt(client):
    response = client.post(
        "/prompts/tutor",
        json={"mode": "hint", "options": {"hint_level": 1, "has_context": True, "topic": "Limits"}},
    )
    assert response.status_code == 200
    prompt = response.json()["prompt"]
    assert prompt.startswith(BASE_WITH_CONTEXT)
    assert GENTLE_HINT in prompt
    assert "This question is about: Limits." in prompt


def test_tutor_prompt_options_are_optional(client):
    response = client.post("/prompts/tutor", json={"mode": "explain"})
    assert response.status_code == 200
    assert "Your task is to EXPLAIN" in response.json()["prompt"]


def test_tutor_prompt_rejects_unknown_mode(client):
    response = client.post("/prompts/tutor", json={"mode": "bogus"})
    assert response.status_code == 422


def test_quiz_prompt(client):
    response = client.post(
        "/prompts/quiz",
        json={
            "topic": "Photosynthesis",
            "num_questions": 5,
            "difficulty": "medium",
            "question_types": ["mcq", "short"],
        },
    )
    assert response.status_code == 200
    prompt = response.json()["prompt"]
    assert "5 high-quality quiz questions about: Photosynthesis" in prompt
    assert "mcq, short" in prompt


@pytest.mark.parametrize(
    "payload",
    [
        {"topic": "A", "num_questions": 0, "difficulty": "easy", "question_types": ["mcq"]},
        {"topic": "A", "num_questions": 3, "difficulty": "easy", "question_types": []},
        {"topic": "   ", "num_questions": 3, "difficulty": "easy", "question_types": ["mcq"]},
        {"topic": "A", "num_questions": 21, "difficulty": "easy", "question_types": ["mcq"]},
        {"topic": "x" * 201, "num_questions": 3, "difficulty": "easy", "question_types": ["mcq"]},
    ],
)
def test_quiz_prompt_validation(client, payload):
    assert client.post("/prompts/quiz", json=payload).status_code == 422


def test_flashcard_prompt(client):
    response = client.post(
        "/prompts/flashcards",
        json={"topic": "Osmosis", "num_cards": 3, "context": "cell walls..."},
    )
    assert response.status_code == 200
    prompt = response.json()["prompt"]
    assert "3 flashcards for studying: Osmosis" in prompt
    assert "Source Material:\ncell walls..." in prompt


@pytest.mark.parametrize(
    "payload",
    [
        {"topic": "Osmosis", "num_cards": -1},
        {"topic": "Osmosis", "num_cards": 0},
        {"topic": "Osmosis", "num_cards": 31},
        {"topic": "x" * 201, "num_cards": 5},
    ],
)
def test_flashcard_prompt_validation(client, payload):
    assert client.post("/prompts/flashcards", json=payload).status_code == 422


def test_count_and_topic_limits_are_inclusive(client):
    quiz = {"topic": "x" * 200, "num_questions": 20, "difficulty": "easy", "question_types": ["mcq"]}
    assert client.post("/prompts/quiz", json=quiz).status_code == 200
    cards = {"topic": "x" * 200, "num_cards": 30}
    assert client.post("/prompts/flashcards", json=cards).status_code == 200


def test_chat_prompt(client):
    response = client.post(
        "/prompts/chat",
        json={
            "query": "What is osmosis?",
            "level": "college",
            "mode": "explain",
            "passages": [{"id": "bio-2", "text": "Water moves across membranes.", "page": 12}],
            "history": [{"role": "user", "content": "hi"}],
        },
    )
    assert response.status_code == 200
    prompt = response.json()["prompt"]
    assert "#1 [source:bio-2 | page:12]" in prompt
    assert "user: hi" in prompt


@pytest.mark.parametrize("query", [" ", "q" * 5001])
def test_chat_prompt_rejects_bad_query(client, query):
    response = client.post("/prompts/chat", json={"query": query, "level": "child", "mode": "hint"})
    assert response.status_code == 422


def test_evaluation_prompt(client):
    response = client.post(
        "/prompts/evaluate",
        json={"question": "Define osmosis", "student_answer": "Water diffusion"},
    )
    assert response.status_code == 200
    assert "Student's Answer: Water diffusion" in response.json()["prompt"]


def test_evaluation_prompt_requires_answer(client):
    response = client.post("/prompts/evaluate", json={"question": "Define osmosis", "student_answer": ""})
    assert response.status_code == 422


def test_analysis_prompt(client):
    response = client.post("/prompts/analyze", json={"content": "Cells are the unit of life.", "file_name": "bio.pdf"})
    assert response.status_code == 200
    assert "Content:\nCells are the unit of life." in response.json()["prompt"]


def test_analysis_log_does_not_include_file_name(client, caplog):
    caplog.set_level(logging.INFO)
    response = client.post(
        "/prompts/analyze",
        json={"content": "Cells are the unit of life.", "file_name": "secret-notes.pdf"},
    )
    assert response.status_code == 200
    assert "Built analysis prompt" in caplog.text
    assert "secret-notes.pdf" not in caplog.text


def test_insights_prompt(client):
    response = client.post("/prompts/insights", json={"performance_data": {"streak": 3}})
    assert response.status_code == 200
    assert '"streak": 3' in response.json()["prompt"]


def test_insights_prompt_requires_data(client):
    assert client.post("/prompts/insights", json={}).status_code == 422


def test_cluster_prompt(client):
    response = client.post("/prompts/clusters", json={"concepts": ["Mitosis", "Meiosis"]})
    assert response.status_code == 200
    assert "Concepts: Mitosis, Meiosis" in response.json()["prompt"]


def test_cluster_prompt_requires_list(client):
    assert client.post("/prompts/clusters", json={"concepts": "Mitosis"}).status_code == 422


def test_routine_prompt(client):
    response = client.post(
        "/prompts/routine",
        json={
            "preferences": {
                "wake_up_time": "06:30",
                "sleep_time": "22:30",
                "study_goal_hours": 3,
                "school_or_work_hours": 8,
                "school_or_work_start_time": "08:00",
                "priority_level": "academic",
                "break_preference": "frequent-short",
            },
            "activities": [{"name": "Run", "suggested_duration": 45, "category": "health"}],
        },
    )
    assert response.status_code == 200
    prompt = response.json()["prompt"]
    assert "15-min breaks every 90 minutes" in prompt
    assert "- Run (45 min, health)" in prompt


def test_routine_prompt_requires_preferences(client):
    assert client.post("/prompts/routine", json={"activities": []}).status_code == 422


def test_quick_chat_prompt(client):
    response = client.post(
        "/prompts/quick-chat",
        json={"message": "What is a derivative?", "mode": "solve", "context": "Chapter 2"},
    )
    assert response.status_code == 200
    prompt = response.json()["prompt"]
    assert "Context: Chapter 2" in prompt
    assert prompt.endswith("Student question: What is a derivative?")


@pytest.mark.parametrize("message", ["", "m" * 5001])
def test_quick_chat_prompt_rejects_bad_message(client, message):
    assert client.post("/prompts/quick-chat", json={"message": message}).status_code == 422
