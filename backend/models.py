from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, field_validator

# Limits enforced on incoming requests only; the builders accept anything.
MAX_TOPIC_CHARS = 200
MAX_QUIZ_QUESTIONS = 20
MAX_FLASHCARDS = 30
MAX_MESSAGE_CHARS = 5000


def _checked_topic(v: str) -> str:
    if not v.strip():
        raise ValueError("Topic cannot be empty")
    if len(v.strip()) > MAX_TOPIC_CHARS:
        raise ValueError(f"Topic is too long (max {MAX_TOPIC_CHARS} characters)")
    return v.strip()


def _checked_message(v: str, label: str) -> str:
    if not v.strip():
        raise ValueError(f"{label} cannot be empty")
    if len(v) > MAX_MESSAGE_CHARS:
        raise ValueError(f"{label} is too long. Please keep it under {MAX_MESSAGE_CHARS} characters.")
    return v.strip()


class TutorMode(str, Enum):
    EXPLAIN = "explain"
    SOLVE = "solve"
    HINT = "hint"
    QUIZ = "quiz"


# ── Builder inputs ────────────────────────────────────────────────────────────

class PromptOptions(BaseModel):
    topic: Optional[str] = None
    difficulty: Optional[str] = None
    hint_level: Optional[int] = None   # 1 | 2 | 3
    has_context: bool = False


class QuizSpec(BaseModel):
    topic: str
    num_questions: int
    difficulty: str
    question_types: list[str]
    context: Optional[str] = None

    @field_validator("topic")
    @classmethod
    def topic_valid(cls, v: str) -> str:
        return _checked_topic(v)

    @field_validator("num_questions")
    @classmethod
    def count_in_range(cls, v: int) -> int:
        if v < 1 or v > MAX_QUIZ_QUESTIONS:
            raise ValueError(f"Question count must be between 1 and {MAX_QUIZ_QUESTIONS}")
        return v

    @field_validator("question_types")
    @classmethod
    def types_not_empty(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("At least one question type is required")
        return v


class FlashcardSpec(BaseModel):
    topic: str
    num_cards: int
    context: Optional[str] = None

    @field_validator("topic")
    @classmethod
    def topic_valid(cls, v: str) -> str:
        return _checked_topic(v)

    @field_validator("num_cards")
    @classmethod
    def count_in_range(cls, v: int) -> int:
        if v < 1 or v > MAX_FLASHCARDS:
            raise ValueError(f"Flashcard count must be between 1 and {MAX_FLASHCARDS}")
        return v


class ContextPassage(BaseModel):
    id: str
    text: str
    page: Optional[int] = None
    score: Optional[float] = None


class ChatMessage(BaseModel):
    role: str   # "user" | "assistant"
    content: str


class ChatPromptSpec(BaseModel):
    query: str
    level: str
    mode: str
    passages: list[ContextPassage] = []
    history: list[ChatMessage] = []
    system_prompt: Optional[str] = None

    @field_validator("query")
    @classmethod
    def query_valid(cls, v: str) -> str:
        return _checked_message(v, "Query")


class QuickChatSpec(BaseModel):
    message: str
    mode: str = "explain"   # unknown modes are explained
    context: Optional[str] = None

    @field_validator("message")
    @classmethod
    def message_valid(cls, v: str) -> str:
        return _checked_message(v, "Message")


class EvaluationSpec(BaseModel):
    question: str
    student_answer: str
    correct_answer: Optional[str] = None

    @field_validator("question", "student_answer")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Question and student answer are required")
        return v.strip()


class AnalysisSpec(BaseModel):
    content: str
    file_name: Optional[str] = None

    @field_validator("content")
    @classmethod
    def content_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Content is required")
        return v


class InsightsSpec(BaseModel):
    performance_data: dict[str, Any]
    user_id: Optional[str] = None
    time_range: Optional[str] = None


class ClusterSpec(BaseModel):
    concepts: list[str]
    materials: Optional[list[str]] = None


class RoutinePreferences(BaseModel):
    wake_up_time: str
    sleep_time: str
    study_goal_hours: Union[int, float]
    school_or_work_hours: Union[int, float]
    school_or_work_start_time: str
    priority_level: str
    break_preference: str   # "pomodoro" | "frequent-short" | "long"


class RoutineActivity(BaseModel):
    name: str
    suggested_duration: int   # minutes
    category: str
    is_optional: bool = False


class RoutineSpec(BaseModel):
    preferences: RoutinePreferences
    activities: list[RoutineActivity] = []


# ── Request / response models ─────────────────────────────────────────────────

class TutorPromptRequest(BaseModel):
    mode: TutorMode
    options: PromptOptions = PromptOptions()


class PromptResponse(BaseModel):
    prompt: str
