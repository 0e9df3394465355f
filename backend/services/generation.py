import logging
from typing import Any, Optional, Sequence

from models import RoutineActivity, RoutinePreferences
from prompts import (
    ANALYSIS_DIRECTIVE,
    ANALYSIS_PROMPT,
    ANALYZER_ROLE,
    BREAK_RULES,
    CLUSTER_DIRECTIVE,
    CLUSTER_PROMPT,
    CLUSTER_ROLE,
    DEFAULT_BREAK_RULE,
    EVALUATION_CRITERIA,
    EVALUATION_DIRECTIVE,
    EVALUATION_INTRO,
    EVALUATOR_ROLE,
    FLASHCARD_CONTEXT,
    FLASHCARD_PROMPT,
    FLASHCARD_SCHEMA,
    GENERATION_DIRECTIVE,
    INSIGHTS_DIRECTIVE,
    INSIGHTS_PROMPT,
    INSIGHTS_ROLE,
    QUIZ_CONTEXT,
    QUIZ_PROMPT,
    QUIZ_SCHEMA,
    ROUTINE_CONSTRAINTS,
    ROUTINE_FORMAT,
    ROUTINE_REQUIREMENTS,
    ROUTINE_ROLE,
)
from utils import join_segments, render_json_example, truncate_content

logger = logging.getLogger(__name__)

_ANALYSIS_MAX_CHARS = 3000


def _json_directive(directive: str, example: dict) -> str:
    return f"{directive}\n{render_json_example(example)}"


def build_quiz_prompt(
    topic: str,
    num_questions: int,
    difficulty: str,
    question_types: list[str],
    context: Optional[str] = None,
) -> str:
    """
    Build the quiz generation prompt. Question types keep the caller's order.
    The schema example carries the real topic and difficulty, unescaped, so the
    model sees a concrete instance of the expected output.
    num_questions is interpolated as-is; callers are trusted to pass a sane count.
    """
    header = QUIZ_PROMPT.format(
        count=num_questions,
        topic=topic,
        difficulty=difficulty,
        question_types=", ".join(question_types),
    )
    material = QUIZ_CONTEXT.format(context=context) if context else None
    schema = QUIZ_SCHEMA.format(topic=topic, difficulty=difficulty)
    logger.debug("Rendering quiz prompt (%d questions, grounded=%s)", num_questions, bool(context))
    return join_segments([header, material, f"{GENERATION_DIRECTIVE}\n{schema}"])


def build_flashcard_prompt(topic: str, num_cards: int, context: Optional[str] = None) -> str:
    """Build the flashcard generation prompt, mirroring build_quiz_prompt."""
    header = FLASHCARD_PROMPT.format(count=num_cards, topic=topic)
    material = FLASHCARD_CONTEXT.format(context=context) if context else None
    schema = FLASHCARD_SCHEMA.format(topic=topic)
    logger.debug("Rendering flashcard prompt (%d cards, grounded=%s)", num_cards, bool(context))
    return join_segments([header, material, f"{GENERATION_DIRECTIVE}\n{schema}"])


def build_evaluation_prompt(
    question: str,
    student_answer: str,
    correct_answer: Optional[str] = None,
) -> str:
    """
    Ask the model to grade a free-form answer. The reference answer line is
    left out when none is known.
    """
    answers = join_segments(
        [
            f"Question: {question}",
            f"Correct Answer: {correct_answer}" if correct_answer else None,
            f"Student's Answer: {student_answer}",
        ],
        separator="\n",
    )
    schema = {
        "score": 85,
        "isCorrect": True,
        "feedback": "detailed feedback",
        "strengths": ["point1", "point2"],
        "improvements": ["suggestion1", "suggestion2"],
    }
    return join_segments([
        EVALUATOR_ROLE,
        EVALUATION_INTRO,
        answers,
        EVALUATION_CRITERIA,
        _json_directive(EVALUATION_DIRECTIVE, schema),
    ])


def build_analysis_prompt(content: str, max_chars: int = _ANALYSIS_MAX_CHARS) -> str:
    """Extract topics, difficulty, subject, concepts and tags from course content."""
    body = ANALYSIS_PROMPT.format(content=truncate_content(content, max_chars))
    schema = {
        "topics": ["topic1", "topic2"],
        "difficulty": "intermediate",
        "subject": "subject name",
        "concepts": ["concept1", "concept2"],
        "tags": ["tag1", "tag2"],
        "summary": "brief summary",
    }
    return join_segments([ANALYZER_ROLE, body, _json_directive(ANALYSIS_DIRECTIVE, schema)])


def build_insights_prompt(performance_data: dict[str, Any]) -> str:
    """
    Summarize a student's performance record. The record is embedded as
    indented JSON; nothing in it is interpreted here.
    """
    body = INSIGHTS_PROMPT.format(data=render_json_example(performance_data))
    schema = {
        "summary": "Overall performance summary",
        "achievements": ["achievement1", "achievement2"],
        "improvements": ["area1", "area2"],
        "trends": ["trend1", "trend2"],
        "recommendations": ["rec1", "rec2"],
        "strengths": ["strength1", "strength2"],
        "focusAreas": ["area1", "area2"],
    }
    return join_segments([INSIGHTS_ROLE, body, _json_directive(INSIGHTS_DIRECTIVE, schema)])


def build_cluster_prompt(concepts: Sequence[str]) -> str:
    body = CLUSTER_PROMPT.format(concepts=", ".join(concepts))
    schema = {
        "clusters": [
            {
                "name": "Cluster Name",
                "concepts": ["concept1", "concept2"],
                "description": "Brief description",
                "difficulty": "beginner/intermediate/advanced",
            }
        ],
        "relationships": [
            {"from": "concept1", "to": "concept2", "type": "prerequisite/related"},
        ],
    }
    return join_segments([CLUSTER_ROLE, body, _json_directive(CLUSTER_DIRECTIVE, schema)])


def _activity_line(activity: RoutineActivity) -> str:
    optional = ", optional" if activity.is_optional else ""
    return f"- {activity.name} ({activity.suggested_duration} min, {activity.category}{optional})"


def build_routine_prompt(
    preferences: RoutinePreferences,
    activities: Sequence[RoutineActivity] = (),
) -> str:
    """
    Build the daily-schedule prompt. The reply is plain text blocks of the form
    ``[HH:MM-HH:MM] Activity | Category | Notes``, not JSON.

    Break preferences other than "pomodoro" and "frequent-short" fall back to
    long breaks every few hours.
    """
    activity_block = None
    if activities:
        activity_block = "Activities to schedule:\n" + "\n".join(_activity_line(a) for a in activities)

    constraints = ROUTINE_CONSTRAINTS.format(
        wake_up_time=preferences.wake_up_time,
        sleep_time=preferences.sleep_time,
        study_goal_hours=preferences.study_goal_hours,
        school_or_work_hours=preferences.school_or_work_hours,
        school_or_work_start_time=preferences.school_or_work_start_time,
        priority_level=preferences.priority_level,
        break_preference=preferences.break_preference,
    )
    requirements = ROUTINE_REQUIREMENTS.format(
        break_rule=BREAK_RULES.get(preferences.break_preference, DEFAULT_BREAK_RULE),
        priority_level=preferences.priority_level,
    )
    logger.debug("Rendering routine prompt (%d activities)", len(activities))
    return join_segments([ROUTINE_ROLE, constraints, activity_block, requirements, ROUTINE_FORMAT])
