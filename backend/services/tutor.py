import logging
from typing import Optional, Union

from models import PromptOptions, TutorMode
from prompts import (
    BASE_WITH_CONTEXT,
    BASE_WITHOUT_CONTEXT,
    CITATION_REMINDERS,
    DIFFICULTY_FRAGMENT,
    EXPLAIN_BODY,
    GENTLE_HINT,
    HINT_GUIDANCE,
    HINT_INTRO,
    MEDIUM_HINT,
    QUICK_CHAT_INSTRUCTIONS,
    QUIZ_HELP_BODY,
    SOLVE_BODY,
    STRONG_HINT,
    TOPIC_FRAGMENT,
)
from utils import join_segments

logger = logging.getLogger(__name__)


def _hint_instructions(hint_level: Optional[int]) -> str:
    # Anything other than 1 or 2, including no level at all, gets the strong hint.
    if hint_level == 1:
        return GENTLE_HINT
    if hint_level == 2:
        return MEDIUM_HINT
    return STRONG_HINT


def _context_line(options: PromptOptions) -> str:
    fragments = []
    if options.difficulty:
        fragments.append(DIFFICULTY_FRAGMENT.format(difficulty=options.difficulty))
    if options.topic:
        fragments.append(TOPIC_FRAGMENT.format(topic=options.topic))
    return " ".join(fragments)


def _mode_body(mode: str, options: PromptOptions) -> Optional[str]:
    if mode == "explain":
        return EXPLAIN_BODY
    if mode == "solve":
        return SOLVE_BODY
    if mode == "hint":
        return join_segments([
            f"{HINT_INTRO}\n{_hint_instructions(options.hint_level)}",
            HINT_GUIDANCE,
        ])
    if mode == "quiz":
        return QUIZ_HELP_BODY
    return None


def build_tutor_prompt(
    mode: Union[TutorMode, str],
    options: Optional[PromptOptions] = None,
) -> str:
    """
    Render the system instruction for a tutoring turn.

    The base instruction depends only on whether course material is attached.
    Difficulty and topic are inserted verbatim; this function does no escaping,
    so untrusted values must be sanitized by the caller.

    A mode outside the four known ones yields the base instruction alone.
    """
    options = options or PromptOptions()
    mode = mode.value if isinstance(mode, TutorMode) else mode

    base = BASE_WITH_CONTEXT if options.has_context else BASE_WITHOUT_CONTEXT
    body = _mode_body(mode, options)
    if body is None:
        logger.debug("Unknown tutor mode %r, returning base instruction", mode)
        return base

    reminder = CITATION_REMINDERS[mode] if options.has_context else None
    return join_segments([base, _context_line(options), body, reminder])


def build_quick_chat_prompt(
    message: str,
    mode: Union[TutorMode, str] = "explain",
    context: Optional[str] = None,
) -> str:
    """
    Build a one-shot tutor prompt without retrieval. Any mode outside the four
    known ones is treated as "explain". The Context section is present only
    when context text is given.
    """
    mode = mode.value if isinstance(mode, TutorMode) else mode
    instruction = QUICK_CHAT_INSTRUCTIONS.get(mode, QUICK_CHAT_INSTRUCTIONS["explain"])
    return join_segments([
        instruction,
        f"Context: {context}" if context else None,
        f"Student question: {message}",
    ])
