import logging
from typing import Optional, Sequence

from models import ChatMessage, ContextPassage
from prompts import CHAT_MODE_INSTRUCTIONS, CHAT_SOURCE_RULE, CHAT_SYSTEM_PROMPT
from utils import join_segments

logger = logging.getLogger(__name__)

_HISTORY_WINDOW = 5


def _passage_header(index: int, passage: ContextPassage) -> str:
    tags = [f"source:{passage.id}"]
    # A page of 0 or a score of 0.0 is treated the same as no value.
    if passage.page:
        tags.append(f"page:{passage.page}")
    if passage.score:
        tags.append(f"score:{passage.score:.3f}")
    return f"#{index} [{' | '.join(tags)}]"


def format_context_block(passages: Sequence[ContextPassage]) -> Optional[str]:
    """
    Render retrieved passages as a numbered CONTEXT block.
    Returns None when there is nothing to ground against.
    """
    if not passages:
        return None
    body = "\n\n".join(
        f"{_passage_header(idx, p)}\n{p.text}" for idx, p in enumerate(passages, start=1)
    )
    return f"[CONTEXT-START]\n{body}\n\n[CONTEXT-END]"


def format_history(history: Sequence[ChatMessage], window: int = _HISTORY_WINDOW) -> Optional[str]:
    if not history or window <= 0:
        return None
    turns = "\n".join(f"{m.role}: {m.content}" for m in history[-window:])
    return f"Previous conversation:\n{turns}"


def build_chat_prompt(
    query: str,
    level: str,
    mode: str,
    passages: Sequence[ContextPassage] = (),
    history: Sequence[ChatMessage] = (),
    system_prompt: Optional[str] = None,
    history_window: int = _HISTORY_WINDOW,
) -> str:
    """
    Build a single grounded prompt for a chat turn: persona, retrieved
    passages, the most recent conversation turns, and the answering
    instruction for the requested mode.
    """
    instruction = join_segments(
        [
            "Instruction: Answer the User Query using CONTEXT.",
            CHAT_MODE_INSTRUCTIONS.get(mode),
            CHAT_SOURCE_RULE,
        ],
        separator=" ",
    )
    request = "\n".join([
        f"User Level: {level}",
        f"Mode: {mode}",
        f"User query: {query}",
    ])

    logger.debug(
        "Rendering chat prompt (mode=%s, passages=%d, history=%d)",
        mode, len(passages), len(history),
    )
    return join_segments([
        system_prompt or CHAT_SYSTEM_PROMPT,
        format_context_block(passages),
        format_history(history, history_window),
        request,
        instruction,
    ])
