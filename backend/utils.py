import json
from typing import Iterable, Optional


def join_segments(segments: Iterable[Optional[str]], separator: str = "\n\n") -> str:
    """
    Join the non-empty prompt segments with a blank line between them.
    Segments that are None or empty are dropped entirely, so an optional
    section never leaves a stray gap behind.
    """
    return separator.join(s for s in segments if s)


def truncate_content(content: str, max_chars: int) -> str:
    return content[:max_chars]


def render_json_example(example: dict) -> str:
    """
    Render a fixed schema example or a caller record as indented JSON. Key
    order is kept as given and non-ASCII text is left readable.
    """
    return json.dumps(example, indent=2, ensure_ascii=False)
