# fpcore/utils.py
# Debug formatting helper used in reprs and error messages.

import json
from typing import Any

from .config import get_settings


def show(x: Any) -> str:
    """JSON-представление значения, если его нет - repr(). Длинные строки обрезаются."""
    try:
        text = json.dumps(x)
    except (TypeError, ValueError):
        text = repr(x)

    limit = get_settings().show_limit
    if len(text) <= limit:
        return text
    if limit <= 3:
        return text[:limit]
    return text[: limit - 3] + "..."
