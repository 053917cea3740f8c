from __future__ import annotations

from typing import Optional


class ConfigurationError(Exception):
    """
    Raised when the effective configuration cannot be built.

    The original failure (I/O, YAML syntax, schema validation) is kept as ``__cause__``.
    """

    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


def format_error_chain(exc: BaseException) -> str:
    parts: list[str] = []
    cur: Optional[BaseException] = exc
    while cur is not None:
        text = str(cur).strip()
        if text and text not in parts:
            parts.append(text)
        cur = cur.__cause__
    return ": ".join(parts)
