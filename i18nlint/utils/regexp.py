"""Helpers for ``/pattern/flags`` strings used as tag selectors."""

from __future__ import annotations

import re
from typing import Pattern

REGEXP_STRING_PATTERN = re.compile(r"\A/(.+)/(.*)\Z")

# JavaScript-style flags; ``g``, ``u``, ``d`` and ``v`` have no Python counterpart
# that changes a single search on a str.
FLAG_MAP = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "g": 0,
    "u": 0,
    "d": 0,
    "v": 0,
    "y": 0,
}


def escape(value: str) -> str:
    return re.escape(value)


def is_regexp(value: str) -> bool:
    """Return True when ``value`` is written as ``/body/flags``."""

    return REGEXP_STRING_PATTERN.match(value) is not None


def to_regexp(value: str) -> Pattern[str]:
    """Compile ``/body/flags`` strings; anything else matches itself exactly.

    The sticky flag ``y`` anchors the pattern at the start of the subject.
    """

    parts = REGEXP_STRING_PATTERN.match(value)
    if parts is None:
        return re.compile(f"^{escape(value)}$")

    body, flags = parts.group(1), parts.group(2)
    compiled_flags = 0
    for flag in flags:
        if flag not in FLAG_MAP:
            raise ValueError(f"Invalid regular expression flag {flag!r} in {value}")
        compiled_flags |= FLAG_MAP[flag]
    if "y" in flags:
        body = rf"\A(?:{body})"
    return re.compile(body, compiled_flags)
