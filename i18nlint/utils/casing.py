"""Tag-name case conventions (kebab-case, camelCase, PascalCase)."""

from __future__ import annotations

import re

SYMBOLS_PATTERN = re.compile(r"""[!"#%&'()*+,./:;<=>?@\[\\\]^`{|}]""")
UPPER_PATTERN = re.compile(r"[A-Z]")
WORD_SEPARATOR_PATTERN = re.compile(r"[-_](\w)", re.ASCII)


def has_symbols(value: str) -> bool:
    return SYMBOLS_PATTERN.search(value) is not None


def is_kebab_case(value: str) -> bool:
    """Return True for lowercase, hyphen-delimited names such as ``my-component``.

    Single words (``input``) count as kebab case too.
    """

    if UPPER_PATTERN.search(value) or has_symbols(value):
        return False
    if value.startswith("-"):
        return False
    return re.search(r"_|--|\s", value) is None


def is_pascal_case(value: str) -> bool:
    if has_symbols(value) or re.match(r"[a-z]", value):
        return False
    return re.search(r"-|_|\s", value) is None


def capitalize(value: str) -> str:
    return value[:1].upper() + value[1:]


def camel_case(value: str) -> str:
    if is_pascal_case(value):
        return value[:1].lower() + value[1:]
    return WORD_SEPARATOR_PATTERN.sub(lambda match: match.group(1).upper(), value)


def pascal_case(value: str) -> str:
    return capitalize(camel_case(value))
