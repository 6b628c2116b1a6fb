"""Rule options: defaults, YAML loading and option-schema checks."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

from .utils import read_yaml_file
from .utils.regexp import is_regexp, to_regexp

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = ".i18nlint.yaml"

# https://dev.w3.org/html5/html-author/charref
DEFAULT_WHITELIST: Tuple[str, ...] = (
    "(",
    ")",
    ",",
    ".",
    "&",
    "+",
    "-",
    "=",
    "*",
    "/",
    "#",
    "%",
    "!",
    "?",
    ":",
    "[",
    "]",
    "{",
    "}",
    "<",
    ">",
    "\u00b7",  # "·"
    "\u2022",  # "•"
    "\u2010",  # "‐"
    "\u2013",  # "–"
    "\u2014",  # "—"
    "\u2212",  # "−"
    "|",
)

DEFAULT_ATTRIBUTES: Mapping[str, Tuple[str, ...]] = {
    "/.+/": (
        "title",
        "aria-label",
        "aria-placeholder",
        "aria-roledescription",
        "aria-valuetext",
    ),
    "input": ("placeholder",),
    "img": ("alt",),
}

DEFAULT_DIRECTIVES: Tuple[str, ...] = ("v-text",)

ALLOWED_KEYS = ("whitelist", "attributes", "directives")
SELECTOR_PATTERN = re.compile(r"^(?:\S+|/.*/[a-z]*)$")
DIRECTIVE_PREFIX = "v-"


class ConfigError(ValueError):
    """Raised when an options file does not match the option schema."""


@dataclass(frozen=True)
class RuleOptions:
    """Validated options for the bare-strings rule."""

    whitelist: Tuple[str, ...] = DEFAULT_WHITELIST
    attributes: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: dict(DEFAULT_ATTRIBUTES))
    directives: Tuple[str, ...] = DEFAULT_DIRECTIVES

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "RuleOptions":
        """Build options from a raw mapping, applying defaults for missing keys."""

        data = validate_options(data or {})
        kwargs: Dict[str, Any] = {}
        if "whitelist" in data:
            kwargs["whitelist"] = tuple(data["whitelist"])
        if "attributes" in data:
            kwargs["attributes"] = {selector: tuple(names) for selector, names in data["attributes"].items()}
        if "directives" in data:
            kwargs["directives"] = tuple(data["directives"])
        return cls(**kwargs)


def load_options(path: Optional[Path]) -> RuleOptions:
    """Load options from a YAML file; a missing or empty file yields defaults."""

    if path is None:
        return RuleOptions()
    try:
        data = read_yaml_file(path)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse options file {path}: {exc}") from exc
    if data is None:
        logger.debug("No options found at %s, using defaults", path)
        return RuleOptions()
    if not isinstance(data, dict):
        raise ConfigError(f"Options file {path} is not a mapping")
    return RuleOptions.from_mapping(data)


def validate_options(data: Mapping[str, Any]) -> Mapping[str, Any]:
    unknown = sorted(set(data) - set(ALLOWED_KEYS))
    if unknown:
        raise ConfigError(f"Unknown option(s): {', '.join(unknown)}")

    if "whitelist" in data:
        _check_string_list(data["whitelist"], "whitelist")

    if "attributes" in data:
        attributes = data["attributes"]
        if not isinstance(attributes, dict):
            raise ConfigError("'attributes' must be a mapping of tag selectors to attribute names")
        for selector, names in attributes.items():
            if not isinstance(selector, str) or not SELECTOR_PATTERN.match(selector):
                raise ConfigError(f"Invalid tag selector in 'attributes': {selector!r}")
            if is_regexp(selector):
                try:
                    to_regexp(selector)
                except (re.error, ValueError) as exc:
                    raise ConfigError(f"Invalid tag pattern {selector}: {exc}") from exc
            _check_string_list(names, f"attributes[{selector!r}]")

    if "directives" in data:
        directives = data["directives"]
        _check_string_list(directives, "directives")
        for directive in directives:
            if not directive.startswith(DIRECTIVE_PREFIX):
                raise ConfigError(f"Directive {directive!r} must start with {DIRECTIVE_PREFIX!r}")

    return data


def _check_string_list(value: Any, label: str) -> None:
    if not isinstance(value, list):
        raise ConfigError(f"'{label}' must be a list of strings")
    seen = set()
    for item in value:
        if not isinstance(item, str):
            raise ConfigError(f"'{label}' entries must be strings, got {item!r}")
        if item in seen:
            raise ConfigError(f"'{label}' contains duplicate entry {item!r}")
        seen.add(item)
