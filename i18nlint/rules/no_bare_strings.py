"""Detect user-facing text in templates that bypasses translation."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict, FrozenSet, Iterable, List, Mapping, Optional, Set

from i18nlint.config import RuleOptions
from i18nlint.nodes import (
    Attribute,
    Directive,
    Element,
    ExpressionContainer,
    Interpolation,
    Literal,
    Position,
    Text,
)
from i18nlint.result import Finding, FindingKind, ScanResult
from i18nlint.severity import Severity
from i18nlint.traversal import walk
from i18nlint.utils.casing import is_kebab_case, pascal_case
from i18nlint.utils.regexp import escape, is_regexp, to_regexp

from . import ScanContext

logger = logging.getLogger(__name__)


class TraversalError(RuntimeError):
    """Raised when nodes arrive in an order no well-formed tree can produce."""


# WhiteSpace and LineTerminator code points, as trimmed by JavaScript.
JS_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


class WhitelistMatcher:
    """Remove whitelisted punctuation and symbols from candidate strings."""

    def __init__(self, whitelist: Iterable[str]) -> None:
        self.pattern = re.compile("|".join(escape(entry) for entry in whitelist))

    def strip(self, value: str) -> str:
        return self.pattern.sub("", value.strip(JS_WHITESPACE)).strip(JS_WHITESPACE)

    def is_bare(self, value: str) -> bool:
        return bool(self.strip(value))


@dataclass(frozen=True)
class TagPattern:
    pattern: re.Pattern
    attributes: FrozenSet[str]


class TargetAttributeResolver:
    """Work out which attributes of a tag must be checked.

    Exact tag names, ``/pattern/`` selectors and the PascalCase spelling of
    kebab-case names all contribute. Results are memoized per tag name for
    the lifetime of the resolver.
    """

    def __init__(self, attributes: Mapping[str, Iterable[str]]) -> None:
        self._names: Dict[str, FrozenSet[str]] = {}
        self._patterns: List[TagPattern] = []
        self._cache: Dict[str, FrozenSet[str]] = {}
        for selector, names in attributes.items():
            if is_regexp(selector):
                self._patterns.append(TagPattern(to_regexp(selector), frozenset(names)))
            else:
                self._names[selector] = frozenset(names)

    def _match(self, tag_name: str) -> Set[str]:
        targets = set(self._names.get(tag_name, ()))
        for tag_pattern in self._patterns:
            if tag_pattern.pattern.search(tag_name):
                targets.update(tag_pattern.attributes)
        return targets

    def resolve(self, tag_name: str) -> FrozenSet[str]:
        cached = self._cache.get(tag_name)
        if cached is not None:
            return cached

        targets = self._match(tag_name)
        if is_kebab_case(tag_name):
            alias = pascal_case(tag_name)
            # Single hop: the alias is matched but never aliased again.
            if alias != tag_name:
                targets.update(self._match(alias))

        resolved = frozenset(targets)
        self._cache[tag_name] = resolved
        logger.debug("Resolved target attributes for <%s>: %s", tag_name, sorted(resolved))
        return resolved


@dataclass(frozen=True)
class ElementFrame:
    name: str
    attributes: FrozenSet[str]


class ElementContext:
    """Stack of the currently open elements."""

    def __init__(self) -> None:
        self._frames: List[ElementFrame] = []

    @property
    def depth(self) -> int:
        return len(self._frames)

    @property
    def current(self) -> ElementFrame:
        if not self._frames:
            raise TraversalError("Attribute visited outside of any open element")
        return self._frames[-1]

    def push(self, name: str, attributes: FrozenSet[str]) -> ElementFrame:
        frame = ElementFrame(name, attributes)
        self._frames.append(frame)
        return frame

    def pop(self) -> ElementFrame:
        if not self._frames:
            raise TraversalError("Element exited with no open element")
        return self._frames.pop()


class BareStringAnalyzer:
    """Per-tree analysis state: attribute cache and element stack."""

    def __init__(
        self,
        matcher: WhitelistMatcher,
        options: RuleOptions,
        report: Callable[[FindingKind, Position, Optional[str]], None],
    ) -> None:
        self.matcher = matcher
        self.directives = frozenset(options.directives)
        self.resolver = TargetAttributeResolver(options.attributes)
        self.context = ElementContext()
        self._report = report

    def enter_element(self, node: Element) -> None:
        self.context.push(node.raw_name, self.resolver.resolve(node.raw_name))

    def exit_element(self, node: Element) -> None:
        self.context.pop()

    def visit_text(self, node: Text) -> None:
        if self.matcher.is_bare(node.value):
            self._report(FindingKind.TEXT, node.position, None)

    def visit_interpolation(self, node: Interpolation) -> None:
        pass

    def visit_attribute(self, node: Attribute) -> None:
        if node.value is None:
            return
        if isinstance(node, Directive):
            self._check_directive(node)
            return

        if node.raw_name not in self.context.current.attributes:
            return
        if self.matcher.is_bare(node.value.value):
            self._report(FindingKind.ATTRIBUTE, node.value.position, node.raw_name)

    def _check_directive(self, node: Directive) -> None:
        directive = node.directive_name
        if directive not in self.directives:
            return
        value = string_value(node.value)
        if value and self.matcher.is_bare(value):
            self._report(FindingKind.ATTRIBUTE, node.value.position, directive)


def string_value(container: Optional[ExpressionContainer]) -> Optional[str]:
    """Return the string of a string-literal expression, otherwise ``None``."""

    if container is None or container.expression is None:
        return None
    expression = container.expression
    if not isinstance(expression, Literal):
        return None
    if isinstance(expression.value, str):
        return expression.value
    return None


class NoBareStringsRule:
    """Flag literal text and attribute values that should be translated."""

    name = "no_bare_strings"

    def __init__(self, options: Optional[RuleOptions] = None, severity: Severity = Severity.ERROR) -> None:
        self.options = options or RuleOptions()
        self.severity = severity
        self.matcher = WhitelistMatcher(self.options.whitelist)

    def scan(self, context: ScanContext, result: ScanResult) -> None:
        before = len(result.findings)

        def report(kind: FindingKind, position: Position, attribute: Optional[str]) -> None:
            result.add_finding(
                Finding(
                    kind=kind,
                    path=context.path,
                    line=position.line,
                    column=position.column,
                    severity=self.severity,
                    rule=self.name,
                    attribute=attribute,
                )
            )

        walk(context.tree, self.analyzer(report))
        logger.debug("%s: %d bare string(s)", context.path, len(result.findings) - before)

    def analyzer(self, report: Callable[[FindingKind, Position, Optional[str]], None]) -> BareStringAnalyzer:
        """Create fresh per-tree state sharing this rule's options and matcher."""

        return BareStringAnalyzer(self.matcher, self.options, report)
