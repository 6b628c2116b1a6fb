"""Build template syntax trees from Vue single-file components and HTML."""

from __future__ import annotations

import html
import re
from html.parser import HTMLParser
from typing import List, Optional, Union

from .nodes import (
    Attribute,
    AttributeValue,
    Directive,
    DirectiveKey,
    Document,
    DynamicExpression,
    Element,
    Expression,
    ExpressionContainer,
    Interpolation,
    Literal,
    PlainAttribute,
    Position,
    Text,
)

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Script and style bodies are code, not text.
RAW_TEXT_ELEMENTS = frozenset({"script", "style"})

TAG_NAME_PATTERN = re.compile(r"<([^\s/>]+)")
ATTRIBUTE_PATTERN = re.compile(r"""([^\s/>"'=][^\s/>=]*)(?:\s*=\s*("[^"]*"|'[^']*'|[^\s>]+))?""")
MUSTACHE_PATTERN = re.compile(r"\{\{(.*?)\}\}", re.DOTALL)

DIRECTIVE_PATTERN = re.compile(r"\Av-([^:.\[]+)(?::(\[[^\]]*\]|[^.]*))?((?:\.[^.]*)*)\Z")
SHORTHAND_PATTERN = re.compile(r"\A([:@#])(\[[^\]]*\]|[^.]*)((?:\.[^.]*)*)\Z")
DIRECTIVE_SHORTHANDS = {":": "bind", "@": "on", "#": "slot"}
# Handlers, slot scopes and loops have their own expression grammar; their values
# are never plain literals.
SPECIAL_EXPRESSION_DIRECTIVES = frozenset({"on", "slot", "for"})

STRING_LITERAL_PATTERN = re.compile(r"""\A(['"])((?:\\.|(?!\1)[^\\\r\n])*)\1\Z""", re.DOTALL)
NUMBER_LITERAL_PATTERN = re.compile(r"\A(?:0[xX][0-9a-fA-F]+|(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)\Z")
KEYWORD_LITERALS = {"true": True, "false": False, "null": None}
ESCAPE_PATTERN = re.compile(r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|\r\n|[\s\S])")
SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
    "\n": "",
    "\r": "",
    "\r\n": "",
    "\u2028": "",
    "\u2029": "",
}


def advance(position: Position, text: str) -> Position:
    """Return the position reached after reading ``text`` from ``position``."""

    newlines = text.count("\n")
    if not newlines:
        return Position(position.line, position.column + len(text))
    return Position(position.line + newlines, len(text) - text.rfind("\n") - 1)


def _unescape_js(body: str) -> str:
    def replace(match: re.Match) -> str:
        escape = match.group(1)
        if escape in SIMPLE_ESCAPES:
            return SIMPLE_ESCAPES[escape]
        if escape.startswith("u{"):
            return chr(int(escape[2:-1], 16))
        if escape[0] in "ux" and len(escape) > 1:
            return chr(int(escape[1:], 16))
        return escape

    return ESCAPE_PATTERN.sub(replace, body)


def _closing_parenthesis(source: str) -> int:
    """Return the index closing the parenthesis at ``source[0]``, or -1."""

    depth = 0
    quote = None
    escaped = False
    for index, char in enumerate(source):
        if quote:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == quote:
                quote = None
        elif char in "'\"`":
            quote = char
        elif char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return index
    return -1


def _unwrap_parentheses(source: str) -> str:
    while source.startswith("(") and _closing_parenthesis(source) == len(source) - 1:
        source = source[1:-1].strip()
    return source


def parse_expression(source: str) -> Optional[Expression]:
    """Classify a bound expression as a literal constant or a dynamic expression.

    Only single- and double-quoted strings, plain numbers, ``true``,
    ``false`` and ``null`` are literals. Template literals, identifiers,
    calls and everything else are dynamic.
    """

    stripped = _unwrap_parentheses(source.strip())
    if not stripped:
        return None
    match = STRING_LITERAL_PATTERN.match(stripped)
    if match:
        return Literal(_unescape_js(match.group(2)), stripped)
    if NUMBER_LITERAL_PATTERN.match(stripped):
        if stripped[:2] in ("0x", "0X"):
            return Literal(float(int(stripped, 16)), stripped)
        return Literal(float(stripped), stripped)
    if stripped in KEYWORD_LITERALS:
        return Literal(KEYWORD_LITERALS[stripped], stripped)
    return DynamicExpression(stripped)


def parse_directive_key(raw_name: str) -> Optional[DirectiveKey]:
    """Split ``v-name:argument.modifier`` (or a shorthand) into its parts."""

    match = DIRECTIVE_PATTERN.match(raw_name)
    if match:
        name, argument, modifiers = match.groups()
    else:
        match = SHORTHAND_PATTERN.match(raw_name)
        if not match:
            return None
        shorthand, argument, modifiers = match.groups()
        name = DIRECTIVE_SHORTHANDS[shorthand]
    return DirectiveKey(
        name=name,
        argument=argument or None,
        modifiers=tuple(modifier for modifier in (modifiers or "").split(".") if modifier),
        raw_name=raw_name,
    )


def parse_start_tag(text: str, position: Position) -> Element:
    """Build an element, keeping raw casing, from the full start-tag source."""

    name_match = TAG_NAME_PATTERN.match(text)
    raw_name = name_match.group(1) if name_match else ""
    element = Element(raw_name=raw_name, position=position)

    start = name_match.end() if name_match else 0
    end = len(text) - 1 if text.endswith(">") else len(text)
    for match in ATTRIBUTE_PATTERN.finditer(text, start, end):
        element.attributes.append(_build_attribute(match, text, position))
    return element


def _build_attribute(match: re.Match, tag_text: str, tag_position: Position) -> Attribute:
    raw_name, raw_value = match.group(1), match.group(2)
    position = advance(tag_position, tag_text[: match.start(1)])
    value_position = advance(tag_position, tag_text[: match.start(2)]) if raw_value is not None else None
    value = None
    if raw_value is not None:
        if raw_value[:1] in ("'", '"'):
            raw_value = raw_value[1:-1]
        value = html.unescape(raw_value)

    key = parse_directive_key(raw_name)
    if key is None:
        return PlainAttribute(
            raw_name=raw_name,
            value=AttributeValue(value, value_position) if value is not None else None,
            position=position,
        )
    container = None
    if value is not None:
        expression = parse_expression(value)
        if key.name in SPECIAL_EXPRESSION_DIRECTIVES and expression is not None:
            expression = DynamicExpression(value.strip())
        container = ExpressionContainer(expression, value_position)
    return Directive(key=key, value=container, position=position)


class TemplateTreeBuilder(HTMLParser):
    """Collect elements, text and mustache interpolations into a tree.

    Text is sliced from the source so that mustache splitting and positions
    work on the raw markup; entities are decoded per piece afterwards.
    """

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.document = Document(position=Position(1, 0))
        self._open: List[Element] = []
        self._source = ""
        self._line_starts = [0]
        self._text_position: Optional[Position] = None

    @property
    def _children(self) -> List[Union[Element, Text, Interpolation]]:
        return self._open[-1].children if self._open else self.document.children

    def _current_position(self) -> Position:
        line, column = self.getpos()
        return Position(line, column)

    def _offset(self, position: Position) -> int:
        return self._line_starts[position.line - 1] + position.column

    def feed(self, data: str) -> None:
        base = len(self._source)
        self._source += data
        self._line_starts.extend(base + match.end() for match in re.finditer("\n", data))
        super().feed(data)

    def handle_starttag(self, tag, attrs):
        element = self._append_element()
        if element.name not in VOID_ELEMENTS:
            self._open.append(element)

    def handle_startendtag(self, tag, attrs):
        self._append_element()

    def handle_endtag(self, tag):
        self._flush_text()
        for index in range(len(self._open) - 1, -1, -1):
            if self._open[index].name == tag:
                del self._open[index:]
                return

    def handle_data(self, data):
        if self._open and self._open[-1].name in RAW_TEXT_ELEMENTS:
            return
        if self._text_position is None:
            self._text_position = self._current_position()

    def handle_comment(self, data):
        self._flush_text()

    def handle_decl(self, decl):
        self._flush_text()

    def handle_pi(self, data):
        self._flush_text()

    def unknown_decl(self, data):
        self._flush_text()

    def close(self) -> None:
        super().close()
        self._flush_text()
        self._open.clear()

    def _append_element(self) -> Element:
        self._flush_text()
        element = parse_start_tag(self.get_starttag_text() or "", self._current_position())
        self._children.append(element)
        return element

    def _flush_text(self) -> None:
        if self._text_position is None:
            return
        start = self._text_position
        self._text_position = None
        raw = self._source[self._offset(start) : self._offset(self._current_position())]

        offset = 0
        for match in MUSTACHE_PATTERN.finditer(raw):
            if match.start() > offset:
                self._append_text(raw[offset : match.start()], advance(start, raw[:offset]))
            self._children.append(
                Interpolation(parse_expression(html.unescape(match.group(1))), advance(start, raw[: match.start()]))
            )
            offset = match.end()
        if offset < len(raw):
            self._append_text(raw[offset:], advance(start, raw[:offset]))

    def _append_text(self, raw: str, position: Position) -> None:
        self._children.append(Text(html.unescape(raw), position))


def parse_template(source: str) -> Document:
    """Parse HTML-like template markup into a :class:`Document`."""

    builder = TemplateTreeBuilder()
    builder.feed(source)
    builder.close()
    return builder.document


def parse_sfc(source: str) -> Optional[Element]:
    """Return the top-level ``<template>`` element of a single-file component.

    Templates written in another language (``<template lang="pug">``) have no
    HTML body to lint, so ``None`` is returned for them too.
    """

    for node in parse_template(source).children:
        if isinstance(node, Element) and node.name == "template":
            if template_lang(node) not in (None, "html"):
                return None
            return node
    return None


def template_lang(element: Element) -> Optional[str]:
    for attribute in element.attributes:
        if isinstance(attribute, PlainAttribute) and attribute.raw_name == "lang":
            return attribute.value.value if attribute.value is not None else None
    return None
