"""Syntax tree model for parsed templates."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union


@dataclass(frozen=True)
class Position:
    """Source location: 1-based line, 0-based column."""

    line: int
    column: int


@dataclass(frozen=True)
class Literal:
    """A constant expression such as ``'Hello'``, ``42`` or ``true``."""

    value: Union[str, float, bool, None]
    raw: str


@dataclass(frozen=True)
class DynamicExpression:
    """Any expression whose value is only known at runtime."""

    source: str


Expression = Union[Literal, DynamicExpression]


@dataclass
class AttributeValue:
    value: str
    position: Position


@dataclass
class ExpressionContainer:
    expression: Optional[Expression]
    position: Position


@dataclass
class PlainAttribute:
    raw_name: str
    value: Optional[AttributeValue]
    position: Position


@dataclass(frozen=True)
class DirectiveKey:
    """Decomposed directive name, e.g. ``v-on:click.stop``."""

    name: str
    argument: Optional[str]
    modifiers: Tuple[str, ...]
    raw_name: str


@dataclass
class Directive:
    key: DirectiveKey
    value: Optional[ExpressionContainer]
    position: Position

    @property
    def directive_name(self) -> str:
        return f"v-{self.key.name}"


Attribute = Union[PlainAttribute, Directive]


@dataclass
class Text:
    value: str
    position: Position


@dataclass
class Interpolation:
    expression: Optional[Expression]
    position: Position


@dataclass
class Element:
    raw_name: str
    position: Position
    attributes: List[Attribute] = field(default_factory=list)
    children: List["Node"] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.raw_name.lower()


@dataclass
class Document:
    position: Position
    children: List["Node"] = field(default_factory=list)


Node = Union[Element, Text, Interpolation]
