"""Depth-first traversal of template trees."""

from __future__ import annotations

from typing import Protocol, Union

from .nodes import Attribute, Document, Element, Interpolation, Node, Text


class TemplateVisitor(Protocol):
    """Callbacks invoked while walking a template tree."""

    def enter_element(self, node: Element) -> None:
        ...

    def exit_element(self, node: Element) -> None:
        ...

    def visit_attribute(self, node: Attribute) -> None:
        ...

    def visit_text(self, node: Text) -> None:
        ...

    def visit_interpolation(self, node: Interpolation) -> None:
        ...


def walk(node: Union[Document, Node], visitor: TemplateVisitor) -> None:
    """Visit ``node`` and its descendants in document order.

    An element's attributes are visited after the element is entered and
    before any of its children.
    """

    if isinstance(node, Document):
        for child in node.children:
            walk(child, visitor)
    elif isinstance(node, Element):
        visitor.enter_element(node)
        for attribute in node.attributes:
            visitor.visit_attribute(attribute)
        for child in node.children:
            walk(child, visitor)
        visitor.exit_element(node)
    elif isinstance(node, Text):
        visitor.visit_text(node)
    elif isinstance(node, Interpolation):
        visitor.visit_interpolation(node)
    else:
        raise TypeError(f"Unsupported template node: {type(node).__name__}")
