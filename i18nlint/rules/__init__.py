"""Rule registry for the linter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Union

from i18nlint.nodes import Document, Element
from i18nlint.result import ScanResult


class Rule(Protocol):
    """Protocol implemented by all template rules."""

    name: str

    def scan(self, context: "ScanContext", result: ScanResult) -> None:
        """Analyze the provided context and append findings to ``result``."""


@dataclass
class ScanContext:
    """A parsed template tree and the file it came from."""

    tree: Union[Document, Element]
    path: str = "<template>"
