"""Core result data structures for the linter."""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from .severity import Severity

SEVERITY_ORDER: Sequence[Severity] = (
    Severity.ERROR,
    Severity.WARNING,
)

MESSAGES = {
    "unexpected": "Unexpected non-translated string used.",
    "unexpectedInAttr": "Unexpected non-translated string used in `{attr}`.",
}


class FindingKind(str, Enum):
    """Where a bare string was found."""

    TEXT = "text"
    ATTRIBUTE = "attribute"

    @property
    def message_id(self) -> str:
        return "unexpected" if self is FindingKind.TEXT else "unexpectedInAttr"


@dataclass
class Finding:
    """Capture a single bare-string occurrence."""

    kind: FindingKind
    path: str
    line: int
    column: int
    severity: Severity
    rule: str
    attribute: Optional[str] = None

    @property
    def message_id(self) -> str:
        return self.kind.message_id

    @property
    def message(self) -> str:
        return MESSAGES[self.message_id].format(attr=self.attribute)

    def to_dict(self) -> Dict[str, object]:
        data = asdict(self)
        data["kind"] = self.kind.value
        data["severity"] = self.severity.value
        data["message_id"] = self.message_id
        data["message"] = self.message
        return data


@dataclass
class Summary:
    """Aggregate finding counts by severity."""

    error: int = 0
    warning: int = 0

    def increment(self, severity: Severity) -> None:
        attr = severity.value.lower()
        setattr(self, attr, getattr(self, attr) + 1)

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)

    def as_rows(self) -> List[Tuple[str, int]]:
        """Return severity/count pairs ordered for reporting."""

        return [(severity.value, getattr(self, severity.value.lower())) for severity in SEVERITY_ORDER]

    @property
    def total(self) -> int:
        return sum(getattr(self, severity.value.lower()) for severity in SEVERITY_ORDER)


@dataclass
class ScanResult:
    """Bundle the lint summary, findings list and scanned files."""

    summary: Summary = field(default_factory=Summary)
    findings: List[Finding] = field(default_factory=list)
    files: List[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.summary.error == 0

    def add_finding(self, finding: Finding) -> None:
        self.summary.increment(finding.severity)
        self.findings.append(finding)

    def to_dict(self) -> Dict[str, object]:
        return {
            "summary": self.summary.to_dict(),
            "files": list(self.files),
            "findings": [finding.to_dict() for finding in self.findings],
            "passed": self.passed,
        }

    def exit_code(self) -> int:
        return max((finding.severity.exit_priority for finding in self.findings), default=0)

    def top_findings(self, limit: int = 10) -> List[Finding]:
        """Return findings ordered by severity, then by location."""

        severity_rank = {severity: idx for idx, severity in enumerate(SEVERITY_ORDER)}
        ordered = sorted(
            self.findings,
            key=lambda finding: (severity_rank[finding.severity], finding.path, finding.line, finding.column),
        )
        return ordered[:limit]


def format_summary_table(result: ScanResult, max_findings: int = 10) -> str:
    """Create a human-readable summary table for console output."""

    lines: List[str] = []
    lines.append("Lint Summary")
    lines.append("=" * 40)
    header = f"{'Severity':<10} | {'Count':>5}"
    lines.append(header)
    lines.append("-" * len(header))
    for severity, count in result.summary.as_rows():
        lines.append(f"{severity:<10} | {count:>5}")
    lines.append("-" * len(header))
    status = "PASS" if result.passed else "FAIL"
    lines.append(f"Status    : {status}")
    lines.append(f"Files     : {len(result.files)}")
    lines.append(f"Findings  : {result.summary.total}")

    findings = result.top_findings(max_findings)
    if findings:
        lines.append("")
        lines.append("Top Findings")
        lines.append("-" * 40)
        for finding in findings:
            lines.append(f"[{finding.severity.value}] {finding.message} ({finding.rule})")
            lines.append(f"  Location: {finding.path}:{finding.line}:{finding.column}")
    return "\n".join(lines)
