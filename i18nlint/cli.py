"""Command-line entry point for the template bare-string linter."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from .config import DEFAULT_CONFIG_FILENAME, ConfigError, RuleOptions, load_options
from .parser import parse_sfc, parse_template
from .result import ScanResult, format_summary_table
from .rules import Rule, ScanContext
from .rules.no_bare_strings import NoBareStringsRule
from .severity import Severity
from .utils import iter_template_files, read_text_file

logger = logging.getLogger(__name__)

DEFAULT_PATHS = (".",)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="i18nlint",
        description="Report non-translated strings in Vue and HTML templates",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help="Template files or directories to lint (defaults to the current directory).",
    )
    parser.add_argument(
        "--config",
        "-c",
        default=None,
        help=f"YAML options file (defaults to {DEFAULT_CONFIG_FILENAME} when present).",
    )
    parser.add_argument(
        "--severity",
        choices=[severity.value.lower() for severity in Severity],
        default=Severity.ERROR.value.lower(),
        help="Severity attached to findings; only errors fail the run.",
    )
    parser.add_argument(
        "--format",
        choices=["json"],
        default="json",
        help="Report format for file output (defaults to json).",
    )
    parser.add_argument(
        "--out",
        "--output",
        dest="output_path",
        type=str,
        default=None,
        help="Path to write the structured report (e.g., artifacts/i18n.json).",
    )
    parser.add_argument(
        "--fail-on-empty",
        action="store_true",
        help="Fail the run if no template files are found.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def load_rules(options: RuleOptions, severity: Severity) -> List[Rule]:
    return [
        NoBareStringsRule(options, severity=severity),
    ]


def resolve_config_path(config: Optional[str]) -> Optional[Path]:
    if config:
        path = Path(config)
        if not path.exists():
            raise SystemExit(f"Options file not found: {config}")
        return path
    default = Path(DEFAULT_CONFIG_FILENAME)
    return default if default.exists() else None


def parse_file(path: Path):
    """Return the tree to lint for ``path``, or ``None`` when there is nothing to lint."""

    source = read_text_file(path)
    if path.suffix == ".vue":
        return parse_sfc(source)
    return parse_template(source)


def run_scan(
    paths: Iterable[str],
    options: Optional[RuleOptions] = None,
    severity: Severity = Severity.ERROR,
    fail_on_empty: bool = False,
) -> ScanResult:
    rules = load_rules(options or RuleOptions(), severity)
    result = ScanResult()
    for path in iter_template_files(paths):
        tree = parse_file(path)
        if tree is None:
            logger.debug("Skipping %s: no <template> block", path)
            continue
        logger.debug("Linting %s", path)
        result.files.append(str(path))
        context = ScanContext(tree=tree, path=str(path))
        for rule in rules:
            rule.scan(context, result)
    if not result.files:
        if fail_on_empty:
            raise SystemExit(f"No template files found in: {', '.join(paths)}")
        logger.info("No template files found")
    return result


def write_output(result: ScanResult, output_path: str | None, report_format: str) -> None:
    summary = format_summary_table(result)
    print(summary)

    if report_format == "json":
        payload = json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
        if output_path:
            output_file = Path(output_path)
            output_file.parent.mkdir(parents=True, exist_ok=True)
            output_file.write_text(payload, encoding="utf-8")
            print(f"\nReport written to {output_path}")
        else:
            print("\nJSON Report")
            print(payload)


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = load_options(resolve_config_path(args.config))
    except ConfigError as exc:
        parser.error(str(exc))

    paths = args.paths or list(DEFAULT_PATHS)
    severity = Severity(args.severity.upper())
    result = run_scan(paths, options, severity=severity, fail_on_empty=args.fail_on_empty)
    write_output(result, args.output_path, args.format)
    return result.exit_code()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
