"""
revision-kit: build correction datasets from tracked-changes documents.

Usage:
  revision-kit <command> [options]

Commands:
  extract   Parse a .docx (or document.xml) into revisions_grouped.json.
  dataset   Build dataset.jsonl from revisions_grouped.json.
  run       extract + dataset in one step.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from revision_kit import __version__
from revision_kit.config import DEFAULT_CONTEXT_WORDS, PipelineConfig
from revision_kit.errors import RevisionKitError
from revision_kit.observability import CountingMetricsHook, names
from revision_kit.pipeline import (
    build_dataset_file,
    extract_revisions,
    render_corrected_readings,
    run,
)

logger = logging.getLogger("revision_kit.cli")


def _config(args: argparse.Namespace) -> PipelineConfig:
    return PipelineConfig(
        output_dir=args.output_dir,
        context_words=getattr(args, "context_words", DEFAULT_CONTEXT_WORDS),
    )


def _context_words(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError("must be >= 0")
    return number


def _report(metrics: CountingMetricsHook) -> None:
    skipped = metrics.count(names.DATASET_RECORDS_SKIPPED)
    if skipped:
        print(f"Skipped {skipped} change group(s) with blank sides.", file=sys.stderr)


def cmd_extract(args: argparse.Namespace) -> None:
    config = _config(args)
    paragraphs = extract_revisions(args.input, config)
    print(f"Grouped revisions saved in {config.revisions_path}", file=sys.stderr)
    if args.preview:
        for line in render_corrected_readings(paragraphs):
            print(line)


def cmd_dataset(args: argparse.Namespace) -> None:
    config = _config(args)
    metrics = CountingMetricsHook()
    count = build_dataset_file(config, input_path=args.input, metrics_hook=metrics)
    print(f"Wrote {count} records to {config.dataset_path}", file=sys.stderr)
    _report(metrics)


def cmd_run(args: argparse.Namespace) -> None:
    config = _config(args)
    metrics = CountingMetricsHook()
    count = run(args.input, config, metrics_hook=metrics)
    print(f"Wrote {count} records to {config.dataset_path}", file=sys.stderr)
    _report(metrics)


def _add_output_dir(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("outputs"),
        help="Directory for generated files (default: outputs).",
    )


def _add_context_words(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--context-words",
        type=_context_words,
        default=DEFAULT_CONTEXT_WORDS,
        help=f"Words of context kept on each side (default: {DEFAULT_CONTEXT_WORDS}).",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="revision-kit",
        description="Build (original, correction) datasets from tracked changes.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"revision-kit {__version__}"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING).",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        metavar="<command>",
        dest="command",
    )
    subparsers.required = True

    p = subparsers.add_parser("extract", help="Parse tracked changes to JSON.")
    p.add_argument("input", type=Path, help="Path to a .docx or document.xml.")
    _add_output_dir(p)
    p.add_argument(
        "--preview",
        action="store_true",
        help="Print the corrected reading of every paragraph.",
    )
    p.set_defaults(func=cmd_extract)

    p = subparsers.add_parser("dataset", help="Build dataset.jsonl.")
    p.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Paragraph JSON (default: <output-dir>/revisions_grouped.json).",
    )
    _add_output_dir(p)
    _add_context_words(p)
    p.set_defaults(func=cmd_dataset)

    p = subparsers.add_parser("run", help="Extract and build the dataset.")
    p.add_argument("input", type=Path, help="Path to a .docx or document.xml.")
    _add_output_dir(p)
    _add_context_words(p)
    p.set_defaults(func=cmd_run)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        args.func(args)
    except (RevisionKitError, OSError) as e:
        logger.error("%s failed: %s", args.command, e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
