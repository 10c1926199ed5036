"""Command line interface: analyse texts, build and benchmark syllable tables."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional, Sequence

from textstats.config import Settings
from textstats.core.alternative import HyphenationEstimator
from textstats.core.analyzer import AnalysisError, analyse
from textstats.core.benchmark import run_benchmark
from textstats.core.cmudict_loader import CMUDictLoader
from textstats.core.heuristic import DEFAULT_HEURISTIC
from textstats.core.models import Result
from textstats.utils.logging_config import configure_logging
from textstats.utils.observability import get_logger

logger = get_logger(__name__).bind(component="cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textstats",
        description="Readability statistics for English text.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (defaults to $TEXTSTATS_LOG_LEVEL or WARNING).",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    analyse_parser = commands.add_parser("analyse", help="Analyse a text file or stdin.")
    analyse_parser.add_argument(
        "path",
        nargs="?",
        default="-",
        help="Text file to analyse; '-' reads stdin.",
    )
    analyse_parser.add_argument("--json", action="store_true", help="Emit the full result as JSON.")
    analyse_parser.add_argument(
        "--pretty", action="store_true", help="Indent JSON output (implies --json)."
    )
    analyse_parser.add_argument(
        "--no-words", action="store_true", help="Omit the per-word list from JSON output."
    )
    analyse_parser.add_argument(
        "--proper-nouns",
        action="store_const",
        const=True,
        default=None,
        help="Track capitalised words separately for Gunning-Fog.",
    )
    analyse_parser.add_argument(
        "--fallback-alternative",
        action="store_const",
        const=True,
        default=None,
        help="Use the hyphenation count instead of 0 for unresolved disagreements.",
    )
    analyse_parser.add_argument(
        "--cmudict",
        type=Path,
        default=None,
        help="CMU dictionary file or JSON syllable table to use as reference.",
    )
    analyse_parser.add_argument(
        "--dale-chall",
        type=Path,
        default=None,
        help="Replacement Dale-Chall word list.",
    )

    cmudict_parser = commands.add_parser(
        "cmudict", help="Build a JSON syllable table from a CMU dictionary file."
    )
    cmudict_parser.add_argument("path", type=Path, help="cmudict-0.7b style file.")
    cmudict_parser.add_argument(
        "--output", type=Path, default=None, help="Write the table here instead of stdout."
    )

    benchmark_parser = commands.add_parser(
        "benchmark", help="Compare both estimators against a JSON syllable table."
    )
    benchmark_parser.add_argument("table", type=Path, help="JSON word -> syllable table.")
    return parser


def _format_summary(result: Result) -> str:
    lines = [
        f"Words:            {result.total_words}",
        f"Unique words:     {result.unique_words}",
        f"Sentences:        {result.sentences}",
        f"Letters:          {result.letters}",
        f"Syllables:        {result.syllables}",
        f"Difficult words:  {result.difficult_words}",
        "",
    ]
    for name, value in result.readability().items():
        lines.append(f"{name + ':':<28}{value:.2f}")
    return "\n".join(lines)


def _run_analyse(args: argparse.Namespace) -> int:
    try:
        settings = Settings.from_env().override(
            cmudict_path=args.cmudict,
            dale_chall_path=args.dale_chall,
            track_proper_nouns=args.proper_nouns,
            fallback_to_alternative=args.fallback_alternative,
        )
    except ValueError as error:
        logger.error("Invalid configuration", context={"error": str(error)})
        return 2

    try:
        if args.path == "-":
            result = analyse(sys.stdin, settings=settings)
        else:
            with open(args.path, "rb") as handle:
                result = analyse(handle, settings=settings)
    except AnalysisError as error:
        logger.error("Analysis aborted", context={"path": args.path, "error": str(error)})
        return 1
    except OSError as error:
        logger.error("Cannot open input", context={"path": args.path, "error": str(error)})
        return 1

    if args.json or args.pretty:
        indent = 2 if args.pretty else None
        sys.stdout.write(result.to_json(indent=indent, include_words=not args.no_words))
        sys.stdout.write("\n")
    else:
        print(_format_summary(result))
    return 0


def _run_cmudict(args: argparse.Namespace) -> int:
    if not args.path.exists():
        logger.error("CMU dictionary not found", context={"path": str(args.path)})
        return 1

    table = CMUDictLoader(args.path).syllable_table()
    payload = json.dumps(dict(sorted(table.items())), indent=2)
    if args.output is not None:
        args.output.write_text(payload + "\n", encoding="utf-8")
        logger.info("Wrote syllable table", context={"path": str(args.output), "words": len(table)})
    else:
        sys.stdout.write(payload + "\n")
    return 0


def _run_benchmark(args: argparse.Namespace) -> int:
    try:
        with args.table.open("r", encoding="utf-8") as handle:
            table = json.load(handle)
    except (OSError, ValueError) as error:
        logger.error("Cannot read syllable table", context={"path": str(args.table), "error": str(error)})
        return 1

    try:
        alternative = HyphenationEstimator(Settings.from_env().hyphenation_lang)
    except ValueError as error:
        logger.error("Invalid configuration", context={"error": str(error)})
        return 2

    report = run_benchmark(table, DEFAULT_HEURISTIC.estimate, alternative.estimate)
    json.dump(report.as_dict(), sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


_COMMANDS = {
    "analyse": _run_analyse,
    "cmudict": _run_cmudict,
    "benchmark": _run_benchmark,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    return _COMMANDS[args.command](args)


if __name__ == "__main__":
    raise SystemExit(main())
