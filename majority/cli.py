"""Command-line entry point: rank skaters from a score file."""

import argparse
import json
import logging
import sys
from pathlib import Path

from majority.analyze import AnalysisError, AnalysisResult, analyze_scores
from majority.models import SkaterResult
from majority.parser import ScoreTextParser


def format_result(result: SkaterResult) -> str:
    """Format one ranked skater as a single line of text."""
    line = (
        f"#{result.rank:<3} {result.name:<20} "
        f"M.V. {result.majority_victories:>4.1f}  "
        f"Total {result.total_score:>5.1f}"
    )
    if result.tie_break_info:
        trail = ", ".join(
            f"{r.level}={r.value:g}" for r in result.tie_break_info
        )
        line += f"  TB: {trail}"
    return line


def format_analysis(analysis: AnalysisResult) -> str:
    """Format a whole ranking as plain text, one skater per line."""
    return "\n".join(
        format_result(r) for r in analysis.result.final_ranking
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Rank skaters with the majority system")
    parser.add_argument(
        "input",
        help="Path to a score file, one skater per line ('-' for stdin)")
    parser.add_argument(
        "-j", "--judges", type=int, default=ScoreTextParser.DEFAULT_JUDGES,
        help=f"Number of judges per line (default: {ScoreTextParser.DEFAULT_JUDGES})")
    parser.add_argument(
        "--json", action="store_true",
        help="Print the full result as JSON")
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Show debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.input == "-":
        content = sys.stdin.read()
    else:
        try:
            content = Path(args.input).read_text(encoding="utf-8")
        except OSError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    try:
        analysis = analyze_scores(content, judges=args.judges)
    except AnalysisError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(analysis.to_dict(), indent=2))
    else:
        print(format_analysis(analysis))
    return 0


if __name__ == "__main__":
    sys.exit(main())
