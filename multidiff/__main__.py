"""
multidiff Entry Point
=====================

Command-line interface for comparing several text documents side by side.
Loads the documents, applies the input policy, runs the comparator and
prints the aligned rows.

Usage:
    python -m multidiff <file> [<file> ...] [--threshold T] [--window W] [--json]
    python -m multidiff <combined_file>
"""
import argparse
import json
import logging
import sys
from .comparator import DEFAULT_CONFIG, MultiTextComparator, summarize
from .input_controller import InputController
from .models import InvalidInputError
from .word_differ import highlight_segments

LOGGING_FORMAT = '%(asctime)s:%(levelname)s:%(message)s'

MAX_DOCUMENTS = 10
MIN_DOCUMENTS = 2


def render_cell(cell) -> str:
    """Plain-text rendering of a cell, with different words wrapped in brackets."""
    if not cell.exists:
        return "-"
    return "".join(f"[{token}]" if highlighted else token
                   for token, highlighted in highlight_segments(cell.content, cell.different_words))


def print_rows(rows, labels):
    print("\t".join(["row", "class"] + labels))
    for row in rows:
        columns = [f"{cell.type.value}: {render_cell(cell)}" for cell in row.cells]
        print("\t".join([str(row.row_index + 1), row.classification.value] + columns))


def main(argv=None):
    """
    Main execution function.

    1. Parses command line arguments.
    2. Loads the documents and checks the count limits.
    3. Runs the comparison.
    4. Prints the rows (text or JSON) and optionally a summary.
    """
    parser = argparse.ArgumentParser(description="multidiff: line alignment and word diff across several texts")
    parser.add_argument("sources", nargs="+", help="Two or more files, or one combined file")
    parser.add_argument("--threshold", type=float, default=DEFAULT_CONFIG["SIMILARITY_THRESHOLD"],
                        help="Word overlap ratio needed to align two different lines")
    parser.add_argument("--window", type=int, default=DEFAULT_CONFIG["WINDOW_RADIUS"],
                        help="How many lines above/below a row to look for a match")
    parser.add_argument("--json", action="store_true", help="Print rows as JSON")
    parser.add_argument("--summary", action="store_true", help="Print row statistics to stderr")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(format=LOGGING_FORMAT,
                        level=logging.DEBUG if args.verbose else logging.WARNING)

    # 1. Load Input
    documents = InputController().load(args.sources)

    if len(documents) > MAX_DOCUMENTS:
        print(f"Error: At most {MAX_DOCUMENTS} texts can be compared, got {len(documents)}.", file=sys.stderr)
        return 1
    if sum(1 for _, text in documents if text.strip()) < MIN_DOCUMENTS:
        print(f"Error: Please provide at least {MIN_DOCUMENTS} non-empty texts to compare.", file=sys.stderr)
        return 1

    labels = [label for label, _ in documents]
    config = {"SIMILARITY_THRESHOLD": args.threshold, "WINDOW_RADIUS": args.window}

    # 2. Compare
    try:
        rows = MultiTextComparator(config).compare([text for _, text in documents])
    except InvalidInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # 3. Output Results
    if args.json:
        print(json.dumps({"labels": labels, "rows": [r.to_dict() for r in rows]}, indent=2))
    else:
        print_rows(rows, labels)

    if args.summary:
        for key, value in summarize(rows).items():
            print(f"{key}: {value}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
