#!/usr/bin/env python3
"""
CLI tool for scoring answers to chess position questions.

Input is a JSON list of question-result records:

    [
      {
        "question": {"players": {"white": "Magnus Carlsen", "black": "..."},
                     "tournament": "..."},
        "stockfishEval": [{"move": "e4", "evaluation": 1.0}, ...],
        "answer": {"evaluation": 0.5, "bestMove": "e4",
                   "playerOrTournament": "Carlsen"}
      }
    ]

Usage:
    python tools/score_answers.py answers.json
    python tools/score_answers.py answers.json --output scores.json --verbose
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from tqdm import tqdm

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from chess_guess.scoring import QuestionResult, score

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def load_records(path: Path) -> list:
    """Read the list of question-result records from a JSON file."""
    if not path.exists():
        raise FileNotFoundError(f"Answers file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        records = json.load(f)

    if isinstance(records, dict):
        records = [records]
    if not isinstance(records, list):
        raise ValueError(f"Expected a list of records in {path}")

    return records


def score_records(records: list, show_progress: bool = False) -> list:
    """
    Score every record.

    Args:
        records: Question-result records
        show_progress: Display a progress bar

    Returns:
        One breakdown dict per record, in input order

    Raises:
        ValueError: If a record is malformed (message names its index)
    """
    scores = []
    for index, record in enumerate(
        tqdm(records, desc="Scoring", unit="answer", disable=not show_progress)
    ):
        try:
            result = QuestionResult.from_dict(record)
        except (ValueError, TypeError) as e:
            raise ValueError(f"Record {index}: {e}") from e

        breakdown = score(result)
        logger.debug(f"Record {index}: total={breakdown.total:.2f}")
        scores.append(breakdown.to_dict())

    return scores


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Score answers to chess position questions",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "answers",
        help="JSON file with question-result records",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Path to write scores (default: print to stdout)",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()
    setup_logging(verbose=args.verbose)

    try:
        records = load_records(Path(args.answers))
        scores = score_records(records, show_progress=args.progress)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        sys.exit(1)
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)

    output = json.dumps(scores, indent=2)
    if args.output:
        Path(args.output).write_text(output + "\n")
        logger.info(f"Wrote {len(scores)} scores to {args.output}")
    else:
        print(output)


if __name__ == "__main__":
    main()
