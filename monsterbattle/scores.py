"""Maximum, minimum and average of a list of scores."""

from __future__ import annotations

import sys
from typing import NamedTuple, Sequence

DEFAULT_SCORES = (88, 61, 90, 75, 93)


class ScoreSummary(NamedTuple):
    maximum: int
    minimum: int
    average: float


def summarize(scores: Sequence[int]) -> ScoreSummary:
    """Return the highest, lowest and mean score."""
    if not scores:
        raise ValueError("no scores to summarize")
    return ScoreSummary(max(scores), min(scores), sum(scores) / len(scores))


def format_summary(scores: Sequence[int]) -> str:
    summary = summarize(scores)
    return (
        f"max score:{summary.maximum}, min score:{summary.minimum}, "
        f"average score:{summary.average:.2f}"
    )


def main(argv: Sequence[str] | None = None) -> int:
    sys.stdout.write(format_summary(DEFAULT_SCORES))
    return 0


if __name__ == "__main__":
    sys.exit(main())