"""Final grade from exam scores and homework."""

from collections.abc import Sequence

from .median import median


def grade(midterm: float, final: float, homework: "float | Sequence[float]") -> float:
    """Weight midterm, final and homework 20/40/40.

    ``homework`` is either a single homework score or a sequence of
    scores, whose median is used. An empty sequence raises ValueError.
    """
    if isinstance(homework, (int, float)):
        homework_score = float(homework)
    else:
        scores = list(homework)
        if not scores:
            raise ValueError("No homework entered!")
        homework_score = median(scores)
    return 0.2 * midterm + 0.4 * final + 0.4 * homework_score