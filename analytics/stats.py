from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from models.course import Course
from models.round import Round

_TWO_PLACES = Decimal("0.01")


class HoleHistory(BaseModel):
    """How the player has done on one hole across a course's round history."""
    model_config = ConfigDict(frozen=True)

    rounds_played: int = 0
    average_score: Optional[float] = None

    @property
    def has_history(self) -> bool:
        return self.rounds_played > 0

    def describe(self) -> str:
        """Render the summary as the sentence used in the caddie briefing."""
        if not self.has_history:
            return "No previous history on this hole."
        return (
            f"Player has played this hole {self.rounds_played} times "
            f"with an average score of {self.average_score:.2f}."
        )


# Returned whenever a hole has never been scored; never carries a number.
NO_HOLE_HISTORY = HoleHistory()


def _average(scores: List[int]) -> float:
    """Mean of the scores, rounded half-up to two decimal places."""
    mean = Decimal(sum(scores)) / Decimal(len(scores))
    return float(mean.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


def hole_history(course: Course, hole_number: int) -> HoleHistory:
    """Summarize past performances on a hole from the course's round history."""
    scores = [
        performance.score
        for round_obj in course.round_history
        for performance in round_obj.hole_by_hole
        if performance.hole_number == hole_number
    ]
    if not scores:
        return NO_HOLE_HISTORY
    return HoleHistory(rounds_played=len(scores), average_score=_average(scores))


def hole_scoring_summary(course: Course) -> List[Dict[str, Any]]:
    """
    Per-hole history for every hole on the course.

    Output rows:
    - hole_number, par
    - rounds_played: number of recorded scores
    - average_score / average_to_par: None when the hole has no history
    """
    results: List[Dict[str, Any]] = []
    for hole in sorted(course.holes, key=lambda h: h.hole_number):
        history = hole_history(course, hole.hole_number)
        average_to_par: Optional[float] = None
        if history.average_score is not None:
            average_to_par = round(history.average_score - hole.par, 2)
        results.append(
            {
                "hole_number": hole.hole_number,
                "par": hole.par,
                "rounds_played": history.rounds_played,
                "average_score": history.average_score,
                "average_to_par": average_to_par,
            }
        )
    return results


def round_summary(round_obj: Round, course: Course) -> Dict[str, Optional[float]]:
    """Compute summary metrics for a single round played on the course."""
    total_score = round_obj.calculate_total_score()

    pars = []
    for performance in round_obj.hole_by_hole:
        hole = course.get_hole(performance.hole_number)
        if hole is not None:
            pars.append(hole.par)

    to_par: Optional[int] = None
    if total_score is not None and len(pars) == len(round_obj.hole_by_hole):
        to_par = total_score - sum(pars)

    return {
        "holes_played": float(round_obj.holes_played()),
        "total_score": float(total_score) if total_score is not None else None,
        "to_par": float(to_par) if to_par is not None else None,
        "shots_logged": float(len(round_obj.shots)),
    }


def scoring_by_par(course: Course) -> List[Dict[str, Any]]:
    """
    Aggregate scoring performance by hole par (3, 4, 5) over the round history.

    Output rows:
    - par: 3, 4, or 5
    - average_to_par: mean(score - par)
    - average_strokes: mean(score)
    - sample_size: number of holes included
    """
    by_par: Dict[int, List[int]] = {}

    for round_obj in course.round_history:
        for performance in round_obj.hole_by_hole:
            hole = course.get_hole(performance.hole_number)
            if not hole or hole.par not in (3, 4, 5):
                continue
            by_par.setdefault(hole.par, []).append(performance.score)

    results: List[Dict[str, Any]] = []
    for par in sorted(by_par):
        strokes = by_par[par]
        avg_strokes = sum(strokes) / len(strokes)
        results.append(
            {
                "par": par,
                "average_to_par": avg_strokes - par,
                "average_strokes": avg_strokes,
                "sample_size": len(strokes),
            }
        )
    return results
