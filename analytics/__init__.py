from .stats import (
    NO_HOLE_HISTORY,
    HoleHistory,
    hole_history,
    hole_scoring_summary,
    round_summary,
    scoring_by_par,
)

__all__ = [
    "NO_HOLE_HISTORY",
    "HoleHistory",
    "hole_history",
    "hole_scoring_summary",
    "round_summary",
    "scoring_by_par",
]
