import pytest
from pydantic import ValidationError

from analytics.stats import (
    NO_HOLE_HISTORY,
    HoleHistory,
    hole_history,
    hole_scoring_summary,
    round_summary,
    scoring_by_par,
)
from models import Course, Hole
from tests.conftest import build_round


def test_hole_history_pinehurst_hole_7(pinehurst):
    history = hole_history(pinehurst, 7)
    assert history.rounds_played == 2
    assert history.average_score == 4.00
    assert history.describe() == (
        "Player has played this hole 2 times with an average score of 4.00."
    )


def test_hole_history_without_matches_is_sentinel(pinehurst):
    history = hole_history(pinehurst, 2)
    assert history is NO_HOLE_HISTORY
    assert history.average_score is None
    assert not history.has_history
    assert history.describe() == "No previous history on this hole."


def test_hole_history_for_course_without_rounds():
    course = Course(name="New", holes=[Hole(hole_number=1, par=4, yardage=400)])
    assert hole_history(course, 1) is NO_HOLE_HISTORY


@pytest.mark.parametrize(
    "scores, expected",
    [
        ([4, 5, 5], 4.67),
        ([3, 4, 4], 3.67),
        ([4, 4, 4, 5], 4.25),
        ([3, 3, 4, 4, 4, 4, 4, 7], 4.13),  # 4.125 rounds half-up
        ([6], 6.0),
    ],
)
def test_hole_history_average_rounded_to_two_places(scores, expected):
    course = Course(id="c", name="Avg", holes=[Hole(hole_number=5, par=4, yardage=390)])
    course.round_history = [
        build_round("c", day, {5: score}) for day, score in enumerate(scores, start=1)
    ]
    history = hole_history(course, 5)
    assert history.rounds_played == len(scores)
    assert history.average_score == expected


def test_hole_history_is_deterministic(pinehurst):
    assert hole_history(pinehurst, 7) == hole_history(pinehurst, 7)


def test_hole_history_is_immutable():
    with pytest.raises(ValidationError):
        NO_HOLE_HISTORY.rounds_played = 3
    assert HoleHistory() == NO_HOLE_HISTORY


def test_hole_scoring_summary(pinehurst):
    rows = {row["hole_number"]: row for row in hole_scoring_summary(pinehurst)}
    assert rows[7]["rounds_played"] == 2
    assert rows[7]["average_to_par"] == 0.0
    assert rows[1]["average_score"] == 4.5
    assert rows[2]["average_score"] is None
    assert rows[2]["average_to_par"] is None


def test_round_summary(pinehurst):
    summary = round_summary(pinehurst.round_history[0], pinehurst)
    assert summary["holes_played"] == 2.0
    assert summary["total_score"] == 9.0
    assert summary["to_par"] == 1.0
    assert summary["shots_logged"] == 0.0


def test_scoring_by_par(pinehurst):
    rows = scoring_by_par(pinehurst)
    assert len(rows) == 1
    assert rows[0]["par"] == 4
    assert rows[0]["sample_size"] == 4
    assert rows[0]["average_strokes"] == pytest.approx(4.25)
