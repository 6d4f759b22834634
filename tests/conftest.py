from datetime import datetime

import pytest

from models import Course, Hole, HolePerformance, PlayerProfile, Round


def build_round(course_id: str, day: int, scores: dict, conditions: str = "Sunny, light wind") -> Round:
    """Helper: past round with {hole_number: score} results."""
    return Round(
        course_id=course_id,
        date=datetime(2026, 5, day, 9, 30),
        conditions=conditions,
        hole_by_hole=[
            HolePerformance(hole_number=n, score=s) for n, s in scores.items()
        ],
    )


@pytest.fixture
def pinehurst() -> Course:
    """Pinehurst with hole 7 (par 4, 380 yds) scored 5 and 3 in two past rounds."""
    course = Course(
        id="pinehurst",
        name="Pinehurst",
        holes=[
            Hole(hole_number=1, par=4, yardage=402),
            Hole(hole_number=2, par=5, yardage=510),
            Hole(hole_number=7, par=4, yardage=380),
        ],
    )
    course.round_history = [
        build_round("pinehurst", 1, {1: 4, 7: 5}),
        build_round("pinehurst", 8, {1: 5, 7: 3}),
    ]
    return course


@pytest.fixture
def current_round() -> Round:
    return Round(
        course_id="pinehurst",
        date=datetime(2026, 6, 14, 8, 0),
        conditions="Overcast, 15 mph wind from the west",
    )


@pytest.fixture
def profile() -> PlayerProfile:
    return PlayerProfile()
