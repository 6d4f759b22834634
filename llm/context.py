from typing import List

from analytics.stats import hole_history
from models import Course, Hole, PlayerProfile, Round

_LIST_SEPARATOR = ", "


def build_hole_context(
    course: Course,
    hole: Hole,
    round_obj: Round,
    profile: PlayerProfile,
) -> str:
    """Format what the caddie knows about the current hole into briefing lines.

    Line order is fixed. Notes and tendencies are left out entirely when
    there are none.
    """
    history = hole_history(course, hole.hole_number)

    lines: List[str] = [
        f"- Course: {course.name}",
        f"- Currently on: Hole #{hole.hole_number} (Par {hole.par}, {hole.yardage} yds)",
        f"- Historical Performance on this hole: {history.describe()}",
    ]
    if hole.notes:
        lines.append(f"- Your organic notes on this hole: {_LIST_SEPARATOR.join(hole.notes)}")
    lines.append(f"- Weather: {round_obj.conditions}")
    if profile.tendencies:
        lines.append(f"- General Player Tendencies: {_LIST_SEPARATOR.join(profile.tendencies)}")

    return "\n".join(lines)
