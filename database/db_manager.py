from __future__ import annotations

import logging
from typing import List, Optional

from database.converters import golf_data_from_document, golf_data_to_document
from database.document_store import DocumentStore
from database.exceptions import DuplicateError, IntegrityError, NotFoundError
from models import Course, GolfData, Hole, PlayerProfile, Round

logger = logging.getLogger(__name__)

GOLF_DATA_KEY = "golfData"


class GolfDataManager:
    """
    Holds the app's golf data in memory and mirrors it to a document store.

    Notes:
    - The whole dataset is one document: load() reads it, save() rewrites it.
    - Every mutating operation saves immediately.
    - Store failures of any kind are logged and never raised; the in-memory state (or an
      empty dataset on a failed load) stays in use.
    """

    def __init__(self, store: DocumentStore, key: str = GOLF_DATA_KEY) -> None:
        self.store = store
        self.key = key
        self.data = GolfData()

    def load(self) -> GolfData:
        """Initialize state from the store. Call once at app startup."""
        try:
            self.data = golf_data_from_document(self.store.get(self.key))
        except Exception:
            logger.exception("Could not load golf data; starting with an empty dataset")
            self.data = GolfData()
        return self.data

    def save(self) -> bool:
        """Write the whole dataset back to the store. Returns False on failure."""
        try:
            self.store.set(self.key, golf_data_to_document(self.data))
            return True
        except Exception:
            logger.exception("Could not save golf data; keeping in-memory state")
            return False

    # ---- Courses ----

    @property
    def courses(self) -> List[Course]:
        return self.data.courses

    def list_courses(self) -> List[Course]:
        return list(self.data.courses)

    def get_course(self, course_id: str) -> Optional[Course]:
        for course in self.data.courses:
            if course.id == course_id:
                return course
        return None

    def require_course(self, course_id: str) -> Course:
        course = self.get_course(course_id)
        if course is None:
            raise NotFoundError(f"Course {course_id} not found")
        return course

    def require_hole(self, course_id: str, hole_number: int) -> Hole:
        course = self.require_course(course_id)
        hole = course.get_hole(hole_number)
        if hole is None:
            raise NotFoundError(f"Hole {hole_number} not found on course {course_id}")
        return hole

    def add_course(self, course: Course) -> Course:
        if self.get_course(course.id) is not None:
            raise DuplicateError(f"Course {course.id} already exists")
        self.data.courses.append(course)
        self.save()
        return course

    # ---- Rounds ----

    def save_round(self, course_id: str, round_obj: Round) -> Course:
        """Insert the round into the course's history, replacing one with the same date."""
        course = self.require_course(course_id)
        if round_obj.course_id != course_id:
            raise IntegrityError(
                f"Round belongs to course {round_obj.course_id}, not {course_id}"
            )
        # Stored by value so later edits to the caller's round need another save.
        replaced = course.upsert_round(round_obj.model_copy(deep=True))
        logger.debug(
            "%s round %s on course %s",
            "Replaced" if replaced else "Added", round_obj.date.isoformat(), course_id,
        )
        self.save()
        return course

    # ---- Learned notes ----

    def add_course_note(self, course_id: str, hole_number: int, note: str) -> Hole:
        hole = self.require_hole(course_id, hole_number)
        hole.add_note(note)
        self.save()
        return hole

    @property
    def player_profile(self) -> PlayerProfile:
        return self.data.player_profile

    def add_player_tendency(self, tendency: str) -> bool:
        """Record a tendency. Returns False if the exact text was already known."""
        added = self.data.player_profile.add_tendency(tendency)
        if added:
            self.save()
        return added
