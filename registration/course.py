"""
Course Entity Module
Holds course identity, capacity and the IDs of enrolled students
"""

from datetime import date
from typing import List, Tuple

from registration.exceptions import (
    AlreadyEnrolledError,
    CourseFullError,
    NotEnrolledError,
)


class Course:
    """
    A course with a fixed capacity and start date
    Enrolled students are tracked by student ID in insertion order
    """

    def __init__(self, name: str, capacity: int, start_date: date):
        self._name = name
        self._capacity = capacity
        self._start_date = start_date
        self._student_ids: List[str] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def start_date(self) -> date:
        return self._start_date

    @property
    def student_ids(self) -> Tuple[str, ...]:
        """IDs of enrolled students, oldest enrollment first"""
        return tuple(self._student_ids)

    @property
    def enrolled_count(self) -> int:
        return len(self._student_ids)

    @property
    def available_slots(self) -> int:
        return max(self._capacity - len(self._student_ids), 0)

    def add_student(self, student):
        """
        Add a student to this course

        Raises:
            CourseFullError: Course has no free slots
            AlreadyEnrolledError: Student is already on the course
        """
        if len(self._student_ids) >= self._capacity:
            raise CourseFullError(
                f"Course {self._name} has reached its capacity ({self._capacity})."
            )

        if student.student_id in self._student_ids:
            raise AlreadyEnrolledError(
                f"Student {student.student_id} is already enrolled in course {self._name}."
            )

        self._student_ids.append(student.student_id)

    def remove_student(self, student):
        """
        Remove a student from this course

        Raises:
            NotEnrolledError: Student is not on the course
        """
        if student.student_id not in self._student_ids:
            raise NotEnrolledError(
                f"Student {student.student_id} is not enrolled in course {self._name}."
            )

        self._student_ids.remove(student.student_id)

    def has_student(self, student_id: str) -> bool:
        return student_id in self._student_ids

    def has_available_slots(self) -> bool:
        return len(self._student_ids) < self._capacity

    def has_enrollments(self) -> bool:
        return bool(self._student_ids)

    @property
    def sort_key(self) -> date:
        return self._start_date

    def __lt__(self, other: "Course") -> bool:
        if not isinstance(other, Course):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __repr__(self) -> str:
        return (f"Course(name={self._name!r}, capacity={self._capacity}, "
                f"start_date={self._start_date.isoformat()})")
