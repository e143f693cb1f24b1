"""
Student Entity Module
Holds student identity and the names of enrolled courses
"""

from datetime import date
from typing import List, Tuple

from registration.exceptions import AlreadyEnrolledError, NotEnrolledError


class Student:
    """
    A registered student
    Sorted by last name, then first name; equality stays identity-based
    """

    def __init__(self, first_name: str, last_name: str, birth_date: date,
                 student_id: str):
        self._first_name = first_name
        self._last_name = last_name
        self._birth_date = birth_date
        self._student_id = student_id
        self._course_names: List[str] = []

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def birth_date(self) -> date:
        return self._birth_date

    @property
    def student_id(self) -> str:
        return self._student_id

    @property
    def full_name(self) -> str:
        return f"{self._last_name} {self._first_name}"

    @property
    def courses(self) -> Tuple[str, ...]:
        """Names of enrolled courses in enrollment order"""
        return tuple(self._course_names)

    def enroll(self, course):
        """
        Enroll this student in a course

        The course side is updated first so a full course leaves
        both sides untouched.

        Raises:
            AlreadyEnrolledError: Student is already on the course
            CourseFullError: Course has no free slots
        """
        if course.name in self._course_names:
            raise AlreadyEnrolledError(
                f"Student {self._student_id} is already enrolled in course {course.name}."
            )

        course.add_student(self)
        self._course_names.append(course.name)

    def withdraw(self, course):
        """
        Withdraw this student from a course

        Raises:
            NotEnrolledError: Student is not on the course
        """
        if course.name not in self._course_names:
            raise NotEnrolledError(
                f"Student {self._student_id} is not enrolled in course {course.name}."
            )

        course.remove_student(self)
        self._course_names.remove(course.name)

    def is_enrolled_in(self, course_name: str) -> bool:
        return course_name in self._course_names

    def is_enrolled_in_any(self) -> bool:
        return bool(self._course_names)

    @property
    def sort_key(self) -> Tuple[str, str]:
        return (self._last_name, self._first_name)

    def __lt__(self, other: "Student") -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __repr__(self) -> str:
        return (f"Student(student_id={self._student_id!r}, "
                f"name={self.full_name!r})")
