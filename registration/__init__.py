"""
Student registration module
Students, courses and the registration service that links them
"""

from .course import Course
from .exceptions import (
    AlreadyEnrolledError,
    CourseFullError,
    CourseNotFoundError,
    DuplicateIdError,
    DuplicateNameError,
    HasEnrollmentsError,
    NotEnrolledError,
    RegistrationError,
    StudentNotFoundError,
)
from .student import Student
from .system import RegistrationSystem

__all__ = [
    'Course',
    'Student',
    'RegistrationSystem',
    'RegistrationError',
    'DuplicateIdError',
    'DuplicateNameError',
    'StudentNotFoundError',
    'CourseNotFoundError',
    'AlreadyEnrolledError',
    'NotEnrolledError',
    'CourseFullError',
    'HasEnrollmentsError',
]
