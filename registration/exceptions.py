"""
Registration Exceptions
One exception per failure condition, all sharing a common base
"""


class RegistrationError(Exception):
    """Base class for every registration failure"""
    pass


class DuplicateIdError(RegistrationError):
    """Raised when a student ID is already registered"""
    pass


class DuplicateNameError(RegistrationError):
    """Raised when a course name is already registered"""
    pass


class StudentNotFoundError(RegistrationError):
    """Raised when no student matches the given ID"""
    pass


class CourseNotFoundError(RegistrationError):
    """Raised when no course matches the given name"""
    pass


class AlreadyEnrolledError(RegistrationError):
    """Raised when a student is already enrolled in a course"""
    pass


class NotEnrolledError(RegistrationError):
    """Raised when a student is not enrolled in a course"""
    pass


class CourseFullError(RegistrationError):
    """Raised when a course has reached its capacity"""
    pass


class HasEnrollmentsError(RegistrationError):
    """Raised when removing a student or course that still has enrollments"""
    pass
