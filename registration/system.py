"""
Registration System Module
Owns the student and course registries, enforces cross-entity rules
and records every attempted operation in the audit log
"""

from pathlib import Path
from typing import Dict, List

import config
from audit.audit_log import AuditLog
from registration.course import Course
from registration.exceptions import (
    CourseNotFoundError,
    DuplicateIdError,
    DuplicateNameError,
    HasEnrollmentsError,
    RegistrationError,
    StudentNotFoundError,
)
from registration.student import Student


class RegistrationSystem:
    """
    Central registration service

    Every operation either applies fully or raises before mutating.
    Failures are written to the audit log as errors and re-raised
    unchanged. Use as a context manager so the log is always released.
    """

    def __init__(self, log_path: Path = config.AUDIT_LOG, store=None):
        self.students: Dict[str, Student] = {}
        self.courses: Dict[str, Course] = {}
        self.store = store
        self._closed = False

        self.audit = AuditLog(log_path)
        self.audit.info("System started")

        if self.store is not None:
            try:
                self._load_from_store()
            except Exception:
                self.audit.error("Startup failed while loading the roster")
                self.audit.close()
                raise

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    # ===========================
    # LOOKUPS
    # ===========================

    def get_student(self, student_id: str) -> Student:
        student = self.students.get(student_id)
        if student is None:
            raise StudentNotFoundError(f"Student with ID {student_id} not found.")
        return student

    def get_course(self, course_name: str) -> Course:
        course = self.courses.get(course_name)
        if course is None:
            raise CourseNotFoundError(f"Course {course_name} not found.")
        return course

    # ===========================
    # REGISTRY OPERATIONS
    # ===========================

    def add_student(self, student: Student):
        """Add a new student; the student ID must be unique"""
        if student.student_id in self.students:
            self.audit.error(
                f"Attempt to add student with existing ID: {student.student_id}"
            )
            raise DuplicateIdError(
                f"Student with ID {student.student_id} already exists."
            )

        self.students[student.student_id] = student
        self.audit.info(
            f"Added student: {student.full_name} ({student.student_id})"
        )

    def add_course(self, course: Course):
        """Add a new course; the course name must be unique"""
        if course.name in self.courses:
            self.audit.error(
                f"Attempt to add course with existing name: {course.name}"
            )
            raise DuplicateNameError(f"Course {course.name} already exists.")

        self.courses[course.name] = course
        self.audit.info(
            f"Added course: {course.name} (Start: {course.start_date.isoformat()}, "
            f"Capacity: {course.capacity})"
        )

    def remove_student(self, student_id: str):
        """Remove a student that is not enrolled in any course"""
        try:
            student = self.get_student(student_id)
            if student.is_enrolled_in_any():
                raise HasEnrollmentsError(
                    f"Cannot remove student {student_id} who is enrolled in courses."
                )
        except RegistrationError as e:
            self.audit.error(f"Remove student failed: {e}")
            raise

        del self.students[student_id]
        self.audit.info(f"Removed student: {student.full_name} ({student_id})")

    def remove_course(self, course_name: str):
        """Remove a course with no enrolled students"""
        try:
            course = self.get_course(course_name)
            if course.has_enrollments():
                raise HasEnrollmentsError(
                    f"Cannot remove course {course_name} with enrolled students."
                )
        except RegistrationError as e:
            self.audit.error(f"Remove course failed: {e}")
            raise

        del self.courses[course_name]
        self.audit.info(f"Removed course: {course_name}")

    # ===========================
    # ENROLLMENT OPERATIONS
    # ===========================

    def enroll(self, student_id: str, course_name: str):
        """
        Enroll a student in a course

        Raises:
            StudentNotFoundError, CourseNotFoundError,
            AlreadyEnrolledError, CourseFullError
        """
        try:
            student = self.get_student(student_id)
            course = self.get_course(course_name)
            student.enroll(course)
        except RegistrationError as e:
            self.audit.error(f"Enrollment failed: {e}")
            raise

        self.audit.info(f"Enrolled student {student_id} in course {course_name}")

    def withdraw(self, student_id: str, course_name: str):
        """
        Withdraw a student from a course

        Raises:
            StudentNotFoundError, CourseNotFoundError, NotEnrolledError
        """
        try:
            student = self.get_student(student_id)
            course = self.get_course(course_name)
            student.withdraw(course)
        except RegistrationError as e:
            self.audit.error(f"Withdrawal failed: {e}")
            raise

        self.audit.info(f"Withdrew student {student_id} from course {course_name}")

    # ===========================
    # QUERIES
    # ===========================

    def list_students(self) -> List[Student]:
        """All students sorted by last name, then first name"""
        return sorted(self.students.values())

    def list_courses(self) -> List[Course]:
        """All courses sorted by start date"""
        return sorted(self.courses.values())

    def list_available_courses(self) -> List[Course]:
        """Courses with free slots, sorted by start date"""
        return sorted(c for c in self.courses.values() if c.has_available_slots())

    def list_student_courses(self, student_id: str) -> List[Course]:
        """Courses of one student in enrollment order"""
        student = self.get_student(student_id)
        return [self.courses[name] for name in student.courses]

    def list_course_students(self, course_name: str) -> List[Student]:
        """Students of one course sorted by last name, then first name"""
        course = self.get_course(course_name)
        return sorted(self.students[sid] for sid in course.student_ids)

    # ===========================
    # PERSISTENCE
    # ===========================

    def _load_from_store(self):
        """Populate the registries from the attached store"""
        for student in self.store.load_students(on_error=self.audit.error):
            if student.student_id in self.students:
                self.audit.error(f"Skipped duplicate stored student: {student.student_id}")
                continue
            self.students[student.student_id] = student

        for course in self.store.load_courses(on_error=self.audit.error):
            if course.name in self.courses:
                self.audit.error(f"Skipped duplicate stored course: {course.name}")
                continue
            self.courses[course.name] = course

        restored = 0
        enrollments = self.store.load_enrollments(on_error=self.audit.error)
        for student_id, course_name in enrollments:
            try:
                self.get_student(student_id).enroll(self.get_course(course_name))
                restored += 1
            except RegistrationError as e:
                self.audit.error(f"Skipped stored enrollment: {e}")

        self.audit.info(
            f"Loaded {len(self.students)} students, {len(self.courses)} courses "
            f"and {restored} enrollments"
        )
        print(f"[Registration] Loaded {len(self.students)} students and "
              f"{len(self.courses)} courses")

    def save(self):
        """Write the roster to the attached store"""
        if self.store is None:
            return
        self.store.save(self.list_students(), self.list_courses())
        self.audit.info("Roster saved")

    # ===========================
    # SHUTDOWN
    # ===========================

    def close(self, save: bool = config.SAVE_ON_EXIT):
        """
        Shut the system down

        Best-effort: errors are reported, never raised, and the
        audit log is released on every path.
        """
        if self._closed:
            return
        self._closed = True

        try:
            self.audit.info("System shutting down")
            if save:
                self.save()
        except Exception as e:
            self.audit.error(f"Shutdown failed: {e}")
            print(f"[Registration] Error during shutdown: {e}")
        finally:
            try:
                self.audit.close()
            except Exception as e:
                print(f"[Registration] Error closing audit log: {e}")
