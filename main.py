"""
Course Registration System - Main Entry Point
CLI menu for managing students, courses and enrollments
"""

import sys
import signal
from datetime import datetime
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

import config
from database.db import get_store
from registration import Course, RegistrationSystem, Student


def read_text(prompt: str) -> str:
    return input(prompt).strip()


def read_date(prompt: str):
    """Read a date typed as YYYY-MM-DD"""
    value = read_text(prompt)
    try:
        return datetime.strptime(value, config.DATE_FORMAT).date()
    except ValueError:
        raise ValueError(f"Invalid date '{value}', expected YYYY-MM-DD") from None


def read_int(prompt: str) -> int:
    value = read_text(prompt)
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Invalid number '{value}'") from None


class RegistrationApp:
    """
    Interactive shell around the registration system
    Sole top-level error boundary: every failure is printed and the menu continues
    """

    MENU = [
        ("1", "Add New Student"),
        ("2", "Add New Course"),
        ("3", "Enroll Student in Course"),
        ("4", "Withdraw Student from Course"),
        ("5", "List Students (A-Z)"),
        ("6", "List Courses (by start date)"),
        ("7", "List Available Courses"),
        ("8", "Remove Student"),
        ("9", "Remove Course"),
        ("10", "Show Student's Courses"),
        ("11", "Show Course's Students"),
        ("12", "Save and Exit"),
    ]

    def __init__(self, system: RegistrationSystem):
        self.system = system
        self.actions = {
            "1": self.add_student,
            "2": self.add_course,
            "3": self.enroll_student,
            "4": self.withdraw_student,
            "5": self.list_students,
            "6": self.list_courses,
            "7": self.list_available_courses,
            "8": self.remove_student,
            "9": self.remove_course,
            "10": self.show_student_courses,
            "11": self.show_course_students,
        }

    def show_menu(self):
        """Show main menu until the user exits"""
        while True:
            print("\n" + "=" * config.MENU_WIDTH)
            print(f"{config.SYSTEM_NAME.upper()} - MAIN MENU")
            print("=" * config.MENU_WIDTH)
            for key, label in self.MENU:
                print(f"{key}. {label}")
            print("=" * config.MENU_WIDTH)

            choice = input(f"\nEnter choice (1-{len(self.MENU)}): ").strip()

            if choice == "12":
                print("\n[System] Saving and exiting...")
                break

            action = self.actions.get(choice)
            if action is None:
                print("[ERROR] Invalid choice")
                continue

            try:
                action()
            except Exception as e:
                print(f"[ERROR] {e}")

    # ===========================
    # MUTATING ACTIONS
    # ===========================

    def add_student(self):
        first_name = read_text("First name: ")
        last_name = read_text("Last name: ")
        birth_date = read_date("Birth date (YYYY-MM-DD): ")
        student_id = read_text("Student ID: ")

        self.system.add_student(Student(first_name, last_name, birth_date, student_id))
        print("[SUCCESS] Student added")

    def add_course(self):
        name = read_text("Course name: ")
        capacity = read_int("Capacity: ")
        start_date = read_date("Start date (YYYY-MM-DD): ")

        self.system.add_course(Course(name, capacity, start_date))
        print("[SUCCESS] Course added")

    def enroll_student(self):
        student_id = read_text("Student ID: ")
        course_name = read_text("Course name: ")

        self.system.enroll(student_id, course_name)
        print("[SUCCESS] Student enrolled")

    def withdraw_student(self):
        student_id = read_text("Student ID: ")
        course_name = read_text("Course name: ")

        self.system.withdraw(student_id, course_name)
        print("[SUCCESS] Student withdrawn")

    def remove_student(self):
        student_id = read_text("Student ID to remove: ")
        self.system.remove_student(student_id)
        print("[SUCCESS] Student removed")

    def remove_course(self):
        name = read_text("Course name to remove: ")
        self.system.remove_course(name)
        print("[SUCCESS] Course removed")

    # ===========================
    # LISTINGS
    # ===========================

    def list_students(self):
        students = self.system.list_students()

        print("\n" + "=" * config.MENU_WIDTH)
        print("STUDENTS (A-Z)")
        print("=" * config.MENU_WIDTH)

        if not students:
            print("No registered students")
        for student in students:
            print(f"- {student.full_name} ({student.student_id})")

    def list_courses(self):
        courses = self.system.list_courses()

        print("\n" + "=" * config.MENU_WIDTH)
        print("COURSES (by start date)")
        print("=" * config.MENU_WIDTH)

        if not courses:
            print("No registered courses")
        for course in courses:
            print(f"- {course.name} (Start: {course.start_date.isoformat()}, "
                  f"Capacity: {course.capacity})")

    def list_available_courses(self):
        courses = self.system.list_available_courses()

        print("\n" + "=" * config.MENU_WIDTH)
        print("AVAILABLE COURSES")
        print("=" * config.MENU_WIDTH)

        if not courses:
            print("No courses with free slots")
        for course in courses:
            print(f"- {course.name} (Free slots: {course.available_slots})")

    def show_student_courses(self):
        student_id = read_text("Student ID: ")
        student = self.system.get_student(student_id)
        courses = self.system.list_student_courses(student_id)

        print(f"\nCourses of {student.full_name}:")
        if not courses:
            print("Not enrolled in any course")
        for course in courses:
            print(f"- {course.name}")

    def show_course_students(self):
        name = read_text("Course name: ")
        students = self.system.list_course_students(name)

        print(f"\nStudents of {name}:")
        if not students:
            print("No enrolled students")
        for student in students:
            print(f"- {student.full_name}")


def main():
    """Main entry point"""
    print("\n" + "=" * config.MENU_WIDTH)
    print(f"{config.SYSTEM_NAME} v{config.VERSION}")
    print("=" * config.MENU_WIDTH)

    with RegistrationSystem(store=get_store()) as system:
        def _signal_handler(signum, frame):
            """Handle interrupt signals"""
            print("\n\n[System] Interrupt received, shutting down...")
            system.close()
            sys.exit(0)

        signal.signal(signal.SIGINT, _signal_handler)
        signal.signal(signal.SIGTERM, _signal_handler)

        try:
            RegistrationApp(system).show_menu()
        except EOFError:
            print("\n[System] Input closed, shutting down...")

    print("\n[System] Goodbye!")


if __name__ == "__main__":
    main()
