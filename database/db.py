"""
Flat-File Store Module
Loads and saves the student/course roster as CSV rows
"""

import csv
from collections import deque
from datetime import datetime, date
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Tuple

import config
from registration.course import Course
from registration.student import Student

# Raised by a row with a missing column or an unparsable value
ROW_ERRORS = (KeyError, ValueError, TypeError, AttributeError)


def parse_date(value: str) -> date:
    """Parse a date stored in config.DATE_FORMAT"""
    return datetime.strptime(value.strip(), config.DATE_FORMAT).date()


def format_date(value: date) -> str:
    return value.strftime(config.DATE_FORMAT)


def order_enrollments(students: Iterable[Student],
                      courses: Iterable[Course]) -> List[Tuple[str, str]]:
    """
    Order (student_id, course_name) pairs for replay

    A pair is emitted once it heads both its student's course list and
    its course's student list, so replaying the pairs in order rebuilds
    both sequences.
    """
    student_queues = {s.student_id: deque(s.courses) for s in students}
    course_queues = {c.name: deque(c.student_ids) for c in courses}

    pairs = []
    progress = True
    while progress:
        progress = False
        for student_id, queue in student_queues.items():
            while queue:
                course_queue = course_queues.get(queue[0])
                if not course_queue or course_queue[0] != student_id:
                    break
                pairs.append((student_id, queue.popleft()))
                course_queue.popleft()
                progress = True

    # Only reachable when the two sides disagree; keep the student-side order
    for student_id, queue in student_queues.items():
        pairs.extend((student_id, course_name) for course_name in queue)

    return pairs


class FlatFileStore:
    """
    CSV-backed storage for students, courses and enrollments
    Each save rewrites all three files
    """

    def __init__(self, data_dir: Path = config.DATA_DIR):
        self.data_dir = Path(data_dir)
        self.students_path = self.data_dir / config.STUDENTS_FILE
        self.courses_path = self.data_dir / config.COURSES_FILE
        self.enrollments_path = self.data_dir / config.ENROLLMENTS_FILE

    def _read_rows(self, path: Path) -> List[dict]:
        if not path.exists():
            return []

        with open(path, 'r', newline='', encoding=config.FILE_ENCODING) as f:
            return list(csv.DictReader(f))

    def _write_rows(self, path: Path, fields: List[str], rows: Iterable[dict]):
        with open(path, 'w', newline='', encoding=config.FILE_ENCODING) as f:
            writer = csv.DictWriter(f, fieldnames=fields)
            writer.writeheader()
            writer.writerows(rows)

    def _parse_rows(self, path: Path, parse: Callable[[dict], object],
                    on_error: Optional[Callable[[str], None]]) -> list:
        """Parse every row of a file, skipping and reporting malformed ones"""
        items = []
        # Line 1 is the header
        for line_number, row in enumerate(self._read_rows(path), start=2):
            try:
                items.append(parse(row))
            except ROW_ERRORS as e:
                message = f"Skipped malformed row {line_number} in {path.name}: {e!r}"
                if on_error is not None:
                    on_error(message)
                else:
                    print(f"[DB] {message}")
        return items

    # ===========================
    # LOAD OPERATIONS
    # ===========================

    def load_students(self, on_error=None) -> List[Student]:
        """Load students without their enrollments"""
        return self._parse_rows(self.students_path, lambda row: Student(
            row['first_name'].strip(),
            row['last_name'].strip(),
            parse_date(row['birth_date']),
            row['student_id'].strip()
        ), on_error)

    def load_courses(self, on_error=None) -> List[Course]:
        """Load courses without their enrollments"""
        return self._parse_rows(self.courses_path, lambda row: Course(
            row['course_name'].strip(),
            int(row['capacity']),
            parse_date(row['start_date'])
        ), on_error)

    def load_enrollments(self, on_error=None) -> List[Tuple[str, str]]:
        """Load (student_id, course_name) pairs in saved order"""
        return self._parse_rows(self.enrollments_path, lambda row: (
            row['student_id'].strip(),
            row['course_name'].strip()
        ), on_error)

    # ===========================
    # SAVE OPERATIONS
    # ===========================

    def save(self, students: Iterable[Student], courses: Iterable[Course]):
        """Rewrite every data file from the given roster"""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        students = list(students)
        courses = list(courses)

        self._write_rows(self.students_path, config.STUDENT_FIELDS, (
            {
                'student_id': s.student_id,
                'first_name': s.first_name,
                'last_name': s.last_name,
                'birth_date': format_date(s.birth_date),
            }
            for s in students
        ))

        self._write_rows(self.courses_path, config.COURSE_FIELDS, (
            {
                'course_name': c.name,
                'capacity': c.capacity,
                'start_date': format_date(c.start_date),
            }
            for c in courses
        ))

        self._write_rows(self.enrollments_path, config.ENROLLMENT_FIELDS, (
            {'student_id': student_id, 'course_name': course_name}
            for student_id, course_name in order_enrollments(students, courses)
        ))

        print(f"[DB] Saved {len(students)} students and {len(courses)} courses "
              f"to {self.data_dir}")


# Singleton instance
_store_instance = None

def get_store() -> FlatFileStore:
    """Get singleton store instance"""
    global _store_instance
    if _store_instance is None:
        _store_instance = FlatFileStore()
    return _store_instance
