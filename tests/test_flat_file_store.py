from __future__ import annotations

from datetime import date

from database.db import FlatFileStore, order_enrollments
from registration import Course, RegistrationSystem, Student


def _seed(system: RegistrationSystem) -> None:
    system.add_student(Student("Alice", "Nowak", date(2001, 5, 4), "1"))
    system.add_student(Student("Bob", "Kowalski", date(2000, 11, 23), "2"))
    system.add_course(Course("Algorithms", 2, date(2024, 1, 10)))
    system.add_course(Course("Databases", 1, date(2024, 2, 1)))
    system.enroll("2", "Algorithms")
    system.enroll("1", "Algorithms")
    system.enroll("1", "Databases")


def test_missing_files_load_empty(tmp_path) -> None:
    store = FlatFileStore(tmp_path / "data")

    assert store.load_students() == []
    assert store.load_courses() == []
    assert store.load_enrollments() == []


def test_saved_roster_reloads_with_enrollments(tmp_path) -> None:
    store = FlatFileStore(tmp_path / "data")
    log_path = tmp_path / "audit.log"

    with RegistrationSystem(log_path=log_path, store=store) as system:
        _seed(system)

    with RegistrationSystem(log_path=log_path, store=store) as restored:
        assert sorted(restored.students) == ["1", "2"]
        assert restored.students["1"].birth_date == date(2001, 5, 4)
        assert restored.courses["Algorithms"].capacity == 2
        assert restored.courses["Databases"].start_date == date(2024, 2, 1)

        assert restored.courses["Algorithms"].student_ids == ("2", "1")
        assert restored.students["1"].courses == ("Algorithms", "Databases")
        assert not restored.courses["Databases"].has_available_slots()


def test_rows_written_as_plain_csv(tmp_path) -> None:
    store = FlatFileStore(tmp_path)
    store.save(
        [Student("Alice", "Nowak", date(2001, 5, 4), "1")],
        [Course("Algorithms", 2, date(2024, 1, 10))],
    )

    assert store.students_path.read_text(encoding="utf-8").splitlines() == [
        "student_id,first_name,last_name,birth_date",
        "1,Alice,Nowak,2001-05-04",
    ]
    assert store.courses_path.read_text(encoding="utf-8").splitlines() == [
        "course_name,capacity,start_date",
        "Algorithms,2,2024-01-10",
    ]
    assert store.enrollments_path.read_text(encoding="utf-8").splitlines() == [
        "student_id,course_name",
    ]


def test_invalid_stored_enrollments_are_skipped_and_logged(tmp_path) -> None:
    store = FlatFileStore(tmp_path)
    store.save(
        [Student("Alice", "Nowak", date(2001, 5, 4), "1"),
         Student("Bob", "Kowalski", date(2000, 11, 23), "2")],
        [Course("Tiny", 1, date(2024, 1, 10))],
    )
    store.enrollments_path.write_text(
        "student_id,course_name\n1,Tiny\n2,Tiny\n9,Tiny\n1,Ghost\n",
        encoding="utf-8",
    )
    log_path = tmp_path / "audit.log"

    with RegistrationSystem(log_path=log_path, store=store) as system:
        system.close(save=False)
        assert system.courses["Tiny"].student_ids == ("1",)
        assert system.students["2"].courses == ()

    errors = [l for l in log_path.read_text(encoding="utf-8").splitlines()
              if " ERROR: " in l]
    assert len(errors) == 3


def test_reload_keeps_student_and_course_enrollment_order(tmp_path) -> None:
    store = FlatFileStore(tmp_path / "data")
    log_path = tmp_path / "audit.log"

    with RegistrationSystem(log_path=log_path, store=store) as system:
        system.add_student(Student("Alice", "Nowak", date(2001, 5, 4), "1"))
        system.add_student(Student("Bob", "Kowalski", date(2000, 11, 23), "2"))
        system.add_course(Course("Late", 5, date(2024, 9, 1)))
        system.add_course(Course("Early", 5, date(2024, 1, 1)))
        system.enroll("1", "Late")
        system.enroll("2", "Early")
        system.enroll("2", "Late")
        system.enroll("1", "Early")

    with RegistrationSystem(log_path=log_path, store=store) as restored:
        assert restored.students["1"].courses == ("Late", "Early")
        assert restored.students["2"].courses == ("Early", "Late")
        assert restored.courses["Late"].student_ids == ("1", "2")
        assert restored.courses["Early"].student_ids == ("2", "1")
        assert [c.name for c in restored.list_student_courses("1")] == ["Late", "Early"]


def test_order_enrollments_survives_withdrawals() -> None:
    alice = Student("Alice", "Nowak", date(2001, 5, 4), "1")
    bob = Student("Bob", "Kowalski", date(2000, 11, 23), "2")
    late = Course("Late", 5, date(2024, 9, 1))
    early = Course("Early", 5, date(2024, 1, 1))

    alice.enroll(early)
    bob.enroll(late)
    alice.enroll(late)
    bob.enroll(early)
    alice.withdraw(early)
    alice.enroll(early)

    pairs = order_enrollments([alice, bob], [early, late])

    replay_students = {"1": [], "2": []}
    replay_courses = {"Early": [], "Late": []}
    for student_id, course_name in pairs:
        replay_students[student_id].append(course_name)
        replay_courses[course_name].append(student_id)

    assert len(pairs) == 4
    assert tuple(replay_students["1"]) == alice.courses == ("Late", "Early")
    assert tuple(replay_students["2"]) == bob.courses
    assert tuple(replay_courses["Early"]) == early.student_ids == ("2", "1")
    assert tuple(replay_courses["Late"]) == late.student_ids


def test_corrupt_rows_are_skipped_and_logged(tmp_path) -> None:
    store = FlatFileStore(tmp_path)
    store.save(
        [Student("Alice", "Nowak", date(2001, 5, 4), "1")],
        [Course("Algorithms", 2, date(2024, 1, 10))],
    )
    store.courses_path.write_text(
        "course_name,capacity,start_date\n"
        "X,many,2024-01-01\n"
        "Y,3,someday\n"
        "Z,4\n"
        "Algorithms,2,2024-01-10\n",
        encoding="utf-8",
    )
    log_path = tmp_path / "audit.log"

    system = RegistrationSystem(log_path=log_path, store=store)
    assert list(system.courses) == ["Algorithms"]
    assert list(system.students) == ["1"]
    system.close(save=False)

    assert not system.audit.is_open
    errors = [l for l in log_path.read_text(encoding="utf-8").splitlines()
              if " ERROR: " in l]
    assert len(errors) == 3
    assert "row 2 in courses.csv" in errors[0]
    assert "row 3 in courses.csv" in errors[1]
    assert "row 4 in courses.csv" in errors[2]


def test_corrupt_rows_are_reported_without_callback(tmp_path, capsys) -> None:
    store = FlatFileStore(tmp_path)
    store.students_path.write_text(
        "student_id,first_name,last_name,birth_date\n1,Alice,Nowak,04/05/2001\n",
        encoding="utf-8",
    )

    assert store.load_students() == []
    assert "[DB] Skipped malformed row 2 in students.csv" in capsys.readouterr().out


def test_save_creates_missing_data_directory(tmp_path) -> None:
    store = FlatFileStore(tmp_path / "not" / "yet" / "there")
    store.save([], [])

    assert store.students_path.exists()
    assert store.enrollments_path.read_text(encoding="utf-8").splitlines() == [
        "student_id,course_name",
    ]
