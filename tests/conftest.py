"""Shared fixtures for the registration test suite."""

from datetime import date

import pytest

from registration import Course, RegistrationSystem, Student


@pytest.fixture
def log_path(tmp_path):
    return tmp_path / "logs" / "audit.log"


@pytest.fixture
def system(log_path):
    with RegistrationSystem(log_path=log_path) as reg:
        yield reg


@pytest.fixture
def alice():
    return Student("Alice", "Nowak", date(2001, 5, 4), "1")


@pytest.fixture
def bob():
    return Student("Bob", "Kowalski", date(2000, 11, 23), "2")


@pytest.fixture
def algorithms():
    return Course("Algorithms", 1, date(2024, 1, 10))


@pytest.fixture
def databases():
    return Course("Databases", 3, date(2024, 2, 1))
