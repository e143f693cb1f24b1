"""
Configuration file for the Course Registration System
Central configuration for all system parameters
"""

from pathlib import Path

# ===========================
# PATH CONFIGURATION
# ===========================
# Runtime files live under the directory the system is started from;
# the audit log and the store create them on first use
RUNTIME_DIR = Path.cwd()
LOGS_DIR = RUNTIME_DIR / "logs"
DATA_DIR = RUNTIME_DIR / "data"

# ===========================
# LOGGING CONFIGURATION
# ===========================
AUDIT_LOG = LOGS_DIR / "audit.log"
AUDIT_LOGGER_NAME = "RegistrationAudit"

# [2024-01-10 09:30:00] INFO: message
AUDIT_LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
FILE_ENCODING = "utf-8"

# ===========================
# DATA FILE CONFIGURATION
# ===========================
STUDENTS_FILE = "students.csv"
COURSES_FILE = "courses.csv"
ENROLLMENTS_FILE = "enrollments.csv"

STUDENT_FIELDS = ["student_id", "first_name", "last_name", "birth_date"]
COURSE_FIELDS = ["course_name", "capacity", "start_date"]
ENROLLMENT_FIELDS = ["student_id", "course_name"]

SAVE_ON_EXIT = True

# ===========================
# INPUT CONFIGURATION
# ===========================
DATE_FORMAT = "%Y-%m-%d"  # Dates typed at the menu and stored in data files

# ===========================
# SYSTEM CONFIGURATION
# ===========================
SYSTEM_NAME = "Course Registration System"
VERSION = "1.0.0"
MENU_WIDTH = 60
