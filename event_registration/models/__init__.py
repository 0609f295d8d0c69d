from .student import Student, AttendanceEntry

__all__ = [
    "Student",
    "AttendanceEntry",
]
