"""Pipeline I/O: score sheet reader."""

from .student_reader import read_students

__all__ = ["read_students"]
