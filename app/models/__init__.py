from app.models.base import Base, TimestampMixin
from app.models.school import School
from app.models.user import User
from app.models.report import Report
from app.models.student import Student
from app.models.subject import Subject, CompetencyDescriptor
from app.models.mark import SubjectMark
from app.models.extra import Extra, ExtraMark
from app.models.notes_attendance import NotesAttendance

__all__ = [
    "Base",
    "TimestampMixin",
    "School",
    "User",
    "Report",
    "Student",
    "Subject",
    "CompetencyDescriptor",
    "SubjectMark",
    "Extra",
    "ExtraMark",
    "NotesAttendance",
]
