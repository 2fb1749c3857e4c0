"""Full-collection saves for the child collections of a report card."""

from typing import Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.database import transaction
from app.exceptions import ConflictError
from app.models.extra import Extra, ExtraMark
from app.models.mark import SubjectMark
from app.models.notes_attendance import NotesAttendance
from app.models.report import Report
from app.models.student import Student
from app.models.subject import CompetencyDescriptor, Subject
from app.schemas.extra import ExtraIn, ExtraMarkIn
from app.schemas.mark import SubjectMarksIn
from app.schemas.notes_attendance import NotesAttendanceIn
from app.schemas.student import STUDENT_PROFILE_FIELDS, StudentIn
from app.schemas.subject import CPIn
from app.services.reconcile import Collection, ReconcileResult, apply, reconcile


STUDENTS = Collection(
    name="students",
    model=Student,
    id_attr="student_id",
    match_attr="nisn",
    parent_attr="report_id",
    parent_model=Report,
    fields=STUDENT_PROFILE_FIELDS,
)

CPS = Collection(
    name="cps",
    model=CompetencyDescriptor,
    id_attr="cp_id",
    parent_attr="subject_id",
    parent_model=Subject,
    fields=("cp_num", "cp_desc"),
)

EXTRAS = Collection(
    name="extras",
    model=Extra,
    id_attr="extra_id",
    parent_attr="report_id",
    parent_model=Report,
    fields=("name",),
)

EXTRA_MARKS = Collection(
    name="extra_marks",
    model=ExtraMark,
    id_attr="extra_mark_id",
    parent_attr="extra_id",
    parent_model=Extra,
    fields=("value", "description", "recommendation"),
    insert_only=("student_id",),
)

NOTES_ATTENDANCE = Collection(
    name="notes_attendances",
    model=NotesAttendance,
    id_attr="id",
    parent_attr="report_id",
    parent_model=Report,
    fields=("notes", "sick", "leave", "alpha"),
    insert_only=("student_id",),
)

# Subject marks are upsert-only: marks left out of a save are kept
CP_MARKS = Collection(
    name="cp_marks",
    model=SubjectMark,
    id_attr="mark_id",
    fields=("value",),
    insert_only=("subject_id", "student_id", "cp_id"),
    delete_stale=False,
)

OTHER_MARKS = Collection(
    name="other_marks",
    model=SubjectMark,
    id_attr="mark_id",
    fields=("value", "type"),
    insert_only=("subject_id", "student_id"),
    delete_stale=False,
)


def _single_parent(ids: Sequence[Optional[str]], what: str) -> Optional[str]:
    """Return the one parent id named by a batch, None for an empty batch."""
    parents = set(ids)
    if len(parents) > 1 or None in parents:
        raise ConflictError(f"All {what} must reference the same parent")
    return next(iter(parents), None)


async def sync_students(
    db: AsyncSession, report_id: str, students: Sequence[StudentIn]
) -> ReconcileResult:
    return await reconcile(db, STUDENTS, report_id, [s.model_dump() for s in students])


async def sync_cps(db: AsyncSession, subject_id: str, cps: Sequence[CPIn]) -> ReconcileResult:
    return await reconcile(db, CPS, subject_id, [cp.model_dump() for cp in cps])


async def sync_extras(
    db: AsyncSession, extras: Sequence[ExtraIn], report_id: Optional[str] = None
) -> Optional[ReconcileResult]:
    """Save the extras of one report.

    Without ``report_id`` the report is taken from the records themselves and
    an empty batch is a no-op, since it names no report.
    """
    if report_id is None:
        report_id = _single_parent([e.report_id for e in extras], "extras")
        if report_id is None:
            return None
    return await reconcile(db, EXTRAS, report_id, [e.model_dump() for e in extras])


async def sync_extra_marks(
    db: AsyncSession, marks: Sequence[ExtraMarkIn], extra_id: Optional[str] = None
) -> Optional[ReconcileResult]:
    """Save the marks of one extra; same parent rules as ``sync_extras``."""
    if extra_id is None:
        extra_id = _single_parent([m.extra_id for m in marks], "extra marks")
        if extra_id is None:
            return None
    return await reconcile(db, EXTRA_MARKS, extra_id, [m.model_dump() for m in marks])


async def sync_notes_attendance(
    db: AsyncSession, report_id: str, entries: Sequence[NotesAttendanceIn]
) -> ReconcileResult:
    return await reconcile(db, NOTES_ATTENDANCE, report_id, [e.model_dump() for e in entries])


async def set_subject_marks(
    db: AsyncSession, groups: Sequence[SubjectMarksIn]
) -> tuple[ReconcileResult, ReconcileResult]:
    """Upsert CP marks and other marks of many (subject, student) pairs in one transaction."""
    cp_marks = [m.model_dump() for g in groups for m in g.cp_marks]
    other_marks = [m.model_dump() for g in groups for m in g.other_marks]
    async with transaction(db):
        cp_result = await apply(db, CP_MARKS, None, cp_marks)
        other_result = await apply(db, OTHER_MARKS, None, other_marks)
    return cp_result, other_result
