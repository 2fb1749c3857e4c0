"""Tests for the reconciling upsert shared by every child collection."""

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from app.exceptions import NotFoundError
from app.models.notes_attendance import NotesAttendance
from app.models.report import Report
from app.models.student import Student
from app.models.subject import CompetencyDescriptor, Subject
from app.schemas.notes_attendance import NotesAttendanceIn
from app.schemas.student import StudentIn
from app.schemas.subject import CPIn
from app.services.sync_service import sync_cps, sync_notes_attendance, sync_students


async def _students(db, report_id):
    result = await db.execute(
        select(Student).where(Student.report_id == report_id).order_by(Student.nisn)
    )
    return result.scalars().all()


@pytest.fixture
def subject_factory(db, report):
    async def _make(name="Matematika"):
        s = Subject(report_id=report.report_id, subject_name=name)
        db.add(s)
        await db.commit()
        db.expunge(s)
        return s

    return _make


# ---------------------------------------------------------------------------
# Students: matched on nisn
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_students_insert_then_resubmit_is_idempotent(db, report):
    roster = [StudentIn(nisn="001", name="Adi"), StudentIn(nisn="002", name="Budi")]

    first = await sync_students(db, report.report_id, roster)
    assert first.inserted == 2 and first.deleted == 0
    ids_before = {s.nisn: s.student_id for s in await _students(db, report.report_id)}

    second = await sync_students(db, report.report_id, roster)
    assert second.inserted == 0
    assert second.updated == 2
    assert second.deleted == 0
    ids_after = {s.nisn: s.student_id for s in await _students(db, report.report_id)}
    assert ids_after == ids_before


@pytest.mark.asyncio
async def test_students_matched_by_nisn_keep_their_id(db, report):
    await sync_students(db, report.report_id, [StudentIn(nisn="001", name="Adi")])
    (before,) = await _students(db, report.report_id)

    # No student_id in the payload: the nisn alone identifies the row
    await sync_students(db, report.report_id, [StudentIn(nisn="001", name="Adi Saputra")])
    db.expunge_all()
    (updated,) = await _students(db, report.report_id)
    assert updated.student_id == before.student_id
    assert updated.name == "Adi Saputra"


@pytest.mark.asyncio
async def test_students_missing_from_payload_are_deleted(db, report):
    await sync_students(
        db,
        report.report_id,
        [StudentIn(nisn="001"), StudentIn(nisn="002"), StudentIn(nisn="003")],
    )

    result = await sync_students(db, report.report_id, [StudentIn(nisn="002")])
    assert result.deleted == 2
    db.expunge_all()
    assert [s.nisn for s in await _students(db, report.report_id)] == ["002"]


@pytest.mark.asyncio
async def test_empty_roster_clears_the_report(db, report):
    await sync_students(db, report.report_id, [StudentIn(nisn="001"), StudentIn(nisn="002")])

    result = await sync_students(db, report.report_id, [])
    assert result.deleted == 2
    db.expunge_all()
    assert await _students(db, report.report_id) == []


@pytest.mark.asyncio
async def test_reconcile_only_touches_its_own_parent(db, account, report):
    other = Report(nip=account.nip, school_year="2024/2025", semester="2", class_="4B")
    db.add(other)
    await db.commit()
    await sync_students(db, other.report_id, [StudentIn(nisn="900", name="Citra")])
    await sync_students(db, report.report_id, [StudentIn(nisn="001")])

    await sync_students(db, report.report_id, [])
    db.expunge_all()
    assert [s.nisn for s in await _students(db, other.report_id)] == ["900"]


@pytest.mark.asyncio
async def test_duplicate_nisn_in_one_batch_keeps_the_last(db, report):
    result = await sync_students(
        db,
        report.report_id,
        [StudentIn(nisn="001", name="First"), StudentIn(nisn="001", name="Second")],
    )
    assert result.inserted == 1
    assert len(result.kept_ids) == 1
    db.expunge_all()
    (student,) = await _students(db, report.report_id)
    assert student.name == "Second"


@pytest.mark.asyncio
async def test_numeric_nisn_is_accepted_as_string(db, report):
    await sync_students(db, report.report_id, [StudentIn.model_validate({"nisn": 12345})])
    (student,) = await _students(db, report.report_id)
    assert student.nisn == "12345"


@pytest.mark.asyncio
async def test_missing_parent_raises_not_found(db):
    with pytest.raises(NotFoundError):
        await sync_students(db, "no-such-report", [StudentIn(nisn="001")])
    count = await db.scalar(select(func.count()).select_from(Student))
    assert count == 0


# ---------------------------------------------------------------------------
# CPs: matched on id
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_cps_supplied_unknown_id_is_used_for_insert(db, subject_factory):
    subject = await subject_factory()
    client_id = "6f1c2d9e-0000-4000-8000-000000000001"

    result = await sync_cps(db, subject.subject_id, [CPIn(cp_id=client_id, cp_num=1, cp_desc="A")])
    assert result.kept_ids == [client_id]
    cp = await db.get(CompetencyDescriptor, client_id)
    assert cp is not None and cp.subject_id == subject.subject_id


@pytest.mark.asyncio
async def test_cps_id_of_another_subject_gets_a_fresh_id(db, subject_factory):
    math = await subject_factory("Matematika")
    art = await subject_factory("Seni")
    await sync_cps(db, math.subject_id, [CPIn(cp_id="cp-1", cp_num=1, cp_desc="Math")])

    result = await sync_cps(db, art.subject_id, [CPIn(cp_id="cp-1", cp_num=1, cp_desc="Art")])
    (new_id,) = result.kept_ids
    assert new_id != "cp-1"

    db.expunge_all()
    math_cp = await db.get(CompetencyDescriptor, "cp-1")
    assert math_cp.subject_id == math.subject_id
    assert math_cp.cp_desc == "Math"


@pytest.mark.asyncio
async def test_cps_update_delete_and_insert_in_one_save(db, subject_factory):
    subject = await subject_factory()
    await sync_cps(
        db,
        subject.subject_id,
        [CPIn(cp_id="cp-1", cp_num=1, cp_desc="one"), CPIn(cp_id="cp-2", cp_num=2, cp_desc="two")],
    )

    result = await sync_cps(
        db,
        subject.subject_id,
        [CPIn(cp_id="cp-2", cp_num=1, cp_desc="two, renumbered"), CPIn(cp_num=2, cp_desc="new")],
    )
    assert (result.updated, result.inserted, result.deleted) == (1, 1, 1)

    db.expunge_all()
    rows = (
        await db.execute(
            select(CompetencyDescriptor)
            .where(CompetencyDescriptor.subject_id == subject.subject_id)
            .order_by(CompetencyDescriptor.cp_num)
        )
    ).scalars().all()
    assert [(r.cp_num, r.cp_desc) for r in rows] == [(1, "two, renumbered"), (2, "new")]
    assert rows[0].cp_id == "cp-2"
    assert await db.get(CompetencyDescriptor, "cp-1") is None


# ---------------------------------------------------------------------------
# Atomicity
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_failed_save_leaves_previous_rows_untouched(db, report):
    await sync_students(db, report.report_id, [StudentIn(nisn="001")])
    (student,) = await _students(db, report.report_id)
    await sync_notes_attendance(
        db, report.report_id, [NotesAttendanceIn(student_id=student.student_id, sick=1)]
    )

    # The second entry references a student that does not exist
    with pytest.raises(IntegrityError):
        await sync_notes_attendance(
            db,
            report.report_id,
            [
                NotesAttendanceIn(student_id=student.student_id, sick=5),
                NotesAttendanceIn(student_id="ghost", sick=2),
            ],
        )

    db.expunge_all()
    rows = (
        await db.execute(select(NotesAttendance).where(NotesAttendance.report_id == report.report_id))
    ).scalars().all()
    assert len(rows) == 1
    assert rows[0].sick == 1
