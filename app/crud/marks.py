from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.mark import SubjectMark
from app.models.subject import CompetencyDescriptor
from app.schemas.mark import CPMarkOut, OtherMarkOut, SubjectMarksOut


async def get_grouped_by_subjects(
    db: AsyncSession, subject_ids: Sequence[str]
) -> list[SubjectMarksOut]:
    """Return marks for the given subjects grouped per (subject, student)."""
    if not subject_ids:
        return []
    result = await db.execute(
        select(SubjectMark, CompetencyDescriptor.cp_num)
        .outerjoin(CompetencyDescriptor, SubjectMark.cp_id == CompetencyDescriptor.cp_id)
        .where(SubjectMark.subject_id.in_(subject_ids))
        .order_by(SubjectMark.subject_id, SubjectMark.student_id)
    )

    groups: dict[tuple[str, str], SubjectMarksOut] = {}
    for mark, cp_num in result.all():
        key = (mark.subject_id, mark.student_id)
        group = groups.get(key)
        if group is None:
            group = groups[key] = SubjectMarksOut(
                subject_id=mark.subject_id, student_id=mark.student_id
            )
        if mark.cp_id:
            group.cp_marks.append(
                CPMarkOut(
                    mark_id=mark.mark_id,
                    value=mark.value,
                    cp_id=mark.cp_id,
                    cp_num=cp_num,
                    student_id=mark.student_id,
                    subject_id=mark.subject_id,
                )
            )
        else:
            group.other_marks.append(
                OtherMarkOut(
                    mark_id=mark.mark_id,
                    type=mark.type,
                    value=mark.value,
                    student_id=mark.student_id,
                    subject_id=mark.subject_id,
                )
            )
    return list(groups.values())
