from app.crud.schools import crud_school
from app.crud.users import crud_user
from app.crud.reports import crud_report
from app.crud.students import crud_student
from app.crud.subjects import crud_subject, crud_cp
from app.crud.extras import crud_extra, crud_extra_mark
from app.crud.notes_attendance import crud_notes_attendance
from app.crud.marks import get_grouped_by_subjects as get_subject_marks

__all__ = [
    "crud_school",
    "crud_user",
    "crud_report",
    "crud_student",
    "crud_subject",
    "crud_cp",
    "crud_extra",
    "crud_extra_mark",
    "crud_notes_attendance",
    "get_subject_marks",
]
