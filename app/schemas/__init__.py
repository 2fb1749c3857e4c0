from app.schemas.common import StatusResponse, ErrorResponse
from app.schemas.school import SchoolCreate, SchoolUpdate, SchoolResponse
from app.schemas.user import (
    UserResponse,
    UserUpdate,
    ChangeSchoolRequest,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
)
from app.schemas.report import ReportData, ReportUpsertRequest, ReportSaved, ReportResponse
from app.schemas.student import StudentIn, StudentsRequest, StudentResponse
from app.schemas.subject import (
    SubjectIn,
    SubjectUpsertRequest,
    SubjectResponse,
    CPIn,
    CPRequest,
    CPResponse,
    CPListResponse,
    SubjectIdsRequest,
)
from app.schemas.mark import CPMarkIn, OtherMarkIn, SubjectMarksIn, SubjectMarksListResponse
from app.schemas.extra import (
    ExtraIn,
    ExtrasRequest,
    ExtraResponse,
    ExtraMarkIn,
    ExtraMarksRequest,
    ExtraMarkResponse,
    ExtraIdsRequest,
    ExtraMarkListResponse,
)
from app.schemas.notes_attendance import NotesAttendanceIn, NotesAttendanceResponse
