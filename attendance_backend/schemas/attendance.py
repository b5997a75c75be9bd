"""
Schémas Pydantic pour les présences.
attendance_status est libre (pas d'énumération imposée).
"""

from pydantic import BaseModel

from attendance_backend.schemas.common import U64


class AttendanceRecordCreate(BaseModel):
    student_id: U64
    attendance_status: str = ""


class AttendanceRecordUpdate(AttendanceRecordCreate):
    pass


class AttendanceRecord(BaseModel):
    id: U64
    student_id: U64
    attendance_status: str
