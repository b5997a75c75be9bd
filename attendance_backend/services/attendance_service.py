"""
Service métier pour les présences.
Aucun champ obligatoire : seuls les bornes des entiers sont contrôlées.
"""

from attendance_backend.schemas.attendance import (
    AttendanceRecord,
    AttendanceRecordCreate,
    AttendanceRecordUpdate,
)
from attendance_backend.schemas.common import parse_input
from attendance_backend.services.crud import create_entity, delete_entity, replace_entity, require
from attendance_backend.storage import Storage


def record_attendance(storage: Storage, student_id: int, attendance_status: str = "") -> AttendanceRecord:
    data = parse_input(AttendanceRecordCreate, student_id=student_id, attendance_status=attendance_status)
    return create_entity(
        storage,
        storage.attendance_records,
        lambda key: AttendanceRecord(id=key, **data.model_dump()),
    )


def get_attendance_record(storage: Storage, record_id: int) -> AttendanceRecord:
    return require(storage.attendance_records, record_id)


def update_attendance_record(
    storage: Storage,
    record_id: int,
    student_id: int,
    attendance_status: str = "",
) -> AttendanceRecord:
    data = parse_input(AttendanceRecordUpdate, student_id=student_id, attendance_status=attendance_status)
    return replace_entity(
        storage,
        storage.attendance_records,
        record_id,
        lambda _current: AttendanceRecord(id=record_id, **data.model_dump()),
    )


def delete_attendance_record(storage: Storage, record_id: int) -> None:
    delete_entity(storage, storage.attendance_records, record_id)


def list_attendance_records(storage: Storage) -> list[AttendanceRecord]:
    return storage.attendance_records.list()
