"""
Point d'entrée du backend : surface d'opérations appelée par le framework englobant.

Chaque opération ouvre sa propre session, construit une poignée Storage et
délègue au service concerné. Les erreurs métier (NotFoundError,
InvalidInputError, TooLargeError) remontent telles quelles à l'appelant.
"""

import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from attendance_backend.config import settings
from attendance_backend.database import SessionLocal, init_db
from attendance_backend.logging_config import setup_logging
from attendance_backend.schemas.attendance import AttendanceRecord
from attendance_backend.schemas.common import MultimediaInput
from attendance_backend.schemas.lecture import Lecture
from attendance_backend.schemas.message import Message
from attendance_backend.schemas.student import Student
from attendance_backend.services import (
    attendance_service,
    lecture_service,
    message_service,
    student_service,
)
from attendance_backend.storage import Storage

logger = logging.getLogger(__name__)


class AttendanceBackend:
    def __init__(
        self,
        session_factory: Callable[[], Session] = SessionLocal,
        max_record_size: int = settings.MAX_RECORD_SIZE,
        id_start: int = settings.ID_COUNTER_START,
    ) -> None:
        self.session_factory = session_factory
        self.max_record_size = max_record_size
        self.id_start = id_start

    @contextmanager
    def _storage(self) -> Iterator[Storage]:
        db = self.session_factory()
        try:
            yield Storage(db, max_record_size=self.max_record_size, id_start=self.id_start)
        finally:
            db.close()

    # --- Élèves ---

    def register_student(self, name: str, contact_details: str = "", attendance_history: str = "") -> Student:
        with self._storage() as storage:
            return student_service.register_student(storage, name, contact_details, attendance_history)

    def get_student(self, student_id: int) -> Student:
        with self._storage() as storage:
            return student_service.get_student(storage, student_id)

    def update_student(
        self, student_id: int, name: str, contact_details: str = "", attendance_history: str = ""
    ) -> Student:
        with self._storage() as storage:
            return student_service.update_student(
                storage, student_id, name, contact_details, attendance_history
            )

    def delete_student(self, student_id: int) -> None:
        with self._storage() as storage:
            student_service.delete_student(storage, student_id)

    def list_students(self) -> list[Student]:
        with self._storage() as storage:
            return student_service.list_students(storage)

    # --- Cours ---

    def schedule_lecture(
        self,
        student_id: int,
        lecturer_id: int,
        date_time: int,
        topic: str,
        multimedia_content: MultimediaInput = None,
    ) -> Lecture:
        with self._storage() as storage:
            return lecture_service.schedule_lecture(
                storage, student_id, lecturer_id, date_time, topic, multimedia_content
            )

    def get_lecture(self, lecture_id: int) -> Lecture:
        with self._storage() as storage:
            return lecture_service.get_lecture(storage, lecture_id)

    def update_lecture(
        self,
        lecture_id: int,
        student_id: int,
        lecturer_id: int,
        date_time: int,
        topic: str,
        multimedia_content: MultimediaInput = None,
    ) -> Lecture:
        with self._storage() as storage:
            return lecture_service.update_lecture(
                storage, lecture_id, student_id, lecturer_id, date_time, topic, multimedia_content
            )

    def delete_lecture(self, lecture_id: int) -> None:
        with self._storage() as storage:
            lecture_service.delete_lecture(storage, lecture_id)

    def list_lectures(self) -> list[Lecture]:
        with self._storage() as storage:
            return lecture_service.list_lectures(storage)

    # --- Présences ---

    def record_attendance(self, student_id: int, attendance_status: str = "") -> AttendanceRecord:
        with self._storage() as storage:
            return attendance_service.record_attendance(storage, student_id, attendance_status)

    def get_attendance_record(self, record_id: int) -> AttendanceRecord:
        with self._storage() as storage:
            return attendance_service.get_attendance_record(storage, record_id)

    def update_attendance_record(
        self, record_id: int, student_id: int, attendance_status: str = ""
    ) -> AttendanceRecord:
        with self._storage() as storage:
            return attendance_service.update_attendance_record(
                storage, record_id, student_id, attendance_status
            )

    def delete_attendance_record(self, record_id: int) -> None:
        with self._storage() as storage:
            attendance_service.delete_attendance_record(storage, record_id)

    def list_attendance_records(self) -> list[AttendanceRecord]:
        with self._storage() as storage:
            return attendance_service.list_attendance_records(storage)

    # --- Messages ---

    def send_reminder_to_student(
        self,
        student_id: int,
        content: str,
        multimedia_content: MultimediaInput = None,
        sender_id: int = message_service.SYSTEM_SENDER_ID,
    ) -> Message:
        with self._storage() as storage:
            return message_service.send_reminder_to_student(
                storage, student_id, content, multimedia_content, sender_id
            )

    def get_message(self, message_id: int) -> Message:
        with self._storage() as storage:
            return message_service.get_message(storage, message_id)

    def update_message(
        self,
        message_id: int,
        caller_id: int,
        content: str,
        multimedia_content: MultimediaInput = None,
    ) -> Message:
        with self._storage() as storage:
            return message_service.update_message(
                storage, message_id, caller_id, content, multimedia_content
            )

    def delete_message(self, message_id: int) -> None:
        with self._storage() as storage:
            message_service.delete_message(storage, message_id)

    def list_messages(self) -> list[Message]:
        with self._storage() as storage:
            return message_service.list_messages(storage)

    def list_messages_for_student(self, student_id: int) -> list[Message]:
        with self._storage() as storage:
            return message_service.list_messages_for_student(storage, student_id)


def create_backend(
    database_url: Optional[str] = None,
    log_level: Optional[str] = None,
) -> AttendanceBackend:
    """
    Construit un backend prêt à l'emploi : journalisation, moteur, tables, fabrique de sessions.
    Sans URL, utilise le moteur par défaut configuré par DATABASE_URL.
    Sans niveau, la journalisation suit LOG_LEVEL.
    """
    setup_logging(log_level)

    if database_url is None:
        init_db()
        return AttendanceBackend()

    engine = create_engine(database_url)
    init_db(engine)
    logger.info("Backend initialisé sur %s", engine.url.render_as_string(hide_password=True))
    return AttendanceBackend(sessionmaker(autocommit=False, autoflush=False, bind=engine))
