"""
Poignée de stockage : le compteur et les quatre maps sur une même session.

Construite explicitement par l'appelant (une par unité de travail) puis passée
aux services : aucun état global, les tests peuvent créer des instances isolées.
"""

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import Session

from attendance_backend.config import settings
from attendance_backend.schemas.attendance import AttendanceRecord
from attendance_backend.schemas.lecture import Lecture
from attendance_backend.schemas.message import Message
from attendance_backend.schemas.student import Student
from attendance_backend.storage.entity_store import EntityStore
from attendance_backend.storage.id_allocator import IdAllocator
from attendance_backend.storage.regions import Region


class Storage:
    def __init__(
        self,
        db: Session,
        max_record_size: int = settings.MAX_RECORD_SIZE,
        id_start: int = settings.ID_COUNTER_START,
    ) -> None:
        self.db = db
        self.ids = IdAllocator(db, start=id_start)
        self.students: EntityStore[Student] = EntityStore(
            db, Region.STUDENTS, Student, "Élève", max_record_size
        )
        self.lectures: EntityStore[Lecture] = EntityStore(
            db, Region.LECTURES, Lecture, "Cours", max_record_size
        )
        self.attendance_records: EntityStore[AttendanceRecord] = EntityStore(
            db, Region.ATTENDANCE_RECORDS, AttendanceRecord, "Présence", max_record_size
        )
        self.messages: EntityStore[Message] = EntityStore(
            db, Region.MESSAGES, Message, "Message", max_record_size
        )

    @contextmanager
    def transaction(self) -> Iterator["Storage"]:
        """Tout ou rien : commit en sortie normale, rollback sur n'importe quelle exception."""
        try:
            yield self
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise


__all__ = ["EntityStore", "IdAllocator", "Region", "Storage"]
