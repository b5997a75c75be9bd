"""
Map clé-valeur durable pour un type d'entité.

Les enregistrements sont sérialisés en JSON (Pydantic) et rangés dans
stored_records sous (region, key). Aucune écriture n'est commitée ici :
la transaction appartient au service appelant.
"""

import logging
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ValidationError
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from attendance_backend.config import settings
from attendance_backend.exceptions import InvalidInputError, StorageCorruptionError, TooLargeError
from attendance_backend.models.record import StoredRecord
from attendance_backend.storage.regions import Region

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=BaseModel)

# Clé primaire BIGINT signée côté base
MAX_KEY = 2**63 - 1


class EntityStore(Generic[EntityT]):
    """
    get / insert / remove / list sur une région.
    Une clé hors bornes est traitée comme absente en lecture et en suppression.
    """

    def __init__(
        self,
        db: Session,
        region: Region,
        model: type[EntityT],
        label: str,
        max_size: int = settings.MAX_RECORD_SIZE,
    ) -> None:
        self.db = db
        self.region = region
        self.model = model
        self.label = label
        self.max_size = max_size

    def get(self, key: int) -> Optional[EntityT]:
        row = self._row(key)
        if row is None:
            return None
        return self.decode(key, row.value)

    def contains(self, key: int) -> bool:
        return self._row(key) is not None

    def insert(self, key: int, value: EntityT) -> Optional[EntityT]:
        """
        Insère ou remplace. Retourne l'ancienne valeur, ou None si la clé était libre.
        Lève TooLargeError avant toute écriture si la taille maximale est dépassée.
        """
        if not _valid_key(key):
            raise InvalidInputError(f"Identifiant hors bornes : {key}")
        raw = self.encode(key, value)

        row = self._row(key)
        previous = None
        if row is None:
            self.db.add(StoredRecord(region=int(self.region), key=key, value=raw))
        else:
            previous = self.decode(key, row.value)
            row.value = raw
        self.db.flush()
        return previous

    def remove(self, key: int) -> Optional[EntityT]:
        """Supprime la clé. Retourne la valeur supprimée, ou None si absente."""
        row = self._row(key)
        if row is None:
            return None
        previous = self.decode(key, row.value)
        self.db.delete(row)
        self.db.flush()
        return previous

    def list(self) -> list[EntityT]:
        """Parcours complet, dans l'ordre croissant des clés. Pas de pagination."""
        rows = self.db.execute(
            select(StoredRecord.key, StoredRecord.value)
            .where(StoredRecord.region == int(self.region))
            .order_by(StoredRecord.key)
        ).all()
        return [self.decode(key, value) for key, value in rows]

    def __len__(self) -> int:
        return self.db.execute(
            select(func.count())
            .select_from(StoredRecord)
            .where(StoredRecord.region == int(self.region))
        ).scalar() or 0

    def encode(self, key: int, value: EntityT) -> bytes:
        raw = value.model_dump_json().encode("utf-8")
        if len(raw) > self.max_size:
            raise TooLargeError(
                f"{self.label} avec id={key} trop volumineux : "
                f"{len(raw)} octets (maximum {self.max_size}).",
                size=len(raw),
                limit=self.max_size,
            )
        return raw

    def decode(self, key: int, raw: bytes) -> EntityT:
        try:
            return self.model.model_validate_json(raw)
        except ValidationError as exc:
            logger.error(
                "Enregistrement illisible : région %s, clé %s", self.region.name, key,
                exc_info=True,
            )
            raise StorageCorruptionError(
                f"{self.label} avec id={key} : données stockées illisibles."
            ) from exc

    def _row(self, key: int) -> Optional[StoredRecord]:
        if not _valid_key(key):
            return None
        return self.db.get(StoredRecord, (int(self.region), key))


def _valid_key(key: int) -> bool:
    return 0 <= key <= MAX_KEY
