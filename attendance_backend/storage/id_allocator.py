"""
Compteur d'identifiants partagé par les quatre types d'entités.

Le compteur vit dans la même transaction que l'écriture qui le consomme :
un rollback rend l'identifiant, qui n'a donc jamais été observé.
"""

import logging

from sqlalchemy.orm import Session

from attendance_backend.config import settings
from attendance_backend.models.counter import IdCounter
from attendance_backend.storage.regions import Region

logger = logging.getLogger(__name__)


class IdAllocator:
    def __init__(
        self,
        db: Session,
        region: Region = Region.ID_COUNTER,
        start: int = settings.ID_COUNTER_START,
    ) -> None:
        self.db = db
        self.region = region
        self.start = start

    def next_id(self) -> int:
        """Retourne la valeur courante du compteur puis l'incrémente."""
        counter = self.db.get(IdCounter, int(self.region))
        if counter is None:
            # Première allocation : la ligne du compteur est créée à la demande
            counter = IdCounter(region=int(self.region), value=self.start)
            self.db.add(counter)
            logger.info("Compteur d'identifiants initialisé à %d", self.start)

        current = counter.value
        counter.value = current + 1
        self.db.flush()
        return current

    def peek(self) -> int:
        """Prochain identifiant qui sera distribué, sans le consommer."""
        counter = self.db.get(IdCounter, int(self.region))
        return self.start if counter is None else counter.value
