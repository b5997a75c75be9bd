"""
Opérations CRUD communes aux services d'entités.

Chaque écriture s'exécute dans storage.transaction() : en cas d'erreur
(y compris TooLargeError), rien n'est écrit et l'identifiant n'est pas consommé.
"""

import logging
from typing import Callable, TypeVar

from pydantic import BaseModel

from attendance_backend.exceptions import NotFoundError
from attendance_backend.storage import EntityStore, Storage

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=BaseModel)


def not_found(store: EntityStore, key: int) -> NotFoundError:
    return NotFoundError(f"{store.label} avec id={key} introuvable.")


def require(store: EntityStore[EntityT], key: int) -> EntityT:
    """Retourne l'entité ou lève NotFoundError."""
    entity = store.get(key)
    if entity is None:
        raise not_found(store, key)
    return entity


def create_entity(
    storage: Storage,
    store: EntityStore[EntityT],
    build: Callable[[int], EntityT],
) -> EntityT:
    """Alloue un identifiant, construit l'entité avec `build(id)` et l'insère."""
    with storage.transaction():
        key = storage.ids.next_id()
        entity = build(key)
        store.insert(key, entity)
    logger.info("%s créé(e) : id=%d", store.label, key)
    return entity


def replace_entity(
    storage: Storage,
    store: EntityStore[EntityT],
    key: int,
    build: Callable[[EntityT], EntityT],
) -> EntityT:
    """
    Remplace intégralement une entité existante.
    L'existence est vérifiée avant toute écriture : un id inconnu ne crée rien.
    `build` reçoit l'ancienne valeur et retourne la nouvelle.
    """
    with storage.transaction():
        current = require(store, key)
        entity = build(current)
        store.insert(key, entity)
    logger.info("%s mis(e) à jour : id=%d", store.label, key)
    return entity


def delete_entity(storage: Storage, store: EntityStore, key: int) -> None:
    with storage.transaction():
        if store.remove(key) is None:
            raise not_found(store, key)
    logger.info("%s supprimé(e) : id=%d", store.label, key)
