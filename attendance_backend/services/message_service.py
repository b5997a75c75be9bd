"""
Service de messagerie : rappels envoyés aux élèves.

Seule vérification inter-entités du système : l'élève destinataire doit exister.
La modification d'un message est réservée à son expéditeur ; l'identité de
l'appelant est fournie par le framework englobant (caller_id), jamais devinée ici.
"""

import logging

from attendance_backend.exceptions import InvalidInputError
from attendance_backend.schemas.common import MultimediaInput, parse_input
from attendance_backend.schemas.message import Message, MessageCreate, MessageUpdate
from attendance_backend.services.crud import (
    create_entity,
    delete_entity,
    not_found,
    replace_entity,
    require,
)
from attendance_backend.storage import Storage

logger = logging.getLogger(__name__)

# Expéditeur utilisé pour les envois automatiques
SYSTEM_SENDER_ID = 0


def send_reminder_to_student(
    storage: Storage,
    student_id: int,
    content: str,
    multimedia_content: MultimediaInput = None,
    sender_id: int = SYSTEM_SENDER_ID,
) -> Message:
    """
    Envoie un rappel à un élève.

    Ordre des contrôles :
    1. L'élève existe (sinon NotFoundError)
    2. Le contenu n'est pas vide (sinon InvalidInputError)
    Aucun message n'est créé ni aucun identifiant consommé en cas d'échec.
    """
    if not storage.students.contains(student_id):
        raise not_found(storage.students, student_id)

    data = parse_input(
        MessageCreate,
        receiver_id=student_id,
        sender_id=sender_id,
        content=content,
        multimedia_content=multimedia_content,
    )
    return create_entity(
        storage, storage.messages, lambda key: Message(id=key, **data.model_dump())
    )


def get_message(storage: Storage, message_id: int) -> Message:
    return require(storage.messages, message_id)


def ensure_sender(message: Message, caller_id: int) -> None:
    """Autorise la modification uniquement pour l'expéditeur d'origine."""
    if caller_id != message.sender_id:
        logger.warning(
            "Modification refusée : message %d, appelant %d, expéditeur %d",
            message.id, caller_id, message.sender_id,
        )
        raise InvalidInputError(
            f"Seul l'expéditeur peut modifier le message avec id={message.id}."
        )


def update_message(
    storage: Storage,
    message_id: int,
    caller_id: int,
    content: str,
    multimedia_content: MultimediaInput = None,
) -> Message:
    """
    Remplace le contenu et les pièces jointes d'un message existant.
    Expéditeur et destinataire sont conservés.
    """
    data = parse_input(MessageUpdate, content=content, multimedia_content=multimedia_content)

    def build(current: Message) -> Message:
        ensure_sender(current, caller_id)
        return current.model_copy(
            update={"content": data.content, "multimedia_content": data.multimedia_content}
        )

    return replace_entity(storage, storage.messages, message_id, build)


def delete_message(storage: Storage, message_id: int) -> None:
    delete_entity(storage, storage.messages, message_id)


def list_messages(storage: Storage) -> list[Message]:
    return storage.messages.list()


def list_messages_for_student(storage: Storage, student_id: int) -> list[Message]:
    """Messages reçus par un élève, par identifiant croissant. L'élève peut ne plus exister."""
    return [m for m in storage.messages.list() if m.receiver_id == student_id]
