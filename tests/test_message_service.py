"""
Tests unitaires pour le service de messagerie (rappels aux élèves).
"""

import pytest

from attendance_backend.exceptions import InvalidInputError, NotFoundError
from attendance_backend.services.message_service import (
    SYSTEM_SENDER_ID,
    delete_message,
    get_message,
    list_messages,
    list_messages_for_student,
    send_reminder_to_student,
    update_message,
)
from attendance_backend.services.student_service import delete_student, register_student


@pytest.fixture
def student(storage):
    return register_student(storage, "Alice", "555-0100", "")


# --- send_reminder_to_student ---

def test_send_reminder_succes(storage, student):
    message = send_reminder_to_student(storage, student.id, "Examen demain", None, 42)
    assert message.receiver_id == student.id
    assert message.sender_id == 42
    assert get_message(storage, message.id) == message


def test_send_reminder_expediteur_systeme_par_defaut(storage, student):
    message = send_reminder_to_student(storage, student.id, "Rappel")
    assert message.sender_id == SYSTEM_SENDER_ID


def test_send_reminder_eleve_inexistant(storage):
    with pytest.raises(NotFoundError, match="Élève avec id=999"):
        send_reminder_to_student(storage, 999, "hi", None, 0)
    assert list_messages(storage) == []
    assert storage.ids.peek() == 1


def test_send_reminder_eleve_verifie_avant_contenu(storage):
    """Élève inexistant ET contenu vide : NotFoundError l'emporte."""
    with pytest.raises(NotFoundError):
        send_reminder_to_student(storage, 999, "")


def test_send_reminder_contenu_vide(storage, student):
    next_id = storage.ids.peek()
    with pytest.raises(InvalidInputError, match="contenu"):
        send_reminder_to_student(storage, student.id, "")
    assert list_messages(storage) == []
    assert storage.ids.peek() == next_id


def test_ids_partages_entre_entites(storage, student):
    message = send_reminder_to_student(storage, student.id, "Rappel")
    assert message.id == student.id + 1


# --- update_message ---

def test_update_message_par_expediteur(storage, student):
    message = send_reminder_to_student(storage, student.id, "v1", {"image_url": "https://i"}, 7)
    updated = update_message(storage, message.id, 7, "v2")
    assert updated.content == "v2"
    assert updated.multimedia_content is None
    assert updated.sender_id == 7
    assert updated.receiver_id == student.id
    assert get_message(storage, message.id) == updated


def test_update_message_autre_appelant_refuse(storage, student):
    message = send_reminder_to_student(storage, student.id, "v1", None, 7)
    with pytest.raises(InvalidInputError, match="expéditeur"):
        update_message(storage, message.id, 8, "piraté")
    assert get_message(storage, message.id).content == "v1"


def test_update_message_inexistant(storage):
    with pytest.raises(NotFoundError, match="Message avec id=3"):
        update_message(storage, 3, 0, "contenu")
    assert list_messages(storage) == []


def test_update_message_contenu_vide(storage, student):
    message = send_reminder_to_student(storage, student.id, "v1")
    with pytest.raises(InvalidInputError):
        update_message(storage, message.id, SYSTEM_SENDER_ID, "")


# --- delete / list ---

def test_delete_message(storage, student):
    message = send_reminder_to_student(storage, student.id, "v1")
    delete_message(storage, message.id)
    with pytest.raises(NotFoundError):
        get_message(storage, message.id)


def test_suppression_eleve_sans_cascade(storage, student):
    message = send_reminder_to_student(storage, student.id, "v1")
    delete_student(storage, student.id)
    assert get_message(storage, message.id) == message
    assert list_messages_for_student(storage, student.id) == [message]


def test_list_messages_for_student(storage, student):
    other = register_student(storage, "Bob")
    m1 = send_reminder_to_student(storage, student.id, "a")
    send_reminder_to_student(storage, other.id, "b")
    m3 = send_reminder_to_student(storage, student.id, "c")
    assert list_messages_for_student(storage, student.id) == [m1, m3]
    assert len(list_messages(storage)) == 3
