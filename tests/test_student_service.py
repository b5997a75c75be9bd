"""
Tests unitaires pour le service des élèves.
"""

import pytest

from attendance_backend.exceptions import InvalidInputError, NotFoundError, TooLargeError
from attendance_backend.services.student_service import (
    delete_student,
    get_student,
    list_students,
    register_student,
    update_student,
)


# --- register_student ---

def test_register_student_succes(storage):
    student = register_student(storage, "Alice", "555-0100", "")
    assert student.id == 1
    assert student.name == "Alice"
    assert get_student(storage, student.id) == student


def test_register_student_nom_vide_rejete(storage):
    with pytest.raises(InvalidInputError, match="nom"):
        register_student(storage, "", "555-0100", "")
    assert list_students(storage) == []
    assert storage.ids.peek() == 1  # aucun identifiant consommé


def test_register_student_nom_espaces_accepte(storage):
    """Seule la chaîne vide est refusée : un nom composé d'espaces est conservé."""
    student = register_student(storage, "   ")
    assert get_student(storage, student.id).name == "   "


def test_register_student_valeurs_conservees_telles_quelles(storage):
    student = register_student(storage, "  Alice  ", "a@b.c", "P,A,P")
    assert get_student(storage, student.id).name == "  Alice  "


def test_register_student_trop_volumineux(storage):
    with pytest.raises(TooLargeError):
        register_student(storage, "Alice", attendance_history="P" * 5000)
    assert list_students(storage) == []
    assert storage.ids.peek() == 1


# --- get_student ---

def test_get_student_inexistant(storage):
    with pytest.raises(NotFoundError, match="id=12"):
        get_student(storage, 12)


# --- update_student ---

def test_update_student_remplacement_complet(storage):
    student = register_student(storage, "Alice", "555-0100", "P")
    updated = update_student(storage, student.id, "Alice Martin")
    assert updated.id == student.id
    assert updated.name == "Alice Martin"
    # Pas de fusion : les champs non fournis sont réinitialisés
    assert updated.contact_details == ""
    assert updated.attendance_history == ""
    assert get_student(storage, student.id) == updated


def test_update_student_inexistant_ne_cree_rien(storage):
    with pytest.raises(NotFoundError):
        update_student(storage, 77, "Fantôme")
    assert list_students(storage) == []


def test_update_student_nom_vide(storage):
    student = register_student(storage, "Alice")
    with pytest.raises(InvalidInputError):
        update_student(storage, student.id, "")
    assert get_student(storage, student.id).name == "Alice"


# --- delete_student ---

def test_delete_student_puis_get(storage):
    student = register_student(storage, "Alice")
    delete_student(storage, student.id)
    with pytest.raises(NotFoundError):
        get_student(storage, student.id)


def test_delete_student_inexistant(storage):
    with pytest.raises(NotFoundError, match="introuvable"):
        delete_student(storage, 5)


def test_identifiants_jamais_reutilises(storage):
    first = register_student(storage, "Alice")
    delete_student(storage, first.id)
    second = register_student(storage, "Bob")
    assert second.id > first.id


# --- list_students ---

def test_list_students_apres_creations_et_suppressions(storage):
    created = [register_student(storage, f"Élève {i}") for i in range(5)]
    delete_student(storage, created[1].id)
    delete_student(storage, created[3].id)
    update_student(storage, created[4].id, "Renommé")

    students = list_students(storage)
    assert [s.id for s in students] == [created[0].id, created[2].id, created[4].id]
    assert students[-1].name == "Renommé"
