"""
Service métier pour les élèves : inscription, lecture, remplacement, suppression.
La suppression d'un élève ne touche ni ses cours, ni ses présences, ni ses messages.
"""

from attendance_backend.schemas.common import parse_input
from attendance_backend.schemas.student import Student, StudentCreate, StudentUpdate
from attendance_backend.services.crud import create_entity, delete_entity, replace_entity, require
from attendance_backend.storage import Storage


def register_student(
    storage: Storage,
    name: str,
    contact_details: str = "",
    attendance_history: str = "",
) -> Student:
    """
    Inscrit un élève. Lève InvalidInputError si le nom est vide
    (aucun identifiant n'est alors consommé).
    """
    data = parse_input(
        StudentCreate,
        name=name,
        contact_details=contact_details,
        attendance_history=attendance_history,
    )
    return create_entity(
        storage, storage.students, lambda key: Student(id=key, **data.model_dump())
    )


def get_student(storage: Storage, student_id: int) -> Student:
    return require(storage.students, student_id)


def update_student(
    storage: Storage,
    student_id: int,
    name: str,
    contact_details: str = "",
    attendance_history: str = "",
) -> Student:
    """
    Remplace tous les champs d'un élève existant.
    Les champs non fournis reprennent leur valeur par défaut (pas de fusion).
    """
    data = parse_input(
        StudentUpdate,
        name=name,
        contact_details=contact_details,
        attendance_history=attendance_history,
    )
    return replace_entity(
        storage,
        storage.students,
        student_id,
        lambda _current: Student(id=student_id, **data.model_dump()),
    )


def delete_student(storage: Storage, student_id: int) -> None:
    delete_entity(storage, storage.students, student_id)


def list_students(storage: Storage) -> list[Student]:
    """Retourne tous les élèves, par identifiant croissant."""
    return storage.students.list()
