"""
Service métier pour les cours.
student_id et lecturer_id ne sont pas vérifiés : ce sont des références informatives.
"""

from attendance_backend.schemas.common import MultimediaInput, parse_input
from attendance_backend.schemas.lecture import Lecture, LectureCreate, LectureUpdate
from attendance_backend.services.crud import create_entity, delete_entity, replace_entity, require
from attendance_backend.storage import Storage


def schedule_lecture(
    storage: Storage,
    student_id: int,
    lecturer_id: int,
    date_time: int,
    topic: str,
    multimedia_content: MultimediaInput = None,
) -> Lecture:
    """Planifie un cours. Lève InvalidInputError si le sujet est vide."""
    data = parse_input(
        LectureCreate,
        student_id=student_id,
        lecturer_id=lecturer_id,
        date_time=date_time,
        topic=topic,
        multimedia_content=multimedia_content,
    )
    return create_entity(
        storage, storage.lectures, lambda key: Lecture(id=key, **data.model_dump())
    )


def get_lecture(storage: Storage, lecture_id: int) -> Lecture:
    return require(storage.lectures, lecture_id)


def update_lecture(
    storage: Storage,
    lecture_id: int,
    student_id: int,
    lecturer_id: int,
    date_time: int,
    topic: str,
    multimedia_content: MultimediaInput = None,
) -> Lecture:
    """Remplace intégralement un cours existant (multimedia_content=None efface les pièces jointes)."""
    data = parse_input(
        LectureUpdate,
        student_id=student_id,
        lecturer_id=lecturer_id,
        date_time=date_time,
        topic=topic,
        multimedia_content=multimedia_content,
    )
    return replace_entity(
        storage,
        storage.lectures,
        lecture_id,
        lambda _current: Lecture(id=lecture_id, **data.model_dump()),
    )


def delete_lecture(storage: Storage, lecture_id: int) -> None:
    delete_entity(storage, storage.lectures, lecture_id)


def list_lectures(storage: Storage) -> list[Lecture]:
    return storage.lectures.list()
