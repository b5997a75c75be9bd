"""
Schémas Pydantic pour les cours.

student_id et lecturer_id sont informatifs : leur existence n'est pas vérifiée.
date_time est un horodatage brut (u64), sans contrôle de cohérence.
"""

from typing import Optional

from pydantic import BaseModel, field_validator

from attendance_backend.schemas.common import U64, MultimediaContent, not_empty


class LectureCreate(BaseModel):
    student_id: U64
    lecturer_id: U64
    date_time: U64
    topic: str
    multimedia_content: Optional[MultimediaContent] = None

    @field_validator("topic")
    @classmethod
    def topic_not_empty(cls, v: str) -> str:
        return not_empty(v, "Le sujet du cours")


class LectureUpdate(LectureCreate):
    """Remplacement complet : tous les champs sont réécrits."""


class Lecture(BaseModel):
    id: U64
    student_id: U64
    lecturer_id: U64
    date_time: U64
    topic: str
    multimedia_content: Optional[MultimediaContent] = None
