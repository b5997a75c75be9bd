"""
Schémas Pydantic pour les élèves.
"""

from pydantic import BaseModel, field_validator

from attendance_backend.schemas.common import U64, not_empty


class StudentCreate(BaseModel):
    """Données d'inscription d'un élève."""
    name: str
    contact_details: str = ""
    attendance_history: str = ""

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        return not_empty(v, "Le nom")


class StudentUpdate(StudentCreate):
    """Remplacement complet : tous les champs sont réécrits."""


class Student(BaseModel):
    """Élève tel que stocké et renvoyé."""
    id: U64
    name: str
    contact_details: str
    attendance_history: str
