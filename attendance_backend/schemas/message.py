"""
Schémas Pydantic pour les messages (rappels envoyés aux élèves).
"""

from typing import Optional

from pydantic import BaseModel, field_validator

from attendance_backend.schemas.common import U64, MultimediaContent, not_empty


class MessageCreate(BaseModel):
    """Rappel envoyé à un élève. sender_id vaut 0 pour un envoi système."""
    receiver_id: U64
    sender_id: U64 = 0
    content: str
    multimedia_content: Optional[MultimediaContent] = None

    @field_validator("content")
    @classmethod
    def content_not_empty(cls, v: str) -> str:
        return not_empty(v, "Le contenu du message")


class MessageUpdate(BaseModel):
    """Seuls le contenu et les pièces jointes sont modifiables."""
    content: str
    multimedia_content: Optional[MultimediaContent] = None

    @field_validator("content")
    @classmethod
    def content_not_empty(cls, v: str) -> str:
        return not_empty(v, "Le contenu du message")


class Message(BaseModel):
    id: U64
    sender_id: U64
    receiver_id: U64
    content: str
    multimedia_content: Optional[MultimediaContent] = None
