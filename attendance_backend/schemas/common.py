"""
Types partagés par les schémas : entier non signé 64 bits, contenu multimédia,
et conversion des erreurs Pydantic en InvalidInputError.
"""

from typing import Annotated, Optional, TypeVar, Union

from pydantic import BaseModel, Field, ValidationError

from attendance_backend.exceptions import InvalidInputError

U64_MAX = 2**64 - 1

# Identifiants, horodatages et clés étrangères informatives
U64 = Annotated[int, Field(ge=0, le=U64_MAX)]

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class MultimediaContent(BaseModel):
    """Pièces jointes optionnelles d'un cours ou d'un message (URLs uniquement)."""
    image_url: Optional[str] = None
    video_url: Optional[str] = None
    audio_url: Optional[str] = None


# Pièces jointes acceptées en entrée : modèle ou dict équivalent
MultimediaInput = Optional[Union[MultimediaContent, dict]]


def not_empty(v: str, label: str) -> str:
    """Refuse uniquement la chaîne vide : les espaces sont acceptés et conservés tels quels."""
    if not v:
        raise ValueError(f"{label} ne peut pas être vide.")
    return v


def parse_input(schema: type[SchemaT], **data) -> SchemaT:
    """
    Construit un schéma d'entrée et traduit une ValidationError en InvalidInputError.
    Seule la première erreur est remontée à l'appelant.
    """
    try:
        return schema(**data)
    except ValidationError as exc:
        raise InvalidInputError(_describe(exc)) from exc


def _describe(exc: ValidationError) -> str:
    error = exc.errors()[0]
    ctx = error.get("ctx") or {}
    if isinstance(ctx.get("error"), ValueError):
        return str(ctx["error"])
    location = ".".join(str(part) for part in error["loc"])
    return f"{location} : {error['msg']}"
