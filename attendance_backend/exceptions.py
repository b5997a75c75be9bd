"""
Erreurs métier renvoyées par les services.

Deux familles récupérables (NotFoundError, InvalidInputError) plus TooLargeError,
cas particulier d'entrée invalide. StorageCorruptionError signale des octets
stockés illisibles : ce n'est pas une erreur métier, l'opération est abandonnée.
"""


class RecordError(Exception):
    """Base des erreurs récupérables. `message` est destiné à l'appelant."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(RecordError):
    """Clé absente, ou entité référencée inexistante."""


class InvalidInputError(RecordError):
    """Champ obligatoire vide, entier hors bornes ou autorisation refusée."""


class TooLargeError(InvalidInputError):
    """L'enregistrement sérialisé dépasse la taille maximale autorisée."""

    def __init__(self, message: str, size: int, limit: int) -> None:
        super().__init__(message)
        self.size = size
        self.limit = limit


class StorageCorruptionError(RuntimeError):
    """Octets stockés impossibles à décoder."""
