# Importe tous les modèles pour enregistrer leurs tables dans Base.metadata
# avant l'appel à init_db().

from attendance_backend.models.record import StoredRecord  # noqa: F401
from attendance_backend.models.counter import IdCounter  # noqa: F401
