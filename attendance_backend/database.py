"""
Configuration de la connexion à la base de données.
Utilise SQLAlchemy avec un moteur synchrone : une seule opération à la fois.
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.orm import sessionmaker

from attendance_backend.config import settings

engine = create_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def init_db(bind: Engine = engine) -> None:
    """Crée les tables (régions clé-valeur + compteur) si elles n'existent pas."""
    import attendance_backend.models  # noqa: F401 — enregistre les modèles dans Base.metadata

    Base.metadata.create_all(bind=bind)


def get_db():
    """Fournit une session BDD et la ferme après usage."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
