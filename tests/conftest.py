"""
Configuration partagée pour tous les tests.
Base SQLite en mémoire (StaticPool : une seule connexion partagée entre sessions).
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from attendance_backend.backend import AttendanceBackend
from attendance_backend.database import init_db
from attendance_backend.storage import Storage


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def storage(db):
    """Poignée de stockage isolée, limite de taille par défaut (2048 octets)."""
    return Storage(db, max_record_size=2048, id_start=1)


@pytest.fixture
def backend(session_factory):
    """Surface d'opérations complète sur la base en mémoire."""
    return AttendanceBackend(session_factory, max_record_size=2048, id_start=1)
