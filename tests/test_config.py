"""
Tests de la configuration par variables d'environnement.
"""

from attendance_backend.config import Settings


def test_valeurs_par_defaut(monkeypatch):
    monkeypatch.delenv("MAX_RECORD_SIZE", raising=False)
    monkeypatch.delenv("ID_COUNTER_START", raising=False)
    s = Settings(_env_file=None)
    assert s.MAX_RECORD_SIZE == 2048
    assert s.ID_COUNTER_START == 1


def test_surcharge_par_environnement(monkeypatch):
    monkeypatch.setenv("MAX_RECORD_SIZE", "4096")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./autre.db")
    s = Settings(_env_file=None)
    assert s.MAX_RECORD_SIZE == 4096
    assert s.DATABASE_URL == "sqlite:///./autre.db"
