"""
Configuration centrale du backend via variables d'environnement.
Charger depuis un fichier .env en développement.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Base de données (SQLite par défaut, toute URL SQLAlchemy est acceptée)
    DATABASE_URL: str = "sqlite:///./student_attendance.db"

    # Taille maximale d'un enregistrement sérialisé, en octets
    MAX_RECORD_SIZE: int = 2048

    # Premier identifiant distribué par le compteur partagé
    ID_COUNTER_START: int = 1

    # Journalisation
    LOG_LEVEL: str = "INFO"

    # Environnement
    ENV: str = "development"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
