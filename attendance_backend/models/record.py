"""
Modèle SQLAlchemy pour la table stored_records.

Une seule table porte les quatre maps clé-valeur : chaque entité y est rangée
sous (region, key), la valeur étant l'enregistrement sérialisé en JSON.
"""

from sqlalchemy import BigInteger, Column, LargeBinary, SmallInteger

from attendance_backend.database import Base


class StoredRecord(Base):
    __tablename__ = "stored_records"

    region = Column(SmallInteger, primary_key=True, autoincrement=False)
    key = Column(BigInteger, primary_key=True, autoincrement=False)
    value = Column(LargeBinary, nullable=False)
