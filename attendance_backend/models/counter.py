"""
Modèle SQLAlchemy pour le compteur d'identifiants (une ligne par région).
"""

from sqlalchemy import BigInteger, Column, SmallInteger

from attendance_backend.database import Base


class IdCounter(Base):
    __tablename__ = "id_counters"

    region = Column(SmallInteger, primary_key=True, autoincrement=False)
    value = Column(BigInteger, nullable=False)
