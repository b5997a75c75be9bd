"""
Identifiants logiques des régions de stockage.
Chaque map et le compteur occupent une région distincte pour ne jamais entrer en collision.
"""

from enum import IntEnum


class Region(IntEnum):
    ID_COUNTER = 0
    STUDENTS = 1
    LECTURES = 2
    ATTENDANCE_RECORDS = 3
    MESSAGES = 4
