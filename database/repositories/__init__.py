from database.repositories.base import BaseRepository
from database.repositories.career_profile import CareerProfileRepository, to_snapshot

__all__ = [
    'BaseRepository',
    'CareerProfileRepository',
    'to_snapshot',
]
