from .base import Base
from .career_profile import CareerProfile

__all__ = [
    'Base',
    'CareerProfile',
]
