"""API route handlers."""

from .session import router as session_router
from .quiz import router as quiz_router
from .profile import router as profile_router
from .enrichment import router as enrichment_router
