"""Business logic services."""

from .profile_service import ProfileService
from .enrichment_service import EnrichmentService
