import logging
from typing import Any, Dict, Optional
from sqlalchemy import select, delete
from sqlalchemy.orm.attributes import flag_modified

from core.pipeline import ProfileSnapshot
from core.scorer.models import HollandVector, BigFiveVector
from database.models import CareerProfile
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

PROFILE_FIELDS = (
    'name',
    'holland_scores',
    'big_five_scores',
    'industries',
    'activities',
    'career_advice',
    'enhanced_job_descriptions',
)


def to_snapshot(profile: CareerProfile) -> ProfileSnapshot:
    """Convert a stored row into the pipeline's snapshot of stage outputs."""
    return ProfileSnapshot(
        user_id=profile.user_id,
        name=profile.name or '',
        holland=HollandVector.from_mapping(profile.holland_scores) if profile.holland_scores else None,
        big_five=BigFiveVector.from_mapping(profile.big_five_scores) if profile.big_five_scores else None,
        industries=list(profile.industries or []),
        activities=list(profile.activities or []),
        career_advice=profile.career_advice or '',
        enhanced_job_descriptions=dict(profile.enhanced_job_descriptions or {}),
    )


class CareerProfileRepository(BaseRepository):
    """Profiles are scoped to one app_id; writes merge into the existing row."""

    def __init__(self, db, app_id: str = "default-app-id"):
        super().__init__(db)
        self.app_id = app_id

    def get_profile(self, user_id: str) -> Optional[CareerProfile]:
        stmt = select(CareerProfile).where(
            CareerProfile.app_id == self.app_id,
            CareerProfile.user_id == user_id
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def get_snapshot(self, user_id: str) -> Optional[ProfileSnapshot]:
        profile = self.get_profile(user_id)
        return to_snapshot(profile) if profile is not None else None

    def save_profile(self, user_id: str, **fields: Any) -> CareerProfile:
        """
        Create or update a profile, overwriting only the supplied fields.

        Raises:
            ValueError: If an unknown field is supplied
        """
        unknown = set(fields) - set(PROFILE_FIELDS)
        if unknown:
            raise ValueError(f"Unknown profile fields: {sorted(unknown)}")

        profile = self.get_profile(user_id)
        if profile is None:
            profile = CareerProfile(app_id=self.app_id, user_id=user_id)
            self.db.add(profile)
            logger.info(f"Created career profile for user {user_id}")

        for key, value in fields.items():
            setattr(profile, key, value)

        self.db.flush()
        return profile

    def save_enhanced_description(self, user_id: str, job_id: int, text: str) -> CareerProfile:
        profile = self.save_profile(user_id)
        descriptions: Dict[str, str] = dict(profile.enhanced_job_descriptions or {})
        descriptions[str(job_id)] = text
        profile.enhanced_job_descriptions = descriptions
        flag_modified(profile, 'enhanced_job_descriptions')
        self.db.flush()
        return profile

    def delete_profile(self, user_id: str) -> bool:
        stmt = delete(CareerProfile).where(
            CareerProfile.app_id == self.app_id,
            CareerProfile.user_id == user_id
        )
        result = self.db.execute(stmt)
        deleted = result.rowcount > 0
        if deleted:
            logger.info(f"Deleted career profile for user {user_id}")
        return deleted
