from sqlalchemy import Column, Text, TIMESTAMP, JSON, func, Index

from .base import Base


class CareerProfile(Base):
    """
    Stored quiz stage outputs for one anonymous user.

    Only stage outputs live here (trait scores, preferences, generated text);
    recommendations are recomputed from them on every read.
    """
    __tablename__ = 'career_profile'

    app_id = Column(Text, primary_key=True)
    user_id = Column(Text, primary_key=True)

    name = Column(Text, nullable=True)

    holland_scores = Column(JSON, nullable=True)      # {"R": 7, "I": 9, ...}
    big_five_scores = Column(JSON, nullable=True)     # {"O": 11, "C": 12, ...}
    industries = Column(JSON, nullable=True)          # ["Technology", "Renewable Energy"]
    activities = Column(JSON, nullable=True)          # ["coding", "teaching"]

    career_advice = Column(Text, nullable=True)
    enhanced_job_descriptions = Column(JSON, nullable=True)  # {"0": "...", "5": "..."}

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        Index('idx_career_profile_user', 'user_id'),
    )
