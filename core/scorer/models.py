#!/usr/bin/env python3
"""
Scoring Models - Data structures for questionnaires, trait vectors and scored jobs.

Trait vectors are fixed-field records (one attribute per dimension) so a
vector can never be missing a dimension or carry an extra one.
"""

from dataclasses import dataclass, fields
from typing import Dict, Mapping, Tuple, Any

HOLLAND_TYPES: Tuple[str, ...] = ('R', 'I', 'A', 'S', 'E', 'C')
BIG_FIVE_TRAITS: Tuple[str, ...] = ('O', 'C', 'E', 'A', 'N')

HOLLAND_TYPE_NAMES: Dict[str, str] = {
    'R': 'Realistic',
    'I': 'Investigative',
    'A': 'Artistic',
    'S': 'Social',
    'E': 'Enterprising',
    'C': 'Conventional',
}

BIG_FIVE_TRAIT_NAMES: Dict[str, str] = {
    'O': 'Openness',
    'C': 'Conscientiousness',
    'E': 'Extraversion',
    'A': 'Agreeableness',
    'N': 'Neuroticism',
}


class _TraitVector:
    """Shared behaviour for the fixed-dimension trait records."""

    def __getitem__(self, key: str) -> int:
        if key not in self.keys():
            raise KeyError(key)
        return getattr(self, key)

    @classmethod
    def keys(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def values(self) -> Tuple[int, ...]:
        return tuple(getattr(self, k) for k in self.keys())

    def to_dict(self) -> Dict[str, int]:
        return {k: getattr(self, k) for k in self.keys()}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]):
        """Build a vector from a letter-keyed mapping; absent dimensions become 0."""
        data = data or {}
        return cls(**{k: data.get(k) or 0 for k in cls.keys()})


@dataclass(frozen=True)
class HollandVector(_TraitVector):
    """RIASEC interest scores."""
    R: int = 0
    I: int = 0
    A: int = 0
    S: int = 0
    E: int = 0
    C: int = 0


@dataclass(frozen=True)
class BigFiveVector(_TraitVector):
    """OCEAN personality scores."""
    O: int = 0
    C: int = 0
    E: int = 0
    A: int = 0
    N: int = 0


@dataclass(frozen=True)
class HollandQuestion:
    id: str
    text: str
    type: str


@dataclass(frozen=True)
class BigFiveQuestion:
    id: str
    text: str
    trait: str
    reverse: bool = False


@dataclass(frozen=True)
class JobProfile:
    """Static reference profile for one occupation."""
    title: str
    description: str
    holland: HollandVector
    big_five: BigFiveVector
    industry: str
    keywords: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Preferences:
    """Normalized user preferences."""
    industries: Tuple[str, ...] = ()
    activities: Tuple[str, ...] = ()


@dataclass(frozen=True)
class FitScores:
    """The four independent fit sub-scores for one job."""
    holland_fit: float = 0.0
    big_five_fit: float = 0.0
    industry_fit: float = 0.0
    activity_fit: float = 0.0


@dataclass
class ScoredJob:
    """A catalog job scored against one user profile."""
    job_id: int
    job: JobProfile

    holland_fit: float = 0.0
    big_five_fit: float = 0.0
    industry_fit: float = 0.0
    activity_fit: float = 0.0
    total_fit: float = 0.0

    @property
    def title(self) -> str:
        return self.job.title
