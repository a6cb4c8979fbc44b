"""Climb descriptors and the athlete-to-climb match result."""

from __future__ import annotations

from dataclasses import dataclass, field

from training_engine.models.enums import ClimbDifficulty, Technicality


@dataclass(frozen=True)
class ClimbSection:
    distance_km: float
    gradient_pct: float
    label: str = ""


@dataclass(frozen=True)
class ClimbDescriptor:
    """Static description of a target climb (col)."""

    distance_km: float
    elevation_m: float
    avg_gradient_pct: float
    max_gradient_pct: float
    difficulty: ClimbDifficulty = ClimbDifficulty.MEDIUM
    technicality: Technicality = Technicality.LOW
    sections: tuple[ClimbSection, ...] = field(default_factory=tuple)
    name: str = "the climb"
    climb_id: str = ""


@dataclass(frozen=True)
class ClimbMatch:
    """How well an athlete suits a climb, plus the expected ascent time."""

    match_score: int  # 0-100
    difficulty_label: str
    ftp_per_kg: float
    estimated_minutes: int
    tier_score: int = 0
    experience_bonus: int = 0
    hours_bonus: int = 0
    strength_bonus: int = 0
    limiting_penalty: int = 0
