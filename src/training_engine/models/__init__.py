"""Data models for the training engine."""

from training_engine.models.activity import Activity, ActivityWindow, WindowedActivities
from training_engine.models.assessment import (
    LoadMetrics,
    NutritionAssessment,
    OvertrainingAssessment,
    Recommendation,
    Signal,
)
from training_engine.models.athlete import Macronutrients, NutritionProfile, UserCapabilities
from training_engine.models.climb import ClimbDescriptor, ClimbMatch, ClimbSection
from training_engine.models.enums import (
    AssessmentStatus,
    CapabilityLevel,
    ClimbDifficulty,
    ExperienceLevel,
    LimitingFactor,
    PerformanceMetric,
    PhaseType,
    RecommendationPriority,
    SignalType,
    Technicality,
    TimeRange,
    Weekday,
    WorkoutType,
    ZoneType,
)
from training_engine.models.program import (
    ClimbCharacteristics,
    Interval,
    Phase,
    ProgramSummary,
    RequiredCapabilities,
    RestDay,
    TrainingProgram,
    Workout,
    ZoneRange,
)
from training_engine.models.projection import (
    Benchmark,
    FutureProjection,
    KeyEvent,
    PerformanceLevel,
    PerformanceProjection,
    ProgressionPoint,
)

__all__ = [
    "Activity",
    "ActivityWindow",
    "AssessmentStatus",
    "Benchmark",
    "CapabilityLevel",
    "ClimbCharacteristics",
    "ClimbDescriptor",
    "ClimbDifficulty",
    "ClimbMatch",
    "ClimbSection",
    "ExperienceLevel",
    "FutureProjection",
    "Interval",
    "KeyEvent",
    "LimitingFactor",
    "LoadMetrics",
    "Macronutrients",
    "NutritionAssessment",
    "NutritionProfile",
    "OvertrainingAssessment",
    "PerformanceLevel",
    "PerformanceMetric",
    "PerformanceProjection",
    "Phase",
    "PhaseType",
    "ProgramSummary",
    "ProgressionPoint",
    "Recommendation",
    "RecommendationPriority",
    "RequiredCapabilities",
    "RestDay",
    "Signal",
    "SignalType",
    "Technicality",
    "TimeRange",
    "TrainingProgram",
    "UserCapabilities",
    "WindowedActivities",
    "Weekday",
    "Workout",
    "WorkoutType",
    "ZoneRange",
    "ZoneType",
]
