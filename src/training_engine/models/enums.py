"""Enumerations and fixed design constants for the training engine.

Thresholds are fixed breakpoints; changing them changes every dashboard
warning, so they live here rather than inline in the calculations.
"""

from enum import Enum, IntEnum, auto


class AssessmentStatus(IntEnum):
    """Overall overtraining status, ordered by severity."""

    OPTIMAL = auto()
    WARNING = auto()
    CRITICAL = auto()


class SignalType(IntEnum):
    """Severity of a single overtraining signal."""

    INFO = auto()
    WARNING = auto()
    CRITICAL = auto()


class RecommendationPriority(IntEnum):
    LOW = auto()
    MEDIUM = auto()
    HIGH = auto()


class RulePriority(IntEnum):
    """Signal rule evaluation tiers — lower value = evaluated first."""

    VOLUME = 0
    INTENSITY = 1
    RECOVERY = 2
    NUTRITION = 3


class ExperienceLevel(IntEnum):
    BEGINNER = auto()
    INTERMEDIATE = auto()
    ADVANCED = auto()
    EXPERT = auto()


class LimitingFactor(Enum):
    """Self-declared weaknesses that lower the climb match score."""

    ENDURANCE = "endurance"
    VO2MAX = "vo2max"
    CLIMBING = "climbing"
    RECOVERY = "recovery"
    TECHNIQUE = "technique"
    MENTAL = "mental"


class ClimbDifficulty(IntEnum):
    EASY = auto()
    MEDIUM = auto()
    HARD = auto()
    EXTREME = auto()


class Technicality(IntEnum):
    LOW = auto()
    MEDIUM = auto()
    HIGH = auto()


class CapabilityLevel(IntEnum):
    """Required level of a physical capability for a given climb."""

    LOW = auto()
    MEDIUM = auto()
    HIGH = auto()


class PerformanceMetric(Enum):
    """Fitness metrics tracked by the performance projector."""

    FTP = "ftp"
    VO2MAX = "vo2max"
    POWER_WEIGHT = "power_weight"
    THRESHOLD_HR = "threshold_hr"
    ENDURANCE = "endurance"


class TimeRange(IntEnum):
    """Projection look-back windows, valued in days."""

    ONE_MONTH = 30
    THREE_MONTHS = 90
    SIX_MONTHS = 180
    ONE_YEAR = 365


class PhaseType(IntEnum):
    """Macrocycle phases of a climb-specific program."""

    BASE = auto()
    SPECIFIC = auto()
    TAPER = auto()


class WorkoutType(IntEnum):
    ENDURANCE = auto()
    STRENGTH = auto()
    THRESHOLD = auto()
    SPECIFIC = auto()
    SHARPENING = auto()
    RECOVERY = auto()
    REST = auto()


class ZoneType(IntEnum):
    """Power zones (Coggan 7-zone model)."""

    Z1 = 1
    Z2 = 2
    Z3 = 3
    Z4 = 4
    Z5 = 5
    Z6 = 6
    Z7 = 7


class Weekday(IntEnum):
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


class FTPTestProtocol(Enum):
    TWENTY_MINUTE = "20min"
    SIXTY_MINUTE = "60min"
    RAMP = "ramp"


# ---------------------------------------------------------------------------
# Activity windows
# ---------------------------------------------------------------------------
WINDOW_DAYS = 7
INTENSE_SESSION_THRESHOLD = 7  # intensity strictly above this (0-10 scale)

# ---------------------------------------------------------------------------
# Load signals
# ---------------------------------------------------------------------------
ACWR_CRITICAL_THRESHOLD = 1.5  # "brutal" week-over-week volume increase
ACWR_WARNING_THRESHOLD = 1.3
MAX_INTENSE_SESSIONS = 3       # more than this in 7 days is critical
MIN_REST_DAYS = 2              # fewer than this in 7 calendar days is a warning

RECOVERY_SCORES = {
    AssessmentStatus.CRITICAL: 40,
    AssessmentStatus.WARNING: 65,
    AssessmentStatus.OPTIMAL: 85,
}

# EWMA spans for the informational ACWR, Williams et al. (2017)
EWMA_ACUTE_SPAN = 7
EWMA_CHRONIC_SPAN = 28

# ---------------------------------------------------------------------------
# Nutrition cross-analysis
# ---------------------------------------------------------------------------
BASE_DAILY_CALORIES = 2000
CALORIES_PER_TRAINING_MINUTE = 10
DEFAULT_WEIGHT_KG = 70.0
HIGH_VOLUME_MIN = 600      # weekly training minutes
MODERATE_VOLUME_MIN = 300
PRE_WORKOUT_VOLUME_MIN = 400
PROTEIN_FACTORS_G_PER_KG = (2.0, 1.8, 1.6)  # high / moderate / low volume
CARBS_TARGET_PCT = (65, 60, 55)             # high / moderate / low volume
CARBS_LOW_MARGIN_PCT = 10
PROTEIN_DEFICIT_RATIO = 0.8
BASE_HYDRATION_L = 2.0
HYDRATION_L_PER_DAILY_HOUR = 0.5
CALORIE_DEFICIT_SIGNAL_KCAL = 500
CALORIE_DEFICIT_ADVICE_KCAL = 300

# ---------------------------------------------------------------------------
# Performance projection
# ---------------------------------------------------------------------------
PROGRESSION_EXPONENT = 0.8
PROGRESSION_JITTER_PCT = 0.01
MONTHLY_PROJECTION_GAIN = 0.01
PROJECTION_HORIZONS_DAYS = (30, 60, 90)
KEY_EVENT_THRESHOLD_FRACTION = 0.15
KEY_EVENT_MIN_STEP_PCT = 2.0
MAX_KEY_EVENTS = 3

METRIC_BASELINES = {
    PerformanceMetric.FTP: 250.0,
    PerformanceMetric.VO2MAX: 50.0,
    PerformanceMetric.POWER_WEIGHT: 3.5,
    PerformanceMetric.THRESHOLD_HR: 170.0,
    PerformanceMetric.ENDURANCE: 70.0,
}

PERFORMANCE_SCALES = {
    PerformanceMetric.FTP: (100, 150, 200, 250, 300, 350, 400),
    PerformanceMetric.VO2MAX: (30, 35, 40, 45, 50, 55, 60),
    PerformanceMetric.POWER_WEIGHT: (2.0, 2.5, 3.0, 3.5, 4.0, 4.5, 5.0),
    PerformanceMetric.THRESHOLD_HR: (150, 155, 160, 165, 170, 175, 180),
    PerformanceMetric.ENDURANCE: (40, 50, 60, 70, 80, 90, 95),
}

PERFORMANCE_LEVEL_LABELS = (
    "Beginner",
    "Lower intermediate",
    "Intermediate",
    "Upper intermediate",
    "Advanced",
    "Very advanced",
    "Elite",
)

BENCHMARK_CATEGORIES = (
    "Beginner sportive",
    "Regular sportive",
    "Amateur racer",
    "Elite racer",
    "Professional",
)

BENCHMARK_VALUES = {
    PerformanceMetric.FTP: (190, 250, 300, 370, 420),
    PerformanceMetric.VO2MAX: (42, 48, 55, 62, 75),
    PerformanceMetric.POWER_WEIGHT: (2.5, 3.2, 4.0, 4.7, 5.5),
    PerformanceMetric.THRESHOLD_HR: (165, 168, 172, 175, 178),
    PerformanceMetric.ENDURANCE: (50, 65, 75, 85, 95),
}

# ---------------------------------------------------------------------------
# Climb capability matching
# ---------------------------------------------------------------------------
# (min W/kg, points) tiers checked top-down, then the floor score.
DIFFICULTY_TIERS = {
    ClimbDifficulty.EASY: (((2.5, 30), (2.0, 25)), 15),
    ClimbDifficulty.MEDIUM: (((3.0, 30), (2.5, 25), (2.0, 15)), 5),
    ClimbDifficulty.HARD: (((3.5, 30), (3.0, 25), (2.5, 15)), 5),
    ClimbDifficulty.EXTREME: (((4.0, 30), (3.5, 25), (3.0, 15)), 5),
}

EXPERIENCE_BONUS = {
    ExperienceLevel.BEGINNER: 10,
    ExperienceLevel.INTERMEDIATE: 15,
    ExperienceLevel.ADVANCED: 20,
    ExperienceLevel.EXPERT: 25,
}

WEEKLY_HOURS_BONUS = ((12, 20), (8, 15), (5, 10))
WEEKLY_HOURS_FLOOR_BONUS = 5
STRENGTH_TRAINING_BONUS = 10
LIMITING_FACTOR_PENALTY = 5

MATCH_LABELS = ((80, "accessible"), (60, "moderate"), (40, "challenging"))
MATCH_LABEL_FLOOR = "very hard"

ASCENT_MINUTES_PER_1000M = 60  # at the reference W/kg
ASCENT_REFERENCE_W_PER_KG = 3.0

# ---------------------------------------------------------------------------
# Periodization
# ---------------------------------------------------------------------------
MAX_PROGRAM_WEEKS = 12
MIN_PROGRAM_WEEKS = 1
MIN_TAPER_WEEKS = 1
PHASE_SPLIT = {
    PhaseType.BASE: 0.4,
    PhaseType.SPECIFIC: 0.4,
    PhaseType.TAPER: 0.2,
}

# weeklyTSS = offset + FTP / divisor
PHASE_TSS = {
    PhaseType.BASE: (300, 3),
    PhaseType.SPECIFIC: (350, 3),
    PhaseType.TAPER: (200, 4),
}

# Required capability breakpoints
THRESHOLD_HIGH_AVG_GRADIENT = 8
VO2MAX_HIGH_MAX_GRADIENT = 12
ENDURANCE_HIGH_DISTANCE_KM = 15
STRENGTH_HIGH_AVG_GRADIENT = 7

# Weekly schedule slots: (type, name, share of weekly hours, intensity factor)
SCHEDULE_SLOTS = (
    (WorkoutType.ENDURANCE, "Long ride", 0.40, 0.60),
    (WorkoutType.THRESHOLD, "Threshold intervals", 0.25, 0.85),
    (WorkoutType.STRENGTH, "Climbing strength", 0.20, 0.75),
    (WorkoutType.RECOVERY, "Recovery ride", 0.15, 0.40),
)

# Program review estimate of weekly sessions
MIN_WEEKLY_SESSIONS = 3
MAX_WEEKLY_SESSIONS = 5

# ---------------------------------------------------------------------------
# Power zones, Coggan & Allen (2010), upper bounds as fraction of FTP
# ---------------------------------------------------------------------------
POWER_ZONE_UPPER_PCT_FTP = {
    ZoneType.Z1: 0.55,
    ZoneType.Z2: 0.75,
    ZoneType.Z3: 0.90,
    ZoneType.Z4: 1.05,
    ZoneType.Z5: 1.20,
    ZoneType.Z6: 1.50,
    ZoneType.Z7: None,  # open-ended
}

FTP_PROTOCOL_FACTORS = {
    FTPTestProtocol.TWENTY_MINUTE: 0.95,
    FTPTestProtocol.SIXTY_MINUTE: 1.0,
    FTPTestProtocol.RAMP: 0.75,
}
