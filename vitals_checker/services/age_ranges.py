from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple


AgeClassifier = Callable[[int], str]
PulseRateLimitProvider = Callable[[int], Tuple[int, int]]
OutputWriter = Callable[[str], None]

UNKNOWN_AGE_GROUP = "Unknown"


@dataclass(frozen=True)
class AgeBand:
    """Inclusive age band with its label and pulse-rate bounds."""
    label: str
    min_age: int
    max_age: Optional[int]  # None means no upper bound
    pulse_rate_range: Tuple[int, int]

    def contains(self, age: int) -> bool:
        if age < self.min_age:
            return False
        return self.max_age is None or age <= self.max_age


# Ordered ascending; the first matching band wins.
AGE_BANDS: List[AgeBand] = [
    AgeBand("Newborn (0-12 months)", 0, 0, (100, 160)),
    AgeBand("Child (1-3 years)", 1, 3, (80, 130)),
    AgeBand("Child (3-5 years)", 4, 5, (80, 120)),
    AgeBand("Child (6-10 years)", 6, 10, (70, 110)),
    AgeBand("Adolescent (11-14 years)", 11, 14, (60, 105)),
    AgeBand("Adult (15+ years)", 15, None, (60, 100)),
]

ADULT_PULSE_RATE_RANGE = (60, 100)

# Temperature (°F) and SpO2 (%) ranges do not vary with age
TEMPERATURE_RANGE = (95.0, 102.0)
SPO2_RANGE = (90, 100)


def age_band_for(age: int) -> Optional[AgeBand]:
    for band in AGE_BANDS:
        if band.contains(age):
            return band
    return None


def classify_age(age: int) -> str:
    """Return the age-group label, or "Unknown" for ages outside every band."""
    band = age_band_for(age)
    return band.label if band else UNKNOWN_AGE_GROUP


def pulse_rate_limits(age: int) -> Tuple[int, int]:
    """Return the inclusive pulse-rate range, falling back to the adult range."""
    band = age_band_for(age)
    return band.pulse_rate_range if band else ADULT_PULSE_RATE_RANGE


class VitalRangeResolver:
    """
    Resolves the applicable inclusive ranges and age-group label for a patient age.

    The classifier and pulse-rate provider can be replaced with any callable
    of the matching shape; omitted strategies fall back to the age band table.
    """

    def __init__(self, age_classifier: Optional[AgeClassifier] = None,
                 pulse_rate_provider: Optional[PulseRateLimitProvider] = None):
        self.age_classifier = age_classifier or classify_age
        self.pulse_rate_provider = pulse_rate_provider or pulse_rate_limits

    def classify_age(self, age: int) -> str:
        return self.age_classifier(age)

    def pulse_rate_limits(self, age: int) -> Tuple[int, int]:
        return self.pulse_rate_provider(age)

    def temperature_limits(self) -> Tuple[float, float]:
        return TEMPERATURE_RANGE

    def spo2_limits(self) -> Tuple[int, int]:
        return SPO2_RANGE
