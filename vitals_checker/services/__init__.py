from .age_ranges import (
    AgeBand,
    AgeClassifier,
    PulseRateLimitProvider,
    OutputWriter,
    VitalRangeResolver,
    classify_age,
    pulse_rate_limits,
    age_band_for
)
from .validation import (
    VitalSignValidator,
    DEFAULT_AGE,
    check_vitals,
    is_temperature_ok,
    is_pulse_rate_ok,
    is_spo2_ok
)
from .display import VitalSignDisplay, display_result

__all__ = [
    'AgeBand',
    'AgeClassifier',
    'PulseRateLimitProvider',
    'OutputWriter',
    'VitalRangeResolver',
    'classify_age',
    'pulse_rate_limits',
    'age_band_for',
    'VitalSignValidator',
    'DEFAULT_AGE',
    'check_vitals',
    'is_temperature_ok',
    'is_pulse_rate_ok',
    'is_spo2_ok',
    'VitalSignDisplay',
    'display_result'
]
