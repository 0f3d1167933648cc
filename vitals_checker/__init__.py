from .models import VitalSign, VitalSignResult
from .services import (
    AgeClassifier,
    PulseRateLimitProvider,
    OutputWriter,
    VitalRangeResolver,
    VitalSignValidator,
    VitalSignDisplay,
    classify_age,
    pulse_rate_limits,
    check_vitals,
    is_temperature_ok,
    is_pulse_rate_ok,
    is_spo2_ok,
    display_result
)
from .checker import VitalsChecker, vitals_ok
from .config import CheckerConfig, ConfigurationError, load_config
from .monitoring import ValidationMetrics

__all__ = [
    'VitalSign',
    'VitalSignResult',
    'AgeClassifier',
    'PulseRateLimitProvider',
    'OutputWriter',
    'VitalRangeResolver',
    'VitalSignValidator',
    'VitalSignDisplay',
    'classify_age',
    'pulse_rate_limits',
    'check_vitals',
    'is_temperature_ok',
    'is_pulse_rate_ok',
    'is_spo2_ok',
    'display_result',
    'VitalsChecker',
    'vitals_ok',
    'CheckerConfig',
    'ConfigurationError',
    'load_config',
    'ValidationMetrics'
]
