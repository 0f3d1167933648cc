import logging
from typing import Optional

from ..models.vital_signs import (
    VitalSign,
    VitalSignResult,
    TEMPERATURE,
    PULSE_RATE,
    OXYGEN_SATURATION
)
from ..monitoring import ValidationMetrics
from .age_ranges import (
    AgeClassifier,
    PulseRateLimitProvider,
    VitalRangeResolver,
    TEMPERATURE_RANGE,
    SPO2_RANGE
)


DEFAULT_AGE = 25


class VitalSignValidator:
    """
    Checks temperature, pulse rate and SpO2 against age-appropriate ranges.

    Ranges (inclusive):
    - Temperature: 95.0-102.0 °F for all ages
    - SpO2: 90-100% for all ages
    - Pulse rate: by age band, adult 60-100 bpm when the age matches no band

    Readings are never rejected as implausible; anything outside its range
    is reported as critical in the result.
    """

    def __init__(self, metrics: Optional[ValidationMetrics] = None):
        self.logger = logging.getLogger(__name__)
        self.metrics = metrics

    def check_vitals(self, temperature: float, pulse_rate: int, spo2: int,
                     age: int = DEFAULT_AGE,
                     age_classifier: Optional[AgeClassifier] = None,
                     pulse_rate_provider: Optional[PulseRateLimitProvider] = None) -> VitalSignResult:
        """
        Evaluate all three vital signs for a patient.

        Args:
            temperature: Body temperature in °F
            pulse_rate: Pulse rate in beats/min
            spo2: Oxygen saturation in percent
            age: Patient age in years, 25 (adult) when omitted
            age_classifier: Replaces the default age-group labelling
            pulse_rate_provider: Replaces the default pulse-rate ranges

        Returns:
            VitalSignResult with entries ordered Temperature, Pulse Rate, Oxygen Saturation
        """
        resolver = VitalRangeResolver(age_classifier, pulse_rate_provider)

        pulse_min, pulse_max = resolver.pulse_rate_limits(age)
        temp_min, temp_max = resolver.temperature_limits()
        spo2_min, spo2_max = resolver.spo2_limits()

        vitals = (
            VitalSign(TEMPERATURE, temperature, temp_min, temp_max),
            VitalSign(PULSE_RATE, pulse_rate, pulse_min, pulse_max),
            VitalSign(OXYGEN_SATURATION, spo2, spo2_min, spo2_max)
        )

        result = VitalSignResult(
            is_all_normal=all(vital.is_in_range for vital in vitals),
            vital_signs=vitals,
            age=age,
            age_group=resolver.classify_age(age)
        )

        self.logger.debug(
            f"Evaluated vitals for age {age} ({result.age_group}): "
            f"all_normal={result.is_all_normal}"
        )
        if not result.is_all_normal:
            critical_names = ", ".join(vital.name for vital in result.critical_vitals)
            self.logger.warning(f"Critical vital signs for age {age}: {critical_names}")

        if self.metrics is not None:
            self.metrics.record(result)

        return result

    def is_temperature_ok(self, temperature: float) -> bool:
        return TEMPERATURE_RANGE[0] <= temperature <= TEMPERATURE_RANGE[1]

    def is_pulse_rate_ok(self, pulse_rate: int, age: int = DEFAULT_AGE,
                         pulse_rate_provider: Optional[PulseRateLimitProvider] = None) -> bool:
        pulse_min, pulse_max = VitalRangeResolver(pulse_rate_provider=pulse_rate_provider).pulse_rate_limits(age)
        return pulse_min <= pulse_rate <= pulse_max

    def is_spo2_ok(self, spo2: int) -> bool:
        return SPO2_RANGE[0] <= spo2 <= SPO2_RANGE[1]


_default_validator = VitalSignValidator()


def check_vitals(temperature: float, pulse_rate: int, spo2: int,
                 age: int = DEFAULT_AGE,
                 age_classifier: Optional[AgeClassifier] = None,
                 pulse_rate_provider: Optional[PulseRateLimitProvider] = None) -> VitalSignResult:
    return _default_validator.check_vitals(
        temperature, pulse_rate, spo2, age,
        age_classifier=age_classifier,
        pulse_rate_provider=pulse_rate_provider
    )


def is_temperature_ok(temperature: float) -> bool:
    return _default_validator.is_temperature_ok(temperature)


def is_pulse_rate_ok(pulse_rate: int, age: int = DEFAULT_AGE,
                     pulse_rate_provider: Optional[PulseRateLimitProvider] = None) -> bool:
    return _default_validator.is_pulse_rate_ok(pulse_rate, age, pulse_rate_provider)


def is_spo2_ok(spo2: int) -> bool:
    return _default_validator.is_spo2_ok(spo2)
