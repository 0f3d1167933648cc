from typing import Optional

from .config import CheckerConfig, build_display
from .monitoring import ValidationMetrics
from .services.age_ranges import OutputWriter
from .services.display import VitalSignDisplay
from .services.validation import VitalSignValidator, DEFAULT_AGE, check_vitals


class VitalsChecker:
    """Validates a set of vitals and presents the outcome in one call."""

    def __init__(self, validator: Optional[VitalSignValidator] = None,
                 display: Optional[VitalSignDisplay] = None,
                 default_age: int = DEFAULT_AGE):
        self.validator = validator or VitalSignValidator()
        self.display = display or VitalSignDisplay()
        self.default_age = default_age

    @classmethod
    def from_config(cls, config: CheckerConfig,
                    output_writer: Optional[OutputWriter] = None) -> 'VitalsChecker':
        metrics = ValidationMetrics() if config.metrics_enabled else None
        return cls(
            validator=VitalSignValidator(metrics=metrics),
            display=build_display(config, output_writer),
            default_age=config.default_age
        )

    def vitals_ok(self, temperature: float, pulse_rate: int, spo2: int,
                  age: Optional[int] = None,
                  output_writer: Optional[OutputWriter] = None) -> bool:
        if age is None:
            age = self.default_age
        # Decision is final before the display (and its alert animation) runs
        result = self.validator.check_vitals(temperature, pulse_rate, spo2, age)
        self.display.display_result(result, output_writer)
        return result.is_all_normal


def vitals_ok(temperature: float, pulse_rate: int, spo2: int,
              age: int = DEFAULT_AGE,
              output_writer: Optional[OutputWriter] = None) -> bool:
    """Check the vitals, print the outcome and return whether all are normal."""
    result = check_vitals(temperature, pulse_rate, spo2, age)
    VitalSignDisplay(output_writer).display_result(result)
    return result.is_all_normal
