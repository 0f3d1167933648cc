from .vital_signs import (
    VitalSign,
    VitalSignResult,
    TEMPERATURE,
    PULSE_RATE,
    OXYGEN_SATURATION,
    STATUS_NORMAL,
    STATUS_CRITICAL
)

__all__ = [
    'VitalSign',
    'VitalSignResult',
    'TEMPERATURE',
    'PULSE_RATE',
    'OXYGEN_SATURATION',
    'STATUS_NORMAL',
    'STATUS_CRITICAL'
]
