from dataclasses import dataclass
from typing import Dict, List, Tuple, Union


Number = Union[int, float]

TEMPERATURE = "Temperature"
PULSE_RATE = "Pulse Rate"
OXYGEN_SATURATION = "Oxygen Saturation"

STATUS_NORMAL = "Normal"
STATUS_CRITICAL = "Critical"


@dataclass(frozen=True)
class VitalSign:
    """One reading checked against its inclusive bounds."""
    name: str
    value: Number
    min_limit: Number
    max_limit: Number

    @property
    def is_in_range(self) -> bool:
        return self.min_limit <= self.value <= self.max_limit

    @property
    def status(self) -> str:
        return STATUS_NORMAL if self.is_in_range else STATUS_CRITICAL

    def to_dict(self) -> Dict:
        return {
            "name": self.name,
            "value": self.value,
            "min_limit": self.min_limit,
            "max_limit": self.max_limit,
            "is_in_range": self.is_in_range,
            "status": self.status
        }


@dataclass(frozen=True)
class VitalSignResult:
    """Outcome of a single vitals evaluation for one patient age."""
    is_all_normal: bool
    vital_signs: Tuple[VitalSign, ...]
    age: int
    age_group: str = ""

    @property
    def critical_vitals(self) -> List[VitalSign]:
        return [vital for vital in self.vital_signs if not vital.is_in_range]

    def to_dict(self) -> Dict:
        return {
            "is_all_normal": self.is_all_normal,
            "age": self.age,
            "age_group": self.age_group,
            "vital_signs": [vital.to_dict() for vital in self.vital_signs],
            "critical_vitals": [vital.name for vital in self.critical_vitals]
        }
