import logging
import time
from typing import Callable, List, Optional

from ..models.vital_signs import VitalSign, VitalSignResult
from .age_ranges import OutputWriter


BLINK_FRAMES = ("\r* ", "\r *")
DEFAULT_BLINK_CYCLES = 6
DEFAULT_FRAME_DELAY_SECONDS = 1.0


def console_writer(message: str):
    """Print a message; blink frames redraw the current line instead of adding one."""
    if message in BLINK_FRAMES:
        print(message, end="", flush=True)
    else:
        print(message)


class VitalSignDisplay:
    """Writes a VitalSignResult as human-readable lines to an output writer."""

    def __init__(self, output_writer: Optional[OutputWriter] = None,
                 blink_cycles: int = DEFAULT_BLINK_CYCLES,
                 frame_delay_seconds: float = DEFAULT_FRAME_DELAY_SECONDS,
                 sleep: Optional[Callable[[float], None]] = None):
        self.logger = logging.getLogger(__name__)
        self.output_writer = output_writer or console_writer
        self.blink_cycles = blink_cycles
        self.frame_delay_seconds = frame_delay_seconds
        self.sleep = sleep or time.sleep

    def display_result(self, result: VitalSignResult,
                       output_writer: Optional[OutputWriter] = None):
        writer = output_writer or self.output_writer
        writer(f"Patient Age: {result.age} years ({result.age_group})")

        if result.is_all_normal:
            self._display_normal_vitals(list(result.vital_signs), writer)
        else:
            self._display_critical_vitals(result.critical_vitals, writer)

    def _display_normal_vitals(self, vitals: List[VitalSign], writer: OutputWriter):
        writer("Vitals received within normal range")
        for vital in vitals:
            writer(f"{vital.name}: {vital.value} (Normal range: {vital.min_limit}-{vital.max_limit})")

    def _display_critical_vitals(self, critical_vitals: List[VitalSign], writer: OutputWriter):
        for vital in critical_vitals:
            self._display_critical_alert(
                f"{vital.name} critical! Value: {vital.value} "
                f"(Normal range: {vital.min_limit}-{vital.max_limit})",
                writer
            )

    def _display_critical_alert(self, message: str, writer: OutputWriter):
        writer(message)
        self.logger.debug(f"Blinking critical alert for {self.blink_cycles} cycles")
        for _ in range(self.blink_cycles):
            for frame in BLINK_FRAMES:
                writer(frame)
                self.sleep(self.frame_delay_seconds)


def display_result(result: VitalSignResult, output_writer: Optional[OutputWriter] = None):
    VitalSignDisplay(output_writer).display_result(result)
