from vitals_checker.services.display import VitalSignDisplay, display_result
from vitals_checker.services.validation import check_vitals


class TestVitalSignDisplay:
    """Presentation of results through an injected output writer."""

    def setup_method(self):
        self.delays = []

    def create_display(self, writer, blink_cycles=6):
        return VitalSignDisplay(
            output_writer=writer,
            blink_cycles=blink_cycles,
            frame_delay_seconds=1.0,
            sleep=self.delays.append
        )

    def test_normal_result_lists_every_vital(self, captured_output, mock_writer):
        result = check_vitals(98.6, 90, 95, 5)

        self.create_display(mock_writer).display_result(result)

        assert captured_output == [
            "Patient Age: 5 years (Child (3-5 years))",
            "Vitals received within normal range",
            "Temperature: 98.6 (Normal range: 95.0-102.0)",
            "Pulse Rate: 90 (Normal range: 80-120)",
            "Oxygen Saturation: 95 (Normal range: 90-100)",
        ]
        assert self.delays == []

    def test_critical_result_blinks_per_critical_vital(self, captured_output, mock_writer):
        result = check_vitals(103.0, 72, 85, 25)

        self.create_display(mock_writer).display_result(result)

        assert captured_output[0] == "Patient Age: 25 years (Adult (15+ years))"
        assert captured_output[1] == "Temperature critical! Value: 103.0 (Normal range: 95.0-102.0)"
        assert captured_output[2:14] == ["\r* ", "\r *"] * 6
        assert captured_output[14] == "Oxygen Saturation critical! Value: 85 (Normal range: 90-100)"
        assert len(captured_output) == 1 + 2 * 13
        assert not any("Pulse Rate" in message for message in captured_output)
        assert self.delays == [1.0] * 24

    def test_blink_cycles_are_configurable(self, captured_output, mock_writer):
        result = check_vitals(98.6, 55, 95, 25)

        self.create_display(mock_writer, blink_cycles=0).display_result(result)

        assert captured_output == [
            "Patient Age: 25 years (Adult (15+ years))",
            "Pulse Rate critical! Value: 55 (Normal range: 60-100)",
        ]
        assert self.delays == []

    def test_writer_argument_overrides_instance_writer(self, captured_output, mock_writer):
        unused = []
        display = self.create_display(unused.append)

        display.display_result(check_vitals(98.6, 72, 95), mock_writer)

        assert unused == []
        assert "Vitals received within normal range" in captured_output

    def test_module_function_uses_default_sleep(self, captured_output, mock_writer, no_sleep):
        display_result(check_vitals(98.6, 140, 95, 25), mock_writer)

        assert "Pulse Rate critical! Value: 140 (Normal range: 60-100)" in captured_output
        assert no_sleep == [1.0] * 12

    def test_default_writer_prints(self, capsys):
        display_result(check_vitals(98.6, 72, 95))

        out = capsys.readouterr().out
        assert "Patient Age: 25 years (Adult (15+ years))" in out
        assert "Vitals received within normal range" in out

    def test_default_writer_redraws_blink_frames_in_place(self, capsys, no_sleep):
        display_result(check_vitals(98.6, 55, 95, 25))

        out = capsys.readouterr().out
        assert "Pulse Rate critical! Value: 55 (Normal range: 60-100)\n" in out
        assert out.endswith("\r* \r *" * 6)
        assert "\r* \n" not in out
