from prometheus_client import CollectorRegistry

from vitals_checker.monitoring import ValidationMetrics
from vitals_checker.services.validation import check_vitals


class TestValidationMetrics:

    def test_records_outcome_per_age_group(self):
        metrics = ValidationMetrics()

        metrics.record(check_vitals(98.6, 130, 95, 0))
        metrics.record(check_vitals(98.6, 130, 95, 0))
        metrics.record(check_vitals(98.6, 130, 95, 25))

        snapshot = metrics.snapshot()
        assert snapshot["vitals_evaluations_total{age_group=Newborn (0-12 months),outcome=normal}"] == 2.0
        assert snapshot["vitals_evaluations_total{age_group=Adult (15+ years),outcome=critical}"] == 1.0

    def test_counts_each_critical_reading(self):
        metrics = ValidationMetrics()

        metrics.record(check_vitals(103.0, 55, 85, 25))

        snapshot = metrics.snapshot()
        assert snapshot["vitals_critical_readings_total{vital=Temperature}"] == 1.0
        assert snapshot["vitals_critical_readings_total{vital=Pulse Rate}"] == 1.0
        assert snapshot["vitals_critical_readings_total{vital=Oxygen Saturation}"] == 1.0

    def test_uses_supplied_registry(self):
        registry = CollectorRegistry()
        metrics = ValidationMetrics(registry)

        metrics.record(check_vitals(98.6, 72, 95))

        value = registry.get_sample_value(
            'vitals_evaluations_total',
            {'age_group': 'Adult (15+ years)', 'outcome': 'normal'}
        )
        assert value == 1.0

    def test_empty_snapshot(self):
        assert ValidationMetrics().snapshot() == {}
