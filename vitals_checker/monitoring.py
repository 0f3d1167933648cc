"""
Prometheus metrics for vital sign evaluations.
"""

from typing import Dict, Optional

from prometheus_client import Counter, CollectorRegistry

from .models.vital_signs import VitalSignResult


class ValidationMetrics:
    """Counts evaluations and critical readings."""

    def __init__(self, registry: Optional[CollectorRegistry] = None):
        self.registry = registry if registry is not None else CollectorRegistry()
        self._setup_prometheus_metrics()

    def _setup_prometheus_metrics(self):
        self.evaluations = Counter(
            'vitals_evaluations_total',
            'Total number of vital sign evaluations',
            ['age_group', 'outcome'],
            registry=self.registry
        )

        self.critical_readings = Counter(
            'vitals_critical_readings_total',
            'Total number of vital sign readings outside their range',
            ['vital'],
            registry=self.registry
        )

    def record(self, result: VitalSignResult):
        outcome = "normal" if result.is_all_normal else "critical"
        self.evaluations.labels(age_group=result.age_group, outcome=outcome).inc()

        for vital in result.critical_vitals:
            self.critical_readings.labels(vital=vital.name).inc()

    def snapshot(self) -> Dict[str, float]:
        """
        Current counter values keyed by metric name and labels.

        Returns:
            Mapping like {"vitals_evaluations_total{age_group=...,outcome=...}": 1.0}
        """
        values = {}
        for metric in self.registry.collect():
            for sample in metric.samples:
                if not sample.name.endswith('_total'):
                    continue
                labels = ",".join(f"{k}={v}" for k, v in sorted(sample.labels.items()))
                values[f"{sample.name}{{{labels}}}"] = sample.value
        return values
