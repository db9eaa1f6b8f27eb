from enum import IntEnum

from metricdata.otlp.schemas import MetricDescriptorType


class MetricType(IntEnum):
    UNSPECIFIED = MetricDescriptorType.UNSPECIFIED.value
    GAUGE_INT64 = MetricDescriptorType.GAUGE_INT64.value
    GAUGE_DOUBLE = MetricDescriptorType.GAUGE_DOUBLE.value
    GAUGE_HISTOGRAM = MetricDescriptorType.GAUGE_HISTOGRAM.value
    COUNTER_INT64 = MetricDescriptorType.COUNTER_INT64.value
    COUNTER_DOUBLE = MetricDescriptorType.COUNTER_DOUBLE.value
    CUMULATIVE_HISTOGRAM = MetricDescriptorType.CUMULATIVE_HISTOGRAM.value
    SUMMARY = MetricDescriptorType.SUMMARY.value

    @classmethod
    def from_wire(cls, tag: MetricDescriptorType | int) -> 'MetricType':
        return cls(int(tag))

    def to_wire(self) -> MetricDescriptorType:
        return MetricDescriptorType(self.value)
