from enum import IntEnum

from pydantic import BaseModel, Field


class AnyValue(BaseModel):
    string_value: str | None = None
    bool_value: bool | None = None
    int_value: int | None = None
    double_value: float | None = None


class AttributeKeyValue(BaseModel):
    key: str
    value: AnyValue = Field(default_factory=AnyValue)


class StringKeyValue(BaseModel):
    key: str
    value: str = ''


class Resource(BaseModel):
    attributes: list[AttributeKeyValue] = []
    dropped_attributes_count: int = 0


class InstrumentationLibrary(BaseModel):
    name: str = ''
    version: str = ''


class MetricDescriptorType(IntEnum):
    UNSPECIFIED = 0
    GAUGE_INT64 = 1
    GAUGE_DOUBLE = 2
    GAUGE_HISTOGRAM = 3
    COUNTER_INT64 = 4
    COUNTER_DOUBLE = 5
    CUMULATIVE_HISTOGRAM = 6
    SUMMARY = 7


class MetricDescriptor(BaseModel):
    name: str = ''
    description: str = ''
    unit: str = ''
    type: MetricDescriptorType = MetricDescriptorType.UNSPECIFIED
    labels: list[StringKeyValue] = []


class Int64DataPoint(BaseModel):
    labels: list[StringKeyValue] = []
    start_time_unix_nano: int = 0
    time_unix_nano: int = 0
    value: int = 0


class DoubleDataPoint(BaseModel):
    labels: list[StringKeyValue] = []
    start_time_unix_nano: int = 0
    time_unix_nano: int = 0
    value: float = 0.0


class HistogramBucket(BaseModel):
    count: int = 0


class HistogramDataPoint(BaseModel):
    labels: list[StringKeyValue] = []
    start_time_unix_nano: int = 0
    time_unix_nano: int = 0
    count: int = 0
    sum: float = 0.0
    buckets: list[HistogramBucket] = []
    explicit_bounds: list[float] = []


class ValueAtPercentile(BaseModel):
    percentile: float = 0.0
    value: float = 0.0


class SummaryDataPoint(BaseModel):
    labels: list[StringKeyValue] = []
    start_time_unix_nano: int = 0
    time_unix_nano: int = 0
    count: int = 0
    sum: float = 0.0
    percentile_values: list[ValueAtPercentile] = []


class Metric(BaseModel):
    metric_descriptor: MetricDescriptor = Field(default_factory=MetricDescriptor)
    int64_data_points: list[Int64DataPoint] = []
    double_data_points: list[DoubleDataPoint] = []
    histogram_data_points: list[HistogramDataPoint] = []
    summary_data_points: list[SummaryDataPoint] = []


class InstrumentationLibraryMetrics(BaseModel):
    instrumentation_library: InstrumentationLibrary = Field(
        default_factory=InstrumentationLibrary
    )
    metrics: list[Metric] = []


class ResourceMetrics(BaseModel):
    resource: Resource = Field(default_factory=Resource)
    instrumentation_library_metrics: list[InstrumentationLibraryMetrics] = []


class ExportMetricsServiceRequest(BaseModel):
    resource_metrics: list[ResourceMetrics] = []
