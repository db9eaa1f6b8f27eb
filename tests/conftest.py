from collections.abc import Callable

import pytest

from metricdata.otlp.schemas import (
    AnyValue,
    AttributeKeyValue,
    DoubleDataPoint,
    InstrumentationLibrary,
    InstrumentationLibraryMetrics,
    Int64DataPoint,
    Metric,
    MetricDescriptor,
    MetricDescriptorType,
    Resource,
    ResourceMetrics,
    StringKeyValue,
)


def make_metric(name: str, points: int = 1) -> Metric:
    return Metric(
        metric_descriptor=MetricDescriptor(
            name=name,
            description=f'{name} description',
            unit='1',
            type=MetricDescriptorType.COUNTER_INT64,
            labels=[StringKeyValue(key='host')],
        ),
        int64_data_points=[
            Int64DataPoint(
                labels=[StringKeyValue(key='host', value='h1')],
                time_unix_nano=1_000 + i,
                value=i,
            )
            for i in range(points)
        ],
    )


def make_resource_metrics(service: str, metric_counts: list[int]) -> ResourceMetrics:
    return ResourceMetrics(
        resource=Resource(
            attributes=[
                AttributeKeyValue(
                    key='service.name', value=AnyValue(string_value=service)
                )
            ]
        ),
        instrumentation_library_metrics=[
            InstrumentationLibraryMetrics(
                instrumentation_library=InstrumentationLibrary(
                    name=f'lib-{i}', version='1.0'
                ),
                metrics=[make_metric(f'{service}.metric.{j}') for j in range(count)],
            )
            for i, count in enumerate(metric_counts)
        ],
    )


@pytest.fixture
def resource_metrics_factory() -> Callable[[str, list[int]], ResourceMetrics]:
    return make_resource_metrics


@pytest.fixture
def wire_graph() -> list[ResourceMetrics]:
    """Two resources with one library each, holding 3 and 5 metrics."""
    return [
        make_resource_metrics('checkout', [3]),
        make_resource_metrics('payments', [5]),
    ]


@pytest.fixture
def double_metric() -> Metric:
    return Metric(
        metric_descriptor=MetricDescriptor(
            name='cpu.utilization', type=MetricDescriptorType.GAUGE_DOUBLE
        ),
        double_data_points=[DoubleDataPoint(value=0.5), DoubleDataPoint(value=0.75)],
    )
