import logging

from metricdata.errors import InvalidMetricDataError
from metricdata.otlp import schemas as otlp
from metricdata.slices import ResourceMetrics, SliceView

logger = logging.getLogger(__name__)


class MetricData:
    """Top-level handle propagated through the metrics pipeline.

    This is a reference type: it holds the root list of wire resource metrics
    by reference, so copying the handle aliases the same storage. Obtain
    instances through ``new_metric_data`` or ``metric_data_from_wire``.
    """

    __slots__ = ('_orig',)

    def __init__(self, orig: list[otlp.ResourceMetrics]) -> None:
        if orig is None:
            raise InvalidMetricDataError('MetricData requires backing resource metrics')
        self._orig = orig

    def __repr__(self) -> str:
        return f'MetricData(resource_metrics={len(self._orig)})'

    def clone(self) -> 'MetricData':
        clones = [rm.model_copy(deep=True) for rm in self._orig]
        logger.debug('MetricData cloned', extra={'resource_metrics': len(clones)})
        return MetricData(clones)

    def resource_metrics(self) -> SliceView[ResourceMetrics, otlp.ResourceMetrics]:
        return SliceView(self._orig, otlp.ResourceMetrics, ResourceMetrics)

    def set_resource_metrics(
        self, view: SliceView[ResourceMetrics, otlp.ResourceMetrics]
    ) -> None:
        if view._element_type is not otlp.ResourceMetrics:
            raise TypeError(
                f'Expected a view over ResourceMetrics, got {view._element_type.__name__}'
            )
        self._orig[:] = view._orig
        logger.debug(
            'MetricData resource metrics replaced',
            extra={'resource_metrics': len(self._orig)},
        )

    def metric_count(self) -> int:
        metric_count = 0
        for rm in self.resource_metrics():
            for ilm in rm.instrumentation_library_metrics():
                metric_count += ilm.metrics().len()
        return metric_count

    def metric_and_data_point_count(self) -> tuple[int, int]:
        metric_count = 0
        data_point_count = 0
        for rm in self.resource_metrics():
            for ilm in rm.instrumentation_library_metrics():
                metrics = ilm.metrics()
                metric_count += metrics.len()
                for metric in metrics:
                    data_point_count += metric.data_point_count()
        return metric_count, data_point_count


def metric_data_from_wire(orig: list[otlp.ResourceMetrics]) -> MetricData:
    return MetricData(orig)


def metric_data_to_wire(md: MetricData) -> list[otlp.ResourceMetrics]:
    return md._orig


def new_metric_data() -> MetricData:
    return MetricData([])


def metric_data_from_request(request: otlp.ExportMetricsServiceRequest) -> MetricData:
    return MetricData(request.resource_metrics)


def metric_data_to_request(md: MetricData) -> otlp.ExportMetricsServiceRequest:
    # must alias the backing list, not a validated copy
    return otlp.ExportMetricsServiceRequest.model_construct(
        resource_metrics=md._orig
    )
