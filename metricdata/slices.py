"""Non-owning views over the repeated fields of a wire metrics graph.

A view never copies the list it is built from: every read and write goes
straight to the backing record, so changes made through one view are visible
through every other view (and wrapper) over the same field. Callers that
share a graph between threads must synchronize around the whole graph, not a
single view.
"""

from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from metricdata.errors import IndexOutOfRangeError
from metricdata.metric_type import MetricType
from metricdata.otlp import schemas as otlp

R = TypeVar('R', bound=BaseModel)
E = TypeVar('E')


class RecordWrapper(Generic[R]):
    __slots__ = ('_orig',)

    def __init__(self, orig: R) -> None:
        self._orig = orig

    @property
    def orig(self) -> R:
        return self._orig

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._orig is other._orig

    def __hash__(self) -> int:
        return id(self._orig)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._orig!r})'


class SliceView(Generic[E, R]):
    """Index-based window over one live list of wire records.

    ``wrap`` turns a backing record into the element handed to callers; when
    omitted the raw record itself is returned.
    """

    __slots__ = ('_orig', '_element_type', '_wrap')

    def __init__(
        self,
        orig: list[R],
        element_type: type[R],
        wrap: Callable[[R], E] | None = None,
    ) -> None:
        self._orig = orig
        self._element_type = element_type
        self._wrap = wrap

    def _element(self, record: R) -> Any:
        if self._wrap is None:
            return record
        return self._wrap(record)

    @staticmethod
    def _record(element: Any) -> Any:
        if isinstance(element, RecordWrapper):
            return element.orig
        return element

    def len(self) -> int:
        return len(self._orig)

    def get(self, index: int) -> E:
        length = len(self._orig)
        if index < 0 or index >= length:
            raise IndexOutOfRangeError(index, length)
        return self._element(self._orig[index])

    def __len__(self) -> int:
        return len(self._orig)

    def __getitem__(self, index: int) -> E:
        return self.get(index)

    def __iter__(self) -> Iterator[E]:
        for record in self._orig:
            yield self._element(record)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SliceView):
            return NotImplemented
        return self._orig is other._orig

    def __hash__(self) -> int:
        return id(self._orig)

    def __repr__(self) -> str:
        return f'SliceView[{self._element_type.__name__}](len={len(self._orig)})'

    def append_empty(self) -> E:
        record = self._element_type()
        self._orig.append(record)
        return self._element(record)

    def append(self, element: E) -> None:
        record = self._record(element)
        if not isinstance(record, self._element_type):
            raise TypeError(
                f'Expected {self._element_type.__name__}, got {type(record).__name__}'
            )
        self._orig.append(record)

    def resize(self, new_len: int) -> None:
        if new_len < 0:
            raise ValueError(f'Slice length must be non-negative, got {new_len}')
        current = len(self._orig)
        if new_len <= current:
            del self._orig[new_len:]
            return
        self._orig.extend(self._element_type() for _ in range(new_len - current))

    def remove_if(self, predicate: Callable[[E], bool]) -> None:
        self._orig[:] = [
            record for record in self._orig if not predicate(self._element(record))
        ]

    def copy_to(self, dest: 'SliceView[E, R]') -> None:
        dest._orig[:] = [record.model_copy(deep=True) for record in self._orig]

    def move_and_append_to(self, dest: 'SliceView[E, R]') -> None:
        if dest._orig is self._orig:
            return
        dest._orig.extend(self._orig)
        self._orig.clear()


class ResourceMetrics(RecordWrapper[otlp.ResourceMetrics]):
    __slots__ = ()

    @property
    def resource(self) -> otlp.Resource:
        return self._orig.resource

    def instrumentation_library_metrics(
        self,
    ) -> SliceView['InstrumentationLibraryMetrics', otlp.InstrumentationLibraryMetrics]:
        return SliceView(
            self._orig.instrumentation_library_metrics,
            otlp.InstrumentationLibraryMetrics,
            InstrumentationLibraryMetrics,
        )


class InstrumentationLibraryMetrics(RecordWrapper[otlp.InstrumentationLibraryMetrics]):
    __slots__ = ()

    @property
    def instrumentation_library(self) -> otlp.InstrumentationLibrary:
        return self._orig.instrumentation_library

    def metrics(self) -> SliceView['Metric', otlp.Metric]:
        return SliceView(self._orig.metrics, otlp.Metric, Metric)


class Metric(RecordWrapper[otlp.Metric]):
    __slots__ = ()

    @property
    def metric_descriptor(self) -> otlp.MetricDescriptor:
        return self._orig.metric_descriptor

    @property
    def name(self) -> str:
        return self._orig.metric_descriptor.name

    @name.setter
    def name(self, value: str) -> None:
        self._orig.metric_descriptor.name = value

    @property
    def type(self) -> MetricType:
        return MetricType.from_wire(self._orig.metric_descriptor.type)

    @type.setter
    def type(self, value: MetricType) -> None:
        self._orig.metric_descriptor.type = value.to_wire()

    def int64_data_points(self) -> SliceView[otlp.Int64DataPoint, otlp.Int64DataPoint]:
        return SliceView(self._orig.int64_data_points, otlp.Int64DataPoint)

    def double_data_points(
        self,
    ) -> SliceView[otlp.DoubleDataPoint, otlp.DoubleDataPoint]:
        return SliceView(self._orig.double_data_points, otlp.DoubleDataPoint)

    def histogram_data_points(
        self,
    ) -> SliceView[otlp.HistogramDataPoint, otlp.HistogramDataPoint]:
        return SliceView(self._orig.histogram_data_points, otlp.HistogramDataPoint)

    def summary_data_points(
        self,
    ) -> SliceView[otlp.SummaryDataPoint, otlp.SummaryDataPoint]:
        return SliceView(self._orig.summary_data_points, otlp.SummaryDataPoint)

    def data_point_count(self) -> int:
        return (
            len(self._orig.int64_data_points)
            + len(self._orig.double_data_points)
            + len(self._orig.histogram_data_points)
            + len(self._orig.summary_data_points)
        )
