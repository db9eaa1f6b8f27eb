class MetricDataError(Exception):
    pass


class PreconditionError(MetricDataError):
    """Caller bug: the operation's precondition does not hold."""


class InvalidMetricDataError(PreconditionError, RuntimeError):
    pass


class IndexOutOfRangeError(PreconditionError, IndexError):
    def __init__(self, index: int, length: int) -> None:
        super().__init__(index, length)
        self.index = index
        self.length = length

    def __str__(self) -> str:
        return f'Index {self.index} out of range for slice of length {self.length}'
