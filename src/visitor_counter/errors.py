# src/visitor_counter/errors.py


class CounterError(Exception):
    """Base class for failures of the read-increment-write cycle."""


class StoreReadError(CounterError):
    pass


class StoreWriteError(CounterError):
    pass


class MalformedRecord(CounterError):
    """The stored item exists but has no usable non-negative integer count."""


class WriteConflict(StoreWriteError):
    """The conditional write lost against a concurrent writer."""
