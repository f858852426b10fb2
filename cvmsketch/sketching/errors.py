"""Exceptions raised by the sketching package."""


class SketchError(Exception):
    """Base class for errors raised by cvmsketch sketches."""


class InvalidCapacityError(SketchError, ValueError):
    """A sketch was configured with a capacity below 1."""

    def __init__(self, capacity: object):
        self.capacity = capacity
        super().__init__(f"capacity must be a positive integer, got {capacity!r}")

