"""Protocols for the random sources driving the samplers."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Capability interface of the random number generator.

    ``numpy.random.Generator`` satisfies it out of the box. Each call both
    reads and advances the generator state, so a source must not be shared
    between threads without external synchronization.
    """

    def uniform(self) -> float:
        """Draw u ~ Uniform[0, 1)."""
        ...

    def standard_normal(self) -> float:
        """Draw z ~ N(0, 1)."""
        ...
