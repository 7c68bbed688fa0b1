"""Public API for stopwatch.

This module re-exports the primary public interfaces:

- ``Stopwatch``: Recorder of labelled time points and their trace.
- ``Measurement``: A recorded ``(label, timestamp)`` pair.
- ``SampleAnnotation``: A ``(label, samples)`` pair used for averaging.

Import from this module rather than ``stopwatch.core``.
"""

from .core import Measurement, SampleAnnotation, Stopwatch

__all__ = ["Stopwatch", "Measurement", "SampleAnnotation"]
