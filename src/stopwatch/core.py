"""Record labelled time points and report the intervals between them.

This module exposes:

- ``Stopwatch``: A recorder that timestamps labelled marks and renders a trace.
- ``Measurement``: A single recorded ``(label, timestamp)`` pair.
- ``SampleAnnotation``: A ``(label, samples)`` divisor used for averaging.

A ``Stopwatch`` starts itself on construction with the label ``"start"``.
Reports are plain text meant for a console or a log.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_clock = time.perf_counter_ns

_NS_PER_US = 1_000
_US_PER_S = 1_000_000


@dataclass(frozen=True, slots=True)
class Measurement:
    """Represent a labelled point in time.

    Attributes:
        label (str):
            Name given to the point when it was marked.
        timestamp (int):
            Monotonic clock reading in nanoseconds.
    """

    label: str
    timestamp: int


@dataclass(frozen=True, slots=True)
class SampleAnnotation:
    """Attach a sample count to every measurement sharing a label.

    Attributes:
        label (str):
            Label of the measurements the count applies to.
        samples (int):
            Divisor used for the per-sample line. Not validated.
    """

    label: str
    samples: int


def _micros(start: int, end: int) -> int:
    """Return the whole microseconds between two clock readings.

    Args:
        start (int):
            Earlier clock reading in nanoseconds.
        end (int):
            Later clock reading in nanoseconds.

    Returns:
        int:
            Elapsed microseconds, truncated.
    """
    return (end - start) // _NS_PER_US


def _per_sample(micros: int, samples: int) -> float:
    """Divide an interval evenly over a number of samples.

    Args:
        micros (int):
            Interval length in whole microseconds.
        samples (int):
            Sample count. Zero yields ``inf``, or ``nan`` for an empty
            interval.

    Returns:
        float:
            Seconds per sample.
    """
    if samples == 0:
        return math.inf if micros else math.nan
    return micros / (samples * _US_PER_S)


class Stopwatch:
    """Record labelled marks and report the time between consecutive ones.

    The first measurement is always ``"start"``, taken on construction.
    Instances are meant for a single owner; they are not thread-safe.
    """

    __slots__ = ("_measurements", "_samples")

    def __init__(self) -> None:
        """Start the stopwatch by recording the ``"start"`` measurement."""
        self._measurements: list[Measurement] = [Measurement("start", _clock())]
        self._samples: list[SampleAnnotation] = []

    @property
    def measurements(self) -> tuple[Measurement, ...]:
        """tuple[Measurement, ...]: Recorded measurements in insertion order."""
        return tuple(self._measurements)

    @property
    def samples(self) -> tuple[SampleAnnotation, ...]:
        """tuple[SampleAnnotation, ...]: Sample annotations in insertion order."""
        return tuple(self._samples)

    def mark(self, label: str, samples: int | None = None) -> None:
        """Record the current time under ``label``.

        When ``samples`` is given, the interval ending at every measurement
        labelled ``label`` is also reported divided by ``samples``; for
        instance the number of loop iterations that ran since the last mark.

        Args:
            label (str):
                Name of the measurement. Duplicates and empty strings are fine.
            samples (int | None):
                Optional sample count. Zero and negative values are accepted
                and show up as ``inf``, ``nan`` or negative durations.
        """
        self._measurements.append(Measurement(label, _clock()))
        if samples is not None:
            self._samples.append(SampleAnnotation(label, samples))

    def report(self) -> str:
        """Build the timing trace.

        The first line is the total time from ``"start"`` until this call.
        Each following line is the time between two consecutive measurements,
        optionally followed by per-sample lines for matching annotations.

        Returns:
            str:
                The newline-terminated trace.
        """
        now = _clock()
        measurements = self._measurements
        start = measurements[0].timestamp

        total = _micros(start, now) / _US_PER_S
        lines = [f"Total; start -> now: {total!r}s\n"]

        for previous, current in zip(measurements, measurements[1:]):
            micros = _micros(previous.timestamp, current.timestamp)
            span = f"{previous.label} -> {current.label}"
            lines.append(f"{span}: {micros / _US_PER_S!r}s\n")

            for annotation in self._samples:
                if annotation.label == current.label:
                    value = _per_sample(micros, annotation.samples)
                    lines.append(f"{span} per sample: {value!r}s\n")

        return "".join(lines)

    def log(
        self,
        target: logging.Logger | None = None,
        level: int = logging.DEBUG,
    ) -> None:
        """Write the trace to a logger, one record per line.

        Args:
            target (logging.Logger | None):
                Logger to write to. Defaults to the ``stopwatch`` module logger.
            level (int):
                Logging level for every record.
        """
        target = target if target is not None else logger
        if not target.isEnabledFor(level):
            return

        for line in self.report().splitlines():
            target.log(level, "%s", line)

    def __str__(self) -> str:
        """Return the current trace.

        Returns:
            str: Same as ``report()``.
        """
        return self.report()
