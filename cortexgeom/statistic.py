"""Simple and sample statistics over integer values."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass, field


@dataclass
class SimpleStat:
    """Count, mean and standard deviation."""

    count: int = 0
    mean: float = 0.0
    deviation: float = 0.0


@dataclass
class SampleStat:
    """Count, mode, median, histogram size, mean and standard deviation."""

    count: int = 0
    mode: int = 0
    median: int = 0
    median_frequency: int = 0
    histogram_bins: int = 0
    mean: float = 0.0
    deviation: float = 0.0


def _half(total: int) -> int:
    """Halve an integer, truncating towards zero."""
    return -((-total) // 2) if total < 0 else total // 2


def median(sorted_numbers: list[int]) -> int:
    """Median of sorted integers; the mean of the middle two is truncated."""
    if not sorted_numbers:
        return 0
    mid = len(sorted_numbers) // 2
    if len(sorted_numbers) % 2 == 0:
        return _half(sorted_numbers[mid - 1] + sorted_numbers[mid])
    return sorted_numbers[mid]


def median_frequency(sorted_numbers: list[int], histogram: dict[int, int]) -> int:
    """Frequency of the median value according to ``histogram``."""
    if not sorted_numbers:
        return 0
    mid = len(sorted_numbers) // 2
    if len(sorted_numbers) % 2 == 0:
        return _half(
            histogram.get(sorted_numbers[mid - 1], 0) + histogram.get(sorted_numbers[mid], 0)
        )
    return histogram.get(sorted_numbers[mid], 0)


@dataclass
class SimpleStatBuilder:
    """Accumulates values into a SimpleStat."""

    sum: int = 0
    sqsum: int = 0
    count: int = 0

    def add(self, v: int) -> None:
        self.sum += v
        self.sqsum += v * v
        self.count += 1

    def build(self) -> SimpleStat:
        mean = self.sum / self.count if self.count else 0.0
        if self.count > 1:
            variance = (float(self.sqsum) - float(self.sum) * mean) / (self.count - 1.0)
        else:
            variance = 0.0
        deviation = math.sqrt(variance) if variance >= 0 else math.nan
        return SimpleStat(count=self.count, mean=mean, deviation=deviation)


@dataclass
class SampleStatBuilder:
    """Accumulates values into a SampleStat."""

    simple: SimpleStatBuilder = field(default_factory=SimpleStatBuilder)
    sequence: list[int] = field(default_factory=list)
    histogram: Counter = field(default_factory=Counter)

    def add(self, v: int) -> None:
        self.simple.add(v)
        self.histogram[v] += 1
        self.sequence.append(v)

    def build(self) -> SampleStat:
        simple = self.simple.build()
        self.sequence.sort()
        top = max(self.histogram.values(), default=0)
        mode = min((k for k, c in self.histogram.items() if c == top), default=0)
        return SampleStat(
            count=simple.count,
            mode=mode,
            median=median(self.sequence),
            median_frequency=median_frequency(self.sequence, self.histogram),
            histogram_bins=len(self.histogram),
            mean=simple.mean,
            deviation=simple.deviation,
        )

    def percentile(self, i: int) -> int:
        """The ``i``-th percentile of the values; meaningful after ``build``."""
        if not self.sequence:
            return 0
        return self.sequence[len(self.sequence) * i // 100]