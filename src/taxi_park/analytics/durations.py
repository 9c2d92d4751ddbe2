# taxi_park/analytics/durations.py
from collections import Counter

from taxi_park.domain.park import TaxiPark

PERIOD_MIN = 10


def duration_period(duration: int, period: int = PERIOD_MIN) -> range:
    """Bin holding `duration`: range(start, start + period), so 12 -> range(10, 20) i.e. 10..19."""
    start = (duration // period) * period
    return range(start, start + period)


def find_most_frequent_trip_duration_period(
    park: TaxiPark, period: int = PERIOD_MIN
) -> range | None:
    """
    Most frequent trip-duration period among 0..9, 10..19, 20..29, ...
    Returns None if there are no trips. When several periods tie, the one
    starting lowest wins, though callers should accept any of the maxima.
    """
    if period <= 0:
        raise ValueError(f"period must be > 0, got {period}")
    if not park.trips:
        return None
    counts = Counter(duration_period(d, period) for d in sorted(t.duration for t in park.trips))
    # Counter.most_common keeps insertion order among equal counts
    best, _ = counts.most_common(1)[0]
    return best
