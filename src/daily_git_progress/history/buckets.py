"""Fixed catalog of time-of-day buckets."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TimeBucket:
    name: str
    start_hour: int
    end_hour: int  # exclusive; smaller than start_hour when the range wraps midnight

    @property
    def wraps(self) -> bool:
        return self.start_hour > self.end_hour

    def contains(self, hour: int) -> bool:
        if self.wraps:
            return hour >= self.start_hour or hour < self.end_hour
        return self.start_hour <= hour < self.end_hour


EARLY_MORNING = TimeBucket("Early Morning", 7, 9)
MORNING = TimeBucket("Morning", 9, 11)
NOON = TimeBucket("Noon", 11, 13)
LUNCH = TimeBucket("Lunch", 13, 14)
AFTERNOON = TimeBucket("Afternoon", 14, 16)
EVENING = TimeBucket("Evening", 16, 18)
SUNSET = TimeBucket("Sunset", 18, 20)
NIGHT = TimeBucket("Night", 20, 7)

# Display order
TIME_BUCKETS: tuple[TimeBucket, ...] = (
    EARLY_MORNING,
    MORNING,
    NOON,
    LUNCH,
    AFTERNOON,
    EVENING,
    SUNSET,
    NIGHT,
)


def bucket_for_hour(hour: int) -> TimeBucket:
    """Return the bucket a local hour (0-23) falls into."""
    if not 0 <= hour < 24:
        raise ValueError(f"hour must be in [0, 24), got {hour}")

    # Night (8pm to 7am) matches through the wrapping branch of contains()
    return next(bucket for bucket in TIME_BUCKETS if bucket.contains(hour))


def bucket_for_timestamp(timestamp: int) -> TimeBucket:
    return bucket_for_hour(datetime.fromtimestamp(timestamp).hour)


def _format_hour(hour: int) -> str:
    if hour == 0:
        return "12am"
    if hour < 12:
        return f"{hour}am"
    if hour == 12:
        return "12pm"
    return f"{hour - 12}pm"


def format_interval(bucket: TimeBucket) -> str:
    """Render a bucket's hour range, e.g. ``"8pm-7am"``."""
    return f"{_format_hour(bucket.start_hour)}-{_format_hour(bucket.end_hour)}"
