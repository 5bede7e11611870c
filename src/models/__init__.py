"""
モデル層

会議候補探索のデータ構造を提供します。
"""

from .time_range import (
    TimeRange,
    START_OF_DAY,
    END_OF_DAY,
    DAY_END,
    WHOLE_DAY,
    get_time_in_minutes,
    format_minutes,
    order_by_start,
    order_by_end
)
from .meeting_models import (
    Event,
    MeetingRequest,
    WeightedSlot
)

__all__ = [
    "TimeRange",
    "START_OF_DAY",
    "END_OF_DAY",
    "DAY_END",
    "WHOLE_DAY",
    "get_time_in_minutes",
    "format_minutes",
    "order_by_start",
    "order_by_end",
    "Event",
    "MeetingRequest",
    "WeightedSlot"
]
