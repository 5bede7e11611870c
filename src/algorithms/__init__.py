"""
アルゴリズム層

会議候補探索アルゴリズムの実装を提供します。
"""

from .availability import AvailabilityExtractor, OptionalCountPolicy
from .weighted_partition import WeightedPartition
from .slot_optimizer import SlotOptimizer, SlotDecision
from .find_meeting_query import FindMeetingQuery, find_meeting_times

__all__ = [
    "AvailabilityExtractor",
    "OptionalCountPolicy",
    "WeightedPartition",
    "SlotOptimizer",
    "SlotDecision",
    "FindMeetingQuery",
    "find_meeting_times"
]
