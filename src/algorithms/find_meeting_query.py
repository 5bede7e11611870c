"""
会議候補探索クエリ

予定とリクエストから、必須参加者全員が参加でき、かつ任意参加者が
できるだけ多く参加できる時間帯を求めます。
"""

import logging
from typing import Iterable, List, Optional, Union

from models.time_range import TimeRange, DAY_END, WHOLE_DAY
from models.meeting_models import Event, MeetingRequest
from .availability import AvailabilityExtractor, OptionalCountPolicy
from .weighted_partition import WeightedPartition
from .slot_optimizer import SlotOptimizer

logger = logging.getLogger(__name__)


class FindMeetingQuery:
    """会議候補探索"""

    def __init__(self, policy: Union[OptionalCountPolicy, str] = OptionalCountPolicy.PER_EVENT):
        # 文字列指定（設定ファイル由来）も受け付ける。不正な値はValueError
        self.policy = OptionalCountPolicy(policy)
        self.extractor = AvailabilityExtractor()
        self.optimizer = SlotOptimizer()

    def query(self, events: Iterable[Event], request: MeetingRequest) -> List[TimeRange]:
        """会議を開催できる時間帯を開始時刻順に返す"""
        events = list(events)
        duration = request.duration

        if duration < 0 or duration > DAY_END:
            logger.info("所要時間 %d分 は1日に収まらないため候補なし", duration)
            return []
        if duration == 0:
            return [WHOLE_DAY]

        mandatory_busy = self.extractor.unavailable_intervals(events, request.attendees)
        candidate_slots = self.extractor.free_slots(mandatory_busy, duration)

        if not request.optional_attendees or not candidate_slots:
            self._log_result(request, candidate_slots)
            return candidate_slots

        # 分割状態はクエリごとに新しく作る
        partition = WeightedPartition(candidate_slots)
        for busy in self.extractor.optional_busy_ranges(events, request.optional_attendees, self.policy):
            partition.add(busy)
        logger.debug("重み付き分割: 候補 %d件 -> %d件", len(candidate_slots), len(partition))

        result = self.optimizer.optimize(partition.as_ordered_list(), duration, candidate_slots)
        self._log_result(request, result)
        return result

    def _log_result(self, request: MeetingRequest, result: List[TimeRange]):
        logger.info(
            "会議候補探索: 必須 %d名, 任意 %d名, %d分 -> %d件",
            len(request.attendees), len(request.optional_attendees), request.duration, len(result)
        )
        logger.debug("候補: %s", ", ".join(str(time_range) for time_range in result))


def find_meeting_times(events: Iterable[Event], request: MeetingRequest,
                       policy: Optional[Union[OptionalCountPolicy, str]] = None) -> List[TimeRange]:
    """会議候補探索（既定の数え方は予定1件につき1回）"""
    if policy is None:
        policy = OptionalCountPolicy.PER_EVENT
    return FindMeetingQuery(policy).query(events, request)
