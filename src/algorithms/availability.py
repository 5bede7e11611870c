"""
空き時間抽出モジュール

予定の集合と参加者の集合から、参加者が拘束されている時間帯（ビジー区間）と、
指定の所要時間を確保できる空きスロットを求めます。
"""

import logging
from enum import Enum
from typing import Iterable, List, Set

from models.time_range import TimeRange, DAY_END, START_OF_DAY, order_by_start, order_by_end
from models.meeting_models import Event

logger = logging.getLogger(__name__)


class OptionalCountPolicy(Enum):
    """任意参加者の不在数の数え方"""
    PER_EVENT = "per_event"        # 予定1件につき1回
    PER_ATTENDEE = "per_attendee"  # 予定に含まれる任意参加者1人につき1回


class AvailabilityExtractor:
    """ビジー区間と空きスロットの抽出"""

    def unavailable_intervals(self, events: Iterable[Event], attendees: Iterable[str]) -> List[TimeRange]:
        """
        参加者のいずれかを拘束する予定の時間帯を開始時刻順に返す

        同じ時間帯の予定が複数あっても1回だけ数えます。
        長さ0の予定は何も拘束しないため除外します。
        """
        attendees = set(attendees)
        busy: Set[TimeRange] = set()
        if not attendees:
            return []

        for event in events:
            if event.when.is_empty:
                continue
            if event.blocks_any(attendees):
                busy.add(event.when)

        return sorted(busy, key=order_by_start)

    def optional_busy_ranges(self, events: Iterable[Event], optional_attendees: Iterable[str],
                             policy: OptionalCountPolicy = OptionalCountPolicy.PER_EVENT) -> List[TimeRange]:
        """
        任意参加者の不在時間帯を終了時刻順に返す

        重み付けに使うため重複は除外しません。PER_ATTENDEEの場合は
        予定に含まれる任意参加者の人数分だけ同じ範囲を返します。
        """
        optional_attendees = set(optional_attendees)
        ranges = []
        for event in events:
            if event.when.is_empty:
                continue
            hits = len(event.attendees & optional_attendees)
            if hits == 0:
                continue
            if policy is OptionalCountPolicy.PER_ATTENDEE:
                ranges.extend([event.when] * hits)
            else:
                ranges.append(event.when)

        return sorted(ranges, key=order_by_end)

    def free_slots(self, busy_intervals: List[TimeRange], duration: int) -> List[TimeRange]:
        """
        開始時刻順のビジー区間から、所要時間以上の空きスロットを求める

        重なっている区間や連続する区間は first_available の更新で
        ひとつの拘束時間として扱われるため、事前のマージは不要です。
        """
        slots = []
        first_available = START_OF_DAY

        for busy in busy_intervals:
            gap = busy.start - first_available
            if gap > 0 and gap >= duration:
                slots.append(TimeRange(first_available, busy.start))
            first_available = max(first_available, busy.end)

        # 1日の終端までの残り（終端に達する範囲は終日扱い）
        remaining = DAY_END - first_available
        if remaining > 0 and remaining >= duration:
            slots.append(TimeRange(first_available, DAY_END))

        logger.debug("空きスロット抽出: ビジー区間 %d件 -> 候補 %d件", len(busy_intervals), len(slots))
        return slots
