"""
重み付き区間分割モジュール

必須参加者だけで求めた空きスロットに任意参加者の不在時間帯を重ね、
各スロットを「不在の任意参加者数が一様な」部分区間に分割します。
"""

import logging
from typing import Iterable, List

from models.time_range import TimeRange, order_by_start
from models.meeting_models import WeightedSlot

logger = logging.getLogger(__name__)


class WeightedPartition:
    """
    候補スロットの重み付き分割

    インスタンスは1回のクエリ専用です。クラス変数やモジュール変数に
    状態を持たせないこと（別のクエリの結果が混ざるため）。
    """

    def __init__(self, candidate_slots: Iterable[TimeRange]):
        self._slots: List[WeightedSlot] = [WeightedSlot(slot, 0) for slot in candidate_slots]

    def __len__(self) -> int:
        return len(self._slots)

    def add(self, busy: TimeRange):
        """任意参加者の不在時間帯を1件反映"""
        updated = []
        for slot in self._slots:
            if not slot.time_range.overlaps(busy):
                updated.append(slot)
            elif slot.time_range == busy:
                updated.append(slot.with_increment())
            else:
                updated.extend(self._split(slot, busy))

        # 走査中のリストは変更せず、作り直したリストと差し替える
        self._slots = updated

    def _split(self, slot: WeightedSlot, busy: TimeRange) -> List[WeightedSlot]:
        """重複の境界でスロットを前・重複部分・後ろの最大3つに分割"""
        overlap_start = max(slot.start, busy.start)
        overlap_end = min(slot.end, busy.end)

        pieces = [
            slot.with_range(TimeRange(slot.start, overlap_start)),
            WeightedSlot(TimeRange(overlap_start, overlap_end), slot.unavailable_count + 1),
            slot.with_range(TimeRange(overlap_end, slot.end)),
        ]
        return [piece for piece in pieces if not piece.time_range.is_empty]

    def as_ordered_list(self) -> List[WeightedSlot]:
        """開始時刻順のスロット一覧を返す"""
        return sorted(self._slots, key=lambda slot: order_by_start(slot.time_range))
