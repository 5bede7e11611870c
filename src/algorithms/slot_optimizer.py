"""
スロット最適化モジュール

重み付き分割の結果を開始時刻順に1回走査し、任意参加者の不在数が最小となる
スロットを集めます。所要時間に満たない短い部分区間は、不在数を悪化させない
範囲で隣接スロットに統合します。
"""

import logging
import math
from enum import Enum
from typing import List, Optional, Sequence

from models.time_range import TimeRange
from models.meeting_models import WeightedSlot

logger = logging.getLogger(__name__)


class SlotDecision(Enum):
    """1スロットごとの判定結果"""
    ACCEPT = "accept"                    # 採用（最小不在数以下）
    EXTEND_PREVIOUS = "extend_previous"  # 直前の採用スロットを延長
    MERGE_NEXT = "merge_next"            # 次のスロットに統合して判定を持ち越す
    DROP = "drop"                        # 不採用


class SlotOptimizer:
    """任意参加者の不在数を最小化するスロット選択"""

    def decide(self, slot: WeightedSlot, next_slot: Optional[WeightedSlot],
               accepted: Sequence[WeightedSlot], best_count: float, duration: int) -> SlotDecision:
        """
        スロットの扱いを判定

        Args:
            slot: 判定対象のスロット
            next_slot: 次に処理されるスロット（なければNone）
            accepted: これまでに採用されたスロット
            best_count: 現在の最小不在数
            duration: 会議の所要時間

        Returns:
            判定結果
        """
        if slot.duration >= duration:
            if slot.unavailable_count <= best_count:
                return SlotDecision.ACCEPT
            return SlotDecision.DROP

        # 所要時間に満たないスロットは単独では使えない
        previous = accepted[-1] if accepted else None
        if (previous is not None and previous.end == slot.start
                and slot.unavailable_count <= previous.unavailable_count):
            return SlotDecision.EXTEND_PREVIOUS

        if next_slot is not None and next_slot.start == slot.end:
            # 次も短ければ統合で長さを稼ぎ、長ければ不在数を悪化させない場合のみ統合。
            # 統合後は大きい方の不在数を使うため、不在の任意参加者を少なく見積もらない
            if next_slot.duration < duration or slot.unavailable_count <= next_slot.unavailable_count:
                return SlotDecision.MERGE_NEXT

        return SlotDecision.DROP

    def optimize(self, weighted_slots: Sequence[WeightedSlot], duration: int,
                 fallback_slots: Sequence[TimeRange]) -> List[TimeRange]:
        """
        最小不在数のスロットを開始時刻順に返す

        採用できるスロットがなければ必須参加者のみの候補（fallback_slots）を
        そのまま返します。
        """
        slots = list(weighted_slots)
        accepted: List[WeightedSlot] = []
        best_count = math.inf
        carried: Optional[WeightedSlot] = None

        for index, slot in enumerate(slots):
            if carried is not None:
                # 統合後の不在数は常に両者の大きい方（次のスロットが短い場合も同じ）
                slot = WeightedSlot(
                    TimeRange(carried.start, slot.end),
                    max(carried.unavailable_count, slot.unavailable_count)
                )
                carried = None

            next_slot = slots[index + 1] if index + 1 < len(slots) else None
            decision = self.decide(slot, next_slot, accepted, best_count, duration)
            logger.debug("スロット %s (不在 %d): %s", slot.time_range, slot.unavailable_count, decision.value)

            if decision is SlotDecision.ACCEPT:
                if slot.unavailable_count < best_count:
                    # より良いスロットが見つかったらそれまでの採用分は破棄
                    accepted = []
                    best_count = slot.unavailable_count
                accepted.append(slot)
            elif decision is SlotDecision.EXTEND_PREVIOUS:
                previous = accepted[-1]
                accepted[-1] = previous.with_range(TimeRange(previous.start, slot.end))
            elif decision is SlotDecision.MERGE_NEXT:
                carried = slot

        if not accepted:
            logger.debug("採用可能なスロットがないため必須参加者のみの候補を返します")
            return list(fallback_slots)

        return [slot.time_range for slot in accepted]
