#!/usr/bin/env python3
"""
スロット最適化のテスト

不在数の最小化、短いスロットの統合、フォールバックの動作をテストします。
"""

import sys
import os
import math

# プロジェクトルートをパスに追加
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from models.time_range import TimeRange, DAY_END
from models.meeting_models import WeightedSlot
from algorithms.slot_optimizer import SlotOptimizer, SlotDecision


def slot(start, end, count):
    return WeightedSlot(TimeRange(start, end), count)


class TestSlotDecision:
    """スロット判定のテスト"""

    def test_accept_long_slot(self):
        """所要時間以上のスロットの採用テスト"""
        optimizer = SlotOptimizer()
        assert optimizer.decide(slot(0, 60, 1), None, [], math.inf, 30) is SlotDecision.ACCEPT
        assert optimizer.decide(slot(0, 60, 1), None, [], 1, 30) is SlotDecision.ACCEPT

    def test_drop_worse_long_slot(self):
        """不在数が多いスロットの不採用テスト"""
        optimizer = SlotOptimizer()
        assert optimizer.decide(slot(0, 60, 2), None, [slot(100, 200, 1)], 1, 30) is SlotDecision.DROP

    def test_extend_previous(self):
        """直前の採用スロットの延長テスト"""
        optimizer = SlotOptimizer()
        decision = optimizer.decide(slot(60, 70, 0), None, [slot(0, 60, 1)], 1, 30)
        assert decision is SlotDecision.EXTEND_PREVIOUS

    def test_merge_next(self):
        """次のスロットへの統合テスト"""
        optimizer = SlotOptimizer()
        decision = optimizer.decide(slot(0, 10, 1), slot(10, 20, 0), [], math.inf, 30)
        assert decision is SlotDecision.MERGE_NEXT

    def test_drop_isolated_short_slot(self):
        """隣接スロットのない短いスロットの不採用テスト"""
        optimizer = SlotOptimizer()
        assert optimizer.decide(slot(0, 10, 0), slot(20, 100, 0), [], math.inf, 30) is SlotDecision.DROP


class TestSlotOptimizer:
    """SlotOptimizerクラスのテスト"""

    def test_keeps_all_ties_and_displaces_worse(self):
        """最小不在数の同点スロットをすべて残すテスト"""
        optimizer = SlotOptimizer()
        slots = [slot(0, 60, 1), slot(100, 200, 0), slot(300, 400, 0), slot(500, 600, 1)]
        result = optimizer.optimize(slots, 30, [])
        assert result == [TimeRange(100, 200), TimeRange(300, 400)]

    def test_better_slot_later_in_day_wins(self):
        """後から見つかったより良いスロットが優先されるテスト"""
        optimizer = SlotOptimizer()
        slots = [slot(0, 480, 2), slot(540, 600, 2), slot(1320, DAY_END, 0)]
        assert optimizer.optimize(slots, 60, []) == [TimeRange(1320, DAY_END)]

    def test_fallback_when_nothing_qualifies(self):
        """採用できるスロットがない場合のフォールバックテスト"""
        optimizer = SlotOptimizer()
        fallback = [TimeRange(0, 20), TimeRange(100, 120)]
        slots = [slot(0, 10, 1), slot(100, 110, 1)]
        assert optimizer.optimize(slots, 20, fallback) == fallback

    def test_extends_previous_without_raising_count(self):
        """不在数を悪化させない短いスロットで延長するテスト"""
        optimizer = SlotOptimizer()
        slots = [slot(540, 900, 1), slot(900, 1020, 0)]
        assert optimizer.optimize(slots, 240, []) == [TimeRange(540, 1020)]

    def test_does_not_extend_with_worse_slot(self):
        """不在数が多い短いスロットでは延長しないテスト"""
        optimizer = SlotOptimizer()
        slots = [slot(0, 300, 0), slot(300, 320, 1)]
        assert optimizer.optimize(slots, 60, []) == [TimeRange(0, 300)]

    def test_merges_short_slots(self):
        """短いスロット同士を統合して所要時間を満たすテスト"""
        optimizer = SlotOptimizer()
        slots = [slot(510, 525, 1), slot(525, 540, 0)]
        assert optimizer.optimize(slots, 30, [TimeRange(510, 540)]) == [TimeRange(510, 540)]

    def test_does_not_spoil_better_next_slot(self):
        """短いスロットで次の良いスロットを悪化させないテスト"""
        optimizer = SlotOptimizer()
        slots = [slot(0, 10, 1), slot(10, DAY_END, 0)]
        assert optimizer.optimize(slots, 30, []) == [TimeRange(10, DAY_END)]

    def test_merges_into_next_when_harmless(self):
        """不在数が悪化しない場合は次のスロットに統合するテスト"""
        optimizer = SlotOptimizer()
        slots = [slot(0, 10, 0), slot(10, 100, 1), slot(200, 300, 1)]
        assert optimizer.optimize(slots, 30, []) == [TimeRange(0, 100), TimeRange(200, 300)]

    def test_merged_count_is_worst_of_pieces(self):
        """統合後の不在数が悪い方になるテスト"""
        optimizer = SlotOptimizer()
        # 統合された 00:00-00:30 は不在数2となり、不在数1のスロットに負ける
        slots = [slot(0, 15, 2), slot(15, 30, 0), slot(100, 200, 1)]
        assert optimizer.optimize(slots, 30, []) == [TimeRange(100, 200)]
