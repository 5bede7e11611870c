"""
1日分の時間範囲モデル

このモジュールは、会議候補の探索で使用する半開区間 [start, end) を提供します。
時刻は0時からの経過分（0〜1440）で表現し、1日の終端に達する範囲は
「終日」範囲と同様に1日の最後の瞬間まで含むものとして扱います。
"""

from dataclasses import dataclass
from typing import Tuple

# 1日の時間定義（分単位）
START_OF_DAY = 0
END_OF_DAY = 23 * 60 + 59  # 1日の最後の1分（inclusive指定で使用）
DAY_END = 24 * 60          # 1日の分数


def get_time_in_minutes(hours: int, minutes: int) -> int:
    """時・分を0時からの経過分に変換"""
    if not (0 <= hours < 24) or not (0 <= minutes < 60):
        raise ValueError(f"時刻が範囲外です: {hours}:{minutes:02d}")
    return hours * 60 + minutes


def format_minutes(minutes: int) -> str:
    """経過分を HH:MM 形式に変換（1日の終端は 24:00）"""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


@dataclass(frozen=True)
class TimeRange:
    """1日の中の半開区間 [start, end)"""
    start: int
    end: int

    def __post_init__(self):
        """範囲作成後の検証"""
        if not isinstance(self.start, int) or not isinstance(self.end, int):
            raise ValueError(f"開始・終了は整数（分）である必要があります: {self.start!r}, {self.end!r}")
        if self.start < START_OF_DAY or self.end > DAY_END:
            raise ValueError(f"範囲が1日の外にあります: [{self.start}, {self.end})")
        if self.start > self.end:
            raise ValueError(f"開始が終了より後になっています: [{self.start}, {self.end})")

    @classmethod
    def from_start_end(cls, start: int, end: int, inclusive: bool) -> 'TimeRange':
        """開始・終了から範囲を作成（inclusiveの場合は終了の1分を含める）"""
        return cls(start, end + 1 if inclusive else end)

    @classmethod
    def from_start_duration(cls, start: int, duration: int) -> 'TimeRange':
        """開始と長さから範囲を作成"""
        return cls(start, start + duration)

    @property
    def duration(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    @property
    def reaches_end_of_day(self) -> bool:
        """1日の終端まで続く範囲か（終端を閉区間として扱う範囲）"""
        return self.end == DAY_END

    def contains_point(self, minute: int) -> bool:
        """指定時刻が範囲内にあるかチェック"""
        if self.reaches_end_of_day and minute == DAY_END:
            return True
        return self.start <= minute < self.end

    def contains(self, other: 'TimeRange') -> bool:
        """他の範囲が完全にこの範囲内にあるかチェック"""
        if other.is_empty:
            # 長さ0の範囲は時刻として扱う
            return self.contains_point(other.start)
        return self.start <= other.start and other.end <= self.end

    def overlaps(self, other: 'TimeRange') -> bool:
        """他の範囲と重複するかチェック（長さ0の範囲は何とも重複しない）"""
        if self.is_empty or other.is_empty:
            return False
        return self.start < other.end and other.start < self.end

    def __str__(self) -> str:
        return f"{format_minutes(self.start)}-{format_minutes(self.end)}"


def order_by_start(time_range: TimeRange) -> Tuple[int, int]:
    """開始時刻の昇順ソートキー"""
    return (time_range.start, time_range.end)


def order_by_end(time_range: TimeRange) -> Tuple[int, int]:
    """終了時刻の昇順ソートキー"""
    return (time_range.end, time_range.start)


WHOLE_DAY = TimeRange.from_start_end(START_OF_DAY, END_OF_DAY, True)
