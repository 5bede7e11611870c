"""
会議スケジューリング用のデータ構造とクラス定義

予定（Event）、会議リクエスト（MeetingRequest）、および
任意参加者の不在数で重み付けされた候補スロット（WeightedSlot）を提供します。
"""

from dataclasses import dataclass, field, replace
from typing import FrozenSet, Iterable, Set

from .time_range import TimeRange


@dataclass(frozen=True)
class Event:
    """参加者の時間を拘束する予定"""
    title: str
    when: TimeRange
    attendees: FrozenSet[str] = frozenset()

    def __post_init__(self):
        """予定作成後の検証"""
        if not isinstance(self.when, TimeRange):
            raise TypeError("予定の時間はTimeRangeである必要があります")
        # リストや集合で渡された参加者を不変集合にそろえる
        object.__setattr__(self, "attendees", frozenset(self.attendees))

    def blocks_any(self, attendees: Iterable[str]) -> bool:
        """指定された参加者の誰かを拘束するかチェック"""
        return not self.attendees.isdisjoint(attendees)


@dataclass
class MeetingRequest:
    """会議リクエスト（必須参加者・任意参加者・所要時間）"""
    attendees: FrozenSet[str]
    duration: int
    optional_attendees: Set[str] = field(default_factory=set)

    def __post_init__(self):
        """リクエスト作成後の検証"""
        if isinstance(self.duration, bool) or not isinstance(self.duration, int):
            raise TypeError(f"所要時間は整数（分）である必要があります: {self.duration!r}")
        self.attendees = frozenset(self.attendees)
        self.optional_attendees = set(self.optional_attendees)

    def add_optional_attendee(self, attendee: str):
        """任意参加者を追加"""
        self.optional_attendees.add(attendee)


@dataclass(frozen=True)
class WeightedSlot:
    """任意参加者の不在数付きの候補スロット"""
    time_range: TimeRange
    unavailable_count: int = 0

    @property
    def start(self) -> int:
        return self.time_range.start

    @property
    def end(self) -> int:
        return self.time_range.end

    @property
    def duration(self) -> int:
        return self.time_range.duration

    def with_increment(self) -> 'WeightedSlot':
        """不在数を1増やしたスロットを返す"""
        return replace(self, unavailable_count=self.unavailable_count + 1)

    def with_range(self, time_range: TimeRange) -> 'WeightedSlot':
        """不在数はそのままに範囲だけ差し替えたスロットを返す"""
        return replace(self, time_range=time_range)
