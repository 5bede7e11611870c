"""
スケジュール変換モジュール

会議候補（TimeRangeのリスト）を表示・ダウンロード用の形式に変換します。
"""

import pandas as pd
from typing import Iterable, List

from models.time_range import TimeRange, format_minutes
from .constants import RESULT_COLS


def format_ranges(ranges: Iterable[TimeRange]) -> List[str]:
    """会議候補を "HH:MM-HH:MM" 形式の文字列リストに変換"""
    return [str(time_range) for time_range in ranges]


def convert_ranges_to_dataframe(ranges: Iterable[TimeRange]) -> pd.DataFrame:
    """
    会議候補を表形式に変換

    Args:
        ranges: 会議候補のリスト

    Returns:
        開始・終了（HH:MM）と長さ（分）を列に持つDataFrame
    """
    records = [
        {
            "start": format_minutes(time_range.start),
            "end": format_minutes(time_range.end),
            "duration_minutes": time_range.duration
        }
        for time_range in ranges
    ]
    return pd.DataFrame(records, columns=RESULT_COLS)


def convert_events_to_dataframe(events: Iterable) -> pd.DataFrame:
    """予定一覧をプレビュー用の表形式に変換"""
    records = [
        {
            "title": event.title,
            "start": format_minutes(event.when.start),
            "end": format_minutes(event.when.end),
            "attendees": ", ".join(sorted(event.attendees))
        }
        for event in events
    ]
    return pd.DataFrame(records, columns=["title", "start", "end", "attendees"])
