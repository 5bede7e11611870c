"""
データ変換モジュール

CSVや画面入力から得た予定データを Event / MeetingRequest に変換します。
"""

import ast
from typing import Any, Dict, Iterable, List

import pandas as pd

from models.time_range import TimeRange, DAY_END
from models.meeting_models import Event, MeetingRequest


def parse_time_of_day(value: Any) -> int:
    """
    時刻を0時からの経過分に変換

    Args:
        value: "HH:MM" 形式の文字列（終端は "24:00"）または経過分の数値

    Returns:
        経過分
    """
    if isinstance(value, str):
        text = value.strip()
        if ":" in text:
            hours_str, minutes_str = text.split(":", 1)
            hours, minutes = int(hours_str), int(minutes_str)
            if not (0 <= minutes < 60):
                raise ValueError(f"分の値が不正です: {value}")
            total = hours * 60 + minutes
        else:
            total = int(text)
    elif isinstance(value, bool) or pd.isna(value):
        raise ValueError(f"時刻が指定されていません: {value!r}")
    else:
        if float(value) != int(value):
            raise ValueError(f"時刻は分単位の整数である必要があります: {value}")
        total = int(value)

    if not (0 <= total <= DAY_END):
        raise ValueError(f"時刻が1日の範囲外です: {value}")
    return total


def parse_attendees(value: Any) -> List[str]:
    """カンマ区切り文字列またはリスト表記を参加者リストに変換"""
    if isinstance(value, (list, tuple, set, frozenset)):
        names = [str(name) for name in value]
    elif value is None or pd.isna(value):
        return []
    else:
        text = str(value).strip()
        if text.startswith('[') and text.endswith(']'):
            # リスト形式の場合
            names = [str(name) for name in ast.literal_eval(text)]
        else:
            names = text.split(',')
    return [name.strip() for name in names if name.strip()]


def convert_rows_to_events(rows: Iterable[Dict[str, Any]]) -> List[Event]:
    """
    辞書形式の予定データをEventオブジェクトに変換

    Args:
        rows: title / start / end / attendees を持つ辞書のリスト

    Returns:
        Eventオブジェクトのリスト
    """
    events = []
    for row in rows:
        when = TimeRange(parse_time_of_day(row["start"]), parse_time_of_day(row["end"]))
        events.append(Event(
            title=str(row.get("title", "")),
            when=when,
            attendees=frozenset(parse_attendees(row.get("attendees")))
        ))
    return events


def convert_dataframe_to_events(df: pd.DataFrame) -> List[Event]:
    """予定DataFrameをEventオブジェクトに変換"""
    return convert_rows_to_events(df.to_dict("records"))


def create_meeting_request(mandatory: Iterable[str], optional: Iterable[str], duration: int) -> MeetingRequest:
    """
    画面入力から会議リクエストを作成

    必須参加者として指定された人は任意参加者から除外します。
    """
    mandatory = [name for name in mandatory if name]
    request = MeetingRequest(frozenset(mandatory), int(duration))
    for name in optional:
        if name and name not in request.attendees:
            request.add_optional_attendee(name)
    return request
