#!/usr/bin/env python3
"""
予定CSVとデータ変換のテスト

テンプレートの読み込み、検証エラー、時刻・参加者の変換、結果の表形式変換をテストします。
"""

import sys
import os
import pytest
import pandas as pd

# プロジェクトルートをパスに追加
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from models.time_range import TimeRange, DAY_END, WHOLE_DAY
from models.meeting_models import Event
from algorithms.find_meeting_query import find_meeting_times
from utils.csv_utils import create_events_template, validate_csv_upload, validate_events_csv
from utils.data_converter import (
    parse_time_of_day,
    parse_attendees,
    convert_rows_to_events,
    convert_dataframe_to_events,
    create_meeting_request
)
from utils.schedule_converter import format_ranges, convert_ranges_to_dataframe, convert_events_to_dataframe
from utils.constants import RESULT_COLS


class TestParseTimeOfDay:
    """時刻変換のテスト"""

    def test_hh_mm(self):
        assert parse_time_of_day("08:30") == 510
        assert parse_time_of_day(" 0:00 ") == 0
        assert parse_time_of_day("24:00") == DAY_END

    def test_minutes(self):
        assert parse_time_of_day(540) == 540
        assert parse_time_of_day(540.0) == 540
        assert parse_time_of_day("540") == 540

    @pytest.mark.parametrize("value", ["25:00", "08:60", "ab:cd", "noon", -1, 1441, 30.5, None, float("nan")])
    def test_invalid(self, value):
        """不正な時刻のテスト"""
        with pytest.raises(ValueError):
            parse_time_of_day(value)


class TestParseAttendees:
    """参加者変換のテスト"""

    def test_comma_separated(self):
        assert parse_attendees("Person A, Person B,,") == ["Person A", "Person B"]

    def test_list_notation(self):
        assert parse_attendees("['Person A', 'Person B']") == ["Person A", "Person B"]
        assert parse_attendees(["Person A", " "]) == ["Person A"]

    def test_missing(self):
        assert parse_attendees(None) == []
        assert parse_attendees(float("nan")) == []


class TestEventsCsv:
    """予定CSVの検証テスト"""

    def test_template_is_valid(self):
        """テンプレートがそのまま読み込めるテスト"""
        ok, df, error = validate_csv_upload(create_events_template().encode("utf-8"))
        assert ok and error is None

        rows, errors = validate_events_csv(df)
        assert errors == []
        assert len(rows) == 4
        assert rows[0] == {"title": "Standup", "start": 480, "end": 510, "attendees": ["Person A"]}
        assert rows[3]["end"] == DAY_END
        assert rows[3]["attendees"] == ["Person D", "Person E"]

    def test_template_events_can_be_queried(self):
        """テンプレートの予定で会議候補を探索するテスト"""
        _, df, _ = validate_csv_upload(create_events_template().encode("utf-8"))
        rows, _ = validate_events_csv(df)
        events = convert_rows_to_events(rows)

        request = create_meeting_request(["Person A", "Person B"], ["Person C"], 30)
        assert find_meeting_times(events, request) == [TimeRange(0, 480), TimeRange(570, DAY_END)]

    def test_missing_columns(self):
        """必要な列の不足テスト"""
        ok, df, error = validate_csv_upload(b"title,start\nStandup,08:00\n")
        assert not ok
        assert df is None
        assert "end" in error and "attendees" in error

    def test_empty_file(self):
        """空ファイルのテスト"""
        ok, df, error = validate_csv_upload(b"")
        assert not ok
        assert error.startswith("CSV読み込みエラー")

    def test_invalid_rows_are_reported(self):
        """不正な行を読み飛ばしてエラーを記録するテスト"""
        content = (
            "title,start,end,attendees\n"
            "Good,09:00,10:00,Person A\n"
            "Bad time,9時,10:00,Person A\n"
            "Reversed,11:00,10:00,Person A\n"
            "Nobody,12:00,13:00,\n"
        ).encode("utf-8")
        _, df, _ = validate_csv_upload(content)
        rows, errors = validate_events_csv(df)

        assert [row["title"] for row in rows] == ["Good"]
        assert len(errors) == 3
        assert "Bad time" in errors[0]
        assert "Reversed" in errors[1]
        assert "Nobody" in errors[2]


class TestConverters:
    """変換機能のテスト"""

    def test_convert_dataframe_to_events(self):
        df = pd.DataFrame([
            {"title": "Standup", "start": "08:00", "end": "08:30", "attendees": "Person A,Person B"}
        ])
        events = convert_dataframe_to_events(df)
        assert events == [Event("Standup", TimeRange(480, 510), ["Person A", "Person B"])]

    def test_create_meeting_request_removes_mandatory_from_optional(self):
        """必須参加者は任意参加者から除外されるテスト"""
        request = create_meeting_request(["Person A", ""], ["Person A", "Person C"], "60")
        assert request.attendees == frozenset({"Person A"})
        assert request.optional_attendees == {"Person C"}
        assert request.duration == 60

    def test_convert_ranges_to_dataframe(self):
        df = convert_ranges_to_dataframe([TimeRange(0, 480), TimeRange(570, DAY_END)])
        assert list(df.columns) == RESULT_COLS
        assert df.to_dict("records") == [
            {"start": "00:00", "end": "08:00", "duration_minutes": 480},
            {"start": "09:30", "end": "24:00", "duration_minutes": 870},
        ]

    def test_convert_empty_ranges(self):
        df = convert_ranges_to_dataframe([])
        assert df.empty
        assert list(df.columns) == RESULT_COLS

    def test_format_ranges(self):
        assert format_ranges([WHOLE_DAY]) == ["00:00-24:00"]

    def test_convert_events_to_dataframe(self):
        df = convert_events_to_dataframe([Event("Standup", TimeRange(480, 510), ["Person B", "Person A"])])
        assert df.iloc[0]["attendees"] == "Person A, Person B"
        assert df.iloc[0]["start"] == "08:00"
