"""
CSV処理モジュール

予定CSVのテンプレート生成、検証、処理機能を提供します。
"""

import pandas as pd
from typing import List, Dict, Any, Tuple, Optional, Union
from io import BytesIO

from .constants import EVENT_COLS
from .data_converter import parse_time_of_day, parse_attendees


def create_events_template() -> str:
    """
    予定CSVテンプレートを生成

    Returns:
        予定CSVテンプレートの文字列
    """
    template_data = """title,start,end,attendees
Standup,08:00,08:30,Person A
Design review,09:00,09:30,Person B
Customer call,08:30,09:00,Person C
Focus time,09:30,24:00,"Person D,Person E"
"""
    return template_data


def validate_csv_upload(file_content: Union[bytes, BytesIO], required_columns: Optional[List[str]] = None,
                        file_type: str = "CSV") -> Tuple[bool, Optional[pd.DataFrame], Optional[str]]:
    """
    CSVファイルのアップロードを検証

    Args:
        file_content: アップロードされたファイルの内容
        required_columns: 必要な列名のリスト（Noneの場合は予定CSVの列）
        file_type: ファイルタイプ（エラーメッセージ用）

    Returns:
        (成功フラグ, DataFrame, エラーメッセージ)のタプル
    """
    if required_columns is None:
        required_columns = EVENT_COLS

    try:
        if isinstance(file_content, bytes):
            file_content = BytesIO(file_content)

        # 時刻列は "08:30" のまま文字列として読む
        df = pd.read_csv(file_content, dtype=str)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        return False, None, f"{file_type}読み込みエラー: {str(e)}"

    missing_columns = [col for col in required_columns if col not in df.columns]
    if missing_columns:
        return False, None, f"必要な列が不足しています: {missing_columns}"

    return True, df, None


def validate_events_csv(df: pd.DataFrame) -> Tuple[List[Dict[str, Any]], List[str]]:
    """
    予定CSVデータを検証して変換

    不正な行はエラーメッセージを記録して読み飛ばします。

    Args:
        df: 予定CSVのDataFrame

    Returns:
        (有効な予定データのリスト, エラーメッセージのリスト)のタプル
    """
    rows = []
    errors = []

    for index, row in df.iterrows():
        title = str(row.get("title", "")).strip() if pd.notna(row.get("title")) else ""
        label = title or f"{index + 1}行目"

        try:
            start = parse_time_of_day(row["start"])
            end = parse_time_of_day(row["end"])
            attendees = parse_attendees(row["attendees"])
        except (ValueError, SyntaxError) as e:
            errors.append(f"予定 {label}: 時刻または参加者の形式が不正です ({e})")
            continue

        if start > end:
            errors.append(f"予定 {label}: 開始時刻が終了時刻より後になっています")
            continue

        if not attendees:
            errors.append(f"予定 {label}: 参加者が設定されていません")
            continue

        rows.append({
            "title": title,
            "start": start,
            "end": end,
            "attendees": attendees
        })

    return rows, errors
