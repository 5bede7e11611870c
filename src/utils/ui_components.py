"""
UIコンポーネントモジュール

Streamlitアプリケーションで使用する共通UIコンポーネントを提供します。
"""

import streamlit as st
import pandas as pd
from datetime import datetime
from typing import List, Tuple
from io import StringIO

from models.time_range import TimeRange
from models.meeting_models import Event
from .constants import DURATION_CHOICES, OPTIONAL_COUNT_POLICY_CHOICES
from .schedule_converter import convert_ranges_to_dataframe, convert_events_to_dataframe


def create_request_input_form(attendees: List[str], default_duration: int) -> Tuple[List[str], List[str], int]:
    """
    会議リクエスト入力フォームを作成

    Args:
        attendees: 予定に登場する参加者のリスト
        default_duration: 既定の所要時間（分）

    Returns:
        (必須参加者, 任意参加者, 所要時間)のタプル
    """
    mandatory = st.sidebar.multiselect("必須参加者", attendees, default=attendees[:1])
    optional = st.sidebar.multiselect(
        "任意参加者", [name for name in attendees if name not in mandatory]
    )
    choices = sorted(set(DURATION_CHOICES) | {default_duration})
    duration = st.sidebar.selectbox("所要時間（分）", choices, index=choices.index(default_duration))
    return mandatory, optional, duration


def select_optional_count_policy(default_policy: str) -> str:
    """任意参加者の不在数の数え方を選択"""
    keys = list(OPTIONAL_COUNT_POLICY_CHOICES)
    return st.sidebar.radio(
        "不在数の数え方",
        keys,
        index=keys.index(default_policy),
        format_func=lambda key: OPTIONAL_COUNT_POLICY_CHOICES[key]
    )


def display_events_preview(events: List[Event]) -> None:
    """予定一覧のプレビューを表示"""
    st.subheader("📅 予定プレビュー")
    st.dataframe(convert_events_to_dataframe(events), use_container_width=True)


def display_meeting_ranges(ranges: List[TimeRange]) -> pd.DataFrame:
    """
    会議候補を表示

    Returns:
        表示した会議候補のDataFrame
    """
    st.subheader("🕒 会議候補")
    result_df = convert_ranges_to_dataframe(ranges)
    if result_df.empty:
        st.warning("条件を満たす時間帯がありません")
    else:
        st.dataframe(result_df, use_container_width=True)
    return result_df


def create_download_button(data: pd.DataFrame, button_text: str, filename: str) -> None:
    """CSVダウンロードボタンを作成"""
    csv_data = StringIO()
    data.to_csv(csv_data, index=False)
    st.download_button(
        button_text,
        csv_data.getvalue(),
        file_name=filename,
        mime="text/csv"
    )


def generate_filename(prefix: str, suffix: str = "") -> str:
    """タイムスタンプ付きのファイル名を生成"""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M")
    base_filename = f"{prefix}_{timestamp}"
    if suffix:
        base_filename += f"_{suffix}"
    return f"{base_filename}.csv"
