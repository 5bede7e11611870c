import streamlit as st
import pandas as pd
from io import StringIO
import sys
import os

# プロジェクトルートをパスに追加
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from algorithms.find_meeting_query import find_meeting_times
from utils.config import get_config
from utils.logger import setup_logging, get_logger
from utils.csv_utils import create_events_template, validate_csv_upload, validate_events_csv
from utils.data_converter import convert_rows_to_events, create_meeting_request
from utils.ui_components import (
    create_request_input_form, select_optional_count_policy, display_events_preview,
    display_meeting_ranges, create_download_button, generate_filename
)

setup_logging()
logger = get_logger(__name__)
config = get_config()

st.title(f"🗓️ {config.app_name}")

# ---------- Sidebar：予定CSV 入力 ----------
st.sidebar.header("1️⃣ 予定：CSV アップロード")
template = create_events_template()
st.sidebar.download_button("テンプレートDL", template,
                           file_name="events_template.csv", mime="text/csv")

up_file = st.sidebar.file_uploader("CSV をアップロード", type="csv",
                                   help="未アップロードの場合は既定の予定ファイルを使用します")

if up_file:
    ok, events_df, error = validate_csv_upload(up_file.getvalue())
    if not ok:
        st.error(error)
        st.info("テンプレートをダウンロードして正しい形式でアップロードしてください")
        st.stop()
    st.success("CSV 読込完了 ✅")
elif config.events_file.exists():
    st.info(f"CSV 未アップロード → {config.events_file} の予定を使用")
    events_df = pd.read_csv(config.events_file, dtype=str)
else:
    st.info("CSV 未アップロード → テンプレートの予定を使用")
    events_df = pd.read_csv(StringIO(template), dtype=str)

rows, errors = validate_events_csv(events_df)
for error in errors:
    st.warning(error)
events = convert_rows_to_events(rows)
display_events_preview(events)

# ---------- Sidebar：会議リクエスト ----------
st.sidebar.header("2️⃣ 会議リクエスト")
attendees = sorted({name for event in events for name in event.attendees})
mandatory, optional, duration = create_request_input_form(attendees, config.default_meeting_duration)
policy = select_optional_count_policy(config.optional_count_policy)

# ---------- 実行ボタン ----------
if st.button("🔍 会議候補を探す"):
    request = create_meeting_request(mandatory, optional, duration)
    ranges = find_meeting_times(events, request, policy)
    logger.info(f"会議候補を表示します: {len(ranges)}件")

    result_df = display_meeting_ranges(ranges)
    if not result_df.empty:
        create_download_button(result_df, "会議候補 CSV DL", generate_filename("meeting_ranges"))
