"""
ユーティリティパッケージ

このパッケージは、アプリケーション全体で使用される共通機能を提供します。
設定管理、ログ機能、データ変換、CSV操作などのユーティリティが含まれています。
"""

# 設定管理とログ機能
from .config import get_config, reload_config, AppConfig
from .logger import setup_logging, get_logger, log_extra_fields

from .schedule_converter import (
    format_ranges,
    convert_ranges_to_dataframe,
    convert_events_to_dataframe
)
from .data_converter import (
    parse_time_of_day,
    parse_attendees,
    convert_rows_to_events,
    convert_dataframe_to_events,
    create_meeting_request
)
from .csv_utils import (
    create_events_template,
    validate_csv_upload,
    validate_events_csv
)
from .constants import (
    EVENT_COLS,
    RESULT_COLS,
    DURATION_CHOICES,
    DEFAULT_DURATION_MINUTES,
    OPTIONAL_COUNT_POLICY_CHOICES,
    DEFAULT_OPTIONAL_COUNT_POLICY
)

__all__ = [
    # 設定管理とログ機能
    'get_config',
    'reload_config',
    'AppConfig',
    'setup_logging',
    'get_logger',
    'log_extra_fields',

    # 会議候補の変換
    'format_ranges',
    'convert_ranges_to_dataframe',
    'convert_events_to_dataframe',

    # データ変換機能
    'parse_time_of_day',
    'parse_attendees',
    'convert_rows_to_events',
    'convert_dataframe_to_events',
    'create_meeting_request',

    # CSV処理機能
    'create_events_template',
    'validate_csv_upload',
    'validate_events_csv',

    # 定数
    'EVENT_COLS',
    'RESULT_COLS',
    'DURATION_CHOICES',
    'DEFAULT_DURATION_MINUTES',
    'OPTIONAL_COUNT_POLICY_CHOICES',
    'DEFAULT_OPTIONAL_COUNT_POLICY'
]
