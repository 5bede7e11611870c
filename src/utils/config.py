"""
設定管理モジュール

このモジュールは、アプリケーション全体で使用される設定値を管理します。
環境変数から値を読み込み、適切なデフォルト値を提供します。
direnvとの連携を考慮し、開発環境での設定管理を簡素化します。

主な機能:
- 環境変数からの設定値読み込み
- デフォルト値の提供
- 設定値の検証
"""

import os
import logging
from typing import Optional
from dataclasses import dataclass
from pathlib import Path

from .constants import (
    DEFAULT_DURATION_MINUTES,
    DEFAULT_OPTIONAL_COUNT_POLICY,
    OPTIONAL_COUNT_POLICY_CHOICES
)


@dataclass
class AppConfig:
    """アプリケーション設定クラス"""

    # アプリケーション基本設定
    app_name: str
    app_version: str
    debug: bool
    log_level: str

    # Streamlit設定
    streamlit_server_port: int
    streamlit_server_address: str

    # 会議候補探索の設定
    default_meeting_duration: int
    optional_count_policy: str

    # ファイルパス設定
    data_dir: Path
    events_file: Path

    # ログ設定
    log_file: Path
    log_max_size: str
    log_backup_count: int


class ConfigManager:
    """設定管理クラス"""

    def __init__(self):
        self._config: Optional[AppConfig] = None
        self._logger = logging.getLogger(__name__)

    def load_config(self) -> AppConfig:
        """環境変数から設定を読み込み、AppConfigオブジェクトを返す"""
        if self._config is None:
            self._config = self._create_config()
        return self._config

    def _create_config(self) -> AppConfig:
        """環境変数から設定オブジェクトを作成"""
        errors = []

        config = AppConfig(
            app_name=os.getenv('APP_NAME', 'Meeting Finder'),
            app_version=os.getenv('APP_VERSION', '0.1.0'),
            debug=self._parse_bool(os.getenv('DEBUG', 'false')),
            log_level=os.getenv('LOG_LEVEL', 'INFO'),
            streamlit_server_port=self._parse_int('STREAMLIT_SERVER_PORT', '8501', errors),
            streamlit_server_address=os.getenv('STREAMLIT_SERVER_ADDRESS', '0.0.0.0'),
            default_meeting_duration=self._parse_int(
                'DEFAULT_MEETING_DURATION', str(DEFAULT_DURATION_MINUTES), errors),
            optional_count_policy=os.getenv('OPTIONAL_COUNT_POLICY', DEFAULT_OPTIONAL_COUNT_POLICY).strip().lower(),
            data_dir=Path(os.getenv('DATA_DIR', './data')),
            events_file=Path(os.getenv('EVENTS_FILE', './data/events/events_default.csv')),
            log_file=Path(os.getenv('LOG_FILE', './logs/app.log')),
            log_max_size=os.getenv('LOG_MAX_SIZE', '10MB'),
            log_backup_count=self._parse_int('LOG_BACKUP_COUNT', '5', errors)
        )

        self._validate_config(config, errors)
        self._log_config_summary(config)
        return config

    def _parse_bool(self, value: str) -> bool:
        """文字列をブール値に変換"""
        return value.lower() in ('true', '1', 'yes', 'on')

    def _parse_int(self, name: str, default: str, errors: list) -> int:
        """環境変数を整数に変換（変換できなければエラーに記録）"""
        value = os.getenv(name, default)
        try:
            return int(value)
        except ValueError:
            errors.append(f"{name}は整数である必要があります: {value}")
            return int(default)

    def _validate_config(self, config: AppConfig, errors: list) -> None:
        """設定値の検証"""
        if not config.data_dir.exists():
            self._logger.warning(f"データディレクトリが存在しません: {config.data_dir}")

        if not (0 < config.default_meeting_duration <= 24 * 60):
            errors.append("DEFAULT_MEETING_DURATIONは1〜1440の値である必要があります")

        if config.optional_count_policy not in OPTIONAL_COUNT_POLICY_CHOICES:
            choices = ", ".join(OPTIONAL_COUNT_POLICY_CHOICES)
            errors.append(f"OPTIONAL_COUNT_POLICYは {choices} のいずれかである必要があります")

        if config.log_backup_count < 0:
            errors.append("LOG_BACKUP_COUNTは0以上の値である必要があります")

        if not (0 < config.streamlit_server_port < 65536):
            errors.append("STREAMLIT_SERVER_PORTは1〜65535の値である必要があります")

        # エラーがあれば例外を発生
        if errors:
            error_msg = "設定エラー:\n" + "\n".join(f"- {error}" for error in errors)
            raise ValueError(error_msg)

    def _log_config_summary(self, config: AppConfig) -> None:
        """設定の要約をログに出力"""
        self._logger.info("アプリケーション設定を読み込みました:")
        self._logger.info(f"  アプリ名: {config.app_name} v{config.app_version}")
        self._logger.info(f"  デバッグモード: {config.debug}")
        self._logger.info(f"  ログレベル: {config.log_level}")
        self._logger.info(f"  不在数の数え方: {config.optional_count_policy}")
        self._logger.info(f"  Streamlit: {config.streamlit_server_address}:{config.streamlit_server_port}")
        self._logger.info(f"  ログファイル: {config.log_file}")


# グローバル設定インスタンス
config_manager = ConfigManager()


def get_config() -> AppConfig:
    """設定オブジェクトを取得"""
    return config_manager.load_config()


def reload_config() -> AppConfig:
    """設定を再読み込み"""
    config_manager._config = None
    return config_manager.load_config()
