"""
ログ管理モジュール

このモジュールは、アプリケーション全体で使用されるログ機能を提供します。
設定（環境変数）と連携し、ログレベルと出力先を初期化します。

主な機能:
- コンソール出力（デバッグモードではカラー表示）
- ローテーション付きのログファイル出力
- 構造化ログ出力
"""

import logging
import logging.handlers
import sys
from typing import Optional

from .config import get_config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ColoredFormatter(logging.Formatter):
    """カラー付きログフォーマッター"""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def format(self, record):
        message = super().format(record)
        color = self.COLORS.get(record.levelname)
        if color is None:
            return message
        return f"{color}{message}{self.RESET}"


class StructuredFormatter(logging.Formatter):
    """構造化ログフォーマッター"""

    def format(self, record):
        log_entry = {
            'timestamp': self.formatTime(record, DATE_FORMAT),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage()
        }

        # log_extra_fields で渡された項目
        fields = getattr(record, 'fields', None)
        if fields:
            log_entry['fields'] = fields

        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)

        return str(log_entry)


class LoggerManager:
    """ログマネージャークラス"""

    def __init__(self):
        self._initialized = False

    def setup_logging(self, log_level: Optional[str] = None) -> None:
        """ログ設定を初期化（2回目以降は何もしない）"""
        if self._initialized:
            return

        config = get_config()
        if log_level is None:
            log_level = config.log_level
        numeric_level = getattr(logging, log_level.upper(), logging.INFO)

        root_logger = logging.getLogger()
        root_logger.setLevel(numeric_level)
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)

        self._setup_console_handler(root_logger, numeric_level, config.debug)
        self._setup_file_handler(root_logger, numeric_level, config)
        self._adjust_library_log_levels(config.debug)

        self._initialized = True
        logging.getLogger(__name__).info("ログシステムを初期化しました")

    def _setup_console_handler(self, logger: logging.Logger, level: int, debug: bool) -> None:
        """コンソールハンドラーを設定"""
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        formatter_class = ColoredFormatter if debug else logging.Formatter
        console_handler.setFormatter(formatter_class(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(console_handler)

    def _setup_file_handler(self, logger: logging.Logger, level: int, config) -> None:
        """ローテーティングファイルハンドラーを設定"""
        log_file = config.log_file
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_file,
            maxBytes=parse_size(config.log_max_size),
            backupCount=config.log_backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    def _adjust_library_log_levels(self, debug: bool) -> None:
        """外部ライブラリのログレベルを調整"""
        logging.getLogger('urllib3').setLevel(logging.WARNING)
        logging.getLogger('streamlit').setLevel(logging.INFO)

        if not debug:
            logging.getLogger('watchdog').setLevel(logging.WARNING)


def parse_size(size_str: str) -> int:
    """サイズ文字列（例: 10MB）をバイト数に変換"""
    size_str = size_str.strip().upper()
    units = {'KB': 1024, 'MB': 1024 ** 2, 'GB': 1024 ** 3}
    for suffix, multiplier in units.items():
        if size_str.endswith(suffix):
            return int(size_str[:-len(suffix)]) * multiplier
    return int(size_str)


# グローバルログマネージャーインスタンス
logger_manager = LoggerManager()


def setup_logging(log_level: Optional[str] = None) -> None:
    """ログ設定を初期化"""
    logger_manager.setup_logging(log_level)


def get_logger(name: str) -> logging.Logger:
    """指定された名前のロガーを取得"""
    return logging.getLogger(name)


def log_extra_fields(logger: logging.Logger, level: int, message: str, **kwargs) -> None:
    """追加フィールド付きでログを出力"""
    logger.log(level, f"{message} | {kwargs}", extra={'fields': kwargs})
