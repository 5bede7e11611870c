"""
定数定義モジュール

会議候補探索システムで使用する定数を定義します。
"""

# 予定CSVの列
EVENT_COLS = ["title", "start", "end", "attendees"]

# 結果表の列
RESULT_COLS = ["start", "end", "duration_minutes"]

# 所要時間の選択肢（分）
DURATION_CHOICES = [15, 30, 45, 60, 90, 120, 180, 240]
DEFAULT_DURATION_MINUTES = 30

# 任意参加者の不在数の数え方
OPTIONAL_COUNT_POLICY_CHOICES = {
    "per_event": "予定1件につき1回",
    "per_attendee": "任意参加者1人につき1回"
}
DEFAULT_OPTIONAL_COUNT_POLICY = "per_event"
