#!/usr/bin/env python3
"""
会議候補探索システム - メインエントリーポイント

このファイルは、Streamlitアプリを起動するためのメインエントリーポイントです。
"""

import sys
import os

# プロジェクトルートをパスに追加
sys.path.append(os.path.join(os.path.dirname(__file__), 'src'))

if __name__ == "__main__":
    import streamlit.web.cli as stcli
    from utils.config import get_config

    config = get_config()
    app_path = os.path.join(os.path.dirname(__file__), "src", "app", "streamlit_meeting_finder_demo.py")

    if os.path.exists(app_path):
        print("🚀 会議候補探索システムを起動中...")
        print(f"📁 アプリケーションパス: {app_path}")
        print(f"🌐 ブラウザで http://localhost:{config.streamlit_server_port} にアクセスしてください")

        sys.argv = [
            "streamlit", "run", app_path,
            f"--server.port={config.streamlit_server_port}",
            f"--server.address={config.streamlit_server_address}"
        ]
        sys.exit(stcli.main())
    else:
        print(f"❌ エラー: アプリケーションファイルが見つかりません: {app_path}")
        sys.exit(1)
