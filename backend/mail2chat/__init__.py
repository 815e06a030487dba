# backend/mail2chat/__init__.py
"""
Mail2Chat: メール形式のメッセージをチャット通知へ変換して転送するパッケージ。

This package contains:
- mail: 入力となるメール系メッセージ（Email / EmailMessage / RawMessage）
- notifications: チャット通知スキーマ・トランスポート・変換ハンドラ
- utils: 環境変数読み取りなどの共通ユーティリティ
"""
