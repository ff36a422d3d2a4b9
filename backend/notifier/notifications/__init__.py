# backend/notifier/notifications/__init__.py

"""
/notifier エンドポイント用モジュール群。

構成イメージ:
- schemas: リクエスト / レスポンスのスキーマ
- validation: 宛先の決定とメールアドレス形式チェック
- factory: アプリ全体で共有する MailDispatcher の生成
- router: /notifier エンドポイント
"""
