# backend/notifier/asana/__init__.py

"""
Asana 連携用モジュール群。

主な責務:
- 通知内容を Asana のタスクとして登録する（ベストエフォート）
- 失敗してもメール送信は止めない（呼び出し側の MailDispatcher で握りつぶす）
"""
