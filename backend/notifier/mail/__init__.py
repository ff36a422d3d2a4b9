# backend/notifier/mail/__init__.py

"""
メール送信レイヤ。

構成:
- config: SMTP リレーの設定値（Office365 固定、環境変数で上書き可）
- client: smtplib による実送信
- service: Asana へのベストエフォート通知＋メール送信をまとめる MailDispatcher
"""
