# backend/notifier/auth/__init__.py

"""
認証・アクセス制御まわり。

- access: localhost 以外からのリクエストを拒否するミドルウェア
- ratelimit: /login 用のレートリミッタ（slowapi）
- tokens: セッショントークン（JWT）の発行・検証
- dependencies: /notifier で使うトークン検証の Depends
- router: /login エンドポイント
"""
