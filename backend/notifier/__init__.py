# backend/notifier/__init__.py
"""
Notifier gateway application package.

This package contains:
- main: FastAPI application entrypoint
- auth: localhost restriction, /login, rate limiting, session tokens
- notifications: /notifier endpoint and recipient validation
- mail: SMTP delivery and the best-effort Asana hand-off
- asana: Asana API client
- utils: environment config and the daily log file handler
"""
