# backend/notifier/utils/__init__.py
