"""Adapters baseados em Django (ORM, views JSON, admin) e Celery."""
