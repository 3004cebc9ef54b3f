"""UserHub - cadastro de usuários em Clean Architecture (Django)."""

__version__ = "0.1.0"
