"""
Configuração do Django App para Usuários.
"""

from django.apps import AppConfig


class UsersConfig(AppConfig):
    """Configuração do app Usuários."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'userhub.adapters.django_app.users'
    label = 'users'
    verbose_name = 'Gestão de Usuários'
