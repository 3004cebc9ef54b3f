"""
Configurações globais do Pytest para UserHub.

Este arquivo é carregado automaticamente pelo pytest e fornece:
- Django settings para testes (SQLite em memória)
- Fixtures compartilhadas entre core e adapters
"""

import pytest

from userhub.core.users.entities import UserEntity
from userhub.core.users.ports import InMemoryUserRepository


def pytest_configure(config):
    """Configura Django antes da coleta dos testes."""
    import django
    from django.conf import settings

    if not settings.configured:
        settings.configure(
            DEBUG=True,
            SECRET_KEY='test-secret-key',
            DATABASES={
                'default': {
                    'ENGINE': 'django.db.backends.sqlite3',
                    'NAME': ':memory:',
                }
            },
            INSTALLED_APPS=[
                'django.contrib.admin',
                'django.contrib.auth',
                'django.contrib.contenttypes',
                'django.contrib.sessions',
                'django.contrib.messages',
                'userhub.adapters.django_app.users',
            ],
            MIDDLEWARE=[
                'django.contrib.sessions.middleware.SessionMiddleware',
                'django.middleware.common.CommonMiddleware',
                'django.contrib.auth.middleware.AuthenticationMiddleware',
                'django.contrib.messages.middleware.MessageMiddleware',
            ],
            TEMPLATES=[{
                'BACKEND': 'django.template.backends.django.DjangoTemplates',
                'DIRS': [],
                'APP_DIRS': True,
                'OPTIONS': {
                    'context_processors': [
                        'django.template.context_processors.request',
                        'django.contrib.auth.context_processors.auth',
                        'django.contrib.messages.context_processors.messages',
                    ],
                },
            }],
            ROOT_URLCONF='userhub.config.urls',
            DEFAULT_AUTO_FIELD='django.db.models.BigAutoField',
            USE_TZ=True,
            TIME_ZONE='America/Sao_Paulo',
            EVENT_PUBLISHER_MODE='sync',
        )
        django.setup()


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def inmemory_user_repo():
    """Repositório em memória para testes unitários."""
    return InMemoryUserRepository()


@pytest.fixture
def inmemory_uow():
    """Unit of Work em memória para testes unitários."""
    from userhub.adapters.django_app.shared.unit_of_work import InMemoryUnitOfWork
    return InMemoryUnitOfWork()


@pytest.fixture
def sample_user():
    """Usuário válido (ainda não persistido)."""
    return UserEntity.criar(nome="Ana Souza", email="ana@example.com")


@pytest.fixture(autouse=True)
def reset_di_container():
    """Container DI limpo a cada teste."""
    from userhub.config.container import reset_container

    reset_container()
    yield
    reset_container()
