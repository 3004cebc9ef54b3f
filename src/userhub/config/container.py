"""
Dependency Injection Container.

Configura e gerencia todas as dependências da aplicação.
Usa dependency-injector para lazy-loading e injeção automática.

Padrões:
- Singleton: Uma instância para toda app (repository, publisher)
- Factory: Nova instância por chamada (services, UoW)

Os adapters Django são importados sob demanda pelas funções de
fábrica abaixo, evitando imports circulares na carga dos settings.
"""

from typing import Optional

from dependency_injector import containers, providers

from userhub.core.users.use_cases import (
    CriarUsuarioService,
    ObterUsuarioService,
    ListarUsuariosService,
    AtualizarUsuarioService,
    RemoverUsuarioService,
)


# =============================================================================
# Fábricas com import tardio
# =============================================================================

def _build_event_publisher():
    from django.conf import settings
    from userhub.adapters.django_app.events.publishers import get_event_publisher

    return get_event_publisher(getattr(settings, 'EVENT_PUBLISHER_MODE', 'sync'))


def _build_user_repository():
    from userhub.adapters.django_app.users.repositories import DjangoUserRepository

    return DjangoUserRepository()


def _build_unit_of_work(event_publisher):
    from userhub.adapters.django_app.shared.unit_of_work import DjangoUnitOfWork

    return DjangoUnitOfWork(event_publisher=event_publisher)


def _build_in_memory_user_repository():
    from userhub.core.users.ports import InMemoryUserRepository

    return InMemoryUserRepository()


def _build_in_memory_event_publisher():
    from userhub.adapters.django_app.events.publishers import InMemoryEventPublisher

    return InMemoryEventPublisher()


def _build_in_memory_unit_of_work(event_publisher):
    from userhub.adapters.django_app.shared.unit_of_work import InMemoryUnitOfWork

    return InMemoryUnitOfWork(event_publisher=event_publisher)


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Example:
        container = get_container()
        service = container.criar_usuario_service()
        output = service.execute(input_dto)
    """

    # =========================================================================
    # Infrastructure
    # =========================================================================

    event_publisher = providers.Singleton(_build_event_publisher)

    # =========================================================================
    # Repositories
    # =========================================================================

    user_repository = providers.Singleton(_build_user_repository)

    # =========================================================================
    # Unit of Work (nova instância por operação)
    # =========================================================================

    unit_of_work = providers.Factory(
        _build_unit_of_work,
        event_publisher=event_publisher,
    )

    # =========================================================================
    # Services / Use Cases
    # =========================================================================

    criar_usuario_service = providers.Factory(
        CriarUsuarioService,
        user_repo=user_repository,
        uow=unit_of_work,
    )

    obter_usuario_service = providers.Factory(
        ObterUsuarioService,
        user_repo=user_repository,
    )

    listar_usuarios_service = providers.Factory(
        ListarUsuariosService,
        user_repo=user_repository,
    )

    atualizar_usuario_service = providers.Factory(
        AtualizarUsuarioService,
        user_repo=user_repository,
        uow=unit_of_work,
    )

    remover_usuario_service = providers.Factory(
        RemoverUsuarioService,
        user_repo=user_repository,
        uow=unit_of_work,
    )


def create_testing_container() -> containers.DynamicContainer:
    """
    Container com implementações InMemory.

    Mesmos providers do Container, sem banco nem broker.

    Example:
        container = create_testing_container()
        container.criar_usuario_service().execute(input_dto)
        container.event_publisher().published_events
    """
    container = Container()
    container.event_publisher.override(
        providers.Singleton(_build_in_memory_event_publisher)
    )
    container.user_repository.override(
        providers.Singleton(_build_in_memory_user_repository)
    )
    container.unit_of_work.override(
        providers.Factory(
            _build_in_memory_unit_of_work,
            event_publisher=container.event_publisher,
        )
    )
    return container


# =============================================================================
# Container Global
# =============================================================================

_container: Optional[containers.DynamicContainer] = None


def get_container() -> containers.DynamicContainer:
    """
    Retorna instância global do container (criada sob demanda).

    Instanciar um DeclarativeContainer devolve um DynamicContainer
    com cópias dos providers declarados em Container.
    """
    global _container

    if _container is None:
        _container = Container()

    return _container


def reset_container() -> None:
    """Descarta o container global (para testes)."""
    global _container
    _container = None
