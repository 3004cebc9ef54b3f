"""
Unit of Work - Implementação Django.

Gerencia a transação de um use case, garantindo consistência de dados
e publicação de eventos somente após commit.

Responsabilidades:
- Abrir/fechar bloco transaction.atomic
- Commit/Rollback coordenado
- Publicar eventos após commit bem-sucedido
"""

from typing import List, Optional
import logging

from django.db import transaction

from userhub.core.shared.interfaces import UnitOfWork, EventPublisher
from userhub.core.shared.events import DomainEvent

logger = logging.getLogger(__name__)


class DjangoUnitOfWork(UnitOfWork):
    """
    Implementação Django do Unit of Work.

    Usa transaction.atomic, o que permite aninhamento (savepoint)
    quando já existe uma transação aberta, como em testes.

    Example:
        with DjangoUnitOfWork(event_publisher=publisher) as uow:
            repo.save(usuario)
            uow.publish_event(UsuarioCriadoEvent(...))
        # Commit automático + eventos publicados

    Example com rollback:
        with DjangoUnitOfWork() as uow:
            repo.save(usuario)
            raise ValidationError("...")
        # Rollback automático, eventos descartados
    """

    def __init__(
        self,
        event_publisher: Optional[EventPublisher] = None,
        using: Optional[str] = None,
    ):
        """
        Args:
            event_publisher: Publicador de eventos (logging, Celery, ...)
            using: Alias do banco (default: 'default')
        """
        super().__init__()
        self._event_publisher = event_publisher
        self._using = using
        self._atomic = None
        self._committed = False
        self._rolled_back = False

    def _begin_transaction(self) -> None:
        self._committed = False
        self._rolled_back = False
        self._atomic = transaction.atomic(using=self._using)
        self._atomic.__enter__()
        logger.debug("Transaction started")

    def commit(self) -> None:
        """
        Fecha o bloco atomic e publica eventos.

        Raises:
            Exception: Se commit falhar, eventos são descartados e a
                exceção é re-lançada
        """
        if self._committed or self._rolled_back:
            logger.warning("Transaction already finalized")
            return

        try:
            if self._atomic is not None:
                atomic, self._atomic = self._atomic, None
                atomic.__exit__(None, None, None)
                logger.debug("Transaction committed")
        except Exception as e:
            logger.error(f"Commit failed: {e}")
            self._rolled_back = True
            self.clear_events()
            raise

        self._committed = True

        if self._events:
            self._publish_events()

    def rollback(self) -> None:
        """Desfaz mudanças do bloco atomic e descarta eventos."""
        if self._committed or self._rolled_back:
            return

        try:
            if self._atomic is not None:
                atomic, self._atomic = self._atomic, None
                transaction.set_rollback(True, using=self._using)
                atomic.__exit__(None, None, None)
                logger.debug("Transaction rolled back")
        except Exception as e:
            logger.error(f"Rollback failed: {e}")
        finally:
            self._rolled_back = True
            self.clear_events()

    def _publish_events(self) -> None:
        """
        Publica eventos para handlers.

        Falhas de publicação são logadas e não desfazem o commit.
        """
        for event in self._events:
            logger.info(
                f"Publishing event: {event.event_type} "
                f"for aggregate {event.aggregate_id}"
            )

            if self._event_publisher:
                try:
                    self._event_publisher.publish(event)
                except Exception as e:
                    logger.error(f"Failed to publish event: {e}")

        self.clear_events()

    @property
    def is_committed(self) -> bool:
        return self._committed

    @property
    def is_rolled_back(self) -> bool:
        return self._rolled_back


class InMemoryUnitOfWork(UnitOfWork):
    """
    Unit of Work em memória para testes.

    Não persiste nada - apenas simula comportamento
    para testes unitários sem banco de dados. Se um publisher for
    informado, eventos também são repassados a ele no commit.

    Example:
        uow = InMemoryUnitOfWork()
        with uow:
            uow.publish_event(event)

        assert uow.committed
        assert len(uow.published_events) == 1
    """

    def __init__(self, event_publisher: Optional[EventPublisher] = None):
        super().__init__()
        self._event_publisher = event_publisher
        self._committed = False
        self._rolled_back = False
        self._published_events: List[DomainEvent] = []

    def _begin_transaction(self) -> None:
        pass

    def commit(self) -> None:
        self._committed = True
        self._published_events.extend(self._events)
        if self._event_publisher and self._events:
            self._event_publisher.publish_batch(self._events)
        self.clear_events()

    def rollback(self) -> None:
        self._rolled_back = True
        self.clear_events()

    @property
    def committed(self) -> bool:
        return self._committed

    @property
    def rolled_back(self) -> bool:
        return self._rolled_back

    @property
    def published_events(self) -> List[DomainEvent]:
        """Retorna eventos que foram 'publicados'."""
        return self._published_events

    def reset(self) -> None:
        """Reset para próximo teste."""
        self._committed = False
        self._rolled_back = False
        self._published_events.clear()
        self.clear_events()
