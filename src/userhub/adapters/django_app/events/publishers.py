"""
Event Publishers - Publicadores de Eventos de Domínio.

Implementações de userhub.core.shared.interfaces.EventPublisher:
- LoggingEventPublisher: Loga e executa handlers locais (desenvolvimento)
- CeleryEventPublisher: Publica via Celery (produção)
- InMemoryEventPublisher: Para testes
"""

from typing import Callable, Dict, List
import json
import logging

from django.core.exceptions import ImproperlyConfigured

from userhub.core.shared.events import DomainEvent
from userhub.core.shared.interfaces import EventPublisher

logger = logging.getLogger(__name__)

EventHandler = Callable[[DomainEvent], None]


class _LocalHandlersMixin:
    """Registro de handlers síncronos por tipo de evento."""

    def _init_handlers(self) -> None:
        self._handlers: Dict[str, List[EventHandler]] = {}

    def register_handler(self, event_type: str, handler: EventHandler) -> None:
        """Registra handler para tipo de evento."""
        self._handlers.setdefault(event_type, []).append(handler)

    def _dispatch_to_handlers(self, event: DomainEvent) -> None:
        for handler in self._handlers.get(event.event_type, []):
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Erro em handler para {event.event_type}: {e}")


class LoggingEventPublisher(_LocalHandlersMixin, EventPublisher):
    """
    Publisher que loga eventos.

    Usado em desenvolvimento para visualizar eventos
    sem necessidade de infraestrutura de mensageria.
    """

    def __init__(self, log_level: int = logging.INFO):
        self._log_level = log_level
        self._init_handlers()

    def publish(self, event: DomainEvent) -> None:
        logger.log(
            self._log_level,
            f"[EVENT] {event.event_type} | "
            f"aggregate={event.aggregate_id} | "
            f"data={json.dumps(event.to_dict(), default=str)}"
        )

        self._dispatch_to_handlers(event)

    def publish_batch(self, events: List[DomainEvent]) -> None:
        for event in events:
            self.publish(event)


class CeleryEventPublisher(EventPublisher):
    """
    Publisher que envia eventos para Celery.

    Usado em produção para processamento assíncrono.
    """

    def __init__(self, also_log: bool = True):
        self._also_log = also_log

    def publish(self, event: DomainEvent) -> None:
        if self._also_log:
            logger.info(
                f"[EVENT->CELERY] {event.event_type} | "
                f"aggregate={event.aggregate_id}"
            )

        from userhub.adapters.django_app.events.handlers import dispatch_domain_event

        try:
            dispatch_domain_event.delay(event.event_type, event.to_dict())
        except Exception as e:
            # Broker indisponível não quebra o fluxo principal
            logger.error(f"Falha ao publicar evento no Celery: {e}", exc_info=True)

    def publish_batch(self, events: List[DomainEvent]) -> None:
        for event in events:
            self.publish(event)


class InMemoryEventPublisher(_LocalHandlersMixin, EventPublisher):
    """
    Publisher em memória para testes.

    Armazena eventos publicados para verificação em testes.
    """

    def __init__(self):
        self._published_events: List[DomainEvent] = []
        self._init_handlers()

    def publish(self, event: DomainEvent) -> None:
        self._published_events.append(event)
        self._dispatch_to_handlers(event)

    def publish_batch(self, events: List[DomainEvent]) -> None:
        for event in events:
            self.publish(event)

    @property
    def published_events(self) -> List[DomainEvent]:
        return self._published_events.copy()

    def clear(self) -> None:
        self._published_events.clear()

    def get_events_by_type(self, event_type: str) -> List[DomainEvent]:
        return [e for e in self._published_events if e.event_type == event_type]


def get_event_publisher(mode: str = "sync") -> EventPublisher:
    """
    Factory para obter publisher apropriado.

    Args:
        mode: 'sync' (LoggingEventPublisher) ou 'celery' (CeleryEventPublisher)

    Returns:
        Publisher configurado

    Raises:
        ImproperlyConfigured: Se modo desconhecido (erro de configuração do servidor)
    """
    if mode == "celery":
        return CeleryEventPublisher()
    if mode == "sync":
        return LoggingEventPublisher()
    raise ImproperlyConfigured(f"EVENT_PUBLISHER_MODE inválido: {mode}")
