"""
Event Handlers - Processadores de Eventos de Domínio.

Handlers são executados de forma assíncrona via Celery quando
Domain Events são publicados pelo CeleryEventPublisher.

event_data tem o formato de DomainEvent.to_dict():
    {"event_type": ..., "aggregate_id": ..., "data": {...}, ...}

Padrão:
    @shared_task(bind=True, ...)
    def handle_<evento>(self, event_data: dict) -> None:
        ...
"""

import logging
from typing import Any, Dict

from celery import shared_task

logger = logging.getLogger(__name__)


# =============================================================================
# Event Handlers - Usuários
# =============================================================================

@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    acks_late=True,
)
def handle_usuario_criado(self, event_data: Dict[str, Any]) -> None:
    """
    Handler para UsuarioCriadoEvent.

    Ações:
    - Enviar boas-vindas ao novo usuário
    """
    try:
        usuario_id = event_data.get('aggregate_id')
        dados = event_data.get('data', {})
        nome = dados.get('nome') or dados.get('email')

        logger.info(
            f"[HANDLER] UsuarioCriado: {usuario_id} | Email: {dados.get('email')}"
        )

        notify_user.delay(
            user_id=usuario_id,
            message=f"Bem-vindo(a), {nome}!",
            channel='email'
        )

    except Exception as e:
        logger.error(f"Erro no handler UsuarioCriado: {e}", exc_info=True)
        raise


@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    acks_late=True,
)
def handle_usuario_atualizado(self, event_data: Dict[str, Any]) -> None:
    """
    Handler para UsuarioAtualizadoEvent.

    Ações:
    - Confirmar troca de email ao usuário
    """
    try:
        usuario_id = event_data.get('aggregate_id')
        campos = event_data.get('data', {}).get('campos_alterados', [])

        logger.info(f"[HANDLER] UsuarioAtualizado: {usuario_id} | Campos: {campos}")

        if 'email' in campos:
            notify_user.delay(
                user_id=usuario_id,
                message="Seu email de cadastro foi alterado",
                channel='email'
            )

    except Exception as e:
        logger.error(f"Erro no handler UsuarioAtualizado: {e}", exc_info=True)
        raise


@shared_task(bind=True, max_retries=3, default_retry_delay=60)
def handle_usuario_removido(self, event_data: Dict[str, Any]) -> None:
    """Handler para UsuarioRemovidoEvent (registro de auditoria)."""
    usuario_id = event_data.get('aggregate_id')
    email = event_data.get('data', {}).get('email')

    logger.info(f"[HANDLER] UsuarioRemovido: {usuario_id} | Email: {email}")


# =============================================================================
# Event Dispatcher (Router)
# =============================================================================

@shared_task(bind=True, max_retries=5, default_retry_delay=30)
def dispatch_domain_event(self, event_type: str, event_data: Dict[str, Any]) -> None:
    """
    Dispatcher central para Domain Events.

    Args:
        event_type: Tipo do evento (ex: 'UsuarioCriadoEvent')
        event_data: Dados do evento serializado
    """
    handlers = {
        'UsuarioCriadoEvent': handle_usuario_criado,
        'UsuarioAtualizadoEvent': handle_usuario_atualizado,
        'UsuarioRemovidoEvent': handle_usuario_removido,
    }

    handler = handlers.get(event_type)

    if handler:
        logger.info(f"[DISPATCHER] Roteando {event_type} para handler")
        handler.delay(event_data)
    else:
        logger.warning(f"[DISPATCHER] Handler não encontrado para {event_type}")


# =============================================================================
# Notification Tasks
# =============================================================================

@shared_task(bind=True, max_retries=3, default_retry_delay=120)
def notify_user(
    self,
    user_id: str,
    message: str,
    channel: str = 'email',
) -> None:
    """
    Notifica usuário pelo canal especificado.

    Args:
        user_id: ID do usuário
        message: Mensagem a enviar
        channel: Canal (email, push, sms)
    """
    logger.info(f"[NOTIFICATION] {channel.upper()} para {user_id}: {message}")
