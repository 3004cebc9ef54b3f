"""
Domain Events do Domínio de Usuários.

Eventos:
- UsuarioCriadoEvent: Novo usuário foi cadastrado
- UsuarioAtualizadoEvent: Nome e/ou email foram alterados
- UsuarioRemovidoEvent: Usuário foi removido

Uso:
    with uow:
        usuario = UserEntity.criar(...)
        repo.save(usuario)
        uow.publish_event(UsuarioCriadoEvent(aggregate_id=usuario.id, ...))
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from userhub.core.shared.events import DomainEvent


@dataclass
class UsuarioCriadoEvent(DomainEvent):
    """
    Evento: Usuário foi criado.

    Handlers típicos:
    - Enviar email de boas-vindas

    Attributes:
        nome: Nome do usuário
        email: Email do usuário
    """

    nome: str = ""
    email: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Usuario"

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "nome": self.nome,
            "email": self.email,
        }


@dataclass
class UsuarioAtualizadoEvent(DomainEvent):
    """
    Evento: Dados do usuário foram alterados.

    Attributes:
        campos_alterados: Nomes dos campos modificados (ex: ["email"])
    """

    campos_alterados: List[str] = field(default_factory=list)

    @property
    def aggregate_type(self) -> str:
        return "Usuario"

    def _get_event_data(self) -> Dict[str, Any]:
        return {"campos_alterados": list(self.campos_alterados)}


@dataclass
class UsuarioRemovidoEvent(DomainEvent):
    """Evento: Usuário foi removido."""

    email: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Usuario"

    def _get_event_data(self) -> Dict[str, Any]:
        return {"email": self.email}
