"""
Data Transfer Objects (DTOs) do Domínio de Usuários.

DTOs são estruturas simples para transportar dados entre camadas,
evitando vazamento de entidades para o controller.

Tipos de DTOs:
- Input DTOs: Recebem dados de entrada (do controller)
- Output DTOs: Formatam dados para resposta (para o controller)
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .entities import UserEntity


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CriarUsuarioInputDTO:
    """
    DTO de entrada para criar usuário.

    Imutável (frozen=True) para garantir que dados
    recebidos não sejam alterados acidentalmente.

    Attributes:
        nome: Nome do usuário
        email: Email do usuário
    """

    nome: Optional[str]
    email: Optional[str]

    def to_dict(self) -> dict:
        return {
            "nome": self.nome,
            "email": self.email,
        }


@dataclass(frozen=True)
class AtualizarUsuarioInputDTO:
    """
    DTO de entrada para atualização parcial de usuário.

    Campos None não são alterados.

    Attributes:
        usuario_id: ID do usuário
        nome: Novo nome (opcional)
        email: Novo email (opcional)
    """

    usuario_id: str
    nome: Optional[str] = None
    email: Optional[str] = None

    @property
    def possui_alteracoes(self) -> bool:
        return self.nome is not None or self.email is not None

    def to_dict(self) -> dict:
        return {
            "usuario_id": self.usuario_id,
            "nome": self.nome,
            "email": self.email,
        }


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class UsuarioOutputDTO:
    """
    DTO de saída com dados do usuário.

    to_dict() usa as chaves do contrato HTTP (name, email, ...).
    """

    id: str
    nome: str
    email: str
    criado_em: datetime
    atualizado_em: datetime

    @classmethod
    def from_entity(cls, entity: UserEntity) -> "UsuarioOutputDTO":
        """
        Factory method para converter entidade em DTO.

        Args:
            entity: Entidade UserEntity

        Returns:
            DTO com dados da entidade
        """
        return cls(
            id=entity.id,
            nome=entity.nome,
            email=entity.email,
            criado_em=entity.criado_em,
            atualizado_em=entity.atualizado_em,
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "id": self.id,
            "name": self.nome,
            "email": self.email,
            "created_at": self.criado_em.isoformat(),
            "updated_at": self.atualizado_em.isoformat(),
        }
