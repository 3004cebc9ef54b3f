"""
Entidades do Domínio de Usuários.

Entidades:
- UserEntity: Usuário do sistema (id, nome, email)

Regras de Negócio Encapsuladas:
- Email válido é aquele que contém '@'
- Criação e alteração de email rejeitam email inválido
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional
import uuid

from userhub.core.shared.exceptions import ValidationError


def _agora() -> datetime:
    """Instante atual em UTC (timestamps do domínio são sempre aware)."""
    return datetime.now(timezone.utc)


@dataclass
class UserEntity:
    """
    Entidade de Domínio: Usuário.

    Independente de banco de dados, framework web ou serialização.

    Invariantes:
    - Email de usuário criado via criar() contém '@'

    Attributes:
        id: Identificador único (UUID)
        nome: Nome do usuário
        email: Endereço de email
        criado_em: Data/hora de criação
        atualizado_em: Data/hora da última atualização

    Example:
        usuario = UserEntity.criar(nome="Ana", email="ana@example.com")
        usuario.alterar_email("ana.souza@example.com")
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    nome: str = ""
    email: str = ""
    criado_em: datetime = field(default_factory=_agora)
    atualizado_em: datetime = field(default_factory=_agora)

    @staticmethod
    def email_e_valido(email: Any) -> bool:
        """
        Verifica formato de email.

        Um email é válido se for uma string contendo '@'.

        Args:
            email: Valor a verificar (pode ser None)

        Returns:
            True se válido, False caso contrário
        """
        return isinstance(email, str) and "@" in email

    @classmethod
    def criar(cls, nome: Optional[str], email: Optional[str]) -> "UserEntity":
        """
        Factory method para criar usuário com validação.

        Args:
            nome: Nome do usuário
            email: Email do usuário (deve conter '@')

        Returns:
            Nova instância de UserEntity

        Raises:
            ValidationError: Se email inválido
        """
        email_limpo = email.strip() if isinstance(email, str) else email
        cls._validar_email(email_limpo)

        return cls(
            nome=cls._normalizar_nome(nome),
            email=email_limpo,
        )

    @classmethod
    def _validar_email(cls, email: Optional[str]) -> None:
        if not cls.email_e_valido(email):
            raise ValidationError(
                "Formato de email inválido",
                field="email"
            )

    @staticmethod
    def _normalizar_nome(nome: Any) -> str:
        if nome is None:
            return ""
        if not isinstance(nome, str):
            raise ValidationError("Nome deve ser texto", field="nome")
        return nome.strip()

    def alterar_nome(self, nome: Optional[str]) -> None:
        """
        Altera nome do usuário.

        Raises:
            ValidationError: Se nome não for texto
        """
        self.nome = self._normalizar_nome(nome)
        self._atualizar_timestamp()

    def alterar_email(self, email: Optional[str]) -> None:
        """
        Altera email do usuário.

        Raises:
            ValidationError: Se novo email inválido
        """
        email_limpo = email.strip() if isinstance(email, str) else email
        self._validar_email(email_limpo)

        self.email = email_limpo
        self._atualizar_timestamp()

    def _atualizar_timestamp(self) -> None:
        self.atualizado_em = _agora()

    @property
    def possui_email_valido(self) -> bool:
        """Aplica a regra de formato de email ao próprio usuário."""
        return self.email_e_valido(self.email)

    def __repr__(self) -> str:
        return (
            f"UserEntity("
            f"id={self.id[:8]}..., "
            f"nome='{self.nome[:20]}', "
            f"email='{self.email}'"
            f")"
        )

    def __eq__(self, other: object) -> bool:
        """Comparação por ID (identidade de entidade)."""
        if not isinstance(other, UserEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
