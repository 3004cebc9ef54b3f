"""
Ports (Interfaces) do Domínio de Usuários.

Define o contrato que os Adapters de persistência devem implementar.

Princípio:
    Core define interfaces → Adapters implementam
    Dependências sempre apontam para o Core

Example:
    # No Adapter (Django)
    class DjangoUserRepository(UserRepository):
        def save(self, user: UserEntity) -> None:
            UserModel.objects.update_or_create(id=user.id, defaults=...)
"""

from dataclasses import replace
from typing import Dict, List, Optional, Protocol, runtime_checkable

from .entities import UserEntity


@runtime_checkable
class UserRepository(Protocol):
    """
    Interface para persistência de Usuários.

    Usando Protocol para duck typing: adapters não precisam herdar.

    Implementações:
    - DjangoUserRepository (ORM)
    - InMemoryUserRepository (para testes)
    """

    def save(self, user: UserEntity) -> None:
        """
        Persiste usuário no repositório.

        Se user.id já existe, atualiza. Caso contrário, cria novo.
        """
        ...

    def get_by_id(self, user_id: str) -> Optional[UserEntity]:
        """
        Busca usuário por ID.

        Returns:
            Entidade encontrada ou None se não existir
        """
        ...

    def get_by_email(self, email: str) -> Optional[UserEntity]:
        """Busca usuário pelo email."""
        ...

    def delete(self, user_id: str) -> None:
        """Remove usuário (sem erro se não existir)."""
        ...

    def list_all(self) -> List[UserEntity]:
        """Lista todos os usuários, do mais antigo para o mais recente."""
        ...

    def exists(self, user_id: str) -> bool:
        ...

    def count(self) -> int:
        ...


class InMemoryUserRepository:
    """
    Implementação em memória do UserRepository.

    Útil para:
    - Testes unitários
    - Prototipagem

    Armazena cópias, como um banco faria.

    Não usar em produção!
    """

    def __init__(self):
        self._users: Dict[str, UserEntity] = {}

    def save(self, user: UserEntity) -> None:
        self._users[user.id] = replace(user)

    def get_by_id(self, user_id: str) -> Optional[UserEntity]:
        user = self._users.get(user_id)
        return replace(user) if user else None

    def get_by_email(self, email: str) -> Optional[UserEntity]:
        for user in self._users.values():
            if user.email == email:
                return replace(user)
        return None

    def delete(self, user_id: str) -> None:
        if user_id in self._users:
            del self._users[user_id]

    def list_all(self) -> List[UserEntity]:
        return [replace(u) for u in sorted(self._users.values(), key=lambda u: u.criado_em)]

    def exists(self, user_id: str) -> bool:
        return user_id in self._users

    def count(self) -> int:
        return len(self._users)

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._users.clear()
