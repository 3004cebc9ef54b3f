"""
Repositório Django para persistência de Usuários.

Implementa a interface (Port) UserRepository definida no Core.
É um DRIVEN ADAPTER - acionado pelo Core em resposta a operações.

Princípios:
- Repository não contém lógica de negócio
- Usa Mapper para conversões
- Trata apenas persistência
"""

from typing import List, Optional
import logging

from userhub.core.users.entities import UserEntity
from userhub.core.users.ports import UserRepository as UserRepositoryPort

from .models import UserModel
from .mappers import UserMapper

logger = logging.getLogger(__name__)


class DjangoUserRepository(UserRepositoryPort):
    """
    Implementação Django do UserRepository.

    Example:
        repo = DjangoUserRepository()
        repo.save(usuario)
        usuario = repo.get_by_id("uuid-here")
    """

    def __init__(self):
        self._mapper = UserMapper()

    def save(self, user: UserEntity) -> None:
        """
        Persiste usuário (create ou update).

        Note:
            Usa update_or_create para atomicidade
        """
        logger.debug(f"Saving user: {user.id}")

        UserModel.objects.update_or_create(
            id=user.id,
            defaults=self._mapper.to_model_fields(user)
        )

        logger.info(f"User saved: {user.id}")

    def get_by_id(self, user_id: str) -> Optional[UserEntity]:
        try:
            model = UserModel.objects.get(id=user_id)
            return self._mapper.to_entity(model)
        except UserModel.DoesNotExist:
            logger.debug(f"User not found: {user_id}")
            return None

    def get_by_email(self, email: str) -> Optional[UserEntity]:
        model = UserModel.objects.filter(email=email).first()
        if model is None:
            return None
        return self._mapper.to_entity(model)

    def delete(self, user_id: str) -> None:
        """
        Remove usuário do banco.

        Note:
            Não lança erro se usuário não existir
        """
        deleted_count, _ = UserModel.objects.filter(id=user_id).delete()

        if deleted_count > 0:
            logger.info(f"User deleted: {user_id}")
        else:
            logger.debug(f"User not found for deletion: {user_id}")

    def list_all(self) -> List[UserEntity]:
        models = UserModel.objects.order_by('criado_em')
        return self._mapper.to_entity_list(models)

    def exists(self, user_id: str) -> bool:
        return UserModel.objects.filter(id=user_id).exists()

    def count(self) -> int:
        return UserModel.objects.count()
