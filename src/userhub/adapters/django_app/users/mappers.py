"""
Mappers para conversão entre Entities (Core) e Models (Django).

Responsabilidades:
- Converter UserEntity → UserModel (para persistência)
- Converter UserModel → UserEntity (para uso no Core)

Princípios:
- Mappers são stateless
- Não contêm lógica de negócio
- Tratam apenas conversão de dados (datas já chegam aware em UTC)
"""

from typing import Iterable, List

from userhub.core.users.entities import UserEntity

from .models import UserModel


class UserMapper:
    """
    Mapper para conversão entre UserEntity e UserModel.

    Responsável por:
    - to_model(): Entity → Model
    - to_model_fields(): Entity → dict de campos (para update_or_create)
    - to_entity(): Model → Entity
    - to_entity_list(): Iterable[Model] → List[Entity]
    """

    @staticmethod
    def to_model_fields(entity: UserEntity) -> dict:
        """Campos persistidos, exceto a primary key."""
        return {
            'nome': entity.nome,
            'email': entity.email,
            'criado_em': entity.criado_em,
            'atualizado_em': entity.atualizado_em,
        }

    @staticmethod
    def to_model(entity: UserEntity) -> UserModel:
        """
        Converte UserEntity para UserModel.

        Note:
            Não chama .save() - deixa isso para o Repository
        """
        return UserModel(id=entity.id, **UserMapper.to_model_fields(entity))

    @staticmethod
    def to_entity(model: UserModel) -> UserEntity:
        """
        Converte UserModel para UserEntity.

        Note:
            Bypassa validações do factory method .criar()
            pois dados já foram validados na criação original
        """
        return UserEntity(
            id=model.id,
            nome=model.nome,
            email=model.email,
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )

    @staticmethod
    def to_entity_list(models: Iterable[UserModel]) -> List[UserEntity]:
        return [UserMapper.to_entity(model) for model in models]
