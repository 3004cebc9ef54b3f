"""
Use Cases (Application Services) do Domínio de Usuários.

Orquestram a lógica de negócio coordenando entidade, repositório e eventos.

Use Cases implementados:
- CriarUsuarioService: Cadastra novo usuário
- ObterUsuarioService: Obtém usuário por ID
- ListarUsuariosService: Lista usuários
- AtualizarUsuarioService: Altera nome e/ou email
- RemoverUsuarioService: Remove usuário

Princípios:
- Um Use Case = Uma operação de negócio
- Dependências injetadas (DI)
- Sem lógica de infraestrutura
"""

from typing import List

from userhub.core.shared.interfaces import UnitOfWork
from userhub.core.shared.exceptions import (
    EntityNotFoundError,
    ValidationError,
    BusinessRuleViolationError,
)

from .ports import UserRepository
from .entities import UserEntity
from .dtos import (
    CriarUsuarioInputDTO,
    AtualizarUsuarioInputDTO,
    UsuarioOutputDTO,
)
from .events import (
    UsuarioCriadoEvent,
    UsuarioAtualizadoEvent,
    UsuarioRemovidoEvent,
)


def _usuario_nao_encontrado(usuario_id: str) -> EntityNotFoundError:
    return EntityNotFoundError(
        f"Usuário {usuario_id} não encontrado",
        entity_type="Usuario",
        entity_id=usuario_id
    )


class CriarUsuarioService:
    """
    Use Case: Criar um novo usuário.

    Fluxo:
    1. Criar entidade (rejeita email sem '@')
    2. Garantir que o email ainda não está cadastrado
    3. Persistir via repositório
    4. Disparar evento UsuarioCriado
    5. Retornar DTO de saída

    Example:
        service = CriarUsuarioService(user_repo, uow)
        output = service.execute(
            CriarUsuarioInputDTO(nome="Ana", email="ana@example.com")
        )
        print(output.id)
    """

    def __init__(self, user_repo: UserRepository, uow: UnitOfWork):
        """
        Inicializa service com dependências injetadas.

        Args:
            user_repo: Repositório para persistência
            uow: Unit of Work para transação atômica
        """
        self.user_repo = user_repo
        self.uow = uow

    def execute(self, input_dto: CriarUsuarioInputDTO) -> UsuarioOutputDTO:
        """
        Executa criação de usuário em transação atômica.

        Raises:
            ValidationError: Se email inválido
            BusinessRuleViolationError: Se email já cadastrado
        """
        with self.uow:
            usuario = UserEntity.criar(
                nome=input_dto.nome,
                email=input_dto.email,
            )

            if self.user_repo.get_by_email(usuario.email):
                raise BusinessRuleViolationError(
                    f"Email {usuario.email} já cadastrado",
                    rule="email_unico"
                )

            self.user_repo.save(usuario)

            self.uow.publish_event(
                UsuarioCriadoEvent(
                    aggregate_id=usuario.id,
                    nome=usuario.nome,
                    email=usuario.email,
                )
            )

        return UsuarioOutputDTO.from_entity(usuario)


class ObterUsuarioService:
    """
    Use Case: Obter usuário por ID.

    Não usa UoW pois é operação de leitura.
    """

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    def execute(self, usuario_id: str) -> UsuarioOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se usuário não existe
        """
        usuario = self.user_repo.get_by_id(usuario_id)

        if not usuario:
            raise _usuario_nao_encontrado(usuario_id)

        return UsuarioOutputDTO.from_entity(usuario)


class ListarUsuariosService:
    """Use Case: Listar usuários cadastrados."""

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    def execute(self) -> List[UsuarioOutputDTO]:
        return [UsuarioOutputDTO.from_entity(u) for u in self.user_repo.list_all()]


class AtualizarUsuarioService:
    """
    Use Case: Atualização parcial de usuário.

    Fluxo:
    1. Buscar usuário existente
    2. Aplicar alterações na entidade (email validado)
    3. Garantir unicidade do novo email
    4. Persistir e disparar UsuarioAtualizado (se algo mudou)
    """

    def __init__(self, user_repo: UserRepository, uow: UnitOfWork):
        self.user_repo = user_repo
        self.uow = uow

    def execute(self, input_dto: AtualizarUsuarioInputDTO) -> UsuarioOutputDTO:
        """
        Raises:
            ValidationError: Se nenhum campo informado ou email inválido
            EntityNotFoundError: Se usuário não existe
            BusinessRuleViolationError: Se email pertence a outro usuário
        """
        if not input_dto.possui_alteracoes:
            raise ValidationError("Nenhum campo válido para atualização")

        with self.uow:
            usuario = self.user_repo.get_by_id(input_dto.usuario_id)

            if not usuario:
                raise _usuario_nao_encontrado(input_dto.usuario_id)

            campos_alterados = []

            if input_dto.nome is not None:
                nome_anterior = usuario.nome
                usuario.alterar_nome(input_dto.nome)
                if usuario.nome != nome_anterior:
                    campos_alterados.append("nome")

            if input_dto.email is not None:
                email_anterior = usuario.email
                usuario.alterar_email(input_dto.email)

                if usuario.email != email_anterior:
                    existente = self.user_repo.get_by_email(usuario.email)
                    if existente and existente.id != usuario.id:
                        raise BusinessRuleViolationError(
                            f"Email {usuario.email} já cadastrado",
                            rule="email_unico"
                        )
                    campos_alterados.append("email")

            if campos_alterados:
                self.user_repo.save(usuario)
                self.uow.publish_event(
                    UsuarioAtualizadoEvent(
                        aggregate_id=usuario.id,
                        campos_alterados=campos_alterados,
                    )
                )

        return UsuarioOutputDTO.from_entity(usuario)


class RemoverUsuarioService:
    """Use Case: Remover usuário."""

    def __init__(self, user_repo: UserRepository, uow: UnitOfWork):
        self.user_repo = user_repo
        self.uow = uow

    def execute(self, usuario_id: str) -> None:
        """
        Raises:
            EntityNotFoundError: Se usuário não existe
        """
        with self.uow:
            usuario = self.user_repo.get_by_id(usuario_id)

            if not usuario:
                raise _usuario_nao_encontrado(usuario_id)

            self.user_repo.delete(usuario.id)

            self.uow.publish_event(
                UsuarioRemovidoEvent(
                    aggregate_id=usuario.id,
                    email=usuario.email,
                )
            )
