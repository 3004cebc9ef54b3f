"""
Domínio de Usuários.

Contém toda a lógica de negócio relacionada a usuários:
- Entidade (UserEntity)
- Use Cases (CriarUsuario, ObterUsuario, ListarUsuarios, ...)
- Domain Events (UsuarioCriado, UsuarioAtualizado, UsuarioRemovido)
- DTOs (Input/Output Data Transfer Objects)
- Ports (Interface do repositório)
"""

from .entities import UserEntity
from .events import (
    UsuarioCriadoEvent,
    UsuarioAtualizadoEvent,
    UsuarioRemovidoEvent,
)
from .dtos import (
    CriarUsuarioInputDTO,
    AtualizarUsuarioInputDTO,
    UsuarioOutputDTO,
)
from .ports import UserRepository, InMemoryUserRepository
from .use_cases import (
    CriarUsuarioService,
    ObterUsuarioService,
    ListarUsuariosService,
    AtualizarUsuarioService,
    RemoverUsuarioService,
)

__all__ = [
    # Entities
    "UserEntity",
    # Events
    "UsuarioCriadoEvent",
    "UsuarioAtualizadoEvent",
    "UsuarioRemovidoEvent",
    # DTOs
    "CriarUsuarioInputDTO",
    "AtualizarUsuarioInputDTO",
    "UsuarioOutputDTO",
    # Ports
    "UserRepository",
    "InMemoryUserRepository",
    # Use Cases
    "CriarUsuarioService",
    "ObterUsuarioService",
    "ListarUsuariosService",
    "AtualizarUsuarioService",
    "RemoverUsuarioService",
]
