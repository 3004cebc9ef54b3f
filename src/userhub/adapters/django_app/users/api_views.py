"""
API Views JSON (Controller) para o domínio de Usuários.

Endpoints:
- GET /users/ - Listar usuários
- POST /users/ - Criar usuário
- GET /users/<id>/ - Obter usuário
- PATCH /users/<id>/ - Atualizar nome/email
- DELETE /users/<id>/ - Remover usuário

Formato:
- Entrada: JSON {"name": ..., "email": ...}
- Saída: JSON com estrutura {success, data/error, meta}

O controller apenas traduz HTTP ↔ DTOs; regras ficam no Core.
"""

import json
import logging
from typing import Any, Dict, Optional

from django.views import View
from django.http import JsonResponse, HttpRequest
from django.utils.decorators import method_decorator
from django.views.decorators.csrf import csrf_exempt

from userhub.core.users.dtos import (
    CriarUsuarioInputDTO,
    AtualizarUsuarioInputDTO,
)
from userhub.core.shared.exceptions import (
    ValidationError,
    EntityNotFoundError,
    BusinessRuleViolationError,
    DomainException,
)
from userhub.config.container import get_container

logger = logging.getLogger(__name__)


# =============================================================================
# Helpers
# =============================================================================

def json_response(success: bool, data: Any = None, error: Optional[str] = None,
                  status: int = 200, meta: Optional[Dict] = None) -> JsonResponse:
    """
    Cria resposta JSON padronizada.

    Args:
        success: Se operação foi bem sucedida
        data: Dados da resposta
        error: Mensagem de erro (se aplicável)
        status: HTTP status code
        meta: Metadados adicionais

    Returns:
        JsonResponse formatada
    """
    response = {'success': success}

    if data is not None:
        response['data'] = data

    if error is not None:
        response['error'] = error

    if meta is not None:
        response['meta'] = meta

    return JsonResponse(response, status=status)


def parse_json_body(request: HttpRequest) -> Dict:
    """
    Parseia body JSON do request.

    Raises:
        ValueError: Se JSON inválido ou não for um objeto
    """
    if not request.body:
        return {}

    try:
        data = json.loads(request.body)
    except json.JSONDecodeError as e:
        raise ValueError(f"JSON inválido: {e}")

    if not isinstance(data, dict):
        raise ValueError("Corpo da requisição deve ser um objeto JSON")

    return data


# =============================================================================
# Base API View
# =============================================================================

@method_decorator(csrf_exempt, name='dispatch')
class BaseAPIView(View):
    """
    View base para APIs JSON.

    Fornece:
    - Parsing de JSON
    - Acesso aos use cases via container DI
    - Tratamento de erros padronizado
    """

    def get_service(self, service_name: str):
        """Obtém use case do container."""
        return getattr(get_container(), service_name)()

    def parse_body(self, request: HttpRequest) -> Dict:
        return parse_json_body(request)

    def handle_exception(self, e: Exception) -> JsonResponse:
        """
        Traduz exceções em respostas HTTP.

        ValidationError → 400, EntityNotFoundError → 404,
        BusinessRuleViolationError → 422, erro inesperado → 500.
        """
        if isinstance(e, ValidationError):
            return json_response(
                success=False,
                error=str(e),
                status=400,
                meta={'field': e.field}
            )

        if isinstance(e, EntityNotFoundError):
            return json_response(
                success=False,
                error=str(e),
                status=404
            )

        if isinstance(e, BusinessRuleViolationError):
            return json_response(
                success=False,
                error=str(e),
                status=422,
                meta={'rule': e.rule}
            )

        if isinstance(e, (DomainException, ValueError)):
            return json_response(
                success=False,
                error=str(e),
                status=400
            )

        logger.exception(f"Erro inesperado na API: {e}")
        return json_response(
            success=False,
            error="Erro interno do servidor",
            status=500
        )


# =============================================================================
# User API Views
# =============================================================================

class UserAPIListView(BaseAPIView):
    """
    API para listar e criar usuários.

    GET /users/ - Lista usuários
    POST /users/ - Cria usuário
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            usuarios = self.get_service('listar_usuarios_service').execute()

            return json_response(
                success=True,
                data=[u.to_dict() for u in usuarios],
                meta={'total': len(usuarios)}
            )

        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Cria novo usuário.

        Body JSON:
        {
            "name": "string",
            "email": "string (deve conter '@')"
        }
        """
        try:
            data = self.parse_body(request)

            criar_service = self.get_service('criar_usuario_service')

            output = criar_service.execute(
                CriarUsuarioInputDTO(
                    nome=data.get('name', ''),
                    email=data.get('email'),
                )
            )

            logger.info(f"API: Usuário criado: {output.id}")

            return json_response(
                success=True,
                data=output.to_dict(),
                status=201
            )

        except Exception as e:
            return self.handle_exception(e)


class UserAPIDetailView(BaseAPIView):
    """
    API para operações em usuário específico.

    GET /users/<id>/ - Obter usuário
    PATCH /users/<id>/ - Atualizar usuário
    DELETE /users/<id>/ - Remover usuário
    """

    def get(self, request: HttpRequest, pk: str) -> JsonResponse:
        try:
            usuario = self.get_service('obter_usuario_service').execute(pk)

            return json_response(
                success=True,
                data=usuario.to_dict()
            )

        except Exception as e:
            return self.handle_exception(e)

    def patch(self, request: HttpRequest, pk: str) -> JsonResponse:
        """
        Atualiza usuário parcialmente.

        Body JSON:
        {
            "name": "string (opcional)",
            "email": "string (opcional)"
        }
        """
        try:
            data = self.parse_body(request)

            atualizar_service = self.get_service('atualizar_usuario_service')

            output = atualizar_service.execute(
                AtualizarUsuarioInputDTO(
                    usuario_id=pk,
                    nome=data.get('name'),
                    email=data.get('email'),
                )
            )

            logger.info(f"API: Usuário {pk} atualizado")

            return json_response(
                success=True,
                data=output.to_dict()
            )

        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: str) -> JsonResponse:
        try:
            self.get_service('remover_usuario_service').execute(pk)

            logger.info(f"API: Usuário {pk} removido")

            return json_response(
                success=True,
                data={'id': pk}
            )

        except Exception as e:
            return self.handle_exception(e)
