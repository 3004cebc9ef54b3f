"""
Testes para Domain Events e exceções do Core.
"""

import pytest

from userhub.core.users.events import (
    UsuarioCriadoEvent,
    UsuarioAtualizadoEvent,
    UsuarioRemovidoEvent,
)
from userhub.core.shared.exceptions import (
    DomainException,
    ValidationError,
    EntityNotFoundError,
    BusinessRuleViolationError,
)


class TestDomainEvents:

    def test_aggregate_id_obrigatorio(self):
        with pytest.raises(ValueError):
            UsuarioCriadoEvent(nome="Ana", email="ana@example.com")

    def test_to_dict_usuario_criado(self):
        evento = UsuarioCriadoEvent(
            aggregate_id="user-1",
            nome="Ana",
            email="ana@example.com",
        )

        dados = evento.to_dict()

        assert dados["event_type"] == "UsuarioCriadoEvent"
        assert dados["aggregate_type"] == "Usuario"
        assert dados["aggregate_id"] == "user-1"
        assert dados["version"] == 1
        assert dados["data"] == {"nome": "Ana", "email": "ana@example.com"}

    def test_from_dict_reconstroi_evento(self):
        original = UsuarioAtualizadoEvent(
            aggregate_id="user-1",
            campos_alterados=["email"],
        )

        reconstruido = UsuarioAtualizadoEvent.from_dict(original.to_dict())

        assert reconstruido.event_id == original.event_id
        assert reconstruido.occurred_at == original.occurred_at
        assert reconstruido.campos_alterados == ["email"]

    def test_eventos_tem_ids_unicos(self):
        e1 = UsuarioRemovidoEvent(aggregate_id="user-1", email="a@example.com")
        e2 = UsuarioRemovidoEvent(aggregate_id="user-1", email="a@example.com")

        assert e1.event_id != e2.event_id


class TestExceptions:

    def test_validation_error_codigo_por_campo(self):
        erro = ValidationError("Formato de email inválido", field="email")

        assert erro.code == "VALIDATION_ERROR_EMAIL"
        assert str(erro) == "[VALIDATION_ERROR_EMAIL] Formato de email inválido"
        assert erro.to_dict()["field"] == "email"
        assert isinstance(erro, DomainException)

    def test_entity_not_found_to_dict(self):
        erro = EntityNotFoundError("Não encontrado", entity_type="Usuario", entity_id="x")

        assert erro.to_dict() == {
            "error": "ENTITY_NOT_FOUND",
            "message": "Não encontrado",
            "entity_type": "Usuario",
            "entity_id": "x",
        }

    def test_business_rule_violation(self):
        erro = BusinessRuleViolationError("Email já cadastrado", rule="email_unico")

        assert erro.code == "BUSINESS_RULE_VIOLATION"
        assert erro.to_dict()["rule"] == "email_unico"
