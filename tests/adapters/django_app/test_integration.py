"""
Testes de Integração para Django Adapters.

Testa a integração entre:
- Django Models ↔ Core Entities (via Mappers)
- Repository ↔ Database (SQLite em memória)
- Unit of Work ↔ Transactions
"""

from datetime import datetime, timezone as dt_timezone
from unittest.mock import Mock

import pytest
from django.utils import timezone

from userhub.core.users.entities import UserEntity
from userhub.core.users.events import UsuarioCriadoEvent
from userhub.core.users.ports import UserRepository
from userhub.core.shared.exceptions import ValidationError
from userhub.adapters.django_app.users.models import UserModel
from userhub.adapters.django_app.users.mappers import UserMapper
from userhub.adapters.django_app.users.repositories import DjangoUserRepository
from userhub.adapters.django_app.shared.unit_of_work import (
    DjangoUnitOfWork,
    InMemoryUnitOfWork,
)
from userhub.adapters.django_app.events.publishers import InMemoryEventPublisher


@pytest.fixture
def repo():
    return DjangoUserRepository()


# =============================================================================
# Mapper
# =============================================================================

class TestUserMapper:

    def test_to_model_converte_entity(self, sample_user):
        model = UserMapper.to_model(sample_user)

        assert model.id == sample_user.id
        assert model.nome == "Ana Souza"
        assert model.email == "ana@example.com"

    def test_to_model_preserva_instante(self, sample_user):
        model = UserMapper.to_model(sample_user)

        assert model.criado_em == sample_user.criado_em
        assert model.atualizado_em == sample_user.atualizado_em
        assert timezone.is_aware(model.criado_em)

    def test_to_entity_converte_model(self):
        agora = timezone.now()
        model = UserModel(
            id="abc",
            nome="Legado",
            email="legado",
            criado_em=agora,
            atualizado_em=agora,
        )

        entity = UserMapper.to_entity(model)

        # Sem revalidar dados já persistidos
        assert entity.id == "abc"
        assert entity.email == "legado"
        assert entity.possui_email_valido is False

    def test_to_entity_list(self, sample_user):
        models = [UserMapper.to_model(sample_user)]

        entities = UserMapper.to_entity_list(models)

        assert entities == [sample_user]


# =============================================================================
# Repository
# =============================================================================

@pytest.mark.django_db
class TestDjangoUserRepository:

    def test_implementa_protocol(self, repo):
        assert isinstance(repo, UserRepository)

    def test_save_e_get_by_id(self, repo, sample_user):
        repo.save(sample_user)

        encontrado = repo.get_by_id(sample_user.id)

        assert encontrado == sample_user
        assert encontrado.nome == "Ana Souza"
        assert encontrado.email == "ana@example.com"
        assert timezone.is_aware(encontrado.criado_em)
        assert encontrado.criado_em == sample_user.criado_em

    def test_save_atualiza_existente(self, repo, sample_user):
        repo.save(sample_user)

        sample_user.alterar_email("ana.nova@example.com")
        repo.save(sample_user)

        assert repo.count() == 1
        assert repo.get_by_id(sample_user.id).email == "ana.nova@example.com"

    def test_get_by_id_inexistente(self, repo):
        assert repo.get_by_id("nao-existe") is None

    def test_get_by_email(self, repo, sample_user):
        repo.save(sample_user)

        assert repo.get_by_email("ana@example.com").id == sample_user.id
        assert repo.get_by_email("outra@example.com") is None

    def test_list_all_ordenado_por_criacao(self, repo):
        primeiro = UserEntity.criar(nome="A", email="a@example.com")
        primeiro.criado_em = datetime(2024, 1, 1, 10, 0, tzinfo=dt_timezone.utc)
        segundo = UserEntity.criar(nome="B", email="b@example.com")
        segundo.criado_em = datetime(2024, 1, 2, 10, 0, tzinfo=dt_timezone.utc)

        repo.save(segundo)
        repo.save(primeiro)

        assert [u.email for u in repo.list_all()] == ["a@example.com", "b@example.com"]

    def test_delete(self, repo, sample_user):
        repo.save(sample_user)

        repo.delete(sample_user.id)

        assert repo.exists(sample_user.id) is False
        assert repo.count() == 0

    def test_email_e_nome_longos(self, repo):
        """Sem limite de tamanho: o banco aceita o que o domínio aceita."""
        email = "a@" + "x" * 300
        usuario = UserEntity.criar(nome="N" * 500, email=email)

        repo.save(usuario)

        encontrado = repo.get_by_email(email)
        assert encontrado.email == email
        assert len(encontrado.nome) == 500

    def test_delete_inexistente_nao_falha(self, repo):
        repo.delete("nao-existe")

        assert repo.count() == 0


# =============================================================================
# Unit of Work
# =============================================================================

@pytest.mark.django_db
class TestDjangoUnitOfWork:

    def test_commit_persiste_e_publica(self, repo, sample_user):
        publisher = InMemoryEventPublisher()
        uow = DjangoUnitOfWork(event_publisher=publisher)

        with uow:
            repo.save(sample_user)
            uow.publish_event(
                UsuarioCriadoEvent(aggregate_id=sample_user.id, email=sample_user.email)
            )

        assert uow.is_committed is True
        assert repo.exists(sample_user.id)
        assert len(publisher.published_events) == 1

    def test_rollback_em_excecao(self, repo, sample_user):
        publisher = InMemoryEventPublisher()
        uow = DjangoUnitOfWork(event_publisher=publisher)

        with pytest.raises(ValidationError):
            with uow:
                repo.save(sample_user)
                uow.publish_event(
                    UsuarioCriadoEvent(aggregate_id=sample_user.id, email=sample_user.email)
                )
                raise ValidationError("falha simulada")

        assert uow.is_rolled_back is True
        assert repo.exists(sample_user.id) is False
        assert publisher.published_events == []

    def test_falha_no_publisher_nao_desfaz_commit(self, repo, sample_user):
        publisher = Mock()
        publisher.publish.side_effect = RuntimeError("broker fora do ar")
        uow = DjangoUnitOfWork(event_publisher=publisher)

        with uow:
            repo.save(sample_user)
            uow.publish_event(
                UsuarioCriadoEvent(aggregate_id=sample_user.id, email=sample_user.email)
            )

        assert uow.is_committed is True
        assert repo.exists(sample_user.id)
        publisher.publish.assert_called_once()

    def test_sem_publisher(self, repo, sample_user):
        with DjangoUnitOfWork() as uow:
            repo.save(sample_user)
            uow.publish_event(
                UsuarioCriadoEvent(aggregate_id=sample_user.id, email=sample_user.email)
            )

        assert uow.collect_events() == []
        assert repo.exists(sample_user.id)


class TestInMemoryUnitOfWork:

    def test_eventos_publicados_apos_commit(self):
        publisher = InMemoryEventPublisher()
        uow = InMemoryUnitOfWork(event_publisher=publisher)

        with uow:
            uow.publish_event(UsuarioCriadoEvent(aggregate_id="user-1"))
            assert uow.published_events == []

        assert uow.committed is True
        assert len(uow.published_events) == 1
        assert len(publisher.published_events) == 1

    def test_eventos_descartados_em_rollback(self):
        uow = InMemoryUnitOfWork()

        with pytest.raises(RuntimeError):
            with uow:
                uow.publish_event(UsuarioCriadoEvent(aggregate_id="user-1"))
                raise RuntimeError("erro")

        assert uow.rolled_back is True
        assert uow.published_events == []

    def test_reset(self):
        uow = InMemoryUnitOfWork()
        with uow:
            uow.publish_event(UsuarioCriadoEvent(aggregate_id="user-1"))

        uow.reset()

        assert uow.committed is False
        assert uow.published_events == []


class TestUserAdmin:

    def test_admin_registrado_sem_cadastro_direto(self):
        from django.contrib import admin

        model_admin = admin.site._registry[UserModel]

        assert model_admin.has_add_permission(request=None) is False
        assert model_admin.id_curto(UserModel(id="12345678-abcd")) == "12345678..."


class TestUserModel:

    def test_colunas_de_texto_sem_max_length(self):
        for campo in ('nome', 'email'):
            field = UserModel._meta.get_field(campo)

            assert field.get_internal_type() == 'TextField'
            assert field.max_length is None

    def test_email_unico(self):
        assert UserModel._meta.get_field('email').unique is True
