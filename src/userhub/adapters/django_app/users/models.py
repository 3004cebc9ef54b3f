"""
Django Models para o domínio de Usuários.

Estes models são ADAPTERS - implementam a persistência para a
entidade de domínio definida em userhub/core/users/entities.py.

IMPORTANTE:
- Models NÃO contêm lógica de negócio
- Validação de email fica na Entity do Core
- Campos de texto sem limite de tamanho: o domínio não impõe nenhum
- Models são mapeados para/de Entities via Mappers
"""

from django.db import models
from django.utils import timezone


class UserModel(models.Model):
    """
    Model Django para persistência de Usuários.

    Fields:
        id: UUID como primary key (gerado pela Entity)
        nome: Nome do usuário
        email: Email (único)
        criado_em: Timestamp de criação
        atualizado_em: Timestamp de última atualização
    """

    # Primary Key - UUID gerado pela Entity
    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID único do usuário"
    )

    nome = models.TextField(
        blank=True,
        default='',
        help_text="Nome do usuário"
    )

    email = models.TextField(
        unique=True,
        help_text="Email do usuário"
    )

    criado_em = models.DateTimeField(
        default=timezone.now,
        db_index=True,
        help_text="Data/hora de criação"
    )

    atualizado_em = models.DateTimeField(
        default=timezone.now,
        help_text="Data/hora da última atualização"
    )

    class Meta:
        db_table = 'users'
        verbose_name = 'Usuário'
        verbose_name_plural = 'Usuários'
        ordering = ['criado_em']

    def __str__(self):
        return f"[{self.id[:8]}] {self.nome} <{self.email}>"

    def __repr__(self):
        return f"<UserModel id={self.id[:8]} email={self.email}>"
