"""
Django Admin para o domínio de Usuários.
"""

from django.contrib import admin

from .models import UserModel


@admin.register(UserModel)
class UserAdmin(admin.ModelAdmin):
    """Admin para UserModel."""

    list_display = [
        'id_curto',
        'nome',
        'email',
        'criado_em',
        'atualizado_em',
    ]

    search_fields = [
        'id',
        'nome',
        'email',
    ]

    readonly_fields = [
        'id',
        'criado_em',
        'atualizado_em',
    ]

    ordering = ['-criado_em']

    @admin.display(description='ID')
    def id_curto(self, obj):
        return f"{obj.id[:8]}..."

    def has_add_permission(self, request):
        # Cadastro passa pelo CriarUsuarioService (validação de email)
        return False
