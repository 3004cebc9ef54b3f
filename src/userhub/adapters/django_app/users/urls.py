"""
URL patterns para o domínio de Usuários.

Endpoints API JSON (montados em /users/):
- GET /users/ - Listar usuários
- POST /users/ - Criar usuário
- GET /users/<id>/ - Obter usuário
- PATCH /users/<id>/ - Atualizar usuário
- DELETE /users/<id>/ - Remover usuário
"""

from django.urls import path

from . import api_views

app_name = 'users'

urlpatterns = [
    path('', api_views.UserAPIListView.as_view(), name='api_list'),
    path('<str:pk>/', api_views.UserAPIDetailView.as_view(), name='api_detail'),
]
