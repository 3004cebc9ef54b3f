"""
URL Configuration para UserHub.

Estrutura:
- /admin/ - Django Admin
- /users/ - API JSON de Usuários
- /health/ - Health check
"""

from django.contrib import admin
from django.http import JsonResponse
from django.urls import path, include


def health(request):
    return JsonResponse({'status': 'ok'})


urlpatterns = [
    path('admin/', admin.site.urls),
    path('users/', include('userhub.adapters.django_app.users.urls')),
    path('health/', health, name='health'),
]
