#!/usr/bin/env python
"""
Setup rápido para desenvolvimento local.

Este script:
1. Configura Django settings (SQLite)
2. Executa migrations
3. Cadastra usuários de exemplo pelo CriarUsuarioService (opcional)

Uso:
    python scripts/quick_setup.py
    python scripts/quick_setup.py --with-sample-data
"""

import os
import sys
import argparse

# Adicionar src ao path (permite rodar sem `pip install -e .`)
sys.path.insert(
    0,
    os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src'),
)


def setup_django():
    """Configura Django para uso standalone."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'userhub.config.settings')

    # Forçar SQLite para desenvolvimento rápido
    os.environ['DATABASE_URL'] = 'sqlite:///db.sqlite3'

    import django
    django.setup()


def run_migrations():
    from django.core.management import call_command

    print("📦 Executando migrations...")
    call_command('migrate', verbosity=1)
    print("✅ Migrations concluídas!")


def create_sample_data():
    """Cadastra usuários de exemplo passando pelas regras do Core."""
    from userhub.config.container import get_container
    from userhub.core.users.dtos import CriarUsuarioInputDTO
    from userhub.core.shared.exceptions import DomainException

    sample_users = [
        ('Ana Souza', 'ana@example.com'),
        ('Bruno Lima', 'bruno@example.com'),
        ('Carla Dias', 'carla@example.com'),
        ('Sem Arroba', 'invalido.example.com'),
    ]

    print("📝 Criando usuários de exemplo...")

    criar_service = get_container().criar_usuario_service()
    criados = 0

    for nome, email in sample_users:
        try:
            criar_service.execute(CriarUsuarioInputDTO(nome=nome, email=email))
            criados += 1
            print(f"   ✓ {nome} <{email}>")
        except DomainException as e:
            print(f"   ✗ {nome} <{email}>: {e}")

    print(f"✅ {criados} usuários criados!")


def check_connection():
    """Verifica conexão com o banco."""
    from django.db import connection

    print("🔍 Verificando conexão com o banco...")

    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        print("✅ Conexão OK!")
        return True
    except Exception as e:
        print(f"❌ Erro de conexão: {e}")
        return False


def show_info():
    from django.conf import settings

    print("\n" + "=" * 60)
    print("📊 Informações do Setup")
    print("=" * 60)
    print(f"  Database Engine: {settings.DATABASES['default']['ENGINE']}")
    print(f"  Database Name: {settings.DATABASES['default']['NAME']}")
    print(f"  Event Publisher: {settings.EVENT_PUBLISHER_MODE}")
    print(f"  Debug Mode: {settings.DEBUG}")
    print("=" * 60)
    print("\n🚀 Próximos passos:")
    print("   1. python manage.py runserver")
    print("   2. Acesse: http://localhost:8000/users/")
    print("   3. Acesse: http://localhost:8000/admin/")
    print("\n")


def main():
    parser = argparse.ArgumentParser(description='Setup rápido para desenvolvimento')
    parser.add_argument(
        '--with-sample-data',
        action='store_true',
        help='Criar usuários de exemplo'
    )
    parser.add_argument(
        '--check-only',
        action='store_true',
        help='Apenas verificar conexão'
    )

    args = parser.parse_args()

    print("\n" + "=" * 60)
    print("🔧 UserHub - Quick Setup")
    print("=" * 60 + "\n")

    setup_django()

    if args.check_only:
        check_connection()
        return

    if not check_connection():
        print("\n⚠️  Certifique-se de que o banco de dados está rodando.")
        return

    run_migrations()

    if args.with_sample_data:
        create_sample_data()

    show_info()


if __name__ == '__main__':
    main()
