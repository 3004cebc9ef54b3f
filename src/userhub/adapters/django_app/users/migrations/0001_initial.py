"""
Migration inicial para o domínio de Usuários.

Cria a tabela:
- users: Usuários cadastrados
"""

from django.db import migrations, models
import django.utils.timezone


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='UserModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='UUID único do usuário'
                )),
                ('nome', models.TextField(
                    blank=True,
                    default='',
                    help_text='Nome do usuário'
                )),
                ('email', models.TextField(
                    unique=True,
                    help_text='Email do usuário'
                )),
                ('criado_em', models.DateTimeField(
                    default=django.utils.timezone.now,
                    db_index=True,
                    help_text='Data/hora de criação'
                )),
                ('atualizado_em', models.DateTimeField(
                    default=django.utils.timezone.now,
                    help_text='Data/hora da última atualização'
                )),
            ],
            options={
                'verbose_name': 'Usuário',
                'verbose_name_plural': 'Usuários',
                'db_table': 'users',
                'ordering': ['criado_em'],
            },
        ),
    ]
