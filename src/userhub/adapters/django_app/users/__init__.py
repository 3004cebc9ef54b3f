"""Django app do domínio de Usuários."""
