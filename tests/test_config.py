"""
Testes da leitura da configuração pelo ambiente.
"""

import pytest

from creche import config
from creche.errors import ConfigurationError

VARIAVEIS = (
    "ASAAS_API_KEY", "ASAAS_BASE_URL", "ASAAS_TIMEOUT", "ASAAS_PAGE_SIZE", "ASAAS_MAX_CONCURRENCY",
    "EXPENSE_STORE", "DATABASE_URL", "ENVIRONMENT", "FRONTEND_URL", "FRONTEND_DIR",
)


@pytest.fixture(autouse=True)
def ambiente_limpo(monkeypatch):
    # Não lê nenhum .env da máquina
    monkeypatch.setattr(config, "load_dotenv", lambda: None)
    for nome in VARIAVEIS:
        monkeypatch.delenv(nome, raising=False)


def test_sem_chave_da_api_e_fatal():
    with pytest.raises(ConfigurationError, match="ASAAS_API_KEY"):
        config.load_settings()


def test_valores_padrao(monkeypatch):
    monkeypatch.setenv("ASAAS_API_KEY", "chave")

    settings = config.load_settings()

    assert settings.asaas_api_key == "chave"
    assert settings.asaas_base_url == "https://api.asaas.com/v3"
    assert settings.asaas_page_size == 100
    assert settings.asaas_max_concurrency == 5
    assert settings.expense_store == "database"
    assert settings.producao is False


def test_sobrescritas(monkeypatch):
    monkeypatch.setenv("ASAAS_API_KEY", "chave")
    monkeypatch.setenv("ASAAS_BASE_URL", "https://sandbox.asaas.com/api/v3/")
    monkeypatch.setenv("ASAAS_MAX_CONCURRENCY", "2")
    monkeypatch.setenv("EXPENSE_STORE", "MEMORY")
    monkeypatch.setenv("DATABASE_URL", "postgres://u:p@host/db")
    monkeypatch.setenv("ENVIRONMENT", "production")

    settings = config.load_settings()

    assert settings.asaas_base_url == "https://sandbox.asaas.com/api/v3"
    assert settings.asaas_max_concurrency == 2
    assert settings.expense_store == "memory"
    assert settings.database_url == "postgresql://u:p@host/db"
    assert settings.producao is True


@pytest.mark.parametrize("nome,valor", [
    ("ASAAS_MAX_CONCURRENCY", "0"),
    ("ASAAS_PAGE_SIZE", "muitos"),
    ("EXPENSE_STORE", "redis"),
    ("ASAAS_TIMEOUT", "rápido"),
])
def test_valores_invalidos(monkeypatch, nome, valor):
    monkeypatch.setenv("ASAAS_API_KEY", "chave")
    monkeypatch.setenv(nome, valor)

    with pytest.raises(ConfigurationError):
        config.load_settings()
