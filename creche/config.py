# -*- coding: utf-8 -*-
"""
Configuração da aplicação lida das variáveis de ambiente (.env).
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from creche.errors import ConfigurationError

ASAAS_BASE_URL_PADRAO = "https://api.asaas.com/v3"


@dataclass
class Settings:
    asaas_api_key: str
    asaas_base_url: str = ASAAS_BASE_URL_PADRAO
    asaas_timeout: float = 15.0
    asaas_page_size: int = 100
    asaas_max_concurrency: int = 5
    expense_store: str = "database"
    database_url: str = "sqlite:///./database/creche.db"
    environment: str = "development"
    frontend_url: str = "http://localhost:5700"
    frontend_dir: str = "./frontend_static"

    @property
    def producao(self) -> bool:
        return self.environment == "production"


def _int_env(nome: str, padrao: int) -> int:
    valor = os.getenv(nome)
    if not valor:
        return padrao
    try:
        numero = int(valor)
    except ValueError:
        raise ConfigurationError(f"A variável de ambiente {nome} deve ser um número inteiro.")
    if numero < 1:
        raise ConfigurationError(f"A variável de ambiente {nome} deve ser maior que zero.")
    return numero


def load_settings() -> Settings:
    """
    Carrega a configuração do ambiente.
    Sem ASAAS_API_KEY a aplicação não pode subir: levanta ConfigurationError.
    """
    load_dotenv()

    api_key = os.getenv("ASAAS_API_KEY")
    if not api_key:
        raise ConfigurationError("A variável de ambiente ASAAS_API_KEY não está definida.")

    store = os.getenv("EXPENSE_STORE", "database").lower()
    if store not in ("database", "memory"):
        raise ConfigurationError("EXPENSE_STORE deve ser 'database' ou 'memory'.")

    try:
        timeout = float(os.getenv("ASAAS_TIMEOUT", "15.0"))
    except ValueError:
        raise ConfigurationError("A variável de ambiente ASAAS_TIMEOUT deve ser numérica.")

    database_url = os.getenv("DATABASE_URL", "sqlite:///./database/creche.db")
    # Se for PostgreSQL no Render, ajusta o prefixo
    if database_url.startswith("postgres://"):
        database_url = database_url.replace("postgres://", "postgresql://", 1)

    return Settings(
        asaas_api_key=api_key,
        asaas_base_url=os.getenv("ASAAS_BASE_URL", ASAAS_BASE_URL_PADRAO).rstrip("/"),
        asaas_timeout=timeout,
        asaas_page_size=_int_env("ASAAS_PAGE_SIZE", 100),
        asaas_max_concurrency=_int_env("ASAAS_MAX_CONCURRENCY", 5),
        expense_store=store,
        database_url=database_url,
        environment=os.getenv("ENVIRONMENT", "development"),
        frontend_url=os.getenv("FRONTEND_URL", "http://localhost:5700"),
        frontend_dir=os.getenv("FRONTEND_DIR", "./frontend_static"),
    )
