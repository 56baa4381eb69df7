# -*- coding: utf-8 -*-
"""
Configuração do banco de dados SQLAlchemy usado pelo armazenamento de despesas.
"""

from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

# Cria uma Base class
Base = declarative_base()


def build_engine(database_url: str):
    """Cria a engine SQLAlchemy com as mesmas opções de robustez para SQLite e PostgreSQL."""
    connect_args = {}
    kwargs = {}
    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            # Banco em memória: uma única conexão compartilhada entre threads
            kwargs["poolclass"] = StaticPool
        else:
            caminho = database_url.replace("sqlite:///", "", 1)
            Path(caminho).parent.mkdir(parents=True, exist_ok=True)

    return create_engine(
        database_url,
        connect_args=connect_args,
        # pool_pre_ping=True: Verifica se a conexão está viva antes de usar (Evita o erro SSL connection closed)
        pool_pre_ping=True,
        # pool_recycle: Recicla conexões a cada hora para evitar timeouts do banco
        pool_recycle=3600,
        **kwargs,
    )


def build_session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
