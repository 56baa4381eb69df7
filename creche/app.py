# -*- coding: utf-8 -*-
"""
Criação da aplicação FastAPI da API financeira da creche.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from creche.asaas_client import AsaasClient
from creche.config import Settings
from creche.despesas_store import build_expense_store
from creche.errors import PartialWriteError, UpstreamError
from creche.routes import alunos_fastapi, dashboard_fastapi, despesas_fastapi, receitas_fastapi


def _registrar_handlers(app: FastAPI):

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        erros = [
            {"field": ".".join(str(parte) for parte in erro["loc"][1:]), "message": erro["msg"]}
            for erro in exc.errors()
        ]
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Todos os campos são obrigatórios e devem ser válidos.", "errors": erros},
        )

    @app.exception_handler(PartialWriteError)
    async def partial_write_handler(request: Request, exc: PartialWriteError):
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": exc.message, "details": exc.details, "customer": exc.customer},
        )

    @app.exception_handler(UpstreamError)
    async def upstream_handler(request: Request, exc: UpstreamError):
        logging.error(f"Erro ao processar {request.method} {request.url.path}: {exc.message} {exc.details}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": f"Erro ao processar a requisição no Asaas: {exc.message}", "details": exc.details},
        )

    @app.exception_handler(Exception)
    async def generic_handler(request: Request, exc: Exception):
        logging.exception(f"Erro interno em {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Erro interno do servidor."},
        )


def create_app(settings: Settings, gateway=None, expense_store=None) -> FastAPI:
    """
    Monta a aplicação. gateway e expense_store podem ser injetados (testes);
    sem eles, são criados a partir das configurações.
    """
    gateway_proprio = gateway is None
    if gateway is None:
        gateway = AsaasClient.from_settings(settings)
    if expense_store is None:
        expense_store = build_expense_store(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        if gateway_proprio:
            await gateway.aclose()

    app = FastAPI(
        title="API Financeira da Creche",
        description="Status de alunos, dashboard e extrato a partir do Asaas e das despesas locais",
        version="1.0.0",
        docs_url=None if settings.producao else "/docs",
        redoc_url=None if settings.producao else "/redoc",
        openapi_url=None if settings.producao else "/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.gateway = gateway
    app.state.expense_store = expense_store

    origins = [
        settings.frontend_url,
        "http://localhost:5700",
        "http://localhost",
        "http://localhost:8080",
        "http://127.0.0.1",
        "http://127.0.0.1:8080",
    ]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _registrar_handlers(app)

    # Montagem dos routers
    app.include_router(alunos_fastapi.router, prefix="/api")
    app.include_router(receitas_fastapi.router, prefix="/api")
    app.include_router(despesas_fastapi.router, prefix="/api")
    app.include_router(dashboard_fastapi.router, prefix="/api")

    # Servir o frontend estático, se existir
    frontend_dir = Path(settings.frontend_dir)
    if frontend_dir.is_dir():
        app.mount("/", StaticFiles(directory=frontend_dir, html=True), name="frontend")
    else:
        @app.get("/", tags=["Root"])
        async def root():
            return {
                "mensagem": "API Financeira da Creche",
                "documentacao": "/docs",
                "endpoints": [
                    {"status_alunos": "/api/students-status"},
                    {"cliente_e_cobranca": "/api/customers-and-payment"},
                    {"relatorio_receitas": "/api/revenue-report"},
                    {"receitas": "/api/revenue"},
                    {"despesas": "/api/expenses"},
                    {"dashboard": "/api/dashboard-summary"},
                    {"extrato": "/api/financial-statement"},
                ],
            }

    return app
