# Em creche/routes/dashboard_fastapi.py

import asyncio

from fastapi import APIRouter, Depends
from starlette.concurrency import run_in_threadpool

from creche import agregacao
from creche.config import Settings
from creche.dependencies import get_expense_store, get_gateway, get_settings
from creche.schemas.asaas import RECEIVED
from creche.schemas.financeiro import DashboardSummary, Statement

router = APIRouter(
    tags=["Dashboard"],
)


@router.get("/dashboard-summary", response_model=DashboardSummary)
async def get_dashboard_summary(gateway=Depends(get_gateway), store=Depends(get_expense_store),
                                settings: Settings = Depends(get_settings)):
    """
    Totais de receitas e despesas, lucro líquido e dados dos gráficos
    (receita dos últimos 6 meses e despesas por categoria).
    O total de clientes é contado sobre a página de cobranças, não é um total real.
    """
    cobrancas, despesas = await asyncio.gather(
        gateway.list_payments(limit=settings.asaas_page_size),
        run_in_threadpool(store.list),
    )
    return agregacao.montar_resumo_dashboard(cobrancas, despesas)


@router.get("/financial-statement", response_model=Statement)
async def get_financial_statement(gateway=Depends(get_gateway), store=Depends(get_expense_store),
                                  settings: Settings = Depends(get_settings)):
    """Extrato unificado de receitas recebidas e despesas, do mais recente ao mais antigo."""
    clientes, recebidas, despesas = await asyncio.gather(
        gateway.list_customers(limit=settings.asaas_page_size),
        gateway.list_payments(status=RECEIVED, limit=settings.asaas_page_size),
        run_in_threadpool(store.list),
    )
    return {"statement": agregacao.montar_extrato(clientes, recebidas, despesas)}
