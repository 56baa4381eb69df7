# Arquivo: creche/routes/receitas_fastapi.py
# -*- coding: utf-8 -*-

import asyncio
import logging

from fastapi import APIRouter, Depends, status

from creche import agregacao
from creche.config import Settings
from creche.dependencies import get_gateway, get_settings
from creche.schemas.asaas import RECEIVED
from creche.schemas.financeiro import ReceitaCreate, RevenueReport

router = APIRouter(
    tags=["Receitas"],
)

CATEGORIA_AVULSA = "Avulso"


@router.get("/revenue-report", response_model=RevenueReport)
async def get_revenue_report(gateway=Depends(get_gateway), settings: Settings = Depends(get_settings)):
    """Lista as cobranças recebidas com o nome do cliente e a categoria."""
    clientes, recebidas = await asyncio.gather(
        gateway.list_customers(limit=settings.asaas_page_size),
        gateway.list_payments(status=RECEIVED, limit=settings.asaas_page_size),
    )
    return {"report": agregacao.montar_relatorio_receitas(clientes, recebidas)}


@router.post("/revenue", status_code=status.HTTP_201_CREATED)
async def create_revenue(dados: ReceitaCreate, gateway=Depends(get_gateway)):
    """
    Cria uma receita avulsa como cobrança no Asaas.
    A categoria vai como prefixo "[categoria]" na descrição.
    """
    categoria = (dados.category or "").strip() or CATEGORIA_AVULSA
    payment = await gateway.create_payment(
        customer_id=dados.customerId,
        value=dados.value,
        due_date=dados.dueDate,
        description=f"[{categoria}] {dados.description}",
    )
    logging.info(f"Receita avulsa {payment.get('id')} ({categoria}) criada para o cliente {dados.customerId}.")
    return {"payment": payment}
