# Arquivo: creche/routes/alunos_fastapi.py
# -*- coding: utf-8 -*-

import logging

from fastapi import APIRouter, Depends, status

from creche import agregacao
from creche.config import Settings
from creche.dependencies import get_gateway, get_settings
from creche.errors import PartialWriteError, UpstreamError
from creche.schemas.financeiro import ClienteCobrancaCreate, StudentStatusList

router = APIRouter(
    tags=["Alunos"],
)


@router.get("/students-status", response_model=StudentStatusList)
async def get_students_status(gateway=Depends(get_gateway), settings: Settings = Depends(get_settings)):
    """
    Retorna o status de pagamento (adimplente/inadimplente) de cada aluno.
    """
    clientes = await gateway.list_customers(limit=settings.asaas_page_size)
    if not clientes:
        return {"students": []}

    alunos = await agregacao.buscar_status_alunos(gateway, clientes, settings.asaas_max_concurrency)
    return {"students": alunos}


@router.post("/customers-and-payment", status_code=status.HTTP_201_CREATED)
async def create_customer_and_payment(dados: ClienteCobrancaCreate, gateway=Depends(get_gateway)):
    """
    Cria o cliente no Asaas e em seguida a primeira cobrança (boleto) da mensalidade.
    Se a cobrança falhar, o cliente já criado não é removido.
    """
    customer = await gateway.create_customer(name=dados.name, cpf_cnpj=dados.cpfCnpj)

    try:
        payment = await gateway.create_payment(
            customer_id=customer["id"],
            value=dados.value,
            due_date=dados.dueDate,
            description=f"Mensalidade da creche para {dados.name}",
        )
    except UpstreamError as e:
        logging.error(f"Cliente {customer.get('id')} criado no Asaas, mas a cobrança falhou: {e.details}")
        raise PartialWriteError(
            "Cliente criado no Asaas, mas a cobrança não foi gerada.",
            customer=customer,
            details=e.details,
            status_code=e.status_code,
        ) from e

    logging.info(f"Cliente {customer['id']} e cobrança {payment.get('id')} criados no Asaas.")
    return {"customer": customer, "payment": payment}
