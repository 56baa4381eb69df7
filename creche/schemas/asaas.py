# -*- coding: utf-8 -*-
"""
Schemas Pydantic para os registros lidos do Asaas (clientes e cobranças).
Os nomes dos campos seguem o JSON da API do Asaas.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel

from creche.schemas.tipos import Dinheiro

# Status de cobrança usados nas regras de agregação
PENDING = "PENDING"
OVERDUE = "OVERDUE"
RECEIVED = "RECEIVED"


class Cliente(BaseModel):
    id: str
    # O Asaas aceita cliente sem nome
    name: Optional[str] = None


class Cobranca(BaseModel):
    id: str
    customer: str
    status: str
    value: Dinheiro
    dueDate: date
    paymentDate: Optional[date] = None
    description: Optional[str] = None
