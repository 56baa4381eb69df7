# creche/schemas/despesa.py
import datetime
from decimal import Decimal
from typing import List

from pydantic import BaseModel, Field

from creche.schemas.tipos import Dinheiro


class DespesaCreate(BaseModel):
    description: str = Field(..., min_length=1, max_length=255)
    # Aceita número ou texto numérico ("150.50")
    value: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    category: str = Field(..., min_length=1, max_length=255)
    date: datetime.date


class DespesaRead(BaseModel):
    id: int
    description: str
    value: Dinheiro
    category: str
    date: datetime.date


class DespesaList(BaseModel):
    expenses: List[DespesaRead]
