# creche/schemas/financeiro.py
import datetime
from decimal import Decimal
from typing import List, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, Field

from creche.schemas.tipos import Dinheiro

ADIMPLENTE = "ADIMPLENTE"
INADIMPLENTE = "INADIMPLENTE"

# Valores sentinela de nextDueDate
EM_DIA = "Em dia"
SEM_COBRANCAS = "Sem cobranças"


# --- Entradas ---

class ClienteCobrancaCreate(BaseModel):
    name: str = Field(..., min_length=1)
    cpfCnpj: str = Field(..., min_length=1, validation_alias=AliasChoices("cpfCnpj", "taxId"))
    value: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    dueDate: datetime.date


class ReceitaCreate(BaseModel):
    customerId: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    value: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    dueDate: datetime.date
    category: Optional[str] = None


# --- Saídas ---

class StudentStatus(BaseModel):
    id: str
    name: str
    status: Literal["ADIMPLENTE", "INADIMPLENTE"]
    nextDueDate: Union[datetime.date, str]
    monthlyFee: Dinheiro


class StudentStatusList(BaseModel):
    students: List[StudentStatus]


class Grafico(BaseModel):
    labels: List[str]
    data: List[Dinheiro]


class DashboardSummary(BaseModel):
    totalRevenue: Dinheiro
    totalExpenses: Dinheiro
    netProfit: Dinheiro
    totalCustomers: int
    evolutionChart: Grafico
    expenseChart: Grafico


class RevenueReportItem(BaseModel):
    id: str
    customerName: str
    value: Dinheiro
    paymentDate: Optional[datetime.date] = None
    description: Optional[str] = None
    category: str


class RevenueReport(BaseModel):
    report: List[RevenueReportItem]


class StatementEntry(BaseModel):
    type: Literal["revenue", "expense"]
    date: datetime.date
    description: str
    category: str
    value: Dinheiro
    customerName: str


class Statement(BaseModel):
    statement: List[StatementEntry]
