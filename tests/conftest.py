"""
Fixtures compartilhadas: configuração de teste, gateway falso do Asaas e cliente HTTP.
"""

from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from creche.app import create_app
from creche.config import Settings
from creche.despesas_store import InMemoryExpenseStore
from creche.schemas.asaas import Cliente, Cobranca
from creche.schemas.despesa import DespesaRead


class FakeGateway:
    """Substitui o AsaasClient; cada método é um AsyncMock inspecionável."""

    def __init__(self):
        self.list_customers = AsyncMock(return_value=[])
        self.list_payments = AsyncMock(return_value=[])
        self.create_customer = AsyncMock()
        self.create_payment = AsyncMock()


@pytest.fixture
def settings(tmp_path):
    return Settings(
        asaas_api_key="chave-de-teste",
        asaas_base_url="https://sandbox.asaas.test/v3",
        expense_store="memory",
        database_url="sqlite://",
        frontend_dir=str(tmp_path / "sem-frontend"),
    )


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def expense_store():
    return InMemoryExpenseStore()


@pytest.fixture
def client(settings, gateway, expense_store):
    app = create_app(settings, gateway=gateway, expense_store=expense_store)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_cliente():
    def _make(id="cus_1", name="Ana"):
        return Cliente(id=id, name=name)
    return _make


@pytest.fixture
def make_cobranca():
    contador = {"n": 0}

    def _make(customer="cus_1", status="PENDING", value="500.00", dueDate="2024-01-10",
              paymentDate=None, description="Mensalidade da creche"):
        contador["n"] += 1
        return Cobranca(
            id=f"pay_{contador['n']}",
            customer=customer,
            status=status,
            value=Decimal(value),
            dueDate=date.fromisoformat(dueDate),
            paymentDate=date.fromisoformat(paymentDate) if paymentDate else None,
            description=description,
        )
    return _make


@pytest.fixture
def make_despesa():
    contador = {"n": 0}

    def _make(category="food", value="100.00", date_="2024-01-15", description="Compra"):
        contador["n"] += 1
        return DespesaRead(
            id=contador["n"],
            description=description,
            value=Decimal(value),
            category=category,
            date=date.fromisoformat(date_),
        )
    return _make
