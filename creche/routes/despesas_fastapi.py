# creche/routes/despesas_fastapi.py
# -*- coding: utf-8 -*-
from fastapi import APIRouter, Depends, status

from creche.dependencies import get_expense_store
from creche.schemas.despesa import DespesaCreate, DespesaList, DespesaRead

router = APIRouter(
    tags=["Despesas"],
)


@router.get("/expenses", response_model=DespesaList)
def read_expenses(store=Depends(get_expense_store)):
    return {"expenses": store.list()}


@router.post("/expenses", response_model=DespesaRead, status_code=status.HTTP_201_CREATED)
def create_expense(despesa: DespesaCreate, store=Depends(get_expense_store)):
    return store.append(despesa)
