# -*- coding: utf-8 -*-
"""
Dependências do FastAPI (usadas com Depends). Os objetos vivem em app.state.
"""

from fastapi import Request

from creche.config import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_gateway(request: Request):
    return request.app.state.gateway


def get_expense_store(request: Request):
    return request.app.state.expense_store
