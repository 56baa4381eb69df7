# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Despesa (lançamentos locais, nunca vêm do Asaas).
"""
from datetime import datetime

from sqlalchemy import Column, Date, DateTime, Integer, Numeric, String

from creche.database import Base


class Despesa(Base):
    __tablename__ = 'despesas'

    id = Column(Integer, primary_key=True, index=True)
    descricao = Column(String(255), nullable=False)
    valor = Column(Numeric(10, 2), nullable=False)
    # Categoria livre, usada como chave de agrupamento (sem normalização)
    categoria = Column(String(255), nullable=False)
    data = Column(Date, nullable=False)
    criado_em = Column(DateTime, default=datetime.utcnow)
