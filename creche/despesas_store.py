# -*- coding: utf-8 -*-
"""
Armazenamento das despesas lançadas localmente.

Duas implementações com o mesmo contrato (list / append):
- SqlAlchemyExpenseStore: persiste na tabela 'despesas' (padrão).
- InMemoryExpenseStore: começa vazio a cada subida do processo e só muda via append.

As escritas são serializadas por processo com um threading.Lock.
"""

import logging
import threading
from typing import List

from creche.config import Settings
from creche.database import Base, build_engine, build_session_factory
from creche.models.despesa import Despesa
from creche.schemas.despesa import DespesaCreate, DespesaRead


class InMemoryExpenseStore:

    def __init__(self):
        self._despesas: List[DespesaRead] = []
        self._proximo_id = 1
        self._lock = threading.Lock()

    def list(self) -> List[DespesaRead]:
        with self._lock:
            return list(self._despesas)

    def append(self, dados: DespesaCreate) -> DespesaRead:
        with self._lock:
            despesa = DespesaRead(id=self._proximo_id, **dados.model_dump())
            self._proximo_id += 1
            self._despesas.append(despesa)
        logging.info(f"Despesa #{despesa.id} registrada em memória ({despesa.category}).")
        return despesa


class SqlAlchemyExpenseStore:

    def __init__(self, session_factory):
        self._session_factory = session_factory
        self._lock = threading.Lock()

    @classmethod
    def from_url(cls, database_url: str):
        engine = build_engine(database_url)
        # Cria as tabelas no banco de dados
        Base.metadata.create_all(bind=engine)
        return cls(build_session_factory(engine))

    @staticmethod
    def _to_read(despesa: Despesa) -> DespesaRead:
        return DespesaRead(
            id=despesa.id,
            description=despesa.descricao,
            value=despesa.valor,
            category=despesa.categoria,
            date=despesa.data,
        )

    def list(self) -> List[DespesaRead]:
        with self._session_factory() as db:
            despesas = db.query(Despesa).order_by(Despesa.id).all()
            return [self._to_read(d) for d in despesas]

    def append(self, dados: DespesaCreate) -> DespesaRead:
        with self._lock, self._session_factory() as db:
            db_despesa = Despesa(
                descricao=dados.description,
                valor=dados.value,
                categoria=dados.category,
                data=dados.date,
            )
            db.add(db_despesa)
            db.commit()
            db.refresh(db_despesa)
            logging.info(f"Despesa #{db_despesa.id} registrada no banco ({db_despesa.categoria}).")
            return self._to_read(db_despesa)


def build_expense_store(settings: Settings):
    if settings.expense_store == "memory":
        logging.info("Usando armazenamento de despesas em memória.")
        return InMemoryExpenseStore()
    return SqlAlchemyExpenseStore.from_url(settings.database_url)
