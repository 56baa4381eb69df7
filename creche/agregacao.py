# -*- coding: utf-8 -*-
"""
Regras de agregação financeira.

Transforma clientes e cobranças do Asaas mais as despesas locais em:
- status de pagamento por aluno
- resumo do dashboard (receitas, despesas, gráficos)
- relatório de receitas e extrato financeiro unificado

Tudo aqui é transformação pura, exceto buscar_status_alunos, que faz o
fan-out das consultas de cobranças por aluno.
"""

import asyncio
import re
from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from dateutil.relativedelta import relativedelta

from creche.schemas.asaas import OVERDUE, PENDING, RECEIVED, Cliente, Cobranca
from creche.schemas.despesa import DespesaRead
from creche.schemas.financeiro import (
    ADIMPLENTE, EM_DIA, INADIMPLENTE, SEM_COBRANCAS,
    DashboardSummary, Grafico, RevenueReportItem, StatementEntry, StudentStatus,
)

CATEGORIA_PADRAO = "Mensalidade"
CLIENTE_NAO_ENCONTRADO = "Cliente não encontrado"
SEM_CLIENTE = "N/A"
CLIENTE_SEM_NOME = "Cliente sem nome"

MESES_ABREVIADOS = ("jan.", "fev.", "mar.", "abr.", "mai.", "jun.",
                    "jul.", "ago.", "set.", "out.", "nov.", "dez.")

_CATEGORIA_RE = re.compile(r"^\s*\[([^\[\]]+)\]")


# --- Status dos alunos ---

def calcular_status_aluno(cliente: Cliente, cobrancas: List[Cobranca]) -> StudentStatus:
    """
    Deriva o status de um aluno a partir de todas as suas cobranças.

    - INADIMPLENTE se houver qualquer cobrança vencida (OVERDUE).
    - Próximo vencimento e mensalidade vêm da cobrança em aberto mais antiga.
    - Sem cobranças em aberto: mensalidade da cobrança mais recente e "Em dia".
    - Sem nenhuma cobrança: "Sem cobranças" e mensalidade zero.
    """
    status = INADIMPLENTE if any(c.status == OVERDUE for c in cobrancas) else ADIMPLENTE

    em_aberto = sorted(
        (c for c in cobrancas if c.status in (PENDING, OVERDUE)),
        key=lambda c: c.dueDate,
    )

    if em_aberto:
        proximo_vencimento = em_aberto[0].dueDate
        mensalidade = em_aberto[0].value
    elif cobrancas:
        ultima = sorted(cobrancas, key=lambda c: c.paymentDate or c.dueDate, reverse=True)[0]
        proximo_vencimento = EM_DIA
        mensalidade = ultima.value
    else:
        proximo_vencimento = SEM_COBRANCAS
        mensalidade = Decimal("0")

    return StudentStatus(
        id=cliente.id,
        name=cliente.name or CLIENTE_SEM_NOME,
        status=status,
        nextDueDate=proximo_vencimento,
        monthlyFee=mensalidade,
    )


async def buscar_status_alunos(gateway, clientes: List[Cliente], max_concorrencia: int = 5) -> List[StudentStatus]:
    """
    Busca as cobranças de cada cliente com no máximo `max_concorrencia` chamadas
    simultâneas ao Asaas. A ordem do resultado é a ordem dos clientes.
    Qualquer falha individual derruba a requisição inteira.
    """
    semaforo = asyncio.Semaphore(max_concorrencia)

    async def status_do_cliente(cliente: Cliente) -> StudentStatus:
        async with semaforo:
            cobrancas = await gateway.list_payments(customer_id=cliente.id)
        return calcular_status_aluno(cliente, cobrancas)

    return list(await asyncio.gather(*(status_do_cliente(c) for c in clientes)))


# --- Dashboard ---

def rotulo_mes(dia: date) -> str:
    return MESES_ABREVIADOS[dia.month - 1]


def montar_resumo_dashboard(cobrancas: List[Cobranca], despesas: List[DespesaRead],
                            hoje: Optional[date] = None) -> DashboardSummary:
    hoje = hoje or date.today()

    total_receitas = Decimal("0")
    clientes = set()
    receita_mensal: Dict[str, Decimal] = defaultdict(Decimal)

    for cobranca in cobrancas:
        clientes.add(cobranca.customer)
        # Recebida sem data de pagamento é registro malformado: fica de fora
        if cobranca.status == RECEIVED and cobranca.paymentDate:
            total_receitas += cobranca.value
            receita_mensal[cobranca.paymentDate.strftime("%Y-%m")] += cobranca.value

    # Janela dos últimos 6 meses, terminando no mês atual, em ordem cronológica
    inicio_mes = hoje.replace(day=1)
    meses = [inicio_mes - relativedelta(months=i) for i in range(6)]
    meses.reverse()
    evolucao = Grafico(
        labels=[rotulo_mes(m) for m in meses],
        data=[receita_mensal.get(m.strftime("%Y-%m"), Decimal("0")) for m in meses],
    )

    total_despesas = Decimal("0")
    por_categoria: Dict[str, Decimal] = {}
    for despesa in despesas:
        total_despesas += despesa.value
        por_categoria[despesa.category] = por_categoria.get(despesa.category, Decimal("0")) + despesa.value

    return DashboardSummary(
        totalRevenue=total_receitas,
        totalExpenses=total_despesas,
        netProfit=total_receitas - total_despesas,
        totalCustomers=len(clientes),
        evolutionChart=evolucao,
        expenseChart=Grafico(labels=list(por_categoria.keys()), data=list(por_categoria.values())),
    )


# --- Relatório de receitas e extrato ---

def extrair_categoria(descricao: Optional[str]) -> str:
    """Categoria do prefixo "[categoria]" da descrição; sem prefixo, "Mensalidade"."""
    if descricao:
        match = _CATEGORIA_RE.match(descricao)
        if match and match.group(1).strip():
            return match.group(1).strip()
    return CATEGORIA_PADRAO


def mapa_nomes_clientes(clientes: Iterable[Cliente]) -> Dict[str, str]:
    return {c.id: c.name or CLIENTE_SEM_NOME for c in clientes}


def montar_relatorio_receitas(clientes: List[Cliente], cobrancas: List[Cobranca]) -> List[RevenueReportItem]:
    nomes = mapa_nomes_clientes(clientes)
    return [
        RevenueReportItem(
            id=c.id,
            customerName=nomes.get(c.customer, CLIENTE_NAO_ENCONTRADO),
            value=c.value,
            paymentDate=c.paymentDate,
            description=c.description,
            category=extrair_categoria(c.description),
        )
        for c in cobrancas
        if c.status == RECEIVED
    ]


def montar_extrato(clientes: List[Cliente], cobrancas: List[Cobranca],
                   despesas: List[DespesaRead]) -> List[StatementEntry]:
    """Receitas recebidas e despesas numa única lista, da mais recente para a mais antiga."""
    nomes = mapa_nomes_clientes(clientes)

    receitas = [
        StatementEntry(
            type="revenue",
            date=c.paymentDate or c.dueDate,
            description=c.description or "",
            category=extrair_categoria(c.description),
            value=c.value,
            customerName=nomes.get(c.customer, CLIENTE_NAO_ENCONTRADO),
        )
        for c in cobrancas
        if c.status == RECEIVED
    ]
    saidas = [
        StatementEntry(
            type="expense",
            date=d.date,
            description=d.description,
            category=d.category,
            value=d.value,
            customerName=SEM_CLIENTE,
        )
        for d in despesas
    ]

    return sorted(receitas + saidas, key=lambda e: e.date, reverse=True)
