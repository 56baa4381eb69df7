# -*- coding: utf-8 -*-
"""
Cliente assíncrono da API do Asaas (clientes e cobranças).
"""

import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional

import httpx
from pydantic import ValidationError

from creche.config import Settings
from creche.errors import UpstreamError
from creche.schemas.asaas import Cliente, Cobranca

BILLING_TYPE_PADRAO = "BOLETO"


class AsaasClient:
    """
    Encapsula as chamadas HTTP ao Asaas. Toda requisição leva o header access_token.
    Erros HTTP ou de transporte viram UpstreamError com o corpo devolvido pelo Asaas.
    """

    def __init__(self, api_key: str, base_url: str, timeout: float = 15.0,
                 page_size: int = 100, transport: httpx.AsyncBaseTransport = None):
        self.page_size = page_size
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={
                "access_token": api_key,
                "Content-Type": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings, transport: httpx.AsyncBaseTransport = None):
        return cls(
            api_key=settings.asaas_api_key,
            base_url=settings.asaas_base_url,
            timeout=settings.asaas_timeout,
            page_size=settings.asaas_page_size,
            transport=transport,
        )

    async def aclose(self):
        await self._client.aclose()

    async def _request(self, method: str, path: str, params: dict = None, json: dict = None) -> dict:
        try:
            response = await self._client.request(method, path, params=params, json=json)
        except httpx.RequestError as e:
            logging.error(f"Erro de comunicação com o Asaas em {method} {path}: {e}")
            raise UpstreamError("Erro de comunicação com o Asaas.", details=str(e))

        try:
            body = response.json()
        except ValueError:
            body = None

        if response.is_error:
            details = body if body is not None else response.text
            logging.error(f"Erro Asaas {response.status_code} em {method} {path}: {details}")
            raise UpstreamError("O Asaas recusou a requisição.", details=details,
                                status_code=response.status_code)

        if not isinstance(body, dict):
            logging.error(f"Resposta inválida do Asaas em {method} {path}: {response.text}")
            raise UpstreamError("Resposta inválida do Asaas.", details=response.text,
                                status_code=response.status_code)
        if body.get("errors"):
            logging.error(f"Erro Asaas em {method} {path}: {body}")
            raise UpstreamError("O Asaas recusou a requisição.", details=body,
                                status_code=response.status_code)
        return body

    def _parse_lista(self, body: dict, schema):
        try:
            return [schema.model_validate(item) for item in body.get("data") or []]
        except ValidationError as e:
            logging.error(f"Registro do Asaas fora do formato esperado: {e}")
            raise UpstreamError("Resposta inválida do Asaas.", details=str(e))

    # --- Clientes ---

    async def list_customers(self, limit: Optional[int] = None) -> List[Cliente]:
        body = await self._request("GET", "/customers", params={"limit": limit or self.page_size})
        return self._parse_lista(body, Cliente)

    async def create_customer(self, name: str, cpf_cnpj: str) -> dict:
        body = await self._request("POST", "/customers", json={"name": name, "cpfCnpj": cpf_cnpj})
        # Sem id não há como gerar a cobrança do cliente
        if not body.get("id"):
            logging.error(f"Asaas criou cliente sem id: {body}")
            raise UpstreamError("Resposta inválida do Asaas.", details=body)
        return body

    # --- Cobranças ---

    async def list_payments(self, customer_id: Optional[str] = None, status: Optional[str] = None,
                            limit: Optional[int] = None) -> List[Cobranca]:
        params = {"limit": limit or self.page_size}
        if customer_id:
            params["customer"] = customer_id
        if status:
            params["status"] = status
        body = await self._request("GET", "/payments", params=params)
        return self._parse_lista(body, Cobranca)

    async def create_payment(self, customer_id: str, value: Decimal, due_date: date,
                             description: str, billing_type: str = BILLING_TYPE_PADRAO) -> dict:
        payload = {
            "customer": customer_id,
            "billingType": billing_type,
            "value": float(value),
            "dueDate": due_date.isoformat(),
            "description": description,
        }
        return await self._request("POST", "/payments", json=payload)
