# -*- coding: utf-8 -*-
"""
Exceções da aplicação. Os handlers em creche.app convertem cada uma em resposta JSON.
"""


class ConfigurationError(Exception):
    """Configuração obrigatória ausente ou inválida. Impede a subida do processo."""


class UpstreamError(Exception):
    """Falha numa chamada ao Asaas (erro HTTP ou de transporte)."""

    def __init__(self, message: str, details=None, status_code: int = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.status_code = status_code


class PartialWriteError(UpstreamError):
    """O cliente foi criado no Asaas mas a cobrança não. Não há rollback."""

    def __init__(self, message: str, customer: dict, details=None, status_code: int = None):
        super().__init__(message, details=details, status_code=status_code)
        self.customer = customer
