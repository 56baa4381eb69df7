# -*- coding: utf-8 -*-
"""
Arquivo principal da aplicação FastAPI da API financeira da creche.
"""

import logging
import os

import uvicorn

from creche.app import create_app
from creche.config import load_settings

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)

# Sem ASAAS_API_KEY, load_settings levanta ConfigurationError e o processo não sobe
settings = load_settings()

# Inicializa a aplicação FastAPI
app = create_app(settings)


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=int(os.getenv("PORT", "3002")))
