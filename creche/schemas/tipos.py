# -*- coding: utf-8 -*-
from decimal import Decimal
from typing import Annotated

from pydantic import PlainSerializer

# Valores monetários: Decimal internamente, número no JSON de resposta
Dinheiro = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
