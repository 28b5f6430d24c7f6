"""Helpers de valor: hash de PII e coerção de propriedades customizadas."""

from __future__ import annotations

import hashlib
import math
import re
from typing import Any

# Inteiro JSON (sem sinal '+', sem espaços ou '_')
_INTEGER_REGEX = re.compile(r"-?\d+", re.ASCII)
# Decimal aceito pela coerção numérica
_DECIMAL_REGEX = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def hash_value(value: str) -> str:
    """Retorna o digest SHA-256 (hex minúsculo) do valor em UTF-8.

    Args:
        value: Valor em texto claro

    Returns:
        Hash hexadecimal com 64 caracteres
    """
    return hashlib.sha256(value.encode("utf-8")).hexdigest()


def parse_value(value: str) -> Any:
    """Converte o valor textual de uma propriedade para um valor JSON.

    - "true"/"false" viram bool
    - texto numérico vira int (quando inteiro) ou float
    - qualquer outro valor permanece string

    Exemplos:
        >>> parse_value("true")
        True
        >>> parse_value("10")
        10
        >>> parse_value("abc")
        'abc'
    """
    if value == "true":
        return True
    if value == "false":
        return False
    if _INTEGER_REGEX.fullmatch(value):
        return int(value)
    if _DECIMAL_REGEX.fullmatch(value):
        number = float(value)
        # JSON não representa inf/nan
        if math.isfinite(number):
            return number
    return value


def parse_properties(properties: list[tuple[str, str]]) -> dict[str, Any]:
    """Converte lista de propriedades em dict com valores coeridos.

    Chaves repetidas: vale a última ocorrência.
    """
    return {key: parse_value(value) for key, value in properties}
