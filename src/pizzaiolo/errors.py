from __future__ import annotations

from typing import Any, Dict, Optional


class ConfigurationError(ValueError):
    """Entrada ou configuração inválida, detectada antes da simulação começar."""


class InvariantViolation(RuntimeError):
    """Estado interno inconsistente (bug de implementação, não erro de entrada)."""

    def __init__(self, message: str, state: Optional[Dict[str, Any]] = None) -> None:
        self.state: Dict[str, Any] = state or {}
        super().__init__(f"{message} | estado: {self.state}")
