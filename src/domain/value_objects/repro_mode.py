from __future__ import annotations

from enum import Enum


class ReproMode(str, Enum):
    CONTINUO = "CONTINUO"
    ESTACAO = "ESTACAO"

    @classmethod
    def normalize(cls, value: object) -> ReproMode | None:
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None

    def is_seasonal(self) -> bool:
        return self is ReproMode.ESTACAO
