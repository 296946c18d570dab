from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from .base import Procedure


class ProcedureRegistryError(RuntimeError):
    pass


class ProcedureAlreadyRegisteredError(ProcedureRegistryError):
    pass


class ProcedureNotFoundError(ProcedureRegistryError):
    pass


@dataclass
class ProcedureRegistry:
    _procedures: dict[str, Procedure] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, procedures: Mapping[str, Procedure]) -> "ProcedureRegistry":
        reg = cls()
        for name, procedure in procedures.items():
            reg.register(name, procedure)
        return reg

    def register(self, name: str, procedure: Any) -> None:
        if not isinstance(name, str) or not name:
            raise ValueError("procedure name must be a non-empty string")
        if procedure is None:
            raise TypeError("procedure must not be None")
        if name in self._procedures:
            raise ProcedureAlreadyRegisteredError(f"{name} already registered")
        self._procedures[name] = procedure

    def has(self, name: str) -> bool:
        return name in self._procedures

    def get(self, name: str) -> Procedure:
        try:
            return self._procedures[name]
        except KeyError as exc:
            raise ProcedureNotFoundError(f"{name} not found") from exc

    def names(self) -> list[str]:
        return sorted(self._procedures)
