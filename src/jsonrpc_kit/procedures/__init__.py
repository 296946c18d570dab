"""Procedure contract and a name-keyed registry."""
from .base import FunctionProcedure, Procedure, ProcedureProvider, is_procedure
from .registry import (
    ProcedureAlreadyRegisteredError,
    ProcedureNotFoundError,
    ProcedureRegistry,
    ProcedureRegistryError,
)
from .schema import SchemaValidationError, validate_params

__all__ = [
    "Procedure",
    "ProcedureProvider",
    "FunctionProcedure",
    "is_procedure",
    "ProcedureRegistry",
    "ProcedureRegistryError",
    "ProcedureAlreadyRegisteredError",
    "ProcedureNotFoundError",
    "SchemaValidationError",
    "validate_params",
]
