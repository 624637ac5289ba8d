"""
Contract Validation Module

Модуль для валидации JSON контрактов запроса и результата операции.
"""

from .validators import (
    ContractValidator,
    OperationRequestValidator,
    OperationResultValidator,
    SchemaLoader,
    validate_operation_request,
    validate_operation_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "OperationRequestValidator",
    "OperationResultValidator",
    # Functions
    "validate_operation_request",
    "validate_operation_result",
]
