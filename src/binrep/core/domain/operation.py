"""
Operation models — Запрос и результат арифметической операции

Immutable Pydantic модели:
- OperationRequest: два операнда, операция, схема, разрядность
- OperationResult: двоичный результат и его десятичное значение

Совместимость с контрактами binrep.core.contracts: JSON Schema
(schema/operation_request.json, operation_result.json) плюс межполевые
проверки OperationRequestValidator / OperationResultValidator дают те же
отказы, что и model_validator этих моделей.
"""

from pydantic import BaseModel, Field, model_validator

from binrep.core.domain.scheme import MAX_BITS, MIN_BITS, Operation, Scheme

BINARY_PATTERN = r"^[01]+$"


# =============================================================================
# REQUEST
# =============================================================================


class OperationRequest(BaseModel):
    """
    Запрос на операцию над двумя операндами в одной схеме.

    Immutable модель (frozen=True). Оба операнда обязаны иметь длину bits.
    """

    a: str = Field(..., pattern=BINARY_PATTERN, description="Первый операнд (MSB первым)")
    b: str = Field(..., pattern=BINARY_PATTERN, description="Второй операнд (MSB первым)")
    op: Operation = Field(..., description="Операция (+, -, *, /)")
    scheme: Scheme = Field(..., description="Схема кодирования операндов и результата")
    bits: int = Field(..., ge=MIN_BITS, le=MAX_BITS, description="Разрядность")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_operand_widths(self) -> "OperationRequest":
        """Проверка, что len(a) == len(b) == bits"""
        for name in ("a", "b"):
            operand = getattr(self, name)
            if len(operand) != self.bits:
                raise ValueError(
                    f"operand {name} has {len(operand)} bits, expected {self.bits}"
                )
        return self


# =============================================================================
# RESULT
# =============================================================================


class OperationResult(BaseModel):
    """
    Результат операции.

    binary — результат, закодированный в той же схеме и разрядности;
    decimal — строковая форма value (до кодирования).
    """

    binary: str = Field(..., pattern=BINARY_PATTERN, description="Результат (MSB первым)")
    decimal: str = Field(..., pattern=r"^-?\d+$", description="Десятичная запись value")
    value: int = Field(..., description="Результат в знаковой арифметике")
    scheme: Scheme = Field(..., description="Схема кодирования результата")
    bits: int = Field(..., ge=MIN_BITS, le=MAX_BITS, description="Разрядность")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_consistency(self) -> "OperationResult":
        if len(self.binary) != self.bits:
            raise ValueError(
                f"binary has {len(self.binary)} bits, expected {self.bits}"
            )
        if self.decimal != str(self.value):
            raise ValueError(
                f"decimal {self.decimal!r} does not match value {self.value}"
            )
        return self

    def as_pair(self) -> tuple[str, str]:
        """
        Пара (двоичный результат, десятичная строка).

        Returns:
            (binary, decimal)
        """
        return (self.binary, self.decimal)
