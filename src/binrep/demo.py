"""
Demo — Демонстрация кодека и арифметики

Кодирует два числа, выводит их двоичные формы, складывает через operate
и выводит результат:

    5 = 00000101 | -3 = 11111101
    Sum: 00000010 = 2
"""

import logging
from dataclasses import dataclass
from typing import Callable

from binrep.core.arithmetic import operate
from binrep.core.codec import dec_to_bin
from binrep.core.domain import DEFAULT_BITS, Operation, Scheme

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DemoConfig:
    """Параметры демонстрации."""

    a: int = 5
    b: int = -3
    bits: int = DEFAULT_BITS
    scheme: Scheme = Scheme.TWOS_COMPLEMENT
    op: Operation = Operation.ADD


_OP_LABELS = {
    Operation.ADD: "Sum",
    Operation.SUBTRACT: "Difference",
    Operation.MULTIPLY: "Product",
    Operation.DIVIDE: "Quotient",
}


def run_demo(
    config: DemoConfig | None = None,
    out: Callable[[str], None] = print,
) -> tuple[str, str]:
    """
    Прогон демонстрации.

    Args:
        config: Параметры (default: DemoConfig())
        out: Функция вывода строки (default: print)

    Returns:
        (двоичный результат, десятичная строка)
    """
    config = config or DemoConfig()

    bin_a = dec_to_bin(config.a, config.bits, config.scheme)
    bin_b = dec_to_bin(config.b, config.bits, config.scheme)
    out(f"{config.a} = {bin_a} | {config.b} = {bin_b}")

    result = operate(bin_a, bin_b, config.op, config.scheme, config.bits)
    out(f"{_OP_LABELS[config.op]}: {result.binary} = {result.decimal}")

    return result.as_pair()


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    logger.info("Running demo with %s", DemoConfig())
    run_demo()
    return 0
