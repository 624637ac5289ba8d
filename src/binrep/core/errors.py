"""
Errors — Иерархия исключений кодека

Все ошибки локальны для одного вызова: функции чистые, повтор не меняет
результата, поэтому retry не выполняется и остаточного состояния нет.

Корень иерархии — BinaryRepresentationError (подкласс ValueError), чтобы
вызывающий код мог ловить либо конкретную ошибку, либо все ошибки кодека
одним except.
"""


# =============================================================================
# BASE
# =============================================================================


class BinaryRepresentationError(ValueError):
    """Базовая ошибка преобразования знаковых двоичных представлений."""

    pass


# =============================================================================
# CONCRETE ERRORS
# =============================================================================


class InvalidScheme(BinaryRepresentationError):
    """
    Неизвестный тег схемы кодирования.

    Допустимые теги: "sm", "c1", "c2", "polarizada".
    """

    pass


class InvalidOperation(BinaryRepresentationError):
    """Неизвестный символ арифметической операции (допустимы + - * /)."""

    pass


class DivisionByZero(BinaryRepresentationError, ZeroDivisionError):
    """
    Делитель декодирован в 0 при операции "/".

    Также является ZeroDivisionError, так что стандартный обработчик
    деления на ноль его перехватывает.
    """

    pass


class MalformedInput(BinaryRepresentationError):
    """
    Некорректная двоичная строка.

    Возникает при:
    - символах, отличных от '0' / '1'
    - пустой строке или не-строке
    - длине, не совпадающей с ожидаемой разрядностью
    """

    pass


class InvalidBitWidth(BinaryRepresentationError):
    """Разрядность вне допустимого диапазона [MIN_BITS, MAX_BITS]."""

    pass


class Overflow(BinaryRepresentationError, OverflowError):
    """
    Значение не помещается в заданную разрядность выбранной схемы.

    Вместо молчаливого расширения строки сверх bits кодек сообщает
    о переполнении явно.
    """

    pass
