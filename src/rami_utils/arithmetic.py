"""Integer arithmetic helpers."""

import operator


def floor_mod(a: int, b: int) -> int:
    """Modulus whose result takes the sign of the divisor.

    For positive ``b`` the result is always in ``[0, b)``, even when ``a`` is
    negative. Python's ``%`` already floors, so this mainly enforces integer
    operands.

    Args:
        a: Dividend
        b: Divisor

    Returns:
        a mod b

    Raises:
        TypeError: If either operand is not an integer
        ZeroDivisionError: If ``b`` is zero
    """
    return operator.index(a) % operator.index(b)
