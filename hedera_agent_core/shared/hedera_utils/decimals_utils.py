"""Exact conversion between display amounts and integer ledger base units."""

from decimal import Decimal, Context, InvalidOperation, Overflow, ROUND_HALF_EVEN
from typing import Union

from hedera_agent_core.shared.errors import ValidationError

HBAR_DECIMALS = 8
MAX_DECIMALS = 255
# Ledger amounts are signed 64-bit integers.
MAX_INT64 = 2**63 - 1

Amount = Union[int, float, str, Decimal]


def to_decimal(value: Amount) -> Decimal:
    """Convert a user-supplied amount to a finite ``Decimal``.

    Floats are converted through ``str`` so that ``0.1`` stays ``0.1`` instead
    of its binary approximation.

    Raises:
        ValidationError: If the value is not a finite number.
    """
    if isinstance(value, bool):
        raise ValidationError(f"Invalid amount: {value}")
    try:
        if isinstance(value, Decimal):
            result = value
        elif isinstance(value, float):
            result = Decimal(str(value))
        else:
            result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as e:
        raise ValidationError(f"Invalid amount: {value}") from e

    if not result.is_finite():
        raise ValidationError(f"Invalid amount: {value}")
    return result


def _validate_decimals(decimals: int) -> None:
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise ValidationError(f"Invalid decimals: {decimals}")
    if decimals < 0 or decimals > MAX_DECIMALS:
        raise ValidationError(
            f"Invalid decimals: {decimals} (must be between 0 and {MAX_DECIMALS})"
        )


def _context_for(value: Decimal, decimals: int) -> Context:
    # enough digits to hold the scaled value without rounding
    digits = len(value.as_tuple().digits) + decimals + 2
    return Context(prec=max(digits, 28), rounding=ROUND_HALF_EVEN)


def to_base_unit(amount: Amount, decimals: int) -> int:
    """Scale a display amount to integer base units: ``amount * 10**decimals``.

    Sub-unit remainders are rounded half-to-even. The result must fit in a
    signed 64-bit integer, the width the ledger stores amounts in.

    Args:
        amount: Display amount (e.g. ``"1.5"`` tokens).
        decimals: Number of decimals of the token.

    Returns:
        int: The amount in base units.

    Raises:
        ValidationError: If ``amount`` is not finite, ``decimals`` is out of
            range or the scaled amount does not fit in 64 bits.
    """
    _validate_decimals(decimals)
    value = to_decimal(amount)
    ctx = _context_for(value, decimals)
    try:
        scaled = value.scaleb(decimals, context=ctx).to_integral_value(
            rounding=ROUND_HALF_EVEN, context=ctx
        )
    except (Overflow, InvalidOperation) as e:
        raise ValidationError(f"Amount out of range: {amount}") from e

    if abs(scaled) > MAX_INT64:
        raise ValidationError(
            f"Amount too large: {amount} exceeds the maximum of {MAX_INT64} base units"
        )
    return int(scaled)


def to_display_unit(base_amount: Amount, decimals: int) -> Decimal:
    """Inverse of :func:`to_base_unit`: ``base_amount / 10**decimals``."""
    _validate_decimals(decimals)
    value = to_decimal(base_amount)
    ctx = _context_for(value, decimals)
    try:
        return value.scaleb(-decimals, context=ctx)
    except (Overflow, InvalidOperation) as e:
        raise ValidationError(f"Amount out of range: {base_amount}") from e


def to_tinybars(hbar: Amount) -> int:
    """Convert an HBAR amount to tinybars (1 HBAR = 10^8 tinybars)."""
    return to_base_unit(hbar, HBAR_DECIMALS)


def from_tinybars(tinybars: Amount) -> Decimal:
    return to_display_unit(tinybars, HBAR_DECIMALS)
