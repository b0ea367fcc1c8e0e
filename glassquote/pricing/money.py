"""
Money — immutable Decimal amount.

All arithmetic keeps full precision. Rounding only happens when a value is
converted for display (to_number / to_fixed / rounded), always ROUND_HALF_UP
to 2 places unless told otherwise.
"""

from decimal import Context, Decimal, InvalidOperation, Overflow, ROUND_HALF_UP
from functools import total_ordering

from .errors import InvalidMoneyValue

ROUND_SCALE = 2

# Shared by every calculator so a caller changing decimal.getcontext() can't alter results.
DECIMAL_CONTEXT = Context(prec=34)


def to_decimal(value, error=InvalidMoneyValue) -> Decimal:
    """
    Normalize a number-like input to a finite Decimal.

    Accepts int, float, str, Decimal and Money. Floats go through repr() so
    0.1 becomes Decimal("0.1"), not its binary expansion.
    Raises `error` for anything else (bool, None, NaN, "abc", ...).
    """
    if isinstance(value, Money):
        return value.amount
    if isinstance(value, bool) or value is None:
        raise error(f"Not a numeric value: {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            raise error(f"Not a numeric value: {value!r}") from None
    else:
        raise error(f"Not a numeric value: {value!r}")

    if not result.is_finite():
        raise error(f"Not a finite value: {value!r}")
    return result


def round_half_up(value: Decimal, places: int = ROUND_SCALE) -> Decimal:
    """Quantize to `places` decimals, ROUND_HALF_UP. Too large to quantize → InvalidMoneyValue."""
    exponent = Decimal(1).scaleb(-places, context=DECIMAL_CONTEXT)
    try:
        return value.quantize(exponent, rounding=ROUND_HALF_UP, context=DECIMAL_CONTEXT)
    except (InvalidOperation, Overflow):
        raise InvalidMoneyValue(f"Value too large to round to {places} places: {value}") from None


@total_ordering
class Money:
    """Immutable money amount. Combine into new instances, never mutate."""

    __slots__ = ("_amount",)

    def __init__(self, value=0):
        self._amount = to_decimal(value)

    @classmethod
    def zero(cls) -> "Money":
        return cls(0)

    @classmethod
    def sum(cls, values) -> "Money":
        """Sum an iterable of Money. Empty iterable → Money(0)."""
        total = cls.zero()
        for value in values:
            total = total.add(value)
        return total

    @property
    def amount(self) -> Decimal:
        """Full-precision amount."""
        return self._amount

    # --- Arithmetic ---

    def add(self, other) -> "Money":
        return Money(DECIMAL_CONTEXT.add(self._amount, to_decimal(other)))

    def subtract(self, other) -> "Money":
        return Money(DECIMAL_CONTEXT.subtract(self._amount, to_decimal(other)))

    def multiply(self, factor) -> "Money":
        return Money(DECIMAL_CONTEXT.multiply(self._amount, to_decimal(factor)))

    def divide(self, divisor) -> "Money":
        divisor = to_decimal(divisor)
        if divisor == 0:
            raise ZeroDivisionError("Cannot divide Money by zero")
        return Money(DECIMAL_CONTEXT.divide(self._amount, divisor))

    def percentage(self, pct) -> "Money":
        """self × pct/100 (e.g. Money(200).percentage(15) → 30)."""
        fraction = DECIMAL_CONTEXT.divide(to_decimal(pct), Decimal(100))
        return self.multiply(fraction)

    def negate(self) -> "Money":
        return Money(-self._amount)

    def is_zero(self) -> bool:
        return self._amount == 0

    def is_negative(self) -> bool:
        return self._amount < 0

    # --- Display conversions (the only place rounding happens) ---

    def rounded(self, places: int = ROUND_SCALE) -> "Money":
        return Money(round_half_up(self._amount, places))

    def to_number(self, places: int = ROUND_SCALE) -> float:
        """Rounded float for display/JSON."""
        return float(round_half_up(self._amount, places))

    def to_fixed(self, places: int = ROUND_SCALE) -> str:
        """Rounded fixed-decimal string, e.g. '105.26'."""
        return f"{round_half_up(self._amount, places):f}"

    # --- Operators ---

    def __add__(self, other):
        if not isinstance(other, (Money, int, float, Decimal)):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        # Lets the builtin sum() start from 0
        if not isinstance(other, (Money, int, float, Decimal)):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, (Money, int, float, Decimal)):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, factor):
        if isinstance(factor, Money):
            return NotImplemented
        return self.multiply(factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor):
        if isinstance(divisor, Money):
            return NotImplemented
        return self.divide(divisor)

    def __neg__(self):
        return self.negate()

    def __eq__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self._amount == other._amount

    def __lt__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self._amount < other._amount

    def __hash__(self):
        return hash(self._amount)

    def __repr__(self):
        return f"Money('{self._amount}')"

    def __str__(self):
        return self.to_fixed()
