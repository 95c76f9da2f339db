# backend/money.py

from decimal import Decimal, DecimalException

from errors import InvalidAmount
import settings

# Longest amount string worth handing to Decimal
_MAX_INPUT_LENGTH = 64


class Money:
    """An amount of currency held as an integer count of minor units.

    ``digits`` is the number of fractional digits (2 means cents). Values of
    different precision never mix.
    """

    __slots__ = ("minor", "digits")

    def __init__(self, minor=0, digits=None):
        if isinstance(minor, bool) or not isinstance(minor, int):
            raise TypeError(f"Money needs an integer count of minor units, got {minor!r}")
        self.minor = minor
        self.digits = settings.MONEY_DIGITS if digits is None else digits

    @classmethod
    def zero(cls, digits=None):
        return cls(0, digits)

    @classmethod
    def parse(cls, value, digits=None):
        """Build Money from a decimal string such as ``"12.50"``.

        Integers are read as whole units. Floats are refused. The conversion
        is exact: anything finer than one minor unit, or longer than
        ``settings.MAX_AMOUNT_DIGITS`` whole digits, is an error.
        """
        digits = settings.MONEY_DIGITS if digits is None else digits
        if isinstance(value, (float, bool)) or not isinstance(value, (str, int)):
            raise InvalidAmount(f"Amount must be a decimal string, got {value!r}", amount=repr(value))
        text = str(value).strip()
        if len(text) > _MAX_INPUT_LENGTH:
            raise InvalidAmount("Amount is too long", amount=text[:_MAX_INPUT_LENGTH] + "...")
        try:
            number = Decimal(text)
        except DecimalException:
            raise InvalidAmount(f"Amount {value!r} is not a number", amount=text)
        if not number.is_finite():
            raise InvalidAmount(f"Amount {value!r} is not a number", amount=text)

        sign, coefficient_digits, exponent = number.as_tuple()
        coefficient = int("".join(map(str, coefficient_digits)))
        if coefficient == 0:
            return cls(0, digits)
        if number.adjusted() >= settings.MAX_AMOUNT_DIGITS:
            raise InvalidAmount(
                f"Amount {value!r} is larger than {settings.MAX_AMOUNT_DIGITS} digits allow",
                amount=text,
            )

        # shift the coefficient so one minor unit becomes 1
        shift = exponent + digits
        if shift >= 0:
            minor = coefficient * 10 ** shift
        else:
            if -shift > len(coefficient_digits):
                minor, rest = 0, coefficient
            else:
                minor, rest = divmod(coefficient, 10 ** -shift)
            if rest:
                raise InvalidAmount(
                    f"Amount {value!r} has more than {digits} fractional digits",
                    amount=text,
                )
        return cls(-minor if sign else minor, digits)

    # --- arithmetic ---

    def _minor_of(self, other):
        if not isinstance(other, Money):
            raise TypeError(f"Expected Money, got {other!r}")
        if other.digits != self.digits:
            raise ValueError(f"Cannot mix Money with {self.digits} and {other.digits} fractional digits")
        return other.minor

    def add(self, other):
        return Money(self.minor + self._minor_of(other), self.digits)

    def subtract(self, other):
        return Money(self.minor - self._minor_of(other), self.digits)

    def __add__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        # lets sum() start from its default 0
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self):
        return Money(-self.minor, self.digits)

    def __abs__(self):
        return Money(abs(self.minor), self.digits)

    def multiply_by_ratio(self, numerator, denominator):
        """Scale by numerator/denominator, rounding half away from zero."""
        if denominator == 0:
            raise ZeroDivisionError("ratio denominator is zero")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        product = self.minor * numerator
        quotient, remainder = divmod(abs(product), denominator)
        if remainder * 2 >= denominator:
            quotient += 1
        return Money(quotient if product >= 0 else -quotient, self.digits)

    def divide_evenly(self, n):
        """Split into ``n`` parts that add back up to exactly this amount.

        Leftover minor units go one at a time to the first parts.
        """
        if n <= 0:
            raise ValueError("Can only divide into a positive number of parts")
        base, remainder = divmod(self.minor, n)
        return [Money(base + 1 if i < remainder else base, self.digits) for i in range(n)]

    # --- comparison ---

    def __eq__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.digits == other.digits and self.minor == other.minor

    def __hash__(self):
        return hash((self.minor, self.digits))

    def __lt__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.minor < self._minor_of(other)

    def __le__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.minor <= self._minor_of(other)

    def __gt__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.minor > self._minor_of(other)

    def __ge__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.minor >= self._minor_of(other)

    def is_zero(self):
        return self.minor == 0

    def is_positive(self):
        return self.minor > 0

    def is_negative(self):
        return self.minor < 0

    # --- formatting ---

    def __str__(self):
        sign = "-" if self.minor < 0 else ""
        if self.digits == 0:
            return f"{sign}{abs(self.minor)}"
        whole, frac = divmod(abs(self.minor), 10 ** self.digits)
        return f"{sign}{whole}.{frac:0{self.digits}d}"

    def __repr__(self):
        return f"Money('{self}')"
