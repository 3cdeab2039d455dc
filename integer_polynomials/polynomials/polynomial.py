# (C) 2024 Irreducible Inc.

from __future__ import annotations

import logging
from dataclasses import dataclass
from numbers import Integral
from typing import Iterable, Self

from ..utils.utils import strip_trailing_zeros, superscript

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Polynomial:
    """A univariate polynomial with integer coefficients.

    `terms[i]` is the coefficient of xⁱ, so the constant term comes first and the degree is always
    `len(terms) - 1`. Instances are immutable; every arithmetic operation returns a new, normalized
    polynomial, i.e. one whose leading coefficient is non-zero unless it is the zero polynomial (0,).

    Construction keeps the given coefficients verbatim, trailing zeros included, so a caller may hold a
    non-normalized polynomial until it passes through an operation.
    """

    terms: tuple[int, ...]

    def __post_init__(self) -> None:
        terms = tuple(self.terms)
        if not terms:
            raise ValueError("empty term list")
        assert all(isinstance(term, Integral) for term in terms), "coefficients must be integers"
        object.__setattr__(self, "terms", tuple(int(term) for term in terms))

    @classmethod
    def from_terms(cls, terms: Iterable[int]) -> Self:
        return cls(tuple(terms))

    @classmethod
    def zero_of_degree(cls, degree: int) -> Self:
        """The polynomial of the given degree whose coefficients are all zero."""
        if degree < 0:
            raise ValueError("negative degree")
        return cls((0,) * (degree + 1))

    @classmethod
    def zero(cls) -> Self:
        return cls((0,))

    @classmethod
    def one(cls) -> Self:
        return cls((1,))

    @property
    def degree(self) -> int:
        return len(self.terms) - 1

    @property
    def leading_coefficient(self) -> int:
        return self.terms[self.degree]

    def coefficient(self, exponent: int) -> int:
        """The coefficient of x^exponent; zero above the degree."""
        if exponent >= len(self.terms):
            return 0
        return self.terms[exponent]

    def is_zero(self) -> bool:
        return not any(self.terms)

    def __bool__(self) -> bool:
        return not self.is_zero()

    def normalized(self) -> Self:
        return self.__class__(strip_trailing_zeros(list(self.terms)))

    def evaluate(self, x: int) -> int:
        # python ints widen instead of overflowing, so the result is always exact.
        return sum(term * x**i for i, term in enumerate(self.terms))

    def truncate(self, max_degree: int) -> Self:
        """Drops every term above x^max_degree. The result is not normalized."""
        if max_degree < 0:
            raise ValueError("negative degree")
        return self.__class__(self.terms[: max_degree + 1])

    def __add__(self, other: Polynomial | int) -> Self:
        rhs = _lift(other)
        if rhs is None:
            return NotImplemented
        length = max(len(self.terms), len(rhs.terms))
        return self.__class__(strip_trailing_zeros([self.coefficient(i) + rhs.coefficient(i) for i in range(length)]))

    __radd__ = __add__

    def __neg__(self) -> Self:
        return self.__class__(tuple(-term for term in self.terms))

    def __sub__(self, other: Polynomial | int) -> Self:
        rhs = _lift(other)
        if rhs is None:
            return NotImplemented
        return self + -rhs

    def __rsub__(self, other: int) -> Self:
        lhs = _lift(other)
        if lhs is None:
            return NotImplemented
        return -self + lhs

    def __mul__(self, other: Polynomial | int) -> Self:
        rhs = _lift(other)
        if rhs is None:
            return NotImplemented
        result = [0] * (self.degree + rhs.degree + 1)
        for i, a in enumerate(self.terms):
            for k, b in enumerate(rhs.terms):
                result[i + k] += a * b
        # only a zero factor (or a non-normalized one) leaves trailing zeros here.
        return self.__class__(strip_trailing_zeros(result))

    __rmul__ = __mul__

    def __pow__(self, exponent: int) -> Self:
        if exponent < 0:
            raise ValueError("negative exponent")
        acc = self.one()
        val = self
        while exponent:
            if exponent % 2:
                acc *= val
            val *= val
            exponent >>= 1
        return acc

    def __divmod__(self, other: Polynomial | int) -> tuple[Self, Self]:
        """Schoolbook long division which only ever produces integer coefficients.

        Raises ValueError as soon as some quotient coefficient would not be an integer; there is no fallback to
        rational coefficients. Returns (quotient, remainder), where the remainder is of lower degree than the
        divisor or is the zero polynomial.
        """
        divisor = _lift(other)
        if divisor is None:
            return NotImplemented
        if self.degree < divisor.degree:
            raise ValueError("dividend degree below divisor degree")
        divisor_lead = divisor.leading_coefficient
        if divisor_lead == 0:
            raise ValueError("zero leading coefficient in divisor")

        quotient = [0] * (self.degree - divisor.degree + 1)
        remainder = self
        for i in reversed(range(len(quotient))):
            # read the coefficient at x^(i + deg divisor) rather than the remainder's leading one; the remainder's
            # degree may have dropped by more than one in the previous step.
            lead = remainder.coefficient(i + divisor.degree)
            if lead % divisor_lead != 0:
                logger.debug(
                    "dividing %s by %s: coefficient %d at x%s is not a multiple of %d",
                    self,
                    divisor,
                    lead,
                    superscript(i + divisor.degree),
                    divisor_lead,
                )
                raise ValueError("non-integer coefficient in quotient")
            quotient[i] = lead // divisor_lead
            remainder = remainder - divisor * self.__class__(quotient).truncate(i)
        return self.__class__(strip_trailing_zeros(quotient)), remainder

    def __floordiv__(self, other: Polynomial | int) -> Self:
        quotient, _ = divmod(self, other)
        return quotient

    def __mod__(self, other: Polynomial | int) -> Self:
        _, remainder = divmod(self, other)
        return remainder

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        # positional: (1, 2, 3) and (3, 2, 1) are different polynomials.
        return self.terms == other.terms

    def __hash__(self) -> int:
        return hash((self.degree, self.terms))

    def __str__(self) -> str:
        """Conventional notation, highest power first, e.g. "3x²+2x-1"."""
        parts: list[str] = []
        for i in reversed(range(len(self.terms))):
            term = self.terms[i]
            if term == 0 and (i != 0 or parts):
                continue
            if parts and term > 0:
                parts.append("+")
            if abs(term) != 1 or i == 0:
                parts.append(str(term))
            elif term == -1:
                parts.append("-")
            if i != 0:
                parts.append("x")
            if i > 1:
                parts.append(superscript(i))
        return "".join(parts)


def _lift(value: Polynomial | int) -> Polynomial | None:
    # plain integers act as constant polynomials
    if isinstance(value, Polynomial):
        return value
    if isinstance(value, Integral):
        return Polynomial((int(value),))
    return None
