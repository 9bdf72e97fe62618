"""Polynomial algebra over F_929.

Polynomials are immutable values: every operation returns a new Polynomial.
"""

from core.field import FieldElement


def _coerce(value) -> FieldElement:
    return value if isinstance(value, FieldElement) else FieldElement(value)


class Polynomial:
    """Polynomial over F_p. coeffs[0] = constant term.

    Trailing zero coefficients are stripped, so the leading coefficient is
    never zero. The zero polynomial has no coefficients and degree -1.
    """

    __slots__ = ('coeffs',)

    def __init__(self, coeffs):
        coeffs = [_coerce(c) for c in coeffs]
        while coeffs and not coeffs[-1]:
            coeffs.pop()
        self.coeffs = tuple(coeffs)

    @property
    def degree(self) -> int:
        return len(self.coeffs) - 1

    def is_zero(self) -> bool:
        return not self.coeffs

    @property
    def leading(self) -> FieldElement:
        """Leading coefficient; zero for the zero polynomial."""
        return self.coeffs[-1] if self.coeffs else FieldElement.zero()

    def coefficient(self, degree: int) -> FieldElement:
        if 0 <= degree < len(self.coeffs):
            return self.coeffs[degree]
        return FieldElement.zero()

    def __eq__(self, other):
        if isinstance(other, Polynomial):
            return self.coeffs == other.coeffs
        return NotImplemented

    def __hash__(self):
        return hash(self.coeffs)

    def __repr__(self):
        return f"Polynomial({[c.value for c in self.coeffs]})"

    def __add__(self, other: 'Polynomial') -> 'Polynomial':
        size = max(len(self.coeffs), len(other.coeffs))
        return Polynomial([self.coefficient(i) + other.coefficient(i) for i in range(size)])

    def __neg__(self) -> 'Polynomial':
        return Polynomial([-c for c in self.coeffs])

    def __sub__(self, other: 'Polynomial') -> 'Polynomial':
        return self + (-other)

    def __mul__(self, other: 'Polynomial') -> 'Polynomial':
        if self.is_zero() or other.is_zero():
            return Polynomial([])
        product = [FieldElement.zero()] * (len(self.coeffs) + len(other.coeffs) - 1)
        for i, a in enumerate(self.coeffs):
            if not a:
                continue
            for j, b in enumerate(other.coeffs):
                product[i + j] = product[i + j] + a * b
        return Polynomial(product)

    def scale(self, factor) -> 'Polynomial':
        factor = _coerce(factor)
        return Polynomial([c * factor for c in self.coeffs])

    def multiply_by_monomial(self, degree: int, coefficient) -> 'Polynomial':
        """Return self * coefficient * x^degree."""
        if degree < 0:
            raise ValueError(f"Monomial degree must be non-negative, got {degree}")
        coefficient = _coerce(coefficient)
        if not coefficient or self.is_zero():
            return Polynomial([])
        return Polynomial([FieldElement.zero()] * degree + [c * coefficient for c in self.coeffs])

    def divide(self, divisor: 'Polynomial') -> tuple['Polynomial', 'Polynomial']:
        """Long division: return (quotient, remainder) with deg(remainder) < deg(divisor)."""
        if divisor.is_zero():
            raise ZeroDivisionError("Polynomial division by zero")
        quotient = Polynomial([])
        remainder = self
        lead_inverse = divisor.leading.inverse()
        while not remainder.is_zero() and remainder.degree >= divisor.degree:
            shift = remainder.degree - divisor.degree
            scale = remainder.leading * lead_inverse
            quotient = quotient + Polynomial.monomial(shift, scale)
            remainder = remainder - divisor.multiply_by_monomial(shift, scale)
        return quotient, remainder

    def evaluate(self, x) -> FieldElement:
        """Evaluate polynomial at x using Horner's method."""
        x = _coerce(x)
        result = FieldElement.zero()
        for coeff in reversed(self.coeffs):
            result = result * x + coeff
        return result

    def derivative(self) -> 'Polynomial':
        """Formal derivative: sum of i * a_i * x^(i-1)."""
        return Polynomial([c * i for i, c in enumerate(self.coeffs)][1:])

    @staticmethod
    def monomial(degree: int, coefficient=1) -> 'Polynomial':
        """coefficient * x^degree."""
        return Polynomial([1]).multiply_by_monomial(degree, coefficient)

    @staticmethod
    def erasure_locator(locations) -> 'Polynomial':
        """Product of (1 - X x) over the given locations X.

        The roots are exactly the inverses of the locations, so a position whose
        locator X is listed here evaluates to zero at X^{-1}.
        """
        result = Polynomial([1])
        for x in locations:
            result = result * Polynomial([1, -_coerce(x)])
        return result
