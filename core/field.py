"""Finite field arithmetic over F_p where p = 929, the PDF417 codeword field."""

PRIME = 929
GENERATOR = 3  # primitive element of F_929
ORDER = PRIME - 1  # size of the multiplicative group


def _build_tables(prime: int, generator: int) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """Walk the powers of the generator to build antilog (EXP) and log (LOG) tables."""
    exp = [0] * (prime - 1)
    log = [0] * prime
    seen = set()
    x = 1
    for i in range(prime - 1):
        exp[i] = x
        log[x] = i
        seen.add(x)
        x = (x * generator) % prime
    if len(seen) != prime - 1:
        raise RuntimeError(
            f"{generator} is not a primitive element of F_{prime}: "
            f"its powers cover {len(seen)} of {prime - 1} non-zero elements")
    return tuple(exp), tuple(log)


EXP, LOG = _build_tables(PRIME, GENERATOR)


class FieldElement:
    """Element of the finite field F_p."""

    __slots__ = ('value',)

    def __init__(self, value: int):
        self.value = value % PRIME

    def __add__(self, other):
        if isinstance(other, int):
            other = FieldElement(other)
        return FieldElement(self.value + other.value)

    def __radd__(self, other):
        if isinstance(other, int):
            return FieldElement(other + self.value)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, int):
            other = FieldElement(other)
        return FieldElement(self.value - other.value)

    def __rsub__(self, other):
        if isinstance(other, int):
            return FieldElement(other - self.value)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, int):
            other = FieldElement(other)
        if self.value == 0 or other.value == 0:
            return FieldElement(0)
        return FieldElement(EXP[(LOG[self.value] + LOG[other.value]) % ORDER])

    def __rmul__(self, other):
        if isinstance(other, int):
            return self * FieldElement(other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, int):
            other = FieldElement(other)
        return self * other.inverse()

    def __neg__(self):
        return FieldElement(-self.value)

    def __pow__(self, power):
        if isinstance(power, FieldElement):
            power = power.value
        if self.value == 0:
            if power < 0:
                raise ZeroDivisionError("Cannot raise zero to a negative power")
            return FieldElement(1 if power == 0 else 0)
        return FieldElement(EXP[(LOG[self.value] * power) % ORDER])

    def __eq__(self, other):
        if isinstance(other, int):
            return self.value == (other % PRIME)
        if isinstance(other, FieldElement):
            return self.value == other.value
        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return f"F({self.value})"

    def __bool__(self):
        return self.value != 0

    def inverse(self):
        """Multiplicative inverse read from the tables: g^{-log(a)}."""
        if self.value == 0:
            raise ZeroDivisionError("Cannot invert zero")
        return FieldElement(EXP[(ORDER - LOG[self.value]) % ORDER])

    def log(self) -> int:
        """Discrete logarithm to the base GENERATOR."""
        if self.value == 0:
            raise ValueError("Zero has no discrete logarithm")
        return LOG[self.value]

    @staticmethod
    def exp(power: int) -> 'FieldElement':
        """GENERATOR ** power; negative powers wrap around the group order."""
        return FieldElement(EXP[power % ORDER])

    @staticmethod
    def zero():
        return FieldElement(0)

    @staticmethod
    def one():
        return FieldElement(1)
