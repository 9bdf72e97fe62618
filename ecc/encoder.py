"""Redundancy codeword generation for PDF417 blocks.

The generator polynomial of a block carrying k redundancy codewords is
g(x) = (x - 3)(x - 3^2)...(x - 3^k), so every valid block, read as a
polynomial with its first codeword as the highest-degree coefficient,
vanishes at 3^1 .. 3^k.
"""

from core.field import FieldElement, PRIME
from core.polynomial import Polynomial

MAX_EC_LEVEL = 8
MAX_CODEWORDS = PRIME - 1


def ec_codeword_count(level: int) -> int:
    """Number of redundancy codewords for an error-correction level (2^(level+1))."""
    if not 0 <= level <= MAX_EC_LEVEL:
        raise ValueError(f"Error correction level must be in [0, {MAX_EC_LEVEL}], got {level}")
    return 1 << (level + 1)


def generator_polynomial(ecc_count: int) -> Polynomial:
    """Product of (x - 3^i) for i = 1..ecc_count."""
    g = Polynomial([1])
    for i in range(1, ecc_count + 1):
        g = g * Polynomial([-FieldElement.exp(i), 1])
    return g


def block_polynomial(codewords: list[int]) -> Polynomial:
    """Polynomial whose x^(n-1-j) coefficient is codewords[j]."""
    return Polynomial(list(reversed(codewords)))


def encode(data: list[int], ecc_count: int) -> list[int]:
    """Return data followed by its ecc_count redundancy codewords.

    The redundancy codewords are the negated remainder of d(x) * x^ecc_count
    divided by the generator polynomial, highest-degree term first.
    """
    if ecc_count < 0:
        raise ValueError(f"ecc_count must be non-negative, got {ecc_count}")
    if len(data) + ecc_count > MAX_CODEWORDS:
        raise ValueError(
            f"Block of {len(data) + ecc_count} codewords exceeds {MAX_CODEWORDS}")
    for value in data:
        if not 0 <= value < PRIME:
            raise ValueError(f"Codeword {value} outside [0, {PRIME})")

    shifted = block_polynomial(data).multiply_by_monomial(ecc_count, 1)
    _, remainder = shifted.divide(generator_polynomial(ecc_count))
    ecc = [(-remainder.coefficient(i)).value for i in reversed(range(ecc_count))]
    return list(data) + ecc
