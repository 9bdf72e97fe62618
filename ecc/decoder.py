"""Reed-Solomon erasure and error correction for PDF417 codeword blocks.

A block of n codewords is read as the polynomial r(x) whose x^(n-1-j)
coefficient is codeword j, so position j has locator X_j = 3^(n-1-j).
Decoding runs in four stages:

1. Syndromes S_i = r(3^i), i = 1..k, where k is the redundancy count.
2. The syndrome polynomial S(x) = sum S_i x^(i-1) is folded with the
   erasure locator G(x) = prod (1 - X_e x) into T(x) = S(x) G(x) mod x^k.
3. The extended Euclidean algorithm on x^k and T(x) yields the error
   locator s(x) and the evaluator W(x) once deg r < (k + erasures) / 2.
   The full locator is L(x) = s(x) G(x).
4. The roots of L(x) among the block positions are located, and Forney's
   formula Y_j = -W(X_j^-1) / L'(X_j^-1) gives each magnitude.

The corrected block is checked again before it is written back, so a
failed decode never leaves a partially corrected block behind.
"""

import logging

from core.field import FieldElement, PRIME
from core.polynomial import Polynomial
from ecc.encoder import MAX_CODEWORDS, block_polynomial
from ecc.errors import ChecksumError

logger = logging.getLogger(__name__)


def syndromes(codewords: list[int], ecc_count: int) -> list[FieldElement]:
    """Evaluate the block at 3^1 .. 3^ecc_count."""
    poly = block_polynomial(codewords)
    return [poly.evaluate(FieldElement.exp(i)) for i in range(1, ecc_count + 1)]


def _check_arguments(codewords: list[int], ecc_count: int, erasures: list[int]):
    n = len(codewords)
    if n > MAX_CODEWORDS:
        raise ValueError(f"Block of {n} codewords exceeds {MAX_CODEWORDS}")
    if not 0 <= ecc_count <= n:
        raise ValueError(f"ecc_count must be in [0, {n}], got {ecc_count}")
    for value in codewords:
        if not 0 <= value < PRIME:
            raise ValueError(f"Codeword {value} outside [0, {PRIME})")
    for position in erasures:
        if not 0 <= position < n:
            raise ValueError(f"Erasure position {position} outside block of {n}")


def _run_euclidean_algorithm(a: Polynomial, b: Polynomial, ecc_count: int,
                             erasure_count: int) -> tuple[Polynomial, Polynomial]:
    """Solve the key equation s(x) T(x) = W(x) mod x^k.

    Returns (s, W) normalized so that s(0) = 1.
    """
    r_last, r = a, b
    t_last, t = Polynomial([]), Polynomial([1])
    while 2 * r.degree >= ecc_count + erasure_count:
        quotient, remainder = r_last.divide(r)
        r_last, r = r, remainder
        t_last, t = t, t_last - quotient * t

    sigma_at_zero = t.coefficient(0)
    if not sigma_at_zero:
        raise ChecksumError("Error locator has a zero constant term")
    inverse = sigma_at_zero.inverse()
    return t.scale(inverse), r.scale(inverse)


def _find_error_positions(locator: Polynomial, n: int) -> list[int]:
    """Block positions j with L(X_j^-1) = 0."""
    positions = [j for j in range(n)
                 if not locator.evaluate(FieldElement.exp(j - (n - 1)))]
    if len(positions) != locator.degree:
        raise ChecksumError(
            f"Error locator of degree {locator.degree} has {len(positions)} roots in the block")
    return positions


def _find_error_magnitudes(evaluator: Polynomial, locator: Polynomial,
                           positions: list[int], n: int) -> list[FieldElement]:
    derivative = locator.derivative()
    magnitudes = []
    for j in positions:
        x_inverse = FieldElement.exp(j - (n - 1))
        denominator = derivative.evaluate(x_inverse)
        if not denominator:
            raise ChecksumError(f"Repeated root of the error locator at position {j}")
        magnitudes.append(-evaluator.evaluate(x_inverse) / denominator)
    return magnitudes


def decode(codewords: list[int], ecc_count: int, erasures=()) -> int:
    """Correct codewords in place.

    codewords: data codewords followed by ecc_count redundancy codewords.
    erasures: positions known to be unreliable; their values are ignored.
    Returns the number of positions located (erasures included), 0 when the
    block was already consistent. Raises ChecksumError when the block cannot
    be corrected; the list is left untouched in that case.

    Any pattern with 2 * errors + erasures <= ecc_count is corrected. ISO 15438
    reserves part of the redundancy for detection (level s allows
    erasures + 2 * errors <= 2^(s+1) - 3 in its Annex Q example); enforcing
    that tighter limit is left to the caller, which knows the level.
    """
    erasure_positions = sorted(set(erasures))
    _check_arguments(codewords, ecc_count, erasure_positions)
    n = len(codewords)

    synd = syndromes(codewords, ecc_count)
    if not any(synd):
        logger.debug("Block of %d codewords is consistent", n)
        return 0
    if len(erasure_positions) > ecc_count:
        raise ChecksumError(
            f"{len(erasure_positions)} erasures exceed {ecc_count} redundancy codewords")

    erasure_locator = Polynomial.erasure_locator(
        FieldElement.exp(n - 1 - e) for e in erasure_positions)
    x_k = Polynomial.monomial(ecc_count)
    _, folded = (Polynomial(synd) * erasure_locator).divide(x_k)

    sigma, omega = _run_euclidean_algorithm(x_k, folded, ecc_count, len(erasure_positions))
    locator = sigma * erasure_locator
    logger.debug("Error locator degree %d (%d erasures)", locator.degree, len(erasure_positions))

    positions = _find_error_positions(locator, n)
    magnitudes = _find_error_magnitudes(omega, locator, positions, n)

    corrected = list(codewords)
    for j, magnitude in zip(positions, magnitudes):
        corrected[j] = (FieldElement(corrected[j]) - magnitude).value
    if any(syndromes(corrected, ecc_count)):
        raise ChecksumError("Syndromes remain non-zero after correction")

    logger.debug("Corrected positions %s", positions)
    codewords[:] = corrected
    return len(positions)
