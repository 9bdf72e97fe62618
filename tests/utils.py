"""Test utilities: reference blocks, corruption helpers, assertion helpers."""

from core import rng
from core.field import PRIME
from ecc import decode

# See ISO 15438, Annex Q (error correction level 1)
PDF417_TEST = [5, 453, 178, 121, 239]
PDF417_TEST_WITH_EC = [5, 453, 178, 121, 239, 452, 327, 657, 619]
ECC_COUNT = len(PDF417_TEST_WITH_EC) - len(PDF417_TEST)


def random_data(length):
    return [rng.randbelow(PRIME) for _ in range(length)]


def corrupt(received, how_many, exclude=()):
    """Replace how_many distinct positions with a different value; return them."""
    candidates = [j for j in range(len(received)) if j not in exclude]
    positions = rng.sample(candidates, how_many)
    for j in positions:
        received[j] = (received[j] + 1 + rng.randbelow(PRIME - 1)) % PRIME
    return positions


def erase(received, how_many, exclude=()):
    """Zero out how_many distinct positions; return them as erasures."""
    candidates = [j for j in range(len(received)) if j not in exclude]
    positions = rng.sample(candidates, how_many)
    for j in positions:
        received[j] = 0
    return positions


def assert_decodes(received, original, ecc_count, erasures=()):
    """Decode received in place and check it matches original."""
    decode(received, ecc_count, erasures)
    data_len = len(original) - ecc_count
    assert received[:data_len] == original[:data_len], \
        f"Decoded data {received[:data_len]}, expected {original[:data_len]}"
    assert received == original
