"""Tests for PDF417 erasure and error correction."""

import logging

import pytest

from core import rng
from core.field import PRIME
from ecc import ChecksumError, decode, ec_codeword_count, encode
from tests.utils import (PDF417_TEST, PDF417_TEST_WITH_EC, ECC_COUNT,
                         random_data, corrupt, erase, assert_decodes)

MAX_ERRORS = ECC_COUNT // 2
MAX_ERASURES = ECC_COUNT


def test_no_error():
    received = list(PDF417_TEST_WITH_EC)
    assert decode(received, ECC_COUNT) == 0
    assert received == PDF417_TEST_WITH_EC


def test_no_error_ignores_erasures():
    received = list(PDF417_TEST_WITH_EC)
    assert decode(received, ECC_COUNT, [0, 3]) == 0
    assert received == PDF417_TEST_WITH_EC


def test_one_error_every_position():
    rng.set_seed(1)
    for i in range(len(PDF417_TEST_WITH_EC)):
        received = list(PDF417_TEST_WITH_EC)
        received[i] = (received[i] + 1 + rng.randbelow(PRIME - 1)) % PRIME
        assert decode(received, ECC_COUNT) == 1
        assert received[:len(PDF417_TEST)] == PDF417_TEST


def test_max_errors():
    rng.set_seed(2)
    for _ in range(50):
        received = list(PDF417_TEST_WITH_EC)
        positions = corrupt(received, MAX_ERRORS)
        assert decode(received, ECC_COUNT) == len(positions)
        assert received == PDF417_TEST_WITH_EC


def test_too_many_errors():
    rng.set_seed(3)
    for _ in range(20):
        received = list(PDF417_TEST_WITH_EC)
        corrupt(received, MAX_ERRORS + 1)
        snapshot = list(received)
        with pytest.raises(ChecksumError):
            decode(received, ECC_COUNT)
        assert received == snapshot


def test_max_erasures():
    rng.set_seed(4)
    for _ in range(20):
        received = list(PDF417_TEST_WITH_EC)
        erasures = erase(received, MAX_ERASURES)
        assert_decodes(received, PDF417_TEST_WITH_EC, ECC_COUNT, erasures)


def test_erasures_of_correct_values():
    received = list(PDF417_TEST_WITH_EC)
    received[2] = 0
    # position 7 is declared unreliable but holds the right value
    assert_decodes(received, PDF417_TEST_WITH_EC, ECC_COUNT, [2, 7])


def test_too_many_erasures():
    rng.set_seed(5)
    received = list(PDF417_TEST_WITH_EC)
    erasures = erase(received, MAX_ERASURES + 1)
    with pytest.raises(ChecksumError):
        decode(received, ECC_COUNT, erasures)


def test_erasure_and_error():
    rng.set_seed(6)
    n = len(PDF417_TEST_WITH_EC)
    for i in range(n):
        for j in range(n):
            if i == j:
                continue
            received = list(PDF417_TEST_WITH_EC)
            received[i] = (received[i] + 1 + rng.randbelow(PRIME - 1)) % PRIME
            received[j] = 0
            assert_decodes(received, PDF417_TEST_WITH_EC, ECC_COUNT, [j])


def test_one_error_two_erasures():
    rng.set_seed(8)
    for _ in range(30):
        received = list(PDF417_TEST_WITH_EC)
        erasures = erase(received, 2)
        corrupt(received, 1, exclude=erasures)
        assert_decodes(received, PDF417_TEST_WITH_EC, ECC_COUNT, erasures)


@pytest.mark.parametrize("level", [2, 3, 4])
def test_random_blocks_within_capacity(level):
    rng.set_seed(100 + level)
    ecc_count = ec_codeword_count(level)
    for _ in range(10):
        block = encode(random_data(30), ecc_count)
        erasure_count = rng.randbelow(ecc_count + 1)
        error_count = (ecc_count - erasure_count) // 2
        received = list(block)
        erasures = erase(received, erasure_count)
        corrupt(received, error_count, exclude=erasures)
        assert_decodes(received, block, ecc_count, erasures)


@pytest.mark.parametrize("level", [2, 3])
def test_random_blocks_over_capacity(level):
    rng.set_seed(200 + level)
    ecc_count = ec_codeword_count(level)
    for _ in range(10):
        block = encode(random_data(30), ecc_count)
        received = list(block)
        corrupt(received, ecc_count // 2 + 1)
        with pytest.raises(ChecksumError):
            decode(received, ecc_count)


def test_errors_in_redundancy_codewords():
    received = list(PDF417_TEST_WITH_EC)
    received[5] = 1
    received[8] = 2
    assert decode(received, ECC_COUNT) == 2
    assert received == PDF417_TEST_WITH_EC


def test_duplicate_erasures_collapse():
    received = list(PDF417_TEST_WITH_EC)
    received[1] = 0
    assert_decodes(received, PDF417_TEST_WITH_EC, ECC_COUNT, [1, 1, 1])


def test_zero_ecc_count():
    received = [1, 2, 3]
    assert decode(received, 0) == 0
    assert received == [1, 2, 3]


def test_level_zero_corrects_single_error():
    block = encode(PDF417_TEST, ec_codeword_count(0))
    received = list(block)
    received[0] = 6
    assert decode(received, 2) == 1
    assert received == block


def test_invalid_arguments():
    with pytest.raises(ValueError):
        decode(list(PDF417_TEST_WITH_EC), -1)
    with pytest.raises(ValueError):
        decode(list(PDF417_TEST_WITH_EC), len(PDF417_TEST_WITH_EC) + 1)
    with pytest.raises(ValueError):
        decode(list(PDF417_TEST_WITH_EC), ECC_COUNT, [len(PDF417_TEST_WITH_EC)])
    with pytest.raises(ValueError):
        decode([5, 453, 929, 121], 2)
    with pytest.raises(ValueError):
        decode([0] * 929, 4)


def test_logs_located_positions(caplog):
    received = list(PDF417_TEST_WITH_EC)
    received[4] = 0
    with caplog.at_level(logging.DEBUG, logger="ecc.decoder"):
        decode(received, ECC_COUNT)
    assert "Corrected positions [4]" in caplog.text


def test_two_erasures_beyond_level_one_reserve_are_corrected():
    # ISO 15438 level 1 allows erasures + 2 * errors <= 1 for this block;
    # the decoder applies the algebraic bound, so two erasures still decode.
    received = list(PDF417_TEST_WITH_EC)
    received[0] = 0
    received[6] = 0
    assert decode(received, ECC_COUNT, [0, 6]) == 2
    assert received == PDF417_TEST_WITH_EC
