"""PDF417 Error Correction — Entry Point.

Runs the ISO 15438 Annex Q example (level 1, four redundancy codewords)
through clean, corrupted and erased scenarios.
Usage: python main.py [seed]
"""

import logging
import os
import sys

from core import rng
from core.field import PRIME
from ecc import ChecksumError, decode, ec_codeword_count, encode

DEFAULT_LOG_LEVEL = "WARNING"

ANNEX_Q_DATA = [5, 453, 178, 121, 239]
ANNEX_Q_LEVEL = 1


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger; PDF417EC_LOG_LEVEL overrides the default."""
    log_level = (level or os.getenv("PDF417EC_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, log_level, logging.WARNING))


def run_scenario(block: list[int], ecc_count: int, errors: int = 0,
                 erasures: int = 0) -> bool:
    """Corrupt a copy of block and try to decode it."""
    received = list(block)
    positions = rng.sample(range(len(block)), errors + erasures)
    error_positions, erasure_positions = positions[:errors], positions[errors:]
    for j in error_positions:
        received[j] = (received[j] + 1 + rng.randbelow(PRIME - 1)) % PRIME
    for j in erasure_positions:
        received[j] = 0

    print(f"Received: {received}")
    print(f"Errors at {sorted(error_positions)}, erasures at {sorted(erasure_positions)}")
    try:
        located = decode(received, ecc_count, erasure_positions)
    except ChecksumError as e:
        print(f"  Uncorrectable: {e}")
        print()
        return False

    data = received[:len(block) - ecc_count]
    ok = received == block
    print(f"  Located {located} position(s), data {data}")
    print(f"  {'Restored' if ok else 'MISCORRECTED'}")
    print()
    return ok


def main():
    configure_logging()
    seed = int(sys.argv[1]) if len(sys.argv) > 1 else 42
    rng.set_seed(seed)

    ecc_count = ec_codeword_count(ANNEX_Q_LEVEL)
    block = encode(ANNEX_Q_DATA, ecc_count)

    print(f"=== PDF417 Error Correction (seed {seed}) ===")
    print(f"Data:  {ANNEX_Q_DATA}")
    print(f"Block: {block}  ({ecc_count} redundancy codewords)")
    print()

    scenarios = [
        ("SCENARIO 1: No errors", 0, 0),
        ("SCENARIO 2: One substitution error", 1, 0),
        ("SCENARIO 3: Two substitution errors", 2, 0),
        ("SCENARIO 4: Four erasures", 0, 4),
        ("SCENARIO 5: One error and two erasures", 1, 2),
        ("SCENARIO 6: Three errors (over capacity)", 3, 0),
    ]
    for title, errors, erasures in scenarios:
        print("=" * 50)
        print(title)
        print("=" * 50)
        run_scenario(block, ecc_count, errors, erasures)


if __name__ == "__main__":
    main()
