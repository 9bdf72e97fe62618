"""PDF417 error correction: redundancy generation and erasure/error decoding."""

from ecc.errors import ChecksumError
from ecc.encoder import ec_codeword_count, encode, generator_polynomial
from ecc.decoder import decode, syndromes
