"""Core primitives: field arithmetic, polynomials, deterministic RNG."""

from core.field import FieldElement, PRIME, GENERATOR
from core.polynomial import Polynomial
from core import rng
