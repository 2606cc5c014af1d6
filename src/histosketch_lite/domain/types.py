"""Shared type aliases and constants used across the domain."""
from __future__ import annotations

from typing import TypeAlias

Label: TypeAlias = int  # unsigned; validated at the store boundary
Weight: TypeAlias = float  # strictly positive
Score: TypeAlias = float  # sampling score, lower wins
Slot: TypeAlias = int  # index in [0, sketch_size)

# Gamma(2, 1) for r and c, Uniform[0, 1) for beta.
GAMMA_SHAPE = 2.0
GAMMA_SCALE = 1.0
