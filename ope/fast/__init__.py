"""
Fast-OPE: Hwang et al's order-preserving encryption from uniform distribution sampling.

Modules:
- params: Scheme parameters and derived interval tables
- oracle: Keyed SHA-256 interval oracle
- key: Per-byte tree encryption and block packing
- cipher: Key generation and decoding
"""

from .params import FastOpeParams
from .oracle import IntervalOracle
from .key import FastOpeKey
from .cipher import FastOpeCipher, FastOpeConfig

__all__ = [
    "FastOpeParams",
    "IntervalOracle",
    "FastOpeKey",
    "FastOpeCipher",
    "FastOpeConfig",
]
