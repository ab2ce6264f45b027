"""
MOPE: modular order-preserving encryption layered over another OPE scheme.
"""

from .key import MopeKey
from .cipher import MopeCipher, MopeConfig

__all__ = [
    "MopeKey",
    "MopeCipher",
    "MopeConfig",
]
