"""
Hill Core Module
=================

The cipher core (codec, modular arithmetic, matrices, keys, blocks,
cipher) plus the orchestration engine and its data models.
"""

from hill.core.cipher import BlockTransform, HillCipher
from hill.core.engine import HillEngine
from hill.core.models import (
    BlockStep,
    CipherMode,
    CipherTrace,
    KeyDerivation,
    RoundTripResult,
)

__all__ = [
    "BlockStep",
    "BlockTransform",
    "CipherMode",
    "CipherTrace",
    "HillCipher",
    "HillEngine",
    "KeyDerivation",
    "RoundTripResult",
]
