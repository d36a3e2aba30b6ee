"""
HillCore Shared Module
=======================

Configuration, logging, and console utilities shared across HillCore
tools.
"""

from shared.config import HillCoreConfig

__all__ = ["HillCoreConfig"]
