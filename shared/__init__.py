"""
Guardian Shared Module
=======================

Configuration, logging, console presentation, result models and
statistics helpers shared by the Guardian tool packages.
"""

from shared.config import GuardianConfig

__all__ = ["GuardianConfig"]
