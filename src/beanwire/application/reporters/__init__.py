"""Reporters for analysis results.

Output is str: the caller decides where it goes.
"""

from beanwire.application.reporters.console import ConsoleConfig, ConsoleReporter
from beanwire.application.reporters.strategies import (
    ByKindStrategy,
    ByTargetStrategy,
    GroupStrategy,
)

__all__ = [
    "ByKindStrategy",
    "ByTargetStrategy",
    "ConsoleConfig",
    "ConsoleReporter",
    "GroupStrategy",
]
