"""
SOLID Examples - Runnable demonstrations of the SOLID design principles.

Each example shows one principle, usually as a pair: a version that breaks
it and a version that follows it. Most examples share one shape: a
capability (a protocol), several variants implementing it, and a driver
that invokes the capability without knowing which variant it holds.
"""

from ._version import __version__

from .dispatch import CapabilityDriver
from .examples import REGISTRY, ExampleRegistry, RegisteredExample
from .models import ExampleInfo, RunContext
from .utils import setup_logging, WrappingFormatter, get_logger
from .cli import main as cli_main, cli as cli_group

__all__ = [
    "__version__",
    "CapabilityDriver",
    "REGISTRY",
    "ExampleRegistry",
    "RegisteredExample",
    "ExampleInfo",
    "RunContext",
    "setup_logging",
    "WrappingFormatter",
    "get_logger",
    "cli_main",
    "cli_group",
]
