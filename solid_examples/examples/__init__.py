"""
The example programs and the registry that lists them.

Every example module exposes ``INFO`` and ``run(echo, context)``.
``REGISTRY`` holds them grouped by principle: SRP, OCP, LSP, ISP, DIP.
"""

from . import (
    dip_01,
    dip_02,
    dip_03,
    dip_04,
    isp_01,
    isp_02,
    isp_03,
    isp_04,
    isp_05,
    lsp_01,
    lsp_02,
    lsp_03,
    lsp_04,
    ocp_01,
    ocp_02,
    ocp_03,
    ocp_04,
    ocp_05,
    ocp_07,
    srp_01,
    srp_02,
)
from .registry import DuplicateExampleError, ExampleRegistry, RegisteredExample, UnknownExampleError

EXAMPLE_MODULES = (
    srp_01,
    srp_02,
    ocp_01,
    ocp_02,
    ocp_03,
    ocp_04,
    ocp_05,
    ocp_07,
    lsp_01,
    lsp_02,
    lsp_03,
    lsp_04,
    isp_01,
    isp_02,
    isp_03,
    isp_04,
    isp_05,
    dip_01,
    dip_02,
    dip_03,
    dip_04,
)


def build_registry() -> ExampleRegistry:
    """Create a registry holding every bundled example."""
    registry = ExampleRegistry()
    for module in EXAMPLE_MODULES:
        registry.register(module.INFO, module.run)
    return registry


REGISTRY = build_registry()

__all__ = [
    "EXAMPLE_MODULES",
    "REGISTRY",
    "build_registry",
    "ExampleRegistry",
    "RegisteredExample",
    "UnknownExampleError",
    "DuplicateExampleError",
]
