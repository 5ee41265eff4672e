"""Tests for the example registry."""

import pytest

from solid_examples.examples import EXAMPLE_MODULES, REGISTRY, build_registry
from solid_examples.examples.registry import DuplicateExampleError, ExampleRegistry, UnknownExampleError
from solid_examples.models import ExampleInfo, RunContext
from solid_examples.utils.error_handling import SolidExamplesError


def _info(name="srp_99", principle="SRP"):
    return ExampleInfo(name=name, principle=principle, title="Test example")


def _hello(echo, context):
    echo("hello")
    echo("world")


class TestExampleRegistry:
    """Test registering and looking up examples."""

    def test_register_and_get(self):
        """Test a registered example can be looked up and run."""
        registry = ExampleRegistry()
        registry.register(_info(), _hello)

        example = registry.get("srp_99")
        assert example.info.name == "srp_99"
        assert example.capture() == "hello\nworld\n"

    def test_run_with_echo(self, echo_lines):
        """Test run passes output through the given echo."""
        lines, echo = echo_lines
        registry = ExampleRegistry()
        registry.register(_info(), _hello)

        registry.get("srp_99").run(echo, RunContext())

        assert lines == ["hello", "world"]

    def test_names_keep_registration_order(self):
        """Test names are listed in registration order."""
        registry = ExampleRegistry()
        registry.register(_info("ocp_01", "OCP"), _hello)
        registry.register(_info("srp_01"), _hello)
        assert registry.names() == ["ocp_01", "srp_01"]
        assert len(registry) == 2
        assert "srp_01" in registry

    def test_duplicate_name(self):
        """Test registering the same name twice fails."""
        registry = ExampleRegistry()
        registry.register(_info(), _hello)
        with pytest.raises(DuplicateExampleError, match="already registered"):
            registry.register(_info(), _hello)

    def test_unknown_name(self):
        """Test looking up an unknown name lists the available ones."""
        registry = ExampleRegistry()
        registry.register(_info(), _hello)

        with pytest.raises(UnknownExampleError) as exc_info:
            registry.get("nope_01")

        assert exc_info.value.name == "nope_01"
        assert str(exc_info.value) == "Unknown example 'nope_01'. Available: srp_99"
        assert isinstance(exc_info.value, SolidExamplesError)
        assert isinstance(exc_info.value, KeyError)

    def test_by_principle_case_insensitive(self):
        """Test filtering by principle ignores case."""
        registry = ExampleRegistry()
        registry.register(_info("srp_01"), _hello)
        registry.register(_info("dip_01", "DIP"), _hello)

        assert [e.info.name for e in registry.by_principle("dip")] == ["dip_01"]
        assert registry.by_principle("LSP") == []

    def test_capture_empty_output(self):
        """Test an example that prints nothing captures as an empty string."""
        registry = ExampleRegistry()
        registry.register(_info(), lambda echo, context: None)
        assert registry.get("srp_99").capture() == ""


class TestDefaultRegistry:
    """Test the registry of bundled examples."""

    def test_every_module_registered(self):
        """Test each example module is registered under its own name."""
        assert REGISTRY.names() == [module.INFO.name for module in EXAMPLE_MODULES]

    def test_principle_order(self):
        """Test examples are grouped SRP, OCP, LSP, ISP, DIP."""
        order = []
        for example in REGISTRY:
            if not order or order[-1] != example.info.principle:
                order.append(example.info.principle)
        assert order == ["SRP", "OCP", "LSP", "ISP", "DIP"]

    def test_build_registry_is_fresh(self):
        """Test build_registry returns an independent registry."""
        registry = build_registry()
        assert registry is not REGISTRY
        assert registry.names() == REGISTRY.names()

    @pytest.mark.parametrize("name", REGISTRY.names())
    def test_examples_are_deterministic(self, name, run_context):
        """Test running an example twice prints the same text."""
        example = REGISTRY.get(name)
        first = example.capture(run_context)
        assert first
        assert example.capture(run_context) == first
