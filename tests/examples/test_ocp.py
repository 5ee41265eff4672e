"""Tests for the open/closed examples."""

import pytest

from solid_examples.dispatch import CapabilityDriver
from solid_examples.editor import LowerCase, ProcessingChain, SpellChecker
from solid_examples.examples import ocp_01, ocp_02, ocp_03, ocp_05
from solid_examples.examples.ocp_01 import MONTHLY_SALES
from solid_examples.models import EditorContent
from solid_examples.protocols import Processing, ReportFormatter

FINAL_CONTENT = "--- FINAL CONTENT ---\nhello world\n[LowerCase OK]\n[SpellChecker OK]\n"


class TestReportSwitch:
    """Test ocp_01."""

    def test_text_report(self):
        """Test the text branch."""
        assert ocp_01.generate(MONTHLY_SALES, ocp_01.ReportFormat.TEXT) == (
            "=== Monthly Sales ===\n- Product A: 120 units\n- Product B: 98 units\n- Product C: 143 units"
        )

    def test_unsupported_format(self):
        """Test anything outside the enum is rejected."""
        with pytest.raises(ValueError, match="Unsupported report format"):
            ocp_01.generate(MONTHLY_SALES, "xml")

    def test_sections_in_enum_order(self, run_example):
        """Test one section per format, in declaration order."""
        output = run_example("ocp_01")
        headers = [line for line in output.splitlines() if line.startswith("--- ")]
        assert headers == ["--- TEXT REPORT ---", "--- HTML REPORT ---", "--- PDF REPORT ---"]
        assert "PDF: Monthly Sales [binary data]" in output


class TestShapes:
    """Test ocp_02."""

    def test_output(self, run_example):
        """Test the shapes example output."""
        assert run_example("ocp_02") == (
            "=== Shape areas ===\n"
            "Circle(radius=2.0) area: 12.566370614359172\n"
            "Square(side=3.0) area: 9\n"
            "Triangle(base=4.0, height=3.0) area: 6\n"
        )

    def test_adding_triangle_leaves_earlier_lines_unchanged(self):
        """Test extending the driver keeps earlier output byte-identical."""
        driver = ocp_02.shape_driver([ocp_02.Circle(radius=2.0), ocp_02.Square(side=3.0)])
        before = driver.run()

        driver.register(ocp_02.Triangle(base=4.0, height=3.0))

        after = driver.run()
        assert after[:2] == before
        assert after[2] == "Triangle(base=4.0, height=3.0) area: 6"

    def test_negative_size_rejected(self):
        """Test shape sizes are validated."""
        with pytest.raises(ValueError):
            ocp_02.Circle(radius=-1.0)


class TestFormatters:
    """Test ocp_03."""

    @pytest.mark.parametrize(
        "formatter",
        [ocp_03.TextFormatter(), ocp_03.HtmlFormatter(), ocp_03.PdfFormatter(), ocp_03.XmlFormatter()],
    )
    def test_formatters_satisfy_protocol(self, formatter):
        """Test every formatter is a ReportFormatter."""
        assert isinstance(formatter, ReportFormatter)

    def test_existing_formats_match_switch_version(self):
        """Test HTML and PDF render exactly as the enum-based version does."""
        assert ocp_03.generate(MONTHLY_SALES, ocp_03.HtmlFormatter()) == ocp_01.generate(
            MONTHLY_SALES, ocp_01.ReportFormat.HTML
        )
        assert ocp_03.generate(MONTHLY_SALES, ocp_03.PdfFormatter()) == ocp_01.generate(
            MONTHLY_SALES, ocp_01.ReportFormat.PDF
        )

    def test_xml(self):
        """Test the XML formatter."""
        assert ocp_03.XmlFormatter().format("T", ["a"]) == (
            "<report>\n  <title>T</title>\n  <items>\n    <item>a</item>\n  </items>\n</report>"
        )

    def test_adding_xml_keeps_earlier_sections(self, run_example):
        """Test the output without XML is a prefix of the output with XML."""

        def section(formatter):
            return f"--- {formatter.label} ---\n{ocp_03.generate(MONTHLY_SALES, formatter)}"

        driver = CapabilityDriver(section, [ocp_03.TextFormatter(), ocp_03.HtmlFormatter(), ocp_03.PdfFormatter()])
        without_xml = "".join(f"{text}\n" for text in driver.run())

        output = run_example("ocp_03")
        assert output.startswith(without_xml)
        assert output[len(without_xml) :].startswith("--- XML ---\n<report>")


class TestEditor:
    """Test ocp_04, ocp_05, ocp_07 and the editor steps."""

    def test_steps_satisfy_protocol(self):
        """Test steps and chains are Processing."""
        assert isinstance(LowerCase(), Processing)
        assert isinstance(SpellChecker(), Processing)
        assert isinstance(ProcessingChain(LowerCase(), SpellChecker()), Processing)

    def test_fixed_pair(self, run_example):
        """Test ocp_04 output."""
        assert run_example("ocp_04") == FINAL_CONTENT

    def test_registered_steps(self, run_example):
        """Test ocp_05 announces each step in registration order."""
        assert run_example("ocp_05") == (
            "Running processing: LowerCase\nRunning processing: SpellChecker\n" + FINAL_CONTENT
        )

    def test_chain(self, run_example):
        """Test ocp_07 runs the chain as one step."""
        assert run_example("ocp_07") == "Running tool chain: LowerCase + SpellChecker\n" + FINAL_CONTENT

    def test_chain_of_builds_nested_chain(self):
        """Test ProcessingChain.of nests to the right."""
        chain = ProcessingChain.of(LowerCase(), SpellChecker(), LowerCase())
        assert chain.name == "LowerCase + SpellChecker + LowerCase"

        content = EditorContent(content="ABC")
        chain.apply(content)
        assert content.content == "abc\n[lowercase ok]\n[spellchecker ok]\n[LowerCase OK]"

    def test_chain_of_single_step(self):
        """Test a single step is returned unchanged."""
        step = SpellChecker()
        assert ProcessingChain.of(step) is step

    def test_processor_with_no_steps(self, echo_lines):
        """Test an empty processor leaves the content alone."""
        lines, echo = echo_lines
        content = EditorContent(content="Text")
        ocp_05.TxtProcessor(echo).run(content)
        assert content.content == "Text"
        assert lines == []
