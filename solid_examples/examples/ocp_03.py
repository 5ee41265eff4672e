"""
OCP, the fix: report formats as plug-in formatters.

``generate`` takes any ``ReportFormatter``. ``XmlFormatter`` was added
later without editing ``generate`` or the other formatters.
"""

from typing import List

from ..dispatch import CapabilityDriver
from ..models.context import RunContext
from ..models.editor import Report
from ..models.example import ExampleInfo
from ..protocols.example_protocol import Echo
from ..protocols.report_protocol import ReportFormatter
from .ocp_01 import MONTHLY_SALES

INFO = ExampleInfo(
    name="ocp_03",
    principle="OCP",
    title="Formatters: add XML without editing the generator",
    summary="generate() delegates to a ReportFormatter; each format is its own class.",
)


class TextFormatter:
    label = "TEXT"

    def format(self, title: str, data: List[str]) -> str:
        output = f"=== {title} ===\n"
        output += "".join(f"- {item}\n" for item in data)
        return output


class HtmlFormatter:
    label = "HTML"

    def format(self, title: str, data: List[str]) -> str:
        output = f"<h1>{title}</h1>\n<ul>\n"
        output += "".join(f"  <li>{item}</li>\n" for item in data)
        return output + "</ul>"


class PdfFormatter:
    label = "PDF"

    def format(self, title: str, data: List[str]) -> str:
        return f"PDF: {title} [binary data]"


class XmlFormatter:
    label = "XML"

    def format(self, title: str, data: List[str]) -> str:
        output = "<report>\n"
        output += f"  <title>{title}</title>\n"
        output += "  <items>\n"
        output += "".join(f"    <item>{item}</item>\n" for item in data)
        return output + "  </items>\n</report>"


def generate(report: Report, formatter: ReportFormatter) -> str:
    return formatter.format(report.title, list(report.data))


def run(echo: Echo, context: RunContext) -> None:
    driver = CapabilityDriver(
        lambda formatter: f"--- {formatter.label} ---\n{generate(MONTHLY_SALES, formatter)}",
        [TextFormatter(), HtmlFormatter(), PdfFormatter()],
    )
    driver.register(XmlFormatter())

    for section in driver.run():
        echo(section)


__all__ = ["INFO", "TextFormatter", "HtmlFormatter", "PdfFormatter", "XmlFormatter", "generate", "run"]
