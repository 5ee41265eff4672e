"""
OCP, the problem: a closed set of report formats.

``generate`` branches on the requested format. Supporting a new format
means editing this function and every caller that lists the formats.
"""

from enum import Enum

from ..models.context import RunContext
from ..models.editor import Report
from ..models.example import ExampleInfo
from ..protocols.example_protocol import Echo

INFO = ExampleInfo(
    name="ocp_01",
    principle="OCP",
    title="Closed enum: every new format edits the generator",
    summary="A single generate() branches over TEXT, HTML and PDF.",
)


class ReportFormat(Enum):
    TEXT = "text"
    HTML = "html"
    PDF = "pdf"


def generate(report: Report, report_format: ReportFormat) -> str:
    if report_format is ReportFormat.TEXT:
        lines = [f"=== {report.title} ==="]
        lines.extend(f"- {item}" for item in report.data)
        return "\n".join(lines)
    if report_format is ReportFormat.HTML:
        output = f"<h1>{report.title}</h1>\n<ul>\n"
        output += "".join(f"  <li>{item}</li>\n" for item in report.data)
        return output + "</ul>"
    if report_format is ReportFormat.PDF:
        return f"PDF: {report.title} [binary data]"
    raise ValueError(f"Unsupported report format: {report_format}")


MONTHLY_SALES = Report(
    title="Monthly Sales",
    data=["Product A: 120 units", "Product B: 98 units", "Product C: 143 units"],
)


def run(echo: Echo, context: RunContext) -> None:
    for report_format in ReportFormat:
        echo("")
        echo(f"--- {report_format.name} REPORT ---")
        echo(generate(MONTHLY_SALES, report_format))


__all__ = ["INFO", "ReportFormat", "generate", "MONTHLY_SALES", "run"]
