"""
OCP with a composed tool chain.

The processor holds a single ``Processing``. A ``ProcessingChain`` is one,
so a whole pipeline is passed where one step is expected and the
processor never learns how many steps there are.
"""

from ..editor import LowerCase, ProcessingChain, SpellChecker
from ..models.context import RunContext
from ..models.editor import EditorContent
from ..models.example import ExampleInfo
from ..protocols.example_protocol import Echo
from ..protocols.report_protocol import Processing

INFO = ExampleInfo(
    name="ocp_07",
    principle="OCP",
    title="Tool chain: a pipeline that is itself a step",
    summary="ProcessingChain composes steps into a single Processing.",
)


class TxtProcessor:
    def __init__(self, tools: Processing) -> None:
        self.tools = tools

    def run(self, content: EditorContent) -> None:
        self.tools.apply(content)


def run(echo: Echo, context: RunContext) -> None:
    processor = TxtProcessor(ProcessingChain(LowerCase(), SpellChecker()))
    content = EditorContent(content="HELLO WORLD")

    echo(f"Running tool chain: {processor.tools.name}")
    processor.run(content)

    echo("--- FINAL CONTENT ---")
    echo(content.content)


__all__ = ["INFO", "TxtProcessor", "run"]
