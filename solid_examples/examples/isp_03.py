"""ISP: an archived document is ``Readable`` and nothing more."""

from ..models.context import RunContext
from ..models.documents import Metadata
from ..models.example import ExampleInfo
from ..protocols.document_protocol import Readable
from ..protocols.example_protocol import Echo

INFO = ExampleInfo(
    name="isp_03",
    principle="ISP",
    title="A new client implements a single role",
    summary="ArchiveDocument only implements Readable.",
)


class ArchiveDocument:
    def __init__(self, content: str, title: str) -> None:
        self._content = content
        self._metadata = Metadata(title=title)

    def get_content(self) -> str:
        return self._content

    def get_metadata(self) -> Metadata:
        return self._metadata


def show(document: Readable, echo: Echo) -> None:
    echo(f"Title: {document.get_metadata().title}")
    echo(f"Content: {document.get_content()}")


def run(echo: Echo, context: RunContext) -> None:
    show(ArchiveDocument("This is a historical document.", "Company Archive 1998"), echo)


__all__ = ["INFO", "ArchiveDocument", "show", "run"]
