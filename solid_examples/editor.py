"""
Editor processing steps.

Steps satisfy the ``Processing`` protocol and mutate a shared
``EditorContent``. ``ProcessingChain`` composes two steps into one, so a
whole pipeline can be handed around wherever a single step is expected.
"""

from .models.editor import EditorContent
from .protocols.report_protocol import Processing


class LowerCase:
    """Lower-cases the whole text."""

    name = "LowerCase"

    def apply(self, context: EditorContent) -> None:
        context.content = context.content.lower() + "\n[LowerCase OK]"


class SpellChecker:
    """Pretend spell checker; only marks that it ran."""

    name = "SpellChecker"

    def apply(self, context: EditorContent) -> None:
        context.content += "\n[SpellChecker OK]"


class ProcessingChain:
    """
    Two processings applied one after the other.

    The tail may itself be a chain, which gives pipelines of any length:
    ``ProcessingChain(a, ProcessingChain(b, c))``.
    """

    def __init__(self, head: Processing, tail: Processing) -> None:
        self.head = head
        self.tail = tail

    @property
    def name(self) -> str:
        return f"{self.head.name} + {self.tail.name}"

    def apply(self, context: EditorContent) -> None:
        self.head.apply(context)
        self.tail.apply(context)

    @classmethod
    def of(cls, first: Processing, *rest: Processing) -> Processing:
        """
        Build a right-nested chain from a list of steps.

        A single step is returned unchanged.
        """
        if not rest:
            return first
        return cls(first, cls.of(*rest))


__all__ = ["LowerCase", "SpellChecker", "ProcessingChain"]
