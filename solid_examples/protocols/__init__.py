"""
Protocols for type safety.

This package provides the capabilities the examples are written against.
Variants satisfy them structurally, without inheriting from them.
"""

from .example_protocol import Echo, ExampleProtocol, Runner
from .shape_protocol import HasArea, Shape
from .report_protocol import Processing, ReportFormatter
from .storage_protocol import Executable, Queryable, Storage, Transaction, Transactional
from .document_protocol import Readable, Searchable
from .notifier_protocol import Notifier

__all__ = [
    "Echo",
    "ExampleProtocol",
    "Runner",
    "HasArea",
    "Shape",
    "Processing",
    "ReportFormatter",
    "Executable",
    "Queryable",
    "Storage",
    "Transaction",
    "Transactional",
    "Readable",
    "Searchable",
    "Notifier",
]
