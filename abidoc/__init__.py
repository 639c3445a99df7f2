"""abidoc: Markdown documentation from Solidity ABI and NatSpec."""

from .artifacts import CompilerOutput, load_output, parse_output
from .config import DocConfig, load_config
from .errors import (
    AbidocError,
    AnnotationMismatchError,
    CompilerError,
    DocWriteError,
    InvariantError,
    MalformedArtifactError,
)
from .extractors import build_contract_doc
from .grouping import group_contracts
from .models import ContractDoc, FileDoc, SummaryEntry
from .pipeline import build_documents, run, write_documents
from .summary import build_summary, render_summary

__all__ = [
    "AbidocError",
    "AnnotationMismatchError",
    "CompilerError",
    "CompilerOutput",
    "ContractDoc",
    "DocConfig",
    "DocWriteError",
    "FileDoc",
    "InvariantError",
    "MalformedArtifactError",
    "SummaryEntry",
    "build_contract_doc",
    "build_documents",
    "build_summary",
    "group_contracts",
    "load_config",
    "load_output",
    "parse_output",
    "render_summary",
    "run",
    "write_documents",
]
