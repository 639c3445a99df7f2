"""Exceptions raised by abidoc.

Missing NatSpec is never an error. Everything here aborts the run.
"""

from __future__ import annotations

from pathlib import Path


class AbidocError(Exception):
    """Base exception for abidoc operations."""

    pass


class MalformedArtifactError(AbidocError):
    """Raised when the compiler output lacks a required ABI or NatSpec container."""

    def __init__(self, message: str, contract: str | None = None):
        super().__init__(message)
        self.contract = contract


class InvariantError(AbidocError):
    """Raised when a filtered source path cannot be stripped to a document name.

    The source glob and the prefix/extension stripping have drifted apart.
    """

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class AnnotationMismatchError(AbidocError):
    """Raised when devdoc and userdoc error lists for one signature differ in length."""

    def __init__(self, message: str, signature: str):
        super().__init__(message)
        self.signature = signature


class CompilerError(AbidocError):
    """Raised when solc fails or reports errors."""

    pass


class DocWriteError(AbidocError):
    """Raised when a documentation directory or file cannot be written."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path
