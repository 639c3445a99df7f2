"""NatSpec coverage checks."""

from __future__ import annotations

from typing import Iterator

from .models import ContractDoc, FileDoc, ValidationResult


def _members(contract: ContractDoc, kind: str) -> Iterator:
    for overloads in getattr(contract, kind).values():
        yield from overloads


def _is_documented(member) -> bool:
    return bool(member.notice or member.details)


def validate_docs(documents: list[FileDoc], strict: bool = False) -> ValidationResult:
    """Validate NatSpec on generated documents.

    Checks:
    1. Contracts should have a @title, @notice or @dev
    2. Methods and events should have a @notice or @dev

    Errors without devdoc never reach the model, so they are not checked.

    Args:
        documents: Grouped documents from a run
        strict: If True, missing docs are errors instead of warnings

    Returns:
        ValidationResult with errors and warnings
    """
    result = ValidationResult()
    messages: list[str] = []

    for document in documents:
        for contract in document.contracts:
            where = f"{document.name}:{contract.name}"
            if not (contract.title or contract.notice or contract.details):
                messages.append(f"{where}: missing @title/@notice (undocumented)")
            for kind in ("methods", "events"):
                for member in _members(contract, kind):
                    if not _is_documented(member):
                        messages.append(f"{where}.{member.name}: missing @notice/@dev")

    if strict:
        result.errors.extend(messages)
    else:
        result.warnings.extend(messages)
    return result


def compute_coverage(documents: list[FileDoc]) -> dict[str, float]:
    """Compute NatSpec coverage by member kind.

    Returns:
        Dict with 'methods' and 'events' coverage (0.0 - 1.0)
    """
    coverage: dict[str, float] = {}
    for kind in ("methods", "events"):
        members = [
            member
            for document in documents
            for contract in document.contracts
            for member in _members(contract, kind)
        ]
        documented = sum(1 for m in members if _is_documented(m))
        coverage[kind] = documented / len(members) if members else 1.0
    return coverage
