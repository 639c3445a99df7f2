"""Data models for generated documentation."""

from __future__ import annotations

from dataclasses import dataclass, field

MISSING = "-"  # Unnamed parameter or parameter without @param


@dataclass
class ParamDoc:
    """Resolved parameter of a function, event or error."""

    name: str  # MISSING when the ABI name is empty
    type: str  # Canonical ABI type, e.g. "(uint256,address)[]"
    doc: str  # MISSING when no @param/@return matched
    internal_type: str | None = None  # Not carried for event params
    indexed: bool | None = None  # Event params only

    def __str__(self) -> str:
        indexed = " indexed" if self.indexed else ""
        if self.name == MISSING:
            return f"{self.type}{indexed}"
        return f"{self.type}{indexed} {self.name}"


@dataclass
class MethodDoc:
    name: str
    state_mutability: str  # "pure" | "view" | "nonpayable" | "payable"
    details: str | None = None
    notice: str | None = None
    params: list[ParamDoc] = field(default_factory=list)
    returns: list[ParamDoc] = field(default_factory=list)

    def __str__(self) -> str:
        params = ", ".join(str(p) for p in self.params)
        returns = ""
        if self.returns:
            returns = f" returns ({', '.join(str(p) for p in self.returns)})"
        return (
            f"function {self.name}({params}) external {self.state_mutability}{returns}"
        )


@dataclass
class EventDoc:
    name: str
    details: str | None = None
    notice: str | None = None
    params: list[ParamDoc] = field(default_factory=list)

    def __str__(self) -> str:
        return f"event {self.name}({', '.join(str(p) for p in self.params)})"


@dataclass
class ErrorDoc:
    name: str
    details: str | None = None
    notice: str | None = None
    params: list[ParamDoc] = field(default_factory=list)

    def __str__(self) -> str:
        return f"error {self.name}({', '.join(str(p) for p in self.params)})"


@dataclass
class ContractDoc:
    """One contract's ABI merged with its devdoc and userdoc."""

    name: str
    title: str | None = None
    details: str | None = None
    notice: str | None = None
    author: str | None = None
    # Keyed by member name; each list holds overloads in ABI order
    methods: dict[str, list[MethodDoc]] = field(default_factory=dict)
    events: dict[str, list[EventDoc]] = field(default_factory=dict)
    errors: dict[str, list[ErrorDoc]] = field(default_factory=dict)


@dataclass
class FileDoc:
    """All contracts declared in one source file."""

    name: str  # Source path relative to src root, extension stripped
    contracts: list[ContractDoc] = field(default_factory=list)


@dataclass(frozen=True)
class SummaryEntry:
    """One line of SUMMARY.md."""

    depth: int
    label: str
    link: str


@dataclass
class ValidationResult:
    """Results from NatSpec coverage validation."""

    errors: list[str] = field(default_factory=list)  # Run fails if non-empty
    warnings: list[str] = field(default_factory=list)  # Printed but allowed
