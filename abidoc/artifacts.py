"""Models of the solc standard-JSON output consumed by abidoc.

Only the `abi`, `devdoc` and `userdoc` outputs are read. Unknown keys
(`kind`, `version`, `stateVariables`, `custom:*` tags) are ignored.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterator, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, RootModel, ValidationError

from .errors import MalformedArtifactError

log = logging.getLogger(__name__)

StateMutability = Literal["pure", "view", "nonpayable", "payable"]


class _Model(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class AbiParam(_Model):
    name: str = ""
    type: str
    components: Optional[list[AbiParam]] = None
    indexed: Optional[bool] = None
    internal_type: Optional[str] = Field(default=None, alias="internalType")


class AbiEntry(_Model):
    """One ABI descriptor: function, event, error, constructor, fallback or receive."""

    type: Literal["function", "event", "error", "constructor", "fallback", "receive"]
    name: str = ""
    inputs: list[AbiParam] = Field(default_factory=list)
    outputs: list[AbiParam] = Field(default_factory=list)
    state_mutability: Optional[StateMutability] = Field(
        default=None, alias="stateMutability"
    )
    anonymous: Optional[bool] = None


class MethodDevDoc(_Model):
    details: Optional[str] = None
    params: dict[str, str] = Field(default_factory=dict)
    returns: dict[str, str] = Field(default_factory=dict)


class EventDevDoc(_Model):
    details: Optional[str] = None
    params: dict[str, str] = Field(default_factory=dict)


class ErrorDevDoc(_Model):
    details: Optional[str] = None
    params: dict[str, str] = Field(default_factory=dict)


class PlainNotice(_Model):
    """Userdoc entry of the form `{"notice": "..."}`."""

    notice: str

    def notice_text(self) -> str:
        return self.notice


class ConstructorNotice(RootModel[str]):
    """Userdoc entry given as a bare string (legacy `constructor` shape)."""

    model_config = ConfigDict(frozen=True)

    def notice_text(self) -> str:
        return self.root


Notice = Union[PlainNotice, ConstructorNotice]


def notice_text(entry: Notice | None) -> str | None:
    """Unwrap either notice shape to its text, or None when absent."""
    if entry is None:
        return None
    return entry.notice_text()


class DevDoc(_Model):
    title: Optional[str] = None
    details: Optional[str] = None
    author: Optional[str] = None
    methods: dict[str, MethodDevDoc] = Field(default_factory=dict)
    events: dict[str, EventDevDoc] = Field(default_factory=dict)
    errors: dict[str, list[ErrorDevDoc]] = Field(default_factory=dict)


class UserDoc(_Model):
    notice: Optional[str] = None
    methods: dict[str, Notice] = Field(default_factory=dict)
    events: dict[str, Notice] = Field(default_factory=dict)
    errors: dict[str, list[Notice]] = Field(default_factory=dict)


class ContractArtifact(_Model):
    abi: list[AbiEntry]
    devdoc: DevDoc = Field(default_factory=DevDoc)
    userdoc: UserDoc = Field(default_factory=UserDoc)

    def functions(self) -> Iterator[AbiEntry]:
        return (e for e in self.abi if e.type == "function")

    def events(self) -> Iterator[AbiEntry]:
        return (e for e in self.abi if e.type == "event")

    def errors(self) -> Iterator[AbiEntry]:
        return (e for e in self.abi if e.type == "error")


class Diagnostic(_Model):
    severity: str = "error"
    message: str = ""
    formatted_message: Optional[str] = Field(default=None, alias="formattedMessage")


class CompilerOutput(_Model):
    """solc standard-JSON output restricted to what abidoc reads.

    Contracts stay raw until `parse_contract`; only files that are documented
    need a well-formed artifact.
    """

    contracts: dict[str, dict[str, dict[str, Any]]] = Field(default_factory=dict)
    errors: list[Diagnostic] = Field(default_factory=list)

    def iter_contracts(self) -> Iterator[tuple[str, str, dict[str, Any]]]:
        """Yield (source path, contract name, raw artifact) in encounter order."""
        for path, contracts in self.contracts.items():
            for name, artifact in contracts.items():
                yield path, name, artifact


def _malformed(e: ValidationError, prefix: tuple = ()) -> MalformedArtifactError:
    first = e.errors()[0]
    loc = prefix + tuple(first["loc"])
    contract = None
    if len(loc) > 2 and loc[0] == "contracts":
        contract = f"{loc[1]}:{loc[2]}"
    where = ".".join(str(part) for part in loc) or "<root>"
    return MalformedArtifactError(
        f"Malformed compiler output at {where}: {first['msg']}", contract=contract
    )


def parse_output(data: dict | str | bytes) -> CompilerOutput:
    """Validate raw compiler output (decoded dict or JSON text).

    Raises:
        MalformedArtifactError: If the payload is not valid JSON or not shaped
            like solc output.
    """
    try:
        if isinstance(data, (str, bytes)):
            return CompilerOutput.model_validate_json(data)
        return CompilerOutput.model_validate(data)
    except ValidationError as e:
        raise _malformed(e) from e


def parse_contract(path: str, name: str, raw: dict[str, Any]) -> ContractArtifact:
    """Validate one contract. Absent devdoc/userdoc default to empty.

    Raises:
        MalformedArtifactError: If the contract has no ABI or it is malformed.
    """
    try:
        return ContractArtifact.model_validate(raw)
    except ValidationError as e:
        raise _malformed(e, prefix=("contracts", path, name)) from e


def load_output(path: Path) -> CompilerOutput:
    """Load a pre-built standard-JSON output file."""
    log.debug("Loading compiler output from %s", path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise MalformedArtifactError(f"Cannot read compiler output {path}: {e}") from e
    return parse_output(raw)
