"""Group compiled contracts into one document per source file."""

from __future__ import annotations

import logging
from fnmatch import fnmatchcase

from .artifacts import CompilerOutput, ContractArtifact, parse_contract
from .errors import InvariantError
from .extractors import build_contract_doc
from .models import FileDoc

log = logging.getLogger(__name__)


def source_glob(src_root: str) -> str:
    """Glob matching every file below `src_root`; `*` also matches `/`."""
    return f"{src_root.rstrip('/')}/*"


def document_name(path: str, src_root: str, extension: str = ".sol") -> str:
    """Strip the source root and extension from a filtered source path.

    >>> document_name("src/utils/Math.sol", "src")
    'utils/Math'
    """
    prefix = f"{src_root.rstrip('/')}/"
    if not path.startswith(prefix) or not path.endswith(extension):
        raise InvariantError(
            f"{path} matched {source_glob(src_root)} but is not {prefix}*{extension}",
            path=path,
        )
    return path[len(prefix) : len(path) - len(extension)]


def group_contracts(
    output: CompilerOutput, src_root: str, extension: str = ".sol"
) -> list[FileDoc]:
    """Build a FileDoc per source file under `src_root`, sorted by name.

    Files outside the source root (libraries, tests, scripts) are skipped
    without being validated. Every retained contract is validated before
    any document is built.
    """
    pattern = source_glob(src_root)
    retained: list[tuple[str, str, ContractArtifact]] = []
    for path, name, raw in output.iter_contracts():
        if not fnmatchcase(path, pattern):
            log.debug("Skipping %s:%s (outside %s)", path, name, pattern)
            continue
        doc_name = document_name(path, src_root, extension)
        retained.append((doc_name, name, parse_contract(path, name, raw)))

    grouped: dict[str, FileDoc] = {}
    for doc_name, name, contract in retained:
        grouped.setdefault(doc_name, FileDoc(name=doc_name)).contracts.append(
            build_contract_doc(name, contract)
        )
    return [grouped[key] for key in sorted(grouped)]
