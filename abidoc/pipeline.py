"""One documentation run: compile, build the document tree, write it out."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from .artifacts import CompilerOutput, load_output
from .compiler import compile_sources
from .config import DocConfig
from .errors import DocWriteError
from .generators import render_file_doc
from .grouping import group_contracts
from .models import FileDoc, ValidationResult
from .summary import build_summary, render_summary
from .validators import compute_coverage, validate_docs

log = logging.getLogger(__name__)

SUMMARY_FILE = "SUMMARY.md"


@dataclass
class RunResult:
    documents: list[FileDoc]
    written: list[Path] = field(default_factory=list)
    validation: ValidationResult = field(default_factory=ValidationResult)
    coverage: dict[str, float] = field(default_factory=dict)


def build_documents(output: CompilerOutput, config: DocConfig) -> list[FileDoc]:
    """Build every document in memory; nothing is written here."""
    return group_contracts(output, config.src, config.extension)


def _write(path: Path, content: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise DocWriteError(f"Cannot write {path}: {e}", path=path) from e


def write_documents(documents: list[FileDoc], out_dir: Path) -> list[Path]:
    """Write one Markdown file per document and SUMMARY.md at the root.

    Files written before a failure are left in place.
    """
    written: list[Path] = []
    for document in documents:
        path = out_dir / f"{document.name}.md"
        _write(path, render_file_doc(document))
        log.debug("Wrote %s", path)
        written.append(path)

    summary_path = out_dir / SUMMARY_FILE
    summary = build_summary([d.name for d in documents])
    _write(summary_path, render_summary(summary))
    written.append(summary_path)
    return written


def run(config: DocConfig) -> RunResult:
    """Generate documentation for the configured project.

    Raises:
        AbidocError: On any malformed input, invariant, compiler or I/O failure.
    """
    if config.artifact is not None:
        output = load_output(config.artifact)
    else:
        output = compile_sources(config)

    documents = build_documents(output, config)
    log.info("Built %d documents from %s", len(documents), config.src)

    result = RunResult(documents=documents)
    result.validation = validate_docs(documents, strict=config.strict)
    result.coverage = compute_coverage(documents)
    if result.validation.errors:
        return result

    out_dir = config.out_dir
    if config.clean and out_dir.exists():
        log.info("Removing %s", out_dir)
        try:
            shutil.rmtree(out_dir)
        except OSError as e:
            raise DocWriteError(f"Cannot remove {out_dir}: {e}", path=out_dir) from e
    result.written = write_documents(documents, out_dir)
    return result
