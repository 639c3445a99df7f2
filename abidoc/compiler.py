"""Run solc to obtain ABI and NatSpec for a project's sources."""

from __future__ import annotations

import json
import logging
import subprocess
from typing import Any

from .artifacts import CompilerOutput, parse_output
from .config import DocConfig
from .errors import CompilerError

log = logging.getLogger(__name__)

OUTPUT_SELECTION = {"*": {"*": ["abi", "devdoc", "userdoc"]}}


def collect_sources(config: DocConfig) -> dict[str, str]:
    """Read every source file under the src dir, keyed by root-relative path."""
    sources: dict[str, str] = {}
    for path in sorted(config.src_dir.rglob(f"*{config.extension}")):
        sources[path.relative_to(config.root).as_posix()] = path.read_text()
    return sources


def standard_json_input(
    sources: dict[str, str], remappings: tuple[str, ...] = ()
) -> dict[str, Any]:
    settings: dict[str, Any] = {"outputSelection": OUTPUT_SELECTION}
    if remappings:
        settings["remappings"] = list(remappings)
    return {
        "language": "Solidity",
        "sources": {name: {"content": content} for name, content in sources.items()},
        "settings": settings,
    }


def compile_sources(config: DocConfig) -> CompilerOutput:
    """Compile the project with `solc --standard-json`.

    Raises:
        CompilerError: If solc cannot be run or reports an error diagnostic.
        MalformedArtifactError: If solc's output is not shaped like standard JSON.
    """
    sources = collect_sources(config)
    if not sources:
        raise CompilerError(f"No *{config.extension} files under {config.src_dir}")
    log.info("Compiling %d source files with %s", len(sources), config.solc)

    try:
        result = subprocess.run(
            [
                config.solc,
                "--standard-json",
                "--base-path",
                str(config.root),
                "--allow-paths",
                str(config.root),
            ],
            input=json.dumps(standard_json_input(sources, config.remappings)),
            capture_output=True,
            text=True,
            cwd=config.root,
        )
    except OSError as e:
        raise CompilerError(f"Cannot run {config.solc}: {e}") from e

    if result.returncode != 0:
        raise CompilerError(
            f"{config.solc} exited with {result.returncode}: {result.stderr.strip()}"
        )

    try:
        data = json.loads(result.stdout)
    except json.JSONDecodeError as e:
        raise CompilerError(f"{config.solc} produced invalid JSON: {e}") from e

    # Contract output after a failed compile is partial; diagnostics decide.
    diagnostics = CompilerOutput.model_validate({"errors": data.get("errors", [])})
    failures = []
    for diagnostic in diagnostics.errors:
        text = diagnostic.formatted_message or diagnostic.message
        if diagnostic.severity == "error":
            failures.append(text)
        else:
            log.warning(text)
    if failures:
        raise CompilerError("\n".join(failures))
    return parse_output(data)

