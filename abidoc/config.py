"""Run configuration.

Precedence, lowest first: defaults, `foundry.toml` and `remappings.txt`,
`ABIDOC_*` environment variables, explicit overrides (CLI flags).
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path, PurePosixPath
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from .errors import AbidocError

log = logging.getLogger(__name__)

CONFIG_FILE = "foundry.toml"
REMAPPINGS_FILE = "remappings.txt"

_ENV_VARS = {
    "src": "ABIDOC_SRC",
    "out": "ABIDOC_OUT",
    "solc": "ABIDOC_SOLC",
}


class DocConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    root: Path
    src: str = "src"  # Relative to root, as solc reports source paths
    out: Path = Path("docs/src")  # Relative to root unless absolute
    extension: str = ".sol"
    solc: str = "solc"
    artifact: Optional[Path] = None  # Pre-built standard-JSON output
    remappings: tuple[str, ...] = ()  # solc import remappings, "prefix=target"
    clean: bool = False
    strict: bool = False

    @field_validator("src")
    @classmethod
    def _normalize_src(cls, value: str) -> str:
        # solc reports "src/A.sol", never "./src/A.sol" or "src//A.sol"
        return PurePosixPath(value).as_posix()

    @property
    def out_dir(self) -> Path:
        return self.out if self.out.is_absolute() else self.root / self.out

    @property
    def src_dir(self) -> Path:
        return self.root / self.src


def _read_project_file(root: Path) -> dict[str, Any]:
    path = root / CONFIG_FILE
    if not path.exists():
        return {}
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise AbidocError(f"Cannot read {path}: {e}") from e

    values: dict[str, Any] = {}
    profile = data.get("profile", {}).get("default", {})
    if "src" in profile:
        values["src"] = profile["src"]
    if "remappings" in profile:
        values["remappings"] = tuple(profile["remappings"])
    doc = data.get("doc", {})
    if "out" in doc:
        values["out"] = Path(doc["out"]) / "src"
    log.debug("Read %s from %s", sorted(values), path)
    return values


def _read_remappings_file(root: Path) -> tuple[str, ...]:
    path = root / REMAPPINGS_FILE
    if not path.exists():
        return ()
    try:
        lines = path.read_text().splitlines()
    except OSError as e:
        raise AbidocError(f"Cannot read {path}: {e}") from e
    return tuple(line.strip() for line in lines if line.strip())


def load_config(root: Path, **overrides: Any) -> DocConfig:
    """Build the config for a project rooted at `root`.

    Overrides set to None are ignored.
    """
    values: dict[str, Any] = {"root": root}
    project = _read_project_file(root)
    remappings = _read_remappings_file(root) + project.pop("remappings", ())
    if remappings:
        values["remappings"] = tuple(dict.fromkeys(remappings))
    values.update(project)
    for field, var in _ENV_VARS.items():
        if var in os.environ:
            values[field] = os.environ[var]
    values.update({k: v for k, v in overrides.items() if v is not None})
    return DocConfig(**values)
