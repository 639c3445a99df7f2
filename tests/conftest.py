"""Shared pytest fixtures for abidoc tests."""

import pytest

from abidoc.artifacts import CompilerOutput, parse_output
from abidoc.config import DocConfig
from tests.helpers import contract, event, function, output, param, token_contract


@pytest.fixture
def project_output() -> CompilerOutput:
    """
    Compiler output for a small project.

    Sources under src/ (root file, two nested dirs) plus a library and a
    test file that must never be documented.
    """
    return parse_output(
        output(
            {
                "src/vault/Vault.sol": {
                    "Vault": contract(
                        [function("deposit", [param("uint256", "assets")])],
                        {"methods": {"deposit(uint256)": {"details": "Deposit."}}},
                    )
                },
                "src/Token.sol": {
                    "Token": token_contract(),
                    "TokenFactory": contract([function("create")]),
                },
                "lib/forge-std/src/Test.sol": {"Test": contract()},
                "src/utils/Math.sol": {
                    "Math": contract([event("Overflow")], {"title": "Math"})
                },
                "test/Token.t.sol": {"TokenTest": contract()},
                "src/utils/Safe.sol": {"Safe": contract()},
            }
        )
    )


@pytest.fixture
def config(tmp_path) -> DocConfig:
    """Config rooted at a temporary project directory."""
    return DocConfig(root=tmp_path)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep ABIDOC_* from the developer's shell out of every test."""
    for var in ("ABIDOC_SRC", "ABIDOC_OUT", "ABIDOC_SOLC"):
        monkeypatch.delenv(var, raising=False)
