"""Builders for raw solc standard-JSON output used across tests."""

from __future__ import annotations

from typing import Any


def param(type_: str, name: str = "", **extra: Any) -> dict[str, Any]:
    return {"name": name, "type": type_, **extra}


def function(
    name: str,
    inputs: list[dict] | None = None,
    outputs: list[dict] | None = None,
    mutability: str = "nonpayable",
) -> dict[str, Any]:
    return {
        "type": "function",
        "name": name,
        "inputs": inputs or [],
        "outputs": outputs or [],
        "stateMutability": mutability,
    }


def event(name: str, inputs: list[dict] | None = None) -> dict[str, Any]:
    return {"type": "event", "name": name, "inputs": inputs or [], "anonymous": False}


def error(name: str, inputs: list[dict] | None = None) -> dict[str, Any]:
    return {"type": "error", "name": name, "inputs": inputs or []}


def contract(
    abi: list[dict] | None = None,
    devdoc: dict | None = None,
    userdoc: dict | None = None,
) -> dict[str, Any]:
    return {
        "abi": abi or [],
        "devdoc": {"kind": "dev", "version": 1, **(devdoc or {})},
        "userdoc": {"kind": "user", "version": 1, **(userdoc or {})},
    }


def output(contracts: dict[str, dict[str, dict]]) -> dict[str, Any]:
    return {"contracts": contracts, "sources": {}}


TOKEN_ABI = [
    function(
        "transfer",
        [param("address", "to"), param("uint256", "amount")],
        [param("bool")],
    ),
    function("mint", [param("address", "to")]),
    function("mint", [param("address", "to"), param("uint256", "amount")]),
    function("balanceOf", [param("address", "owner")], [param("uint256")], "view"),
    event(
        "Transfer",
        [
            param("address", "from", indexed=True),
            param("address", "to", indexed=True),
            param("uint256", "value", indexed=False),
        ],
    ),
    error(
        "InsufficientBalance",
        [param("uint256", "available"), param("uint256", "required")],
    ),
]

TOKEN_DEVDOC = {
    "title": "Simple token",
    "author": "Ada",
    "details": "Minimal ERC20-like token.",
    "methods": {
        "transfer(address,uint256)": {
            "details": "Moves `amount` to `to`.",
            "params": {"to": "Recipient", "amount": "Token amount"},
            "returns": {"_0": "Always true"},
        },
        "mint(address,uint256)": {"params": {"amount": "Amount to mint"}},
    },
    "events": {
        "Transfer(address,address,uint256)": {
            "details": "Emitted on every transfer.",
            "params": {"from": "Sender"},
        }
    },
    "errors": {
        "InsufficientBalance(uint256,uint256)": [
            {"details": "Balance too low.", "params": {"available": "Held"}}
        ]
    },
}

TOKEN_USERDOC = {
    "notice": "A token for tests.",
    "methods": {
        "transfer(address,uint256)": {"notice": "Send tokens."},
        "mint(address)": "Mint one token.",
    },
    "events": {"Transfer(address,address,uint256)": {"notice": "Tokens moved."}},
    "errors": {"InsufficientBalance(uint256,uint256)": [{"notice": "Not enough."}]},
}


def token_contract() -> dict[str, Any]:
    return contract(TOKEN_ABI, TOKEN_DEVDOC, TOKEN_USERDOC)
