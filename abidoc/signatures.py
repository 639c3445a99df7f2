"""Signature keys used to join ABI members against devdoc/userdoc maps.

solc keys NatSpec by `name(type1,type2,...)` using canonical ABI types,
with tuples written out as `(t1,t2)` and array suffixes kept.
"""

from __future__ import annotations

from .artifacts import AbiEntry, AbiParam


def canonical_type(param: AbiParam) -> str:
    """Render a parameter's canonical ABI type.

    >>> canonical_type(AbiParam(type="tuple[2][]", components=[
    ...     AbiParam(type="uint256"), AbiParam(type="address")]))
    '(uint256,address)[2][]'
    """
    if not param.type.startswith("tuple"):
        return param.type
    suffix = param.type[len("tuple") :]
    inner = ",".join(canonical_type(c) for c in param.components or [])
    return f"({inner}){suffix}"


def _join(params: list[AbiParam]) -> str:
    return ",".join(canonical_type(p) for p in params)


def abi_signature(entry: AbiEntry) -> str:
    """Signature as the ABI layer renders it.

    Functions with outputs carry a `:(outputs)` segment.
    """
    signature = f"{entry.name}({_join(entry.inputs)})"
    if entry.type == "function" and entry.outputs:
        signature += f":({_join(entry.outputs)})"
    return signature


def signature_key(entry: AbiEntry) -> str:
    """Key under which devdoc/userdoc store this member's annotations."""
    if entry.type == "function":
        return abi_signature(entry).split(":", 1)[0]
    return f"{entry.name}({_join(entry.inputs)})"
