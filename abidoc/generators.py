"""Markdown output for generated documentation."""

from __future__ import annotations

from .models import ContractDoc, ErrorDoc, EventDoc, FileDoc, MethodDoc, ParamDoc

HEADER = "<!-- AUTO-GENERATED. DO NOT EDIT. Run `abidoc` to regenerate. -->"


def _escape(text: str) -> str:
    """Keep free text from breaking a table row."""
    return text.replace("|", "\\|").replace("\n", " ")


def _param_table(title: str, params: list[ParamDoc]) -> list[str]:
    if not params:
        return []
    lines = [
        f"**{title}:**",
        "",
        "| Name | Type | Description |",
        "|------|------|-------------|",
    ]
    for p in params:
        lines.append(f"| `{p.name}` | `{p.type}` | {_escape(p.doc)} |")
    lines.append("")
    return lines


def _member(member: MethodDoc | EventDoc | ErrorDoc) -> list[str]:
    lines = [
        f"#### {member.name}",
        "",
        "```solidity",
        str(member),
        "```",
        "",
    ]

    if member.notice:
        lines.append(member.notice)
        lines.append("")

    if member.details:
        lines.append(f"*{member.details}*")
        lines.append("")

    lines.extend(_param_table("Parameters", member.params))
    if isinstance(member, MethodDoc):
        lines.extend(_param_table("Returns", member.returns))
    return lines


def _section(title: str, members: dict[str, list]) -> list[str]:
    if not members:
        return []
    lines = [f"### {title}", ""]
    for overloads in members.values():
        for member in overloads:
            lines.extend(_member(member))
    return lines


def render_contract(contract: ContractDoc) -> list[str]:
    lines = [f"## {contract.name}", ""]

    if contract.title:
        lines.append(f"**{contract.title}**")
        lines.append("")

    if contract.notice:
        lines.append(contract.notice)
        lines.append("")

    if contract.details:
        lines.append(f"*{contract.details}*")
        lines.append("")

    if contract.author:
        lines.append(f"Author: {contract.author}")
        lines.append("")

    lines.extend(_section("Methods", contract.methods))
    lines.extend(_section("Events", contract.events))
    lines.extend(_section("Errors", contract.errors))
    return lines


def render_file_doc(doc: FileDoc) -> str:
    """Render one source file's contracts as a Markdown document."""
    lines = [
        HEADER,
        "",
        f"# {doc.name.rpartition('/')[2]}",
        "",
    ]
    for contract in doc.contracts:
        lines.extend(render_contract(contract))
    return "\n".join(lines)
