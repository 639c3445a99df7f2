"""Merge ABI, devdoc and userdoc into per-contract documentation."""

from __future__ import annotations

import logging

from .artifacts import (
    AbiEntry,
    AbiParam,
    ContractArtifact,
    DevDoc,
    EventDevDoc,
    MethodDevDoc,
    UserDoc,
    notice_text,
)
from .errors import AnnotationMismatchError
from .models import MISSING, ContractDoc, ErrorDoc, EventDoc, MethodDoc, ParamDoc
from .signatures import canonical_type, signature_key

log = logging.getLogger(__name__)


def build_params(params: list[AbiParam], descriptions: dict[str, str]) -> list[ParamDoc]:
    """Resolve function/error parameters against @param or @return text.

    Lookup uses the declared name verbatim, so unnamed parameters never
    pick up a description.
    """
    return [
        ParamDoc(
            name=p.name or MISSING,
            type=canonical_type(p),
            internal_type=p.internal_type,
            doc=descriptions.get(p.name, MISSING),
        )
        for p in params
    ]


def build_event_params(
    params: list[AbiParam], descriptions: dict[str, str]
) -> list[ParamDoc]:
    """Resolve event parameters; these carry `indexed` instead of internal type."""
    return [
        ParamDoc(
            name=p.name or MISSING,
            type=canonical_type(p),
            indexed=bool(p.indexed),
            doc=descriptions.get(p.name, MISSING),
        )
        for p in params
    ]


def build_methods(
    functions: list[AbiEntry], dev_doc: DevDoc, user_doc: UserDoc
) -> dict[str, list[MethodDoc]]:
    methods: dict[str, list[MethodDoc]] = {}
    for function in functions:
        signature = signature_key(function)
        function_dev_doc = dev_doc.methods.get(signature, MethodDevDoc())
        methods.setdefault(function.name, []).append(
            MethodDoc(
                name=function.name,
                details=function_dev_doc.details,
                notice=notice_text(user_doc.methods.get(signature)),
                state_mutability=function.state_mutability or "nonpayable",
                params=build_params(function.inputs, function_dev_doc.params),
                returns=build_params(function.outputs, function_dev_doc.returns),
            )
        )
    return dict(sorted(methods.items()))


def build_events(
    events: list[AbiEntry], dev_doc: DevDoc, user_doc: UserDoc
) -> dict[str, list[EventDoc]]:
    docs: dict[str, list[EventDoc]] = {}
    for event in events:
        signature = signature_key(event)
        event_dev_doc = dev_doc.events.get(signature, EventDevDoc())
        docs.setdefault(event.name, []).append(
            EventDoc(
                name=event.name,
                details=event_dev_doc.details,
                notice=notice_text(user_doc.events.get(signature)),
                params=build_event_params(event.inputs, event_dev_doc.params),
            )
        )
    return dict(sorted(docs.items()))


def build_errors(
    errors: list[AbiEntry], dev_doc: DevDoc, user_doc: UserDoc
) -> dict[str, list[ErrorDoc]]:
    """Build error docs, pairing devdoc and userdoc lists by index.

    The same error signature can be declared more than once along an
    inheritance chain, so solc stores a list per signature. The i-th devdoc
    record is assumed to belong with the i-th userdoc record.

    Raises:
        AnnotationMismatchError: If both lists exist but differ in length.
    """
    docs: dict[str, list[ErrorDoc]] = {}
    for error in errors:
        signature = signature_key(error)
        error_dev_docs = dev_doc.errors.get(signature)
        if not error_dev_docs:
            log.debug("No devdoc for error %s, skipping", signature)
            continue
        error_user_docs = user_doc.errors.get(signature)
        if error_user_docs is None:
            notices: list[str | None] = [None] * len(error_dev_docs)
        elif len(error_user_docs) != len(error_dev_docs):
            raise AnnotationMismatchError(
                f"Error {signature}: {len(error_dev_docs)} devdoc entries "
                f"but {len(error_user_docs)} userdoc entries",
                signature=signature,
            )
        else:
            notices = [notice_text(n) for n in error_user_docs]

        for error_dev_doc, notice in zip(error_dev_docs, notices):
            docs.setdefault(error.name, []).append(
                ErrorDoc(
                    name=error.name,
                    details=error_dev_doc.details,
                    notice=notice,
                    params=build_params(error.inputs, error_dev_doc.params),
                )
            )
    return dict(sorted(docs.items()))


def build_contract_doc(name: str, contract: ContractArtifact) -> ContractDoc:
    """Combine a contract's ABI, devdoc and userdoc."""
    dev_doc = contract.devdoc
    user_doc = contract.userdoc
    return ContractDoc(
        name=name,
        title=dev_doc.title,
        details=dev_doc.details,
        notice=user_doc.notice,
        author=dev_doc.author,
        methods=build_methods(list(contract.functions()), dev_doc, user_doc),
        events=build_events(list(contract.events()), dev_doc, user_doc),
        errors=build_errors(list(contract.errors()), dev_doc, user_doc),
    )
