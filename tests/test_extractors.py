"""Tests for merging ABI, devdoc and userdoc."""

import pytest

from abidoc.artifacts import ContractArtifact
from abidoc.errors import AnnotationMismatchError
from abidoc.extractors import build_contract_doc
from abidoc.models import MISSING
from tests.helpers import contract, error, event, function, param, token_contract


def build(raw: dict, name: str = "C"):
    return build_contract_doc(name, ContractArtifact.model_validate(raw))


class TestContract:
    """Contract-level NatSpec."""

    def test_contract_fields(self):
        doc = build(token_contract(), "Token")
        assert doc.name == "Token"
        assert doc.title == "Simple token"
        assert doc.author == "Ada"
        assert doc.details == "Minimal ERC20-like token."
        assert doc.notice == "A token for tests."

    def test_contract_without_natspec(self):
        doc = build(contract([function("f")]))
        assert doc.title is None
        assert doc.details is None
        assert doc.notice is None
        assert doc.author is None
        assert list(doc.methods) == ["f"]
        assert doc.events == {}
        assert doc.errors == {}


class TestMethods:
    """Function docs."""

    def test_documented_method(self):
        [transfer] = build(token_contract()).methods["transfer"]
        assert transfer.details == "Moves `amount` to `to`."
        assert transfer.notice == "Send tokens."
        assert transfer.state_mutability == "nonpayable"
        assert [(p.name, p.type, p.doc) for p in transfer.params] == [
            ("to", "address", "Recipient"),
            ("amount", "uint256", "Token amount"),
        ]

    def test_unnamed_return_is_never_matched(self):
        """devdoc keys unnamed returns as `_0`; the empty name must not match it."""
        [transfer] = build(token_contract()).methods["transfer"]
        [ret] = transfer.returns
        assert ret.name == MISSING
        assert ret.type == "bool"
        assert ret.doc == MISSING

    def test_overloads_are_kept_in_abi_order(self):
        mints = build(token_contract()).methods["mint"]
        assert [len(m.params) for m in mints] == [1, 2]
        assert mints[0].notice == "Mint one token."
        assert mints[1].notice is None
        assert mints[1].params[1].doc == "Amount to mint"

    def test_method_without_annotations(self):
        [balance] = build(token_contract()).methods["balanceOf"]
        assert balance.details is None
        assert balance.notice is None
        assert balance.state_mutability == "view"
        assert all(p.doc == MISSING for p in balance.params + balance.returns)

    def test_methods_keyed_by_name(self):
        assert list(build(token_contract()).methods) == ["balanceOf", "mint", "transfer"]

    def test_internal_type_is_carried(self):
        raw = contract(
            [function("set", [param("address", "token", internalType="contract IERC20")])]
        )
        [method] = build(raw).methods["set"]
        assert method.params[0].internal_type == "contract IERC20"
        assert method.params[0].indexed is None

    def test_constructor_is_not_documented(self):
        raw = contract([{"type": "constructor", "inputs": []}, function("f")])
        assert list(build(raw).methods) == ["f"]


class TestEvents:
    """Event docs."""

    def test_event_params_carry_indexed(self):
        [transfer] = build(token_contract()).events["Transfer"]
        assert transfer.details == "Emitted on every transfer."
        assert transfer.notice == "Tokens moved."
        assert [(p.name, p.indexed, p.doc) for p in transfer.params] == [
            ("from", True, "Sender"),
            ("to", True, MISSING),
            ("value", False, MISSING),
        ]
        assert all(p.internal_type is None for p in transfer.params)

    def test_event_without_inputs(self):
        raw = contract(
            [event("Paused")],
            {"events": {"Paused()": {"details": "Contract paused."}}},
        )
        [paused] = build(raw).events["Paused"]
        assert paused.details == "Contract paused."
        assert paused.params == []


class TestErrors:
    """Error docs pair devdoc and userdoc lists by index."""

    SIG = "Bad(uint256)"

    def errors_contract(self, dev: list | None, user: list | None) -> dict:
        devdoc = {"errors": {self.SIG: dev}} if dev is not None else {}
        userdoc = {"errors": {self.SIG: user}} if user is not None else {}
        return contract([error("Bad", [param("uint256", "code")])], devdoc, userdoc)

    def test_single_error(self):
        [bad] = build(token_contract()).errors["InsufficientBalance"]
        assert bad.details == "Balance too low."
        assert bad.notice == "Not enough."
        assert [p.doc for p in bad.params] == ["Held", MISSING]

    def test_repeated_declarations_pair_by_index(self):
        raw = self.errors_contract(
            [{"details": "first", "params": {"code": "c1"}}, {"details": "second"}],
            [{"notice": "one"}, "two"],
        )
        errors = build(raw).errors["Bad"]
        assert [(e.details, e.notice) for e in errors] == [
            ("first", "one"),
            ("second", "two"),
        ]
        assert errors[0].params[0].doc == "c1"
        assert errors[1].params[0].doc == MISSING

    def test_error_without_devdoc_is_skipped(self):
        raw = self.errors_contract(None, [{"notice": "orphan"}])
        assert build(raw).errors == {}

    def test_error_without_userdoc_has_no_notice(self):
        raw = self.errors_contract([{"details": "only dev"}], None)
        [bad] = build(raw).errors["Bad"]
        assert bad.details == "only dev"
        assert bad.notice is None

    def test_length_mismatch_is_fatal(self):
        raw = self.errors_contract(
            [{"details": "a"}, {"details": "b"}], [{"notice": "only one"}]
        )
        with pytest.raises(AnnotationMismatchError) as exc:
            build(raw)
        assert exc.value.signature == self.SIG
