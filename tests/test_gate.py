"""
tests.test_gate

AuthorizationGate behavior against fake collaborators.
"""

from __future__ import annotations

import pytest

from rbac_gate.gate.errors import EvaluationError, Forbidden, InvalidRequest, RoleLookupFailure
from rbac_gate.gate.models import AuthorizationQuery
from rbac_gate.gate.service import AuthorizationGate
from tests.fakes import FakeEvaluator, FakeRoleStore

ADMIN_CONTENT = ("admin", "/content", "POST")


def _gate(store: FakeRoleStore, evaluator: FakeEvaluator, **kwargs) -> AuthorizationGate:
    return AuthorizationGate(role_store=store, evaluator=evaluator, **kwargs)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [b"not-json", b"", b"[1, 2]", b"null", b'{"username": 42}', b'{"username": '],
)
async def test_invalid_body_rejected_before_lookup(body: bytes) -> None:
    store = FakeRoleStore({"alice": "admin"})
    evaluator = FakeEvaluator({ADMIN_CONTENT})

    with pytest.raises(InvalidRequest) as exc:
        await _gate(store, evaluator).authorize(body=body, resource="/content", action="POST")

    assert exc.value.status_code == 400
    assert exc.value.detail == "Invalid JSON"
    assert store.calls == []
    assert evaluator.calls == []


@pytest.mark.asyncio
async def test_known_subject_allowed() -> None:
    store = FakeRoleStore({"alice": "admin"})
    evaluator = FakeEvaluator({ADMIN_CONTENT})

    decision = await _gate(store, evaluator).authorize(
        body=b'{"username": "alice"}', resource="/content", action="POST"
    )

    assert decision.allowed is True
    assert decision.query == AuthorizationQuery(role="admin", resource="/content", action="POST")
    assert store.calls == ["alice"]
    assert evaluator.calls == [ADMIN_CONTENT]


@pytest.mark.asyncio
async def test_unknown_subject_evaluated_as_default_role() -> None:
    evaluator = FakeEvaluator()

    with pytest.raises(Forbidden) as exc:
        await _gate(FakeRoleStore(), evaluator).authorize(
            body=b'{"username": "bob"}', resource="/content", action="POST"
        )

    assert exc.value.status_code == 403
    assert evaluator.calls == [("user", "/content", "POST")]


@pytest.mark.asyncio
async def test_missing_username_and_extra_fields() -> None:
    evaluator = FakeEvaluator({("user", "/content", "POST")})
    store = FakeRoleStore()

    decision = await _gate(store, evaluator).authorize(
        body=b'{"other": true}', resource="/content", action="POST"
    )

    assert decision.query.role == "user"
    assert store.calls == [""]


@pytest.mark.asyncio
async def test_store_error_degrades_to_default_role() -> None:
    store = FakeRoleStore({"alice": "admin"}, error=ConnectionError("store down"))
    evaluator = FakeEvaluator({("user", "/content", "POST")})

    decision = await _gate(store, evaluator).authorize(
        body=b'{"username": "alice"}', resource="/content", action="POST"
    )

    assert decision.allowed is True
    assert decision.query.role == "user"


@pytest.mark.asyncio
async def test_lookup_timeout_degrades_to_default_role() -> None:
    store = FakeRoleStore({"alice": "admin"}, delay_s=1.0)
    gate = _gate(store, FakeEvaluator(), role_lookup_timeout_s=0.01)

    assert await gate.resolve_role("alice") == "user"


@pytest.mark.asyncio
async def test_default_role_is_configurable() -> None:
    gate = _gate(FakeRoleStore(), FakeEvaluator(), default_role="guest")

    assert await gate.resolve_role("nobody") == "guest"


@pytest.mark.asyncio
async def test_strict_lookup_surfaces_failure_reason() -> None:
    gate = _gate(FakeRoleStore({"empty": ""}), FakeEvaluator())

    with pytest.raises(RoleLookupFailure, match="subject not found"):
        await gate.lookup_role("missing")
    with pytest.raises(RoleLookupFailure, match="subject not found"):
        await gate.lookup_role("empty")


@pytest.mark.asyncio
async def test_evaluation_error_rejects_request() -> None:
    evaluator = FakeEvaluator(error=RuntimeError("matcher blew up"))

    with pytest.raises(EvaluationError) as exc:
        await _gate(FakeRoleStore({"alice": "admin"}), evaluator).authorize(
            body=b'{"username": "alice"}', resource="/content", action="POST"
        )

    assert exc.value.status_code == 500
    assert isinstance(exc.value.__cause__, RuntimeError)


@pytest.mark.asyncio
async def test_query_uses_request_path_and_method() -> None:
    evaluator = FakeEvaluator({("admin", "/reports/7", "DELETE")})

    decision = await _gate(FakeRoleStore({"alice": "admin"}), evaluator).authorize(
        body=b'{"username": "alice"}', resource="/reports/7", action="DELETE"
    )

    assert decision.allowed is True
    assert evaluator.calls == [("admin", "/reports/7", "DELETE")]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("body", "expected_role"),
    [
        (b'{"Username": "alice"}', "admin"),
        (b'{"USERNAME": "alice"}', "admin"),
        (b'{"username": "alice", "Username": "bob"}', "admin"),
    ],
)
async def test_username_key_matches_case_insensitively(body: bytes, expected_role: str) -> None:
    store = FakeRoleStore({"alice": "admin", "bob": "user"})
    evaluator = FakeEvaluator({(expected_role, "/content", "POST")})

    decision = await _gate(store, evaluator).authorize(
        body=body, resource="/content", action="POST"
    )

    assert decision.query.role == expected_role
    assert store.calls == ["alice"]


@pytest.mark.asyncio
async def test_folded_username_key_still_type_checked() -> None:
    store = FakeRoleStore()

    with pytest.raises(InvalidRequest):
        await _gate(store, FakeEvaluator()).authorize(
            body=b'{"Username": 7}', resource="/content", action="POST"
        )

    assert store.calls == []
