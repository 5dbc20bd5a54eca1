"""User Application Routes — delegate, chair and delegation submissions.

Invariants:
    - PUT creates exactly one application per role per user (second PUT → 403)
    - Unknown committee → 422 with the full committee id list, no country issue
    - Country outside its committee → 422 listing that committee's countries
    - GET returns 404 until the user has applied
    - Unknown delegationId → 422 on delegationId; a constraint failure that is
      not a duplicate application → 409, never 403
    - Unauthenticated PUT → 401 before any validation
"""

from datetime import date

import pytest
from sqlalchemy import select

from munreg.core.domain_types import ApplicationRole
from munreg.core.errors import ConflictError, DuplicateApplicationError
from munreg.models.application import DelegateApplication
from munreg.models.user import User
from munreg.schemas.forms import DelegateApplyForm
from munreg.services import application_service


async def test_get_delegate_application_before_applying_is_404(client, auth_headers):
    res = await client.get("/api/v1/user/application/delegate", headers=auth_headers)
    assert res.status_code == 404
    assert res.json()["message"] == "Not Found"


async def test_submit_delegate_application(
    client, auth_headers, seed_reference, delegate_payload,
):
    res = await client.put(
        "/api/v1/user/application/delegate", json=delegate_payload, headers=auth_headers,
    )
    assert res.status_code == 201, res.text
    data = res.json()["data"]
    assert data["paymentStatus"] == "pending"
    assert data["delegationId"] is None
    assert data["choice2country"] == "FR"
    assert data["shirtSize"] == "M"

    res = await client.get("/api/v1/user/application/delegate", headers=auth_headers)
    assert res.status_code == 200
    assert res.json()["data"]["id"] == data["id"]


async def test_second_delegate_application_is_403(
    client, auth_headers, seed_reference, delegate_payload, test_db,
):
    first = await client.put(
        "/api/v1/user/application/delegate", json=delegate_payload, headers=auth_headers,
    )
    assert first.status_code == 201
    second = await client.put(
        "/api/v1/user/application/delegate", json=delegate_payload, headers=auth_headers,
    )
    assert second.status_code == 403
    assert second.json()["message"] == "Forbidden"

    rows = (await test_db.execute(select(DelegateApplication))).scalars().all()
    assert len(rows) == 1


async def test_unknown_committee_is_422_with_options(
    client, auth_headers, seed_reference, delegate_payload,
):
    delegate_payload.update(choice1committee=5, choice1country="ZZ")
    res = await client.put(
        "/api/v1/user/application/delegate", json=delegate_payload, headers=auth_headers,
    )
    assert res.status_code == 422
    report = res.json()["description"][0]
    assert [i["path"] for i in report["issues"]] == [["choice1committee"]]
    assert report["issues"][0]["options"] == [1, 2, 3]
    assert report["issues"][0]["kind"] == "invalid_enum_value"


async def test_country_outside_committee_is_422(
    client, auth_headers, seed_reference, delegate_payload,
):
    delegate_payload.update(choice1committee=2, choice1country="ZZ")
    res = await client.put(
        "/api/v1/user/application/delegate", json=delegate_payload, headers=auth_headers,
    )
    assert res.status_code == 422
    issue = res.json()["description"][0]["issues"][0]
    assert issue["path"] == ["choice1country"]
    assert issue["options"] == ["US", "FR"]


async def test_delegate_application_requires_login(client, seed_reference, delegate_payload):
    res = await client.put("/api/v1/user/application/delegate", json=delegate_payload)
    assert res.status_code == 401


async def test_submit_chair_application(client, auth_headers, seed_reference, chair_payload):
    res = await client.put(
        "/api/v1/user/application/chair", json=chair_payload, headers=auth_headers,
    )
    assert res.status_code == 201, res.text
    data = res.json()["data"]
    assert data["choice1committee"] == 2
    assert "choice1country" not in data

    res = await client.get("/api/v1/user/application/chair", headers=auth_headers)
    assert res.status_code == 200


async def test_chair_unknown_committee_is_422(
    client, auth_headers, seed_reference, chair_payload,
):
    chair_payload["choice2committee"] = 77
    res = await client.put(
        "/api/v1/user/application/chair", json=chair_payload, headers=auth_headers,
    )
    assert res.status_code == 422
    assert res.json()["description"][0]["fieldErrors"] == {
        "choice2committee": ["The committee with the given ID was not found"],
    }


async def test_delegate_and_chair_applications_are_independent(
    client, auth_headers, seed_reference, delegate_payload, chair_payload,
):
    delegate = await client.put(
        "/api/v1/user/application/delegate", json=delegate_payload, headers=auth_headers,
    )
    chair = await client.put(
        "/api/v1/user/application/chair", json=chair_payload, headers=auth_headers,
    )
    assert delegate.status_code == 201
    assert chair.status_code == 201


async def test_submit_delegation_then_reference_it(
    client, auth_headers, seed_reference, delegate_payload,
):
    res = await client.put(
        "/api/v1/user/application/delegation",
        json={"name": "Springfield High School", "country": "us", "estimatedDelegates": 8},
        headers=auth_headers,
    )
    assert res.status_code == 201, res.text
    delegation = res.json()["data"]
    assert delegation["country"] == "US"
    assert delegation["estimatedDelegates"] == 8

    delegate_payload["delegationId"] = delegation["id"]
    res = await client.put(
        "/api/v1/user/application/delegate", json=delegate_payload, headers=auth_headers,
    )
    assert res.status_code == 201
    assert res.json()["data"]["delegationId"] == delegation["id"]


async def test_second_delegation_is_403(client, auth_headers):
    payload = {"name": "Springfield High School", "country": "US", "estimatedDelegates": 3}
    first = await client.put(
        "/api/v1/user/application/delegation", json=payload, headers=auth_headers,
    )
    second = await client.put(
        "/api/v1/user/application/delegation", json=payload, headers=auth_headers,
    )
    assert first.status_code == 201
    assert second.status_code == 403


async def test_unknown_delegation_is_422_not_duplicate(
    client, auth_headers, seed_reference, delegate_payload, test_db,
):
    delegate_payload["delegationId"] = 999
    res = await client.put(
        "/api/v1/user/application/delegate", json=delegate_payload, headers=auth_headers,
    )
    assert res.status_code == 422
    report = res.json()["description"][0]
    assert report["issues"][0]["path"] == ["delegationId"]
    assert report["issues"][0]["options"] == []

    rows = (await test_db.execute(select(DelegateApplication))).scalars().all()
    assert rows == []


async def test_chair_unknown_delegation_is_422(
    client, auth_headers, seed_reference, chair_payload,
):
    chair_payload["delegationId"] = 999
    res = await client.put(
        "/api/v1/user/application/chair", json=chair_payload, headers=auth_headers,
    )
    assert res.status_code == 422


# ─── Service: constraint failures at commit ─────────────────────

@pytest.fixture
async def applicant(test_db):
    user = User(
        email="grace@example.org", password_hash="x", firstname="Grace",
        lastname="Hopper", birthdate=date(2004, 12, 9), nationality="US",
    )
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user


async def test_missing_delegation_at_commit_is_conflict(
    test_db, applicant, delegate_payload,
):
    delegate_payload["delegationId"] = 999
    form = DelegateApplyForm.model_validate(delegate_payload)
    with pytest.raises(ConflictError):
        await application_service.submit_application(
            test_db, ApplicationRole.DELEGATE, applicant.id, form,
        )
    assert await application_service.get_application(
        test_db, ApplicationRole.DELEGATE, applicant.id,
    ) is None


async def test_racing_duplicate_at_commit_is_still_403(
    test_db, applicant, delegate_payload, monkeypatch,
):
    form = DelegateApplyForm.model_validate(delegate_payload)
    await application_service.submit_application(
        test_db, ApplicationRole.DELEGATE, applicant.id, form,
    )

    real_get_application = application_service.get_application
    calls = []

    async def miss_first_lookup(db, role, user_id):
        calls.append(user_id)
        if len(calls) == 1:
            return None
        return await real_get_application(db, role, user_id)

    monkeypatch.setattr(application_service, "get_application", miss_first_lookup)
    with pytest.raises(DuplicateApplicationError):
        await application_service.submit_application(
            test_db, ApplicationRole.DELEGATE, applicant.id, form,
        )
    assert len(calls) == 2
