"""
Integration tests for the Accounts API endpoints.

These tests verify:
1. POST /api/create - Register a customer with a bank account
2. GET /api/fetch - Retrieve a customer by mobile number
3. PUT /api/update - Replace customer details
4. DELETE /api/delete - Remove a customer and their account
5. Validation, not-found and conflict responses
"""

import pytest
from httpx import AsyncClient

from tests.integration.conftest import MOBILE_NUMBER, parse_timestamp

AUDIT_FIELDS = ("createdAt", "createdBy", "updatedAt", "updatedBy")


# =============================================================================
# Lifecycle Tests
# =============================================================================

class TestAccountLifecycle:
    """Create, fetch, update and delete a customer account."""

    @pytest.mark.asyncio
    async def test_full_lifecycle(
        self,
        accounts_client: AsyncClient,
        customer_request: dict,
    ):
        """
        Create -> fetch -> update -> delete -> fetch.

        The final fetch must report the customer as not found.
        """
        created = await accounts_client.post("/api/create", json=customer_request)
        assert created.status_code == 201
        created_body = created.json()
        assert created_body["mobileNumber"] == MOBILE_NUMBER
        assert created_body["name"] == "A"

        fetched = await accounts_client.get(
            "/api/fetch", params={"mobileNumber": MOBILE_NUMBER}
        )
        assert fetched.status_code == 200
        assert fetched.json() == created_body

        updated = await accounts_client.put(
            "/api/update",
            json={"mobileNumber": MOBILE_NUMBER, "name": "B"},
        )
        assert updated.status_code == 200
        updated_body = updated.json()
        assert updated_body["name"] == "B"
        assert parse_timestamp(updated_body["updatedAt"]) > parse_timestamp(
            created_body["updatedAt"]
        )

        deleted = await accounts_client.delete(
            "/api/delete", params={"mobileNumber": MOBILE_NUMBER}
        )
        assert deleted.status_code == 200
        assert deleted.json() == {
            "statusCode": "200",
            "statusMsg": "Request processed successfully",
        }

        gone = await accounts_client.get(
            "/api/fetch", params={"mobileNumber": MOBILE_NUMBER}
        )
        assert gone.status_code == 404
        assert gone.json()["error"] == "RESOURCE_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_create_hides_internal_identifiers(
        self,
        accounts_client: AsyncClient,
        customer_request: dict,
    ):
        """Surrogate ids never appear in the response."""
        response = await accounts_client.post("/api/create", json=customer_request)
        body = response.json()

        assert "id" not in body
        assert "customerId" not in body
        assert "customerId" not in body["account"]

    @pytest.mark.asyncio
    async def test_create_opens_default_account(
        self,
        accounts_client: AsyncClient,
        customer_request: dict,
    ):
        """A customer gets a generated 10-digit account with default terms."""
        response = await accounts_client.post("/api/create", json=customer_request)
        account = response.json()["account"]

        assert len(str(account["accountNumber"])) == 10
        assert account["accountType"] == "Savings"
        assert account["branchAddress"] == "123 Main Street, New York"

    @pytest.mark.asyncio
    async def test_create_with_account_details(
        self,
        accounts_client: AsyncClient,
        full_customer_request: dict,
    ):
        """Supplied account type and branch are used instead of the defaults."""
        response = await accounts_client.post("/api/create", json=full_customer_request)

        assert response.status_code == 201
        body = response.json()
        assert body["email"] == "madan@example.com"
        assert body["account"]["accountType"] == "Current"
        assert body["account"]["branchAddress"] == "221B Baker Street, London"

    @pytest.mark.asyncio
    async def test_create_with_partial_account_details(
        self,
        accounts_client: AsyncClient,
        customer_request: dict,
    ):
        """A missing branch takes the default while the given type is kept."""
        customer_request["account"] = {"accountType": "Current"}

        response = await accounts_client.post("/api/create", json=customer_request)

        assert response.status_code == 201
        account = response.json()["account"]
        assert account["accountType"] == "Current"
        assert account["branchAddress"] == "123 Main Street, New York"

    @pytest.mark.asyncio
    async def test_create_stamps_audit_fields(
        self,
        accounts_client: AsyncClient,
        customer_request: dict,
    ):
        """All audit fields are populated on creation by the service actor."""
        response = await accounts_client.post("/api/create", json=customer_request)
        body = response.json()

        for field in AUDIT_FIELDS:
            assert body[field] is not None
        assert body["createdBy"] == "ACCOUNTS_MS"
        assert body["createdAt"] == body["updatedAt"]

    @pytest.mark.asyncio
    async def test_client_cannot_write_audit_fields(
        self,
        accounts_client: AsyncClient,
        customer_request: dict,
    ):
        """Audit values sent by the client are ignored."""
        customer_request["createdBy"] = "mallory"
        customer_request["createdAt"] = "1999-01-01T00:00:00Z"

        response = await accounts_client.post("/api/create", json=customer_request)
        body = response.json()

        assert body["createdBy"] == "ACCOUNTS_MS"
        assert not body["createdAt"].startswith("1999")


# =============================================================================
# Update Tests
# =============================================================================

class TestUpdateAccount:
    """Tests for PUT /api/update."""

    @pytest.mark.asyncio
    async def test_update_preserves_creation_audit(
        self,
        accounts_client: AsyncClient,
        customer_request: dict,
    ):
        """created* stay fixed while updated* move forward."""
        created = (await accounts_client.post("/api/create", json=customer_request)).json()

        updated = (await accounts_client.put(
            "/api/update",
            json={"mobileNumber": MOBILE_NUMBER, "name": "Renamed"},
        )).json()

        assert updated["createdAt"] == created["createdAt"]
        assert updated["createdBy"] == created["createdBy"]
        assert parse_timestamp(updated["updatedAt"]) > parse_timestamp(created["updatedAt"])
        assert updated["updatedBy"] == "ACCOUNTS_MS"

    @pytest.mark.asyncio
    async def test_update_keeps_account_number(
        self,
        accounts_client: AsyncClient,
        full_customer_request: dict,
    ):
        """Account type and branch change; the account number does not."""
        created = (await accounts_client.post("/api/create", json=full_customer_request)).json()

        full_customer_request["account"] = {
            "accountNumber": 1111111111,
            "accountType": "Savings",
            "branchAddress": "1 Infinite Loop",
        }
        updated = (await accounts_client.put("/api/update", json=full_customer_request)).json()

        assert updated["account"]["accountNumber"] == created["account"]["accountNumber"]
        assert updated["account"]["accountType"] == "Savings"
        assert updated["account"]["branchAddress"] == "1 Infinite Loop"

    @pytest.mark.asyncio
    async def test_update_with_partial_account_keeps_other_detail(
        self,
        accounts_client: AsyncClient,
        full_customer_request: dict,
    ):
        await accounts_client.post("/api/create", json=full_customer_request)

        full_customer_request["account"] = {"branchAddress": "1 Infinite Loop"}
        response = await accounts_client.put("/api/update", json=full_customer_request)

        assert response.status_code == 200
        account = response.json()["account"]
        assert account["accountType"] == "Current"
        assert account["branchAddress"] == "1 Infinite Loop"

    @pytest.mark.asyncio
    async def test_update_with_blank_account_type_returns_400(
        self,
        accounts_client: AsyncClient,
        full_customer_request: dict,
    ):
        await accounts_client.post("/api/create", json=full_customer_request)

        full_customer_request["account"] = {"accountType": "  "}
        response = await accounts_client.put("/api/update", json=full_customer_request)

        assert response.status_code == 400
        assert response.json()["violations"] == [
            {"field": "account.accountType", "reason": "must not be blank"}
        ]

    @pytest.mark.asyncio
    async def test_update_replaces_email(
        self,
        accounts_client: AsyncClient,
        full_customer_request: dict,
    ):
        """Update is a full replace: an omitted email is cleared."""
        await accounts_client.post("/api/create", json=full_customer_request)

        updated = (await accounts_client.put("/api/update", json={
            "name": "Madan Reddy",
            "mobileNumber": full_customer_request["mobileNumber"],
        })).json()

        assert updated["email"] is None
        assert updated["account"]["accountType"] == "Current"

    @pytest.mark.asyncio
    async def test_update_unknown_customer_returns_404(
        self,
        accounts_client: AsyncClient,
        customer_request: dict,
    ):
        response = await accounts_client.put("/api/update", json=customer_request)

        assert response.status_code == 404
        assert response.json()["error"] == "RESOURCE_NOT_FOUND"


# =============================================================================
# Error Tests
# =============================================================================

class TestAccountErrors:
    """Not-found, conflict and validation responses."""

    @pytest.mark.asyncio
    async def test_duplicate_create_returns_409(
        self,
        accounts_client: AsyncClient,
        customer_request: dict,
    ):
        """The second create on the same mobile number conflicts."""
        first = await accounts_client.post("/api/create", json=customer_request)
        second = await accounts_client.post("/api/create", json=customer_request)

        assert first.status_code == 201
        assert second.status_code == 409
        assert second.json()["error"] == "RESOURCE_ALREADY_EXISTS"

    @pytest.mark.asyncio
    async def test_fetch_unknown_returns_404(self, accounts_client: AsyncClient):
        response = await accounts_client.get(
            "/api/fetch", params={"mobileNumber": "1234567890"}
        )

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "RESOURCE_NOT_FOUND"
        assert "1234567890" in body["message"]

    @pytest.mark.asyncio
    async def test_delete_unknown_returns_404(self, accounts_client: AsyncClient):
        response = await accounts_client.delete(
            "/api/delete", params={"mobileNumber": "1234567890"}
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_create_without_mobile_number_returns_400(
        self,
        accounts_client: AsyncClient,
    ):
        """An omitted natural key is reported by name."""
        response = await accounts_client.post("/api/create", json={"name": "A"})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "VALIDATION_FAILED"
        assert "mobileNumber" in [v["field"] for v in body["violations"]]

    @pytest.mark.asyncio
    async def test_create_with_empty_mobile_number_returns_400(
        self,
        accounts_client: AsyncClient,
    ):
        response = await accounts_client.post(
            "/api/create", json={"name": "A", "mobileNumber": ""}
        )

        assert response.status_code == 400
        assert response.json()["violations"] == [
            {"field": "mobileNumber", "reason": "must not be empty"}
        ]

    @pytest.mark.asyncio
    async def test_all_violations_reported_together(
        self,
        accounts_client: AsyncClient,
    ):
        """Every invalid field is reported in a single response."""
        response = await accounts_client.post("/api/create", json={
            "name": " ",
            "email": "not-an-email",
            "mobileNumber": "12345",
            "account": {"accountType": "", "branchAddress": "Somewhere"},
        })

        assert response.status_code == 400
        fields = {v["field"] for v in response.json()["violations"]}
        assert fields == {"name", "email", "mobileNumber", "account.accountType"}

    @pytest.mark.asyncio
    async def test_fetch_with_malformed_key_returns_400(
        self,
        accounts_client: AsyncClient,
    ):
        response = await accounts_client.get(
            "/api/fetch", params={"mobileNumber": "98765abcde"}
        )

        assert response.status_code == 400
        assert response.json()["violations"][0]["field"] == "mobileNumber"

    @pytest.mark.asyncio
    async def test_fetch_without_key_returns_400(self, accounts_client: AsyncClient):
        response = await accounts_client.get("/api/fetch")

        assert response.status_code == 400
        assert response.json()["violations"] == [
            {"field": "mobileNumber", "reason": "must not be empty"}
        ]

    @pytest.mark.asyncio
    async def test_failed_validation_persists_nothing(
        self,
        accounts_client: AsyncClient,
    ):
        """A rejected create leaves no record behind."""
        await accounts_client.post(
            "/api/create",
            json={"name": "", "mobileNumber": MOBILE_NUMBER},
        )

        response = await accounts_client.get(
            "/api/fetch", params={"mobileNumber": MOBILE_NUMBER}
        )
        assert response.status_code == 404
