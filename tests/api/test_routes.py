import pytest

HANDYMAN_METRICS = {"servicesRendered": 160, "companyRevenueNgn": 2_100_000, "averageRating": 4.72}


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.get_json()["status"] == "ok"


def test_unknown_route_returns_json(client):
    resp = client.get("/api/nowhere")
    assert resp.status_code == 404
    assert "error" in resp.get_json()


class TestBadgeRoutes:
    def test_list_roles(self, client):
        assert client.get("/api/badges").get_json() == {"roles": ["handyman", "homerunner"]}

    def test_compute(self, client):
        resp = client.post("/api/badges/handyman", json={"metrics": HANDYMAN_METRICS})
        body = resp.get_json()
        assert resp.status_code == 200
        assert body["label"] == "Gold"
        assert body["score"] == 6
        assert body["total_possible"] == 9

    def test_unknown_role(self, client):
        resp = client.post("/api/badges/tenant", json={"metrics": {}})
        assert resp.status_code == 404

    def test_missing_metrics(self, client):
        resp = client.post("/api/badges/handyman", json={})
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "metrics must be an object"

    def test_unsorted_targets(self, client):
        resp = client.post("/api/badges/handyman", json={
            "metrics": HANDYMAN_METRICS,
            "targets": {
                "servicesRendered": [300, 50],
                "companyRevenueNgn": [1],
                "averageRating": [1],
            },
        })
        assert resp.status_code == 422

    def test_tiers(self, client):
        body = client.get("/api/badges/homerunner/tiers").get_json()
        assert [t["label"] for t in body["tiers"]] == ["Bronze", "Silver", "Gold", "Platinum"]


class TestReportRoutes:
    def test_tenant_without_viewing(self, client):
        resp = client.post("/api/reports/eligibility", json={
            "role": "tenant", "report_type": "property",
        })
        assert resp.get_json()["can_report"] is False

    def test_tenant_after_viewing(self, client):
        resp = client.post("/api/reports/eligibility", json={
            "role": "tenant", "report_type": "property", "context": {"has_viewed": True},
        })
        assert resp.get_json()["can_report"] is True

    def test_invalid_role(self, client):
        resp = client.post("/api/reports/eligibility", json={
            "role": "pirate", "report_type": "property",
        })
        assert resp.status_code == 400

    def test_report_type(self, client):
        resp = client.get("/api/reports/type?entity_type=user&entity_role=homerunner")
        assert resp.get_json() == {"report_type": "homerunner"}

    def test_report_type_requires_entity(self, client):
        assert client.get("/api/reports/type").status_code == 400


class TestAccessRoutes:
    def test_blocked(self, client):
        resp = client.post("/api/access/check", json={
            "active_role": "homerunner", "allowed_roles": ["landlord"],
        })
        assert resp.get_json() == {"allowed": False, "redirect_to": "/homerunner/dashboard"}

    def test_anonymous(self, client):
        resp = client.post("/api/access/check", json={"allow_unauthenticated": True})
        assert resp.get_json() == {"allowed": True, "redirect_to": None}

    def test_bad_role_list(self, client):
        resp = client.post("/api/access/check", json={"active_role": "admin", "allowed_roles": "admin"})
        assert resp.status_code == 400


class TestRealtorRoutes:
    def test_dashboard(self, client):
        body = client.get("/api/realtor/dashboard").get_json()
        assert body["overview"]["managed_properties"] == 24
        assert body["pipeline"]["upcoming_viewings"] == 6

    def test_earnings(self, client):
        body = client.get("/api/realtor/earnings").get_json()
        assert body["net_this_month"] == 1_700_000


class TestMessagingRoutes:
    PAYLOAD = {
        "property_id": "prop-9",
        "property_name": "Ikoyi Flat",
        "owner_name": "Chioma Nwosu",
        "tenant": {"id": "tenant-7", "name": "Tosin"},
        "slots": [{"date": "2025-01-10T14:30:00", "label": "Fri"}],
        "move_in_date": "2025-03-01",
        "tenancy_duration": "6 months",
        "minimum_budget": 1200000,
        "rental_preference": "long_term",
    }

    def test_create_and_list(self, client):
        resp = client.post("/api/messaging/viewing-requests", json=self.PAYLOAD)
        body = resp.get_json()
        assert resp.status_code == 201
        assert body["participants"][0] == "tenant-7"
        assert "1. Friday, Jan 10 @ 2:30 PM" in body["message"]
        assert "• Budget: ₦1,200,000 per month" in body["message"]

        messages = client.get(
            f"/api/messaging/conversations/{body['conversation_id']}/messages"
        ).get_json()
        assert len(messages) == 1
        assert messages[0]["sender_id"] == "tenant-7"

    def test_missing_fields(self, client):
        resp = client.post("/api/messaging/viewing-requests", json={"property_id": "p"})
        assert resp.status_code == 400

    def test_bad_slot_date(self, client):
        payload = {**self.PAYLOAD, "slots": [{"date": "someday"}]}
        assert client.post("/api/messaging/viewing-requests", json=payload).status_code == 400

    def test_unknown_conversation(self, client):
        assert client.get("/api/messaging/conversations/nope/messages").status_code == 404

    @pytest.mark.parametrize("field, value", [
        ("note", 5),
        ("owner_name", 42),
        ("property_name", ["Ikoyi"]),
        ("tenancy_duration", 6),
        ("owner_phone", 8010000002),
    ])
    def test_non_string_field_rejected(self, client, field, value):
        payload = {**self.PAYLOAD, field: value}
        resp = client.post("/api/messaging/viewing-requests", json=payload)
        assert resp.status_code == 400
        assert field in resp.get_json()["error"]

    def test_non_string_tenant_name_rejected(self, client):
        payload = {**self.PAYLOAD, "tenant": {"id": "tenant-7", "name": 7}}
        resp = client.post("/api/messaging/viewing-requests", json=payload)
        assert resp.status_code == 400
        assert "tenant.name" in resp.get_json()["error"]

    def test_non_finite_budget_rejected(self, client):
        payload = {**self.PAYLOAD, "minimum_budget": "NaN"}
        assert client.post("/api/messaging/viewing-requests", json=payload).status_code == 400
