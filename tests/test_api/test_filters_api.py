"""Tests for filters API endpoints."""


class TestDescribeFilters:
    """Tests for GET /api/filters endpoint."""

    def test_default_state(self, client):
        """Test every filter is described and none is active."""
        response = client.get("/api/filters")
        assert response.status_code == 200

        data = response.json()
        assert data["valid"] is True
        assert data["errors"] == []
        assert data["conditions"] is None
        assert data["query"] == ""
        assert [f["name"] for f in data["filters"]] == [
            "customer_name", "customer_type", "customer_since", "job_type", "commercial", "sex",
        ]
        assert not any(f["active"] for f in data["filters"])

    def test_controls(self, client):
        """Test render details for each kind."""
        filters = {f["name"]: f for f in client.get("/api/filters").json()["filters"]}

        assert filters["customer_name"]["size"] == 30
        assert filters["customer_name"]["operator"] == "contains"
        assert {"value": "does_not_contain", "label": "does not contain"} in filters["customer_name"]["operators"]
        assert [c["value"] for c in filters["job_type"]["choices"]] == ["1", "2", "3"]
        assert [o["value"] for o in filters["commercial"]["operators"]] == ["yes", "no", "blank"]
        assert filters["sex"]["choices"][0] == {"label": "Male", "value": "m"}


class TestApplyFilters:
    """Tests for POST /api/filters/apply endpoint."""

    def test_apply_valid(self, client):
        """Test conditions for valid state."""
        response = client.post("/api/filters/apply", json={
            "fields": ["customer_name", "customer_since"],
            "operators": {"customer_name": "starts_with", "customer_since": "on_or_after"},
            "values": {"customer_name": "Acme", "customer_since": "1/1/2020"},
        })
        assert response.status_code == 200

        data = response.json()
        assert data["valid"] is True
        assert data["conditions"] == {
            "sql": "(customers.name LIKE ?) AND (customers.since >= ?)",
            "params": ["Acme%", "2020-01-01"],
        }
        assert data["query"].startswith("fields%5B%5D=customer_name")

    def test_apply_invalid(self, client):
        """Test errors are reported for invalid state."""
        response = client.post("/api/filters/apply", json={
            "fields": ["customer_since"],
            "operators": {"customer_since": "between"},
            "values": {"customer_since": ["2024-01-01", "not a date"]},
        })
        assert response.status_code == 200

        data = response.json()
        assert data["valid"] is False
        assert data["errors"] == ["Customer Since: second date is invalid"]
        assert data["conditions"] is None

        since = next(f for f in data["filters"] if f["name"] == "customer_since")
        assert since["error"] == "second date is invalid"

    def test_unknown_names_ignored(self, client):
        """Test unknown filters and operators do not fail the request."""
        response = client.post("/api/filters/apply", json={
            "fields": ["nope", "sex"],
            "operators": {"sex": "greater_than"},
            "values": {"sex": "f"},
        })
        assert response.status_code == 200

        data = response.json()
        assert data["conditions"] == {"sql": "(customers.sex IN (?))", "params": ["f"]}

    def test_reset(self, client):
        """Test reset ignores submitted state."""
        response = client.post("/api/filters/apply", json={"fields": ["commercial"], "reset": True})
        assert response.status_code == 200

        data = response.json()
        assert data["conditions"] is None
        assert data["query"] == ""


class TestParseFilters:
    """Tests for GET /api/filters/parse endpoint."""

    def test_round_trip(self, client):
        """Test a query from apply restores the same conditions."""
        applied = client.post("/api/filters/apply", json={
            "fields": ["customer_type", "commercial"],
            "operators": {"customer_type": "is_not", "commercial": "no"},
            "values": {"customer_type": ["Lead", "Prospect"]},
        }).json()

        response = client.get("/api/filters/parse", params={"q": applied["query"]})
        assert response.status_code == 200

        data = response.json()
        assert data["conditions"] == applied["conditions"]
        assert data["query"] == applied["query"]

    def test_empty_query(self, client):
        """Test no query gives the defaults."""
        response = client.get("/api/filters/parse")
        assert response.status_code == 200
        assert response.json()["conditions"] is None
