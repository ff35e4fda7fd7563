"""Integration tests for the country registry endpoints."""


class TestListCountries:
    """Test GET /countries."""

    def test_list(self, test_client, api_v1_prefix):
        """All registered countries should be listed, sorted by code."""
        response = test_client.get(f"{api_v1_prefix}/countries")

        assert response.status_code == 200
        data = response.json()
        codes = [country["country_code"] for country in data["countries"]]
        assert data["total"] == 116
        assert codes == sorted(codes)
        assert "DE" in codes


class TestGetCountry:
    """Test GET /countries/{country_code}."""

    def test_get(self, test_client, api_v1_prefix):
        """Should return the country's IBAN structure."""
        response = test_client.get(f"{api_v1_prefix}/countries/gb")

        assert response.status_code == 200
        assert response.json() == {
            "country_code": "GB",
            "country_name": "United Kingdom",
            "iban_length": 22,
            "bban_length": 18,
            "iban_format": "GB2!n4!a6!n8!n",
            "bank_identifier": {"offset": 0, "length": 4},
            "branch_identifier": {"offset": 4, "length": 6},
            "checksum": None,
        }

    def test_get_with_checksum(self, test_client, api_v1_prefix):
        """National checksum positions should be exposed."""
        response = test_client.get(f"{api_v1_prefix}/countries/IT")

        assert response.json()["checksum"] == {"offset": 0, "length": 1}

    def test_unknown(self, test_client, api_v1_prefix):
        """Unknown countries should return 404."""
        response = test_client.get(f"{api_v1_prefix}/countries/ZZ")

        assert response.status_code == 404
        assert response.json()["code"] == "COUNTRY_NOT_FOUND"


class TestHealth:
    """Test the unversioned health endpoint."""

    def test_health(self, test_client):
        """Health should report status and registry size."""
        response = test_client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["countries"] == 116

    def test_docs_disabled_without_debug(self, test_client):
        """Interactive docs are only served in debug mode."""
        assert test_client.get("/docs").status_code == 404
