import pytest
from unittest.mock import patch, AsyncMock
from sqlalchemy.exc import OperationalError


class TestErrorHandling:
    """Tests for global error mapping."""

    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/api/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    @pytest.mark.asyncio
    async def test_store_unavailable_is_generic_500(self, client):
        """Database failures surface as a 500 without leaking details."""
        with patch("app.routers.products.catalog_service") as mock_catalog:
            mock_catalog.list_products = AsyncMock(
                side_effect=OperationalError("SELECT 1", {}, Exception("connection refused"))
            )

            response = await client.get("/api/products")

            assert response.status_code == 500
            assert response.json() == {"detail": "Database error"}

    @pytest.mark.asyncio
    async def test_validation_error_is_400(self, client):
        response = await client.post("/api/login", json={})
        assert response.status_code == 400
        assert isinstance(response.json()["detail"], list)
