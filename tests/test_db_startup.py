"""
Database and reference data startup fail-fast tests.

``app.main.engine`` is patched so lifespan shutdown does not dispose the
shared in-memory test database.
"""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from app.reference_data import ReferenceDataValidationError


def test_app_fails_to_start_when_db_unreachable() -> None:
    """App fails fast when database is unreachable at startup."""
    with (
        patch("app.main.engine"),
        patch("app.main.check_db_connection") as mock_check,
    ):
        mock_check.side_effect = Exception("Database unreachable")

        from app.main import create_app

        app = create_app()

        with pytest.raises(Exception, match="Database unreachable"):
            with TestClient(app) as test_client:
                test_client.get("/health")


def test_app_fails_to_start_when_reference_data_invalid() -> None:
    """App fails fast when the reference data YAML does not validate."""
    with (
        patch("app.main.engine"),
        patch("app.main.check_db_connection"),
        patch(
            "app.reference_data.get_reference_data_version",
            side_effect=ReferenceDataValidationError("reference data must have 'cartridge_types'"),
        ),
    ):
        from app.main import create_app

        app = create_app()

        with pytest.raises(ReferenceDataValidationError, match="cartridge_types"):
            with TestClient(app) as test_client:
                test_client.get("/health")


def test_app_starts_with_valid_reference_data() -> None:
    """Startup succeeds against the test database and the packaged YAML."""
    with patch("app.main.engine") as mock_engine:
        from app.main import create_app

        with TestClient(create_app()) as test_client:
            assert test_client.get("/health").status_code == 200

    mock_engine.dispose.assert_called_once()
