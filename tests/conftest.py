"""
Shared pytest fixtures for auth service tests.
"""
import os
from unittest.mock import MagicMock, patch

import pytest


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_auth_db",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "BCRYPT_ROUNDS": "4",
        "LOG_LEVEL": "DEBUG",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 1440
    mock.bcrypt_rounds = 4
    mock.log_level = "INFO"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("auth_service.core.config.get_settings", return_value=mock), patch(
        "auth_service.core.security.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def registration_payload():
    """A registration request body that passes every value object rule."""
    return {
        "email": "a@b.com",
        "password": "Secret123!",
        "first_name": "A",
        "last_name": "B",
        "phone": "+10000000000",
        "national_id": "ID1",
        "location": "X",
    }
