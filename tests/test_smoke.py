"""
Smoke test - verifies test infrastructure is working.
Run: pytest tests/test_smoke.py -v
"""


def test_import_settings():
    """Verify the package can be imported and settings load."""
    from auth_service.core.config import Settings

    settings = Settings()
    assert settings is not None
    assert hasattr(settings, "mongo_uri")


def test_settings_read_environment(mock_env):
    from auth_service.core.config import Settings

    settings = Settings()
    assert settings.mongo_database_name == "test_auth_db"
    assert settings.bcrypt_rounds == 4
    assert settings.log_level == "DEBUG"
