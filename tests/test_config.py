from coal_logistics.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("CLM_SUPABASE_URL", raising=False)
    monkeypatch.delenv("CLM_SAMPLE_DATA_FALLBACK", raising=False)

    settings = Settings(_env_file=None)

    assert settings.api_prefix == "/api"
    assert settings.supabase_url is None
    assert settings.sample_data_fallback is True
    assert settings.sample_data_seed is None
    assert settings.analytics_fetch_workers == 4


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CLM_SAMPLE_DATA_FALLBACK", "false")
    monkeypatch.setenv("CLM_SAMPLE_DATA_SEED", "42")
    monkeypatch.setenv("CLM_LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.sample_data_fallback is False
    assert settings.sample_data_seed == 42
    assert settings.log_level == "DEBUG"


def test_origins_accept_json_array(monkeypatch):
    monkeypatch.setenv("CLM_FRONTEND_ALLOWED_ORIGINS", '["https://a.example"]')

    settings = Settings(_env_file=None)

    assert settings.frontend_allowed_origins == ("https://a.example",)


def test_origins_accept_comma_separated_string():
    settings = Settings(_env_file=None, frontend_allowed_origins="https://a.example, https://b.example")

    assert settings.frontend_allowed_origins == ("https://a.example", "https://b.example")


def test_supabase_client_requires_credentials():
    from coal_logistics.db.supabase import create_supabase_client

    settings = Settings(_env_file=None, supabase_url="https://example.supabase.co", supabase_key=None)

    assert create_supabase_client(settings) is None
