from payment_service.config import Settings, parse_replica_hosts
from payment_service.database import build_url, create_replica_engines


def test_parse_replica_hosts_skips_blanks():
    assert parse_replica_hosts(None) == []
    assert parse_replica_hosts("") == []
    assert parse_replica_hosts("10.0.0.2, 10.0.0.3,, ") == ["10.0.0.2", "10.0.0.3"]


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("POSTGRES_HOST", "db")
    monkeypatch.setenv("POSTGRES_USER", "payments")
    monkeypatch.setenv("POSTGRES_DB", "payments")
    monkeypatch.setenv("POSTGRES_PASSWORD", "secret")
    monkeypatch.setenv("POSTGRES_REPLICA_IPS", "10.0.0.2,10.0.0.3")
    monkeypatch.setenv("COUNTRY_CODE", "id")
    monkeypatch.setenv("FAIL", "true")
    monkeypatch.delenv("DATABASE_URL", raising=False)

    settings = Settings.from_env()

    assert settings.postgres_host == "db"
    assert settings.replica_hosts == ["10.0.0.2", "10.0.0.3"]
    assert settings.fail is True
    assert settings.api_prefix == "/payments/id/api/v1"


def test_fail_toggle_only_accepts_true(monkeypatch):
    monkeypatch.setenv("FAIL", "1")

    assert Settings.from_env().fail is False


def test_replica_urls_reuse_primary_credentials():
    settings = Settings(
        postgres_user="payments",
        postgres_password="secret",
        postgres_db="payments",
        replica_hosts=["10.0.0.2"],
    )

    url = build_url(settings, "10.0.0.2")

    assert url.host == "10.0.0.2"
    assert url.port == 5432
    assert url.username == "payments"
    assert url.database == "payments"
    assert url.query["sslmode"] == "disable"


def test_no_replica_engines_without_hosts():
    assert create_replica_engines(Settings()) == []
