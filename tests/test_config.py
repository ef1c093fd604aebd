import pytest
from greenhouse_ingestion import (
    BasicCredentials,
    BearerToken,
    ConflictingCredentialsError,
    IngestionClient,
    MissingCredentialsError,
    create_client_from_env,
    load_env_config,
)
from greenhouse_ingestion.client import DEFAULT_BASE_URL

ENV_VARS = (
    "GREENHOUSE_INGESTION_BASE_URL",
    "GREENHOUSE_INGESTION_ACCESS_TOKEN",
    "GREENHOUSE_INGESTION_API_KEY",
    "GREENHOUSE_INGESTION_ON_BEHALF_OF",
    "GREENHOUSE_INGESTION_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    cfg = load_env_config(use_dotenv=False)
    assert cfg.base_url == DEFAULT_BASE_URL
    assert cfg.timeout_seconds == 10.0
    with pytest.raises(MissingCredentialsError):
        cfg.credentials()


@pytest.mark.asyncio
async def test_token_from_env(monkeypatch):
    monkeypatch.setenv("GREENHOUSE_INGESTION_ACCESS_TOKEN", " tok ")
    monkeypatch.setenv("GREENHOUSE_INGESTION_BASE_URL", "https://mock-gh.test/")
    monkeypatch.setenv("GREENHOUSE_INGESTION_TIMEOUT", "2.5")

    async with create_client_from_env(use_dotenv=False) as client:
        pass

    assert isinstance(client, IngestionClient)
    assert client.credentials == BearerToken("tok")
    assert client.base_url == "https://mock-gh.test"
    assert client.timeout_seconds == 2.5


def test_api_key_from_env(monkeypatch):
    monkeypatch.setenv("GREENHOUSE_INGESTION_API_KEY", "apiKey")
    monkeypatch.setenv("GREENHOUSE_INGESTION_ON_BEHALF_OF", "john.smith@example.com")

    cfg = load_env_config(use_dotenv=False)

    assert cfg.credentials() == BasicCredentials("apiKey", "john.smith@example.com")


def test_both_credentials_conflict(monkeypatch):
    monkeypatch.setenv("GREENHOUSE_INGESTION_ACCESS_TOKEN", "tok")
    monkeypatch.setenv("GREENHOUSE_INGESTION_API_KEY", "apiKey")

    with pytest.raises(ConflictingCredentialsError):
        create_client_from_env(use_dotenv=False)


def test_bad_timeout(monkeypatch):
    monkeypatch.setenv("GREENHOUSE_INGESTION_TIMEOUT", "soon")
    with pytest.raises(ValueError):
        load_env_config(use_dotenv=False)


def test_secrets_not_in_repr(monkeypatch):
    monkeypatch.setenv("GREENHOUSE_INGESTION_API_KEY", "super-secret")
    cfg = load_env_config(use_dotenv=False)
    assert "super-secret" not in repr(cfg)
    assert "super-secret" not in repr(cfg.credentials())
