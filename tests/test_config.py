import pytest

from db2mb.config import COLLECTION_BATCH_LIMIT, PLACEHOLDER_ID_THRESHOLD, Settings


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)

        assert settings.scryfall_api_url == "https://api.scryfall.com"
        assert settings.placeholder_id_threshold == PLACEHOLDER_ID_THRESHOLD == 1_000_000
        assert settings.collection_batch_size == COLLECTION_BATCH_LIMIT == 75
        assert settings.request_timeout is None

    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB2MB_PLACEHOLDER_ID_THRESHOLD", "500")
        monkeypatch.setenv("DB2MB_REQUEST_TIMEOUT", "12.5")

        settings = Settings(_env_file=None)

        assert settings.placeholder_id_threshold == 500
        assert settings.request_timeout == 12.5
