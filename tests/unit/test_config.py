from seigate.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("DEFAULT_NETWORK", "PRIVATE_KEY", "RPC_FAILOVER", "PORT"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.default_network == "sei-testnet"
        assert settings.private_key == ""
        assert settings.rpc_failover is False
        assert settings.history_scan_window == 100
        assert settings.assistant_allow_writes is False
        assert settings.port == 3004

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_NETWORK", "sei")
        monkeypatch.setenv("RPC_FAILOVER", "true")
        monkeypatch.setenv("HISTORY_SCAN_WINDOW", "25")

        settings = Settings(_env_file=None)

        assert settings.default_network == "sei"
        assert settings.rpc_failover is True
        assert settings.history_scan_window == 25
