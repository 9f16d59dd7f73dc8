"""Unit tests for the configuration context."""

import pytest

from src.product_api.runtime.config.config_data import (
    AppConfig,
    ConfigData,
    DatabaseConfig,
)
from src.product_api.runtime.context import (
    AppContext,
    get_config,
    get_context,
    set_config,
    with_context,
)


class TestContextManager:
    def test_default_context_available(self):
        context = get_context()

        assert isinstance(context, AppContext)
        assert isinstance(get_config(), ConfigData)
        assert context.config is get_config()

    def test_with_context_override_reverts(self):
        original_config = get_config()

        with with_context(ConfigData(app=AppConfig(port=9999))):
            assert get_config().app.port == 9999
            assert get_config() is not original_config

        assert get_config() is original_config

    def test_partial_override_inherits_other_fields(self):
        original = get_config()

        with with_context(ConfigData(database=DatabaseConfig(create_tables=False))):
            config = get_config()
            assert config.database.create_tables is False
            assert config.database.url == original.database.url
            assert config.app.environment == original.app.environment

    def test_nested_overrides(self):
        with with_context(ConfigData(app=AppConfig(port=8001))):
            with with_context(ConfigData(app=AppConfig(host="inner"))):
                config = get_config()
                assert config.app.host == "inner"
                assert config.app.port == 8001
            assert get_config().app.host != "inner"

    def test_none_override_is_noop(self):
        original = get_config()

        with with_context(None):
            assert get_config() is original

    def test_invalid_override_type(self):
        with pytest.raises(ValueError, match="config_override must be ConfigData"):
            with with_context({"app": {"port": 1}}):  # type: ignore[arg-type]
                pass

    def test_set_config_replaces_configuration(self):
        original = get_config()
        replacement = ConfigData(app=AppConfig(port=1234))
        try:
            set_config(replacement)
            assert get_config() is replacement
        finally:
            set_config(original)
