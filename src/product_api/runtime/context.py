import os
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace
from pathlib import Path

from pydantic import BaseModel

from src.product_api.runtime.config.config_data import ConfigData
from src.product_api.runtime.config.config_template import load_config


@dataclass
class AppContext:
    """Application context holding the active configuration."""

    config: ConfigData


CONFIG_FILE_ENV_VAR = "APP_CONFIG_FILE"

_default_config = load_config(Path(os.getenv(CONFIG_FILE_ENV_VAR, "config.yaml")))
_default_context = AppContext(config=_default_config)

_app_context: ContextVar[AppContext] = ContextVar(
    "app_context", default=_default_context
)


def get_context() -> AppContext:
    """Get the current application context."""
    return _app_context.get()


def set_context(context: AppContext) -> Token[AppContext]:
    """Set the current application context.

    Args:
        context: AppContext instance to set as current.
    """
    return _app_context.set(context)


def _dump_explicitly_set(model: BaseModel) -> dict:
    """Dump only the fields that were explicitly set, descending into nested models.

    A nested model that was set without any explicit fields of its own is dumped
    whole, so assigning ``DatabaseConfig()`` resets that section to its defaults.
    """
    result = {}
    explicitly_set_fields = model.model_fields_set

    for field_name in type(model).model_fields:
        field_value = getattr(model, field_name)

        if isinstance(field_value, BaseModel):
            nested = _dump_explicitly_set(field_value)
            if nested:
                result[field_name] = nested
            elif field_name in explicitly_set_fields:
                result[field_name] = field_value.model_dump()
        elif field_name in explicitly_set_fields:
            result[field_name] = field_value

    return result


def _recursive_dict_merge(base_dict: dict, override_dict: dict) -> dict:
    """Recursively merge ``override_dict`` into a copy of ``base_dict``."""
    result = base_dict.copy()

    for key, value in override_dict.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _recursive_dict_merge(result[key], value)
        else:
            result[key] = value

    return result


def _merge_configs(base_config: ConfigData, override_config: ConfigData) -> ConfigData:
    """Merge the explicitly set values of ``override_config`` onto ``base_config``."""
    base_dict = base_config.model_dump()
    override_dict = _dump_explicitly_set(override_config)
    merged_dict = _recursive_dict_merge(base_dict, override_dict)
    return ConfigData.model_validate(merged_dict)


@contextmanager
def with_context(config_override: ConfigData | None = None):
    """Temporarily override the application configuration.

    Only fields explicitly set on ``config_override`` replace the current values;
    everything else is inherited from the enclosing context.

    Example:
        override = ConfigData(database=DatabaseConfig(url="sqlite://"))
        with with_context(override):
            assert get_config().database.url == "sqlite://"
            # app, logging and the remaining database fields are inherited
    """
    if config_override is None:
        yield
        return

    if not isinstance(config_override, ConfigData):
        raise ValueError(
            f"config_override must be ConfigData, or None, got {type(config_override)}"
        )

    merged_config = _merge_configs(get_context().config, config_override)
    token = set_context(replace(get_context(), config=merged_config))
    try:
        yield
    finally:
        _app_context.reset(token)


def set_config(config: ConfigData) -> None:
    """Replace the entire current configuration with ``config``."""
    set_context(replace(get_context(), config=config))


def get_config() -> ConfigData:
    """Convenience function to get the current configuration."""
    return get_context().config
