"""
Settings for building a logger at startup.

Pydantic-based settings that can be read from a TOML file (the
``[scopelog]`` table) and overridden with ``SCOPELOG_*`` environment
variables, e.g.::

    [scopelog]
    level = "debug"
    indentation_per_scope = 4
    exclude_modules = ["noisy.py"]
    handlers = ["console", "file"]
    file_path = "/var/log/app/trace.log"

List values given through the environment use JSON syntax:
``SCOPELOG_EXCLUDE_MODULES='["noisy.py"]'``.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Union

import tomli_w
from pydantic import Field, ValidationError, field_serializer, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .config import Config
from .constants import (
    DEFAULT_INDENTATION_CHARACTER,
    DEFAULT_INDENTATION_PER_SCOPE,
    DEFAULT_SCOPE_IN_SYMBOL,
    DEFAULT_SCOPE_OUT_SYMBOL,
    HANDLER_CONSOLE,
    HANDLER_FILE,
    HANDLER_SYSLOG,
    SETTINGS_ENV_PREFIX,
    SETTINGS_TOML_TABLE,
)
from .exceptions import ConfigurationError, SinkUnavailableError
from .handlers import ConsoleHandler, Handler, SystemLogHandler, open_file_handler
from .levels import LogLevel

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = logging.getLogger(__name__)

HandlerKind = Literal["console", "syslog", "file"]


class ScopelogSettings(BaseSettings):
    """Logger settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix=SETTINGS_ENV_PREFIX,
        case_sensitive=False,
        extra="ignore",
    )

    level: LogLevel = Field(LogLevel.TRACE, description="Severity threshold")
    indentation_per_scope: int = Field(
        DEFAULT_INDENTATION_PER_SCOPE, ge=0, description="Indentation characters per scope"
    )
    indentation_character: str = Field(
        DEFAULT_INDENTATION_CHARACTER, min_length=1, description="Indentation character"
    )
    scope_in_symbol: str = Field(DEFAULT_SCOPE_IN_SYMBOL, description="Scope entry prefix")
    scope_out_symbol: str = Field(DEFAULT_SCOPE_OUT_SYMBOL, description="Scope exit prefix")
    include_modules: Optional[List[str]] = Field(None, description="Only these modules log")
    exclude_modules: Optional[List[str]] = Field(None, description="These modules never log")
    handlers: List[HandlerKind] = Field(
        default_factory=lambda: [HANDLER_CONSOLE], description="Output handlers, in order"
    )
    file_path: Optional[Path] = Field(None, description="Log file for the file handler")
    syslog_address: Optional[str] = Field(
        None, description="Syslog socket path or host for the syslog handler"
    )
    syslog_port: Optional[int] = Field(None, ge=1, le=65535, description="Syslog UDP port")

    @field_validator("level", mode="before")
    @classmethod
    def parse_level(cls, v: Any) -> LogLevel:
        try:
            return LogLevel.parse(v)
        except ConfigurationError as e:
            raise ValueError(e.message) from e

    @field_serializer("level")
    def serialize_level(self, level: LogLevel) -> str:
        return level.name.lower()

    def to_config(self) -> Config:
        """Build the Config these settings describe."""
        return Config(
            log_level=self.level,
            indentation_per_scope=self.indentation_per_scope,
            indentation_character=self.indentation_character,
            scope_in_symbol=self.scope_in_symbol,
            scope_out_symbol=self.scope_out_symbol,
            include_modules=self.include_modules,
            exclude_modules=self.exclude_modules,
        )

    def syslog_target(self) -> Optional[Union[str, tuple]]:
        if self.syslog_address is None:
            return None
        if self.syslog_port is not None:
            return (self.syslog_address, self.syslog_port)
        return self.syslog_address


def _read_toml_table(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            document = tomllib.load(f)
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read settings file '{path}': {e}",
            help_text="Check that the settings file exists and is readable",
            error_code="CONFIG_UNREADABLE",
        ) from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(
            f"Settings file '{path}' is not valid TOML: {e}",
            error_code="CONFIG_INVALID",
        ) from e

    table = document.get(SETTINGS_TOML_TABLE, document)
    if not isinstance(table, dict):
        raise ConfigurationError(
            f"'{SETTINGS_TOML_TABLE}' in '{path}' must be a table",
            error_code="CONFIG_INVALID",
        )
    return table


def _validation_failure(e: ValidationError, source: str) -> ConfigurationError:
    errors = [
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
    ]
    message = f"Invalid logging settings from {source}:"
    for error in errors:
        message += f"\n  - {error}"
    return ConfigurationError(message, error_code="CONFIG_VALIDATION")


def load_settings(path: Optional[Union[str, Path]] = None) -> ScopelogSettings:
    """Load settings from an optional TOML file, with environment overrides.

    Raises:
        ConfigurationError: The file cannot be read or the values are invalid.
    """
    file_values: Dict[str, Any] = {}
    if path is not None:
        file_values = _read_toml_table(Path(path))

    try:
        env_settings = ScopelogSettings()
    except ValidationError as e:
        raise _validation_failure(e, "environment") from e
    env_values = env_settings.model_dump(include=env_settings.model_fields_set)

    merged = {**file_values, **env_values}
    try:
        settings = ScopelogSettings(**merged)
    except ValidationError as e:
        raise _validation_failure(e, str(path) if path else "environment") from e

    if path is not None:
        logger.debug(f"Loaded logging settings from {path}")
    return settings


def save_settings(settings: ScopelogSettings, path: Union[str, Path]) -> None:
    """Write settings to ``path`` as a ``[scopelog]`` TOML table."""
    path = Path(path)
    data = settings.model_dump(mode="json", exclude_none=True)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            tomli_w.dump({SETTINGS_TOML_TABLE: data}, f)
    except OSError as e:
        raise ConfigurationError(
            f"Cannot write settings file '{path}': {e}",
            error_code="CONFIG_UNWRITABLE",
        ) from e
    logger.debug(f"Saved logging settings to {path}")


def build_handlers(settings: ScopelogSettings) -> List[Handler]:
    """Create the handlers listed in ``settings``, in order.

    A handler that cannot be created is reported and left out.

    Raises:
        ConfigurationError: The file handler is requested without a file path.
    """
    handlers: List[Handler] = []
    for kind in settings.handlers:
        if kind == HANDLER_CONSOLE:
            handlers.append(ConsoleHandler())
        elif kind == HANDLER_SYSLOG:
            try:
                handlers.append(SystemLogHandler(address=settings.syslog_target()))
            except SinkUnavailableError as e:
                logger.error(e.message)
        elif kind == HANDLER_FILE:
            if settings.file_path is None:
                raise ConfigurationError(
                    "The file handler requires file_path",
                    help_text=f"Set file_path in [{SETTINGS_TOML_TABLE}] or {SETTINGS_ENV_PREFIX}FILE_PATH",
                    error_code="CONFIG_MISSING",
                )
            handler = open_file_handler(settings.file_path)
            if handler is not None:
                handlers.append(handler)
    return handlers
