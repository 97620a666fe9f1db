"""
Package-wide constants for scopelog.

Default values shared by Config, the settings model and the handlers.
"""

# Indentation defaults
DEFAULT_INDENTATION_PER_SCOPE = 2
DEFAULT_INDENTATION_CHARACTER = " "

# Scope markers
DEFAULT_SCOPE_IN_SYMBOL = "->"
DEFAULT_SCOPE_OUT_SYMBOL = "<-"

# Execution context labels
MAIN_CONTEXT_LABEL = "main"

# Settings
SETTINGS_ENV_PREFIX = "SCOPELOG_"
SETTINGS_TOML_TABLE = "scopelog"

# Handler kinds accepted by the settings model
HANDLER_CONSOLE = "console"
HANDLER_SYSLOG = "syslog"
HANDLER_FILE = "file"

# Name of the stdlib logger the system-log handler forwards to
SYSTEM_LOG_LOGGER_NAME = "scopelog.syslog"

# File handler encoding
LOG_FILE_ENCODING = "utf-8"

# Platform syslog socket used when no syslog address is configured
DEFAULT_SYSLOG_SOCKET = "/dev/log"
