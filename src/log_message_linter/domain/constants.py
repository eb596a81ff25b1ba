"""
Built-in tables for log call classification and message validation.

Every table here is immutable and built once at import time.
"""

import re
from dataclasses import dataclass

from log_message_linter.domain.entities import LoggerKind

# Registry keys are e.g. "logmsg.W9401"
RULE_PREFIX: str = "logmsg."

# Severity-level method names. Case-sensitive, exact match.
LOG_LEVEL_METHODS: frozenset[str] = frozenset(
    {
        "debug",
        "info",
        "warning",
        "warn",
        "error",
        "exception",
        "critical",
        "fatal",
    }
)

# Modules whose level functions are called as module.func(...).
STD_LOGGING_MODULES: frozenset[str] = frozenset({"logging"})

# Qualified class name -> capability.
LOGGER_CAPABILITIES: dict[str, LoggerKind] = {
    "logging.Logger": LoggerKind.STDLIB_LOGGER,
    "logging.RootLogger": LoggerKind.STDLIB_LOGGER,
    "logging.LoggerAdapter": LoggerKind.STDLIB_ADAPTER,
    "loguru._logger.Logger": LoggerKind.LOGURU,
    "structlog.stdlib.BoundLogger": LoggerKind.STRUCTLOG,
    "structlog._generic.BoundLogger": LoggerKind.STRUCTLOG,
}

ALLOWED_PUNCTUATION: frozenset[str] = frozenset(".,:;-_'\"")

# The character-set correction additionally keeps path separators.
CORRECTION_EXTRA_CHARS: frozenset[str] = frozenset("/")

SENSITIVE_KEYWORDS: tuple[str, ...] = (
    "password",
    "passwd",
    "pwd",
    "token",
    "api_key",
    "apikey",
    "secret",
    "private_key",
    "privatekey",
    "access_key",
    "accesskey",
    "client_secret",
    "clientsecret",
    "bearer",
)


@dataclass(frozen=True)
class SecretPattern:
    """A compiled regex for a likely credential and its human label."""

    regex: re.Pattern[str]
    label: str


# Matched in order against the original-case message.
SECRET_PATTERNS: tuple[SecretPattern, ...] = (
    SecretPattern(
        re.compile(r"eyJ[A-Za-z0-9_-]{10,}\.[A-Za-z0-9_-]{10,}\.[A-Za-z0-9_-]{10,}"),
        "JWT token",
    ),
    SecretPattern(re.compile(r"ghp_[0-9a-zA-Z]{36}"), "GitHub Personal Access Token"),
    SecretPattern(re.compile(r"gho_[0-9a-zA-Z]{36}"), "GitHub OAuth Access Token"),
    SecretPattern(re.compile(r"ghr_[0-9a-zA-Z]{36}"), "GitHub Refresh Token"),
    SecretPattern(
        re.compile(r"-----BEGIN (RSA |EC |DSA |OPENSSH |PGP )?PRIVATE KEY( BLOCK)?-----"),
        "Private Key",
    ),
    # Flags any UUID-shaped value, including benign identifiers.
    SecretPattern(
        re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"),
        "UUID (potential secret)",
    ),
    SecretPattern(
        re.compile(r"(?i)(bearer|token)['\"]?\s*[:=]\s*['\"]?[0-9a-zA-Z\-_.]{20,}"),
        "Bearer/Auth Token",
    ),
)

# printf-style conversion in a logging format string, "%%" included.
PRINTF_PLACEHOLDER: re.Pattern[str] = re.compile(
    r"%(\([^)]*\))?[#0 +-]*(\*|\d+)?(\.(\*|\d+))?[hlL]?[diouxXeEfFgGcrsa%]"
)
