"""Config resolution with a process-wide cache the host controls explicitly."""

import logging
import threading

from log_message_linter.domain.config import RuleConfig
from log_message_linter.domain.protocols import ConfigResolverProtocol
from log_message_linter.infrastructure.config_file_loader import ConfigFileLoader

logger = logging.getLogger(__name__)

# Cache key for "no explicit file": the pyproject.toml section or defaults.
_PROJECT_KEY = ""


class ConfigResolver(ConfigResolverProtocol):
    """
    Resolves RuleConfig once per config path and caches it.

    Missing, unreadable or malformed configuration falls back to the
    all-enabled defaults; resolution never raises. The cache is filled
    under a lock so concurrent first use resolves exactly once.
    """

    def __init__(self, file_loader: ConfigFileLoader | None = None) -> None:
        self._file_loader = file_loader or ConfigFileLoader()
        self._lock = threading.Lock()
        self._cache: dict[str, RuleConfig] = {}

    def resolve(self, path: str | None = None) -> RuleConfig:
        key = path.strip() if path else _PROJECT_KEY
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        with self._lock:
            if key not in self._cache:
                self._cache[key] = self._load(key)
            return self._cache[key]

    def set_config(self, config: RuleConfig, path: str | None = None) -> None:
        """Override the config for path (default: the project config)."""
        with self._lock:
            self._cache[path.strip() if path else _PROJECT_KEY] = config

    def teardown(self) -> None:
        """Drop every cached config; the next resolve() reads the files again."""
        with self._lock:
            self._cache.clear()

    def _load(self, key: str) -> RuleConfig:
        if key == _PROJECT_KEY:
            try:
                raw = self._file_loader.load_config_from_fs()
            except OSError as exc:
                logger.warning("cannot read project config, using defaults: %s", exc)
                return RuleConfig.default()
            return RuleConfig.from_mapping(raw)
        try:
            raw = self._file_loader.load_json(key)
        except (OSError, ValueError) as exc:
            logger.warning("cannot load config file %s, using defaults: %s", key, exc)
            return RuleConfig.default()
        return RuleConfig.from_mapping(raw)
