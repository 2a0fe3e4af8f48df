from __future__ import annotations

import logging
import os


logger = logging.getLogger(__name__)

_DEFAULT_EDGE_ITEMS = 4
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_SCALAR_BLOCK_WARN_ELEMENTS = 4096


def _env_int(name: str, default: int, *, minimum: int = 0) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("ignoring %s=%r: not an integer", name, raw)
        return default
    if value < minimum:
        logger.warning("ignoring %s=%r: must be >= %d", name, raw, minimum)
        return default
    return value


class Settings:
    """Environment-driven settings, read lazily and cached per instance."""

    def __init__(
        self,
        *,
        edge_items_var: str = "BLOCKMAT_EDGE_ITEMS",
        log_level_var: str = "BLOCKMAT_LOG_LEVEL",
        scalar_block_warn_var: str = "BLOCKMAT_SCALAR_BLOCK_WARN_ELEMENTS",
    ) -> None:
        self._edge_items_var = edge_items_var
        self._log_level_var = log_level_var
        self._scalar_block_warn_var = scalar_block_warn_var
        self._edge_items: int | None = None
        self._log_level: str | None = None
        self._scalar_block_warn_elements: int | None = None

    @property
    def edge_items(self) -> int:
        if self._edge_items is None:
            self._edge_items = _env_int(self._edge_items_var, _DEFAULT_EDGE_ITEMS, minimum=1)
        return self._edge_items

    @property
    def log_level(self) -> str:
        if self._log_level is None:
            raw = (os.environ.get(self._log_level_var) or "").strip().upper()
            if raw and isinstance(logging.getLevelName(raw), int):
                self._log_level = raw
            else:
                if raw:
                    logger.warning("ignoring %s=%r: unknown log level", self._log_level_var, raw)
                self._log_level = _DEFAULT_LOG_LEVEL
        return self._log_level

    @property
    def scalar_block_warn_elements(self) -> int:
        if self._scalar_block_warn_elements is None:
            self._scalar_block_warn_elements = _env_int(
                self._scalar_block_warn_var, _DEFAULT_SCALAR_BLOCK_WARN_ELEMENTS
            )
        return self._scalar_block_warn_elements


_SETTINGS: Settings | None = None


def settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings()
    return _SETTINGS


def reset_settings() -> None:
    """Drop cached settings so the next access re-reads the environment."""

    global _SETTINGS
    _SETTINGS = None
