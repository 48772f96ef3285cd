"""
Runtime settings, read from environment variables.

Only the outer layers (service / database) need these. The domain layer gets everything it needs as constructor arguments.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Self

ENV_PREFIX = "TICTACTOE_"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{ENV_PREFIX}{name} must be a boolean, got {value!r}.")


@dataclass(frozen=True)
class Settings:
    database_url: str = "sqlite:///tictactoe.db"
    board_size: int = 3
    strict_turns: bool = True
    log_level: str = "INFO"
    sql_echo: bool = False

    def __post_init__(self) -> None:
        if self.board_size < 1:
            raise ValueError(
                f"{ENV_PREFIX}BOARD_SIZE must be a positive integer, got {self.board_size}."
            )
        if self.log_level.upper() not in logging.getLevelNamesMapping():
            raise ValueError(f"{ENV_PREFIX}LOG_LEVEL {self.log_level!r} is unknown.")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Self:
        """Build settings from the environment. Unset variables fall back to the defaults above."""
        env = os.environ if environ is None else environ
        defaults = cls()

        raw_size = env.get(f"{ENV_PREFIX}BOARD_SIZE")
        try:
            board_size = int(raw_size) if raw_size is not None else defaults.board_size
        except ValueError:
            raise ValueError(
                f"{ENV_PREFIX}BOARD_SIZE must be an integer, got {raw_size!r}."
            ) from None

        raw_strict = env.get(f"{ENV_PREFIX}STRICT_TURNS")
        raw_echo = env.get(f"{ENV_PREFIX}SQL_ECHO")
        return cls(
            database_url=env.get(f"{ENV_PREFIX}DATABASE_URL", defaults.database_url),
            board_size=board_size,
            strict_turns=(
                _parse_bool("STRICT_TURNS", raw_strict)
                if raw_strict is not None
                else defaults.strict_turns
            ),
            log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level).upper(),
            sql_echo=(
                _parse_bool("SQL_ECHO", raw_echo)
                if raw_echo is not None
                else defaults.sql_echo
            ),
        )


def configure_logging(settings: Settings) -> None:
    """Root logger setup. Call once, from whatever process hosts the service."""
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)
