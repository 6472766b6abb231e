"""Process-wide compiler configuration."""

from __future__ import annotations

from enum import IntEnum, IntFlag
from typing import Optional


class LogLevel(IntEnum):
    DISABLED = 0
    ENABLED = 1
    TRACE = 2


class OptLevel(IntEnum):
    O0 = 0
    O1 = 1
    O2 = 2


class ConfigFlag(IntFlag):
    NONE = 0
    DUMP_LLVM = 1
    DUMP_SYMBOLS = 1 << 1
    DUMP_AST = 1 << 2
    WARN_IS_ERR = 1 << 4
    TIME_ACTIONS = 1 << 5
    DUMP_TYPES = 1 << 6


class ConfigError(Exception):
    """Raised when the configuration is misused."""


class Config:
    """Compiler settings; only readable once initialised."""

    def __init__(self) -> None:
        self._input = ""
        self._output = ""
        self._arch = ""
        self._opt = OptLevel.O0
        self._log_lvl = LogLevel.DISABLED
        self._flags = ConfigFlag.NONE
        self._jobs = 1
        self._ok = False

    def _require_ok(self) -> None:
        if not self._ok:
            raise ConfigError("configuration has not been initialized.")

    @property
    def ok(self) -> bool:
        return self._ok

    @property
    def input_file_name(self) -> str:
        self._require_ok()
        return self._input

    @property
    def output_file_name(self) -> str:
        self._require_ok()
        return self._output

    @property
    def arch(self) -> Optional[str]:
        return self._arch or None

    @property
    def flags(self) -> ConfigFlag:
        self._require_ok()
        return self._flags

    @property
    def opt_lvl(self) -> OptLevel:
        self._require_ok()
        return self._opt

    @property
    def log_lvl(self) -> LogLevel:
        self._require_ok()
        return self._log_lvl

    @property
    def jobs(self) -> int:
        self._require_ok()
        return self._jobs


_config = Config()


def get_config() -> Config:
    """Return the process-wide configuration."""
    return _config


def init_config(
    input: str,
    output: str,
    arch: Optional[str] = None,
    opt: OptLevel = OptLevel.O0,
    log_level: LogLevel = LogLevel.DISABLED,
    flags: ConfigFlag = ConfigFlag.NONE,
    max_jobs: int = 1,
) -> Config:
    """Initialise the process-wide configuration exactly once."""
    cfg = get_config()
    if not input:
        raise ConfigError("no input file provided.")
    if not output:
        raise ConfigError("no output file provided.")
    if cfg.ok:
        raise ConfigError("config has already been initialized.")

    cfg._input = input
    cfg._output = output
    cfg._opt = OptLevel(opt)
    cfg._log_lvl = LogLevel(log_level)
    cfg._flags = ConfigFlag(flags)
    cfg._jobs = max_jobs
    cfg._arch = arch or ""
    cfg._ok = True
    return cfg


def reset_config() -> Config:
    """Discard the current configuration and return a fresh, uninitialised one."""
    global _config
    _config = Config()
    return _config