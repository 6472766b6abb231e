import pytest

from takc.config import (
    ConfigError,
    ConfigFlag,
    LogLevel,
    OptLevel,
    get_config,
    init_config,
    reset_config,
)


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


def test_uninitialized_is_not_ok():
    assert get_config().ok is False


@pytest.mark.parametrize(
    "attr", ["input_file_name", "output_file_name", "flags", "opt_lvl", "log_lvl", "jobs"]
)
def test_uninitialized_access_raises(attr):
    with pytest.raises(ConfigError):
        getattr(get_config(), attr)


def test_init_stores_values():
    flags = ConfigFlag.DUMP_AST | ConfigFlag.DUMP_TYPES
    cfg = init_config("main.tak", "out.o", "x86_64-pc-linux-gnu", OptLevel.O2, LogLevel.TRACE, flags, 4)
    assert cfg is get_config()
    assert cfg.ok is True
    assert cfg.input_file_name == "main.tak"
    assert cfg.output_file_name == "out.o"
    assert cfg.arch == "x86_64-pc-linux-gnu"
    assert cfg.opt_lvl is OptLevel.O2
    assert cfg.log_lvl is LogLevel.TRACE
    assert cfg.flags & ConfigFlag.DUMP_AST
    assert not cfg.flags & ConfigFlag.DUMP_LLVM
    assert cfg.jobs == 4


def test_defaults():
    cfg = init_config("a.tak", "a.o")
    assert cfg.arch is None
    assert cfg.opt_lvl is OptLevel.O0
    assert cfg.log_lvl is LogLevel.DISABLED
    assert cfg.flags == ConfigFlag.NONE
    assert cfg.jobs == 1


def test_empty_arch_is_none():
    cfg = init_config("a.tak", "a.o", "")
    assert cfg.arch is None


def test_double_init_raises():
    init_config("a.tak", "a.o")
    with pytest.raises(ConfigError):
        init_config("b.tak", "b.o")
    assert get_config().input_file_name == "a.tak"


@pytest.mark.parametrize("inp,out", [("", "a.o"), ("a.tak", "")])
def test_missing_files_raise(inp, out):
    with pytest.raises(ConfigError):
        init_config(inp, out)
    assert get_config().ok is False


def test_reset_gives_fresh_config():
    init_config("a.tak", "a.o")
    fresh = reset_config()
    assert fresh is get_config()
    assert fresh.ok is False
    init_config("b.tak", "b.o")
    assert get_config().input_file_name == "b.tak"