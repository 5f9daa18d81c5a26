"""Tests for ContextVar-based format configuration.

Validates thread isolation, context manager behavior, and that sessions
capture the config active when they are created.
"""

from threading import Thread

import pytest

from chainfmt import (
    FormatConfig,
    Formatter,
    SessionError,
    format_config_context,
    get_format_config,
    reset_format_config,
    set_format_config,
)


class TestFormatConfigDataclass:
    """Test FormatConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = FormatConfig()
        assert config.initial_buffer_size == 16
        assert config.default_separator == ", "
        assert config.strict_materialize is False
        assert config.enforce_owner_thread is True

    def test_immutability(self) -> None:
        config = FormatConfig()
        with pytest.raises(AttributeError):
            config.strict_materialize = True  # type: ignore[misc]

    def test_buffer_size_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="initial_buffer_size"):
            FormatConfig(initial_buffer_size=0)


class TestFromDict:
    def test_known_keys(self) -> None:
        config = FormatConfig.from_dict({"strict_materialize": True, "initial_buffer_size": 64})
        assert config.strict_materialize is True
        assert config.initial_buffer_size == 64

    def test_unknown_keys_ignored(self) -> None:
        config = FormatConfig.from_dict({"unknown_key": "ignored"})
        assert config == FormatConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def test_default_config(self) -> None:
        reset_format_config()
        assert get_format_config() == FormatConfig()

    def test_set_and_reset(self) -> None:
        custom = FormatConfig(default_separator="; ")
        set_format_config(custom)
        try:
            assert get_format_config() is custom
        finally:
            reset_format_config()
        assert get_format_config() == FormatConfig()

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with format_config_context(FormatConfig(strict_materialize=True)):
                raise RuntimeError("boom")
        assert get_format_config().strict_materialize is False

    def test_thread_isolation(self) -> None:
        """Each thread sees its own config."""
        results: dict[int, str] = {}

        def worker(thread_id: int, separator: str) -> None:
            set_format_config(FormatConfig(default_separator=separator))
            results[thread_id] = get_format_config().default_separator

        threads = [Thread(target=worker, args=(i, sep)) for i, sep in enumerate(["|", "; ", "-"])]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert results == {0: "|", 1: "; ", 2: "-"}


class TestSessionCapturesConfig:
    def test_config_captured_at_construction(self) -> None:
        with format_config_context(FormatConfig(strict_materialize=True)):
            f = Formatter("done")
        assert f.materialize() == "done"
        with pytest.raises(SessionError):
            f.materialize()

    def test_later_config_change_does_not_apply(self) -> None:
        f = Formatter("x")
        with format_config_context(FormatConfig(strict_materialize=True)):
            f.materialize()
            assert f.materialize() == "xx"
