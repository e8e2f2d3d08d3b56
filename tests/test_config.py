"""Tests for ContextVar-based preprocessing configuration.

Validates defaults, immutability, context manager behavior, and thread
isolation.
"""

from threading import Thread

import pytest

from mathguard import (
    PreprocessConfig,
    get_preprocess_config,
    preprocess,
    preprocess_config_context,
    reset_preprocess_config,
    set_preprocess_config,
)


class TestPreprocessConfigDataclass:
    """Test PreprocessConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = PreprocessConfig()
        assert config.preserve_math is True
        assert config.block_joiner == " "
        assert config.dollar_entity == "&#36;"
        assert config.warn_unterminated is True

    def test_immutability(self) -> None:
        config = PreprocessConfig()
        with pytest.raises(AttributeError):
            config.block_joiner = "\n"  # type: ignore[misc]

    def test_from_dict(self) -> None:
        config = PreprocessConfig.from_dict({"block_joiner": "\n", "warn_unterminated": False})
        assert config.block_joiner == "\n"
        assert config.warn_unterminated is False
        assert config.preserve_math is True

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = PreprocessConfig.from_dict({"smart": True, "generate_toc": True})
        assert config == PreprocessConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def setup_method(self) -> None:
        reset_preprocess_config()

    def teardown_method(self) -> None:
        reset_preprocess_config()

    def test_default(self) -> None:
        assert get_preprocess_config() == PreprocessConfig()

    def test_set_and_reset(self) -> None:
        custom = PreprocessConfig(dollar_entity="&#x24;")
        set_preprocess_config(custom)
        assert get_preprocess_config() is custom
        assert preprocess(r"\$") == "&#x24;"

        reset_preprocess_config()
        assert get_preprocess_config() == PreprocessConfig()

    def test_context_manager_restores(self) -> None:
        outer = PreprocessConfig(block_joiner="\n")
        inner = PreprocessConfig(preserve_math=False)
        set_preprocess_config(outer)

        with preprocess_config_context(inner):
            assert get_preprocess_config() is inner

        assert get_preprocess_config() is outer

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with preprocess_config_context(PreprocessConfig(preserve_math=False)):
                raise RuntimeError("boom")
        assert get_preprocess_config().preserve_math is True


class TestThreadIsolation:
    def test_each_thread_sees_its_own_config(self) -> None:
        """Configs set in worker threads never leak into each other."""
        results: dict[int, str] = {}

        def worker(thread_id: int, config: PreprocessConfig) -> None:
            set_preprocess_config(config)
            results[thread_id] = preprocess(r"\$a_b\$ \$")

        configs = [
            PreprocessConfig(),
            PreprocessConfig(preserve_math=False),
            PreprocessConfig(dollar_entity="&#x24;"),
        ]

        threads = [Thread(target=worker, args=(i, c)) for i, c in enumerate(configs)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results[0] == "&#36;a_b&#36; &#36;"
        assert results[1] == r"\$a_b\$ \$"
        assert results[2] == "&#x24;a_b&#x24; &#x24;"
