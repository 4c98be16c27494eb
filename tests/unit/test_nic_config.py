"""
NIC config tests.

The process-wide default can be changed at runtime; explicit configs
override it per call.
"""

from __future__ import annotations

import pytest

from lknic.adapters.time_colombo import FrozenTimeAdapter
from lknic.components.nic import (
    DEFAULT_CONFIG,
    NICConfig,
    NICErrorCode,
    configure,
    get_config,
    is_valid,
    reset_config,
    set_config,
    validate,
)


class TestDefaults:
    """Documented defaults."""

    def test_defaults(self) -> None:
        config = get_config()
        assert config.minimum_legal_age == 15
        assert config.oldest_valid_birth_year == 1901
        assert config == DEFAULT_CONFIG

    @pytest.mark.parametrize(
        "kwargs",
        [{"minimum_legal_age": -1}, {"oldest_valid_birth_year": 0}],
    )
    def test_rejects_out_of_range(self, kwargs: dict[str, int]) -> None:
        with pytest.raises(ValueError):
            NICConfig(**kwargs)


class TestProcessWideConfig:
    """configure / set_config / reset_config."""

    def test_configure_minimum_age(self, clock: FrozenTimeAdapter) -> None:
        assert is_valid("201001502757", clock=clock)

        configure(minimum_legal_age=18)

        result = validate("201001502757", clock=clock)
        assert result.error is not None
        assert result.error.code is NICErrorCode.MINIMUM_AGE_REQUIREMENT_NOT_MET
        assert "18 years" in result.error.message

    def test_configure_oldest_year(self, clock: FrozenTimeAdapter) -> None:
        configure(oldest_valid_birth_year=1950)
        result = validate("194901502757", clock=clock)
        assert result.error is not None
        assert result.error.code is NICErrorCode.MAXIMUM_AGE_REQUIREMENT_NOT_MET

    def test_configure_keeps_other_threshold(self) -> None:
        configure(minimum_legal_age=16)
        configure(oldest_valid_birth_year=1910)
        assert get_config() == NICConfig(minimum_legal_age=16, oldest_valid_birth_year=1910)

    def test_set_and_reset(self) -> None:
        set_config(NICConfig(minimum_legal_age=21))
        assert get_config().minimum_legal_age == 21
        reset_config()
        assert get_config() is DEFAULT_CONFIG


class TestExplicitConfig:
    """Per-call config overrides the default without touching it."""

    def test_override(self, clock: FrozenTimeAdapter) -> None:
        strict = NICConfig(minimum_legal_age=18)
        assert not is_valid("201001502757", config=strict, clock=clock)
        assert is_valid("201001502757", clock=clock)
        assert get_config() is DEFAULT_CONFIG

    def test_zero_minimum_age(self, clock_on) -> None:
        config = NICConfig(minimum_legal_age=0)
        # born today
        assert is_valid("202605902757", config=config, clock=clock_on(2026, 2, 28))
        assert not is_valid("202606002757", config=config, clock=clock_on(2026, 2, 28))
