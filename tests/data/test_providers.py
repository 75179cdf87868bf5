"""Tests for static and file-backed providers and the provider factory."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from src.data import create_provider
from src.data.constants import MAX_RATE, RAY, USDC, WETH
from src.data.file_provider import FileDataProvider, _parse_ray
from src.data.interfaces import RateConfigProvider, ReserveState
from src.data.static_params import StaticDataProvider
from src.governance.validation import validate_curve, validate_fee
from src.protocol.errors import OutOfRangeError

CONFIG = {
    "DAI": {
        "curve": {
            "kink": 0.9,
            "slope_below": "1267505861",
            "slope_above": 19012587,
            "base": 0.0,
        },
        "fee_bps": 1000,
        "state": {"cash": 400, "borrows": 1600},
    },
    "LINK": {
        "curve": {"kink": 0.45, "slope_below": 0.07, "slope_above": 3.0},
    },
}


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "rates.json"
    path.write_text(json.dumps(CONFIG))
    return path


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("RATE_CONFIG_PATH", raising=False)


class TestStaticDataProvider:
    def test_markets(self) -> None:
        assert StaticDataProvider().markets() == [USDC, WETH]

    @pytest.mark.parametrize("market", [USDC, WETH])
    def test_configs_are_valid(self, market: str) -> None:
        config = StaticDataProvider().get_rate_config(market)
        validate_curve(config.curve, config.max_rate)
        validate_fee(config.fee_bps)

    def test_reserve_state(self) -> None:
        state = StaticDataProvider().get_reserve_state(WETH)
        assert isinstance(state, ReserveState)
        assert state.cash > 0 and state.borrows > 0

    def test_unknown_market(self) -> None:
        with pytest.raises(KeyError):
            StaticDataProvider().get_rate_config("DOGE")

    def test_interface_conformance(self) -> None:
        assert isinstance(StaticDataProvider(), RateConfigProvider)


class TestParseRay:
    def test_float_is_fraction(self) -> None:
        assert _parse_ray(0.9) == 9 * 10**26

    def test_int_and_string_are_raw(self) -> None:
        assert _parse_ray(17) == 17
        assert _parse_ray("1267505861") == 1_267_505_861

    def test_rejects_bool(self) -> None:
        with pytest.raises(TypeError):
            _parse_ray(True)


class TestFileDataProvider:
    def test_loads_markets(self, config_file: Path) -> None:
        provider = FileDataProvider(config_file)
        assert provider.markets() == ["DAI", "LINK"]

        dai = provider.get_rate_config("DAI")
        assert dai.curve.kink == 9 * 10**26
        assert dai.curve.slope_below == 1_267_505_861
        assert dai.curve.slope_above == 19_012_587
        assert dai.curve.base == 0
        assert dai.fee_bps == 1000
        assert dai.max_rate == MAX_RATE
        assert provider.get_reserve_state("DAI") == ReserveState(cash=400, borrows=1600)

    def test_defaults(self, config_file: Path) -> None:
        provider = FileDataProvider(config_file)
        link = provider.get_rate_config("LINK")
        assert link.curve.base == 0
        assert link.curve.slope_above == 3 * RAY
        assert link.fee_bps == 0
        assert provider.get_reserve_state("LINK") == ReserveState(cash=0, borrows=0)

    def test_invalid_curve(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(
            json.dumps({"X": {"curve": {"kink": 1.5, "slope_below": 0, "slope_above": 0}}})
        )
        with pytest.raises(OutOfRangeError):
            FileDataProvider(path)

    def test_max_rate_above_ceiling(self, tmp_path: Path) -> None:
        path = tmp_path / "ceiling.json"
        path.write_text(
            json.dumps(
                {
                    "X": {
                        "curve": {
                            "kink": 0.5,
                            "slope_below": 0,
                            "slope_above": 0,
                            "base": str(10**40),
                        },
                        "max_rate": str(10**41),
                    }
                }
            )
        )
        with pytest.raises(OutOfRangeError, match="max_rate"):
            FileDataProvider(path)

    def test_negative_balances(self, tmp_path: Path) -> None:
        path = tmp_path / "negative.json"
        path.write_text(
            json.dumps(
                {
                    "X": {
                        "curve": {"kink": 0.5, "slope_below": 0, "slope_above": 0},
                        "state": {"cash": -400, "borrows": 1600},
                    }
                }
            )
        )
        with pytest.raises(OutOfRangeError, match="non-negative"):
            FileDataProvider(path)

    def test_top_level_must_be_object(self, tmp_path: Path) -> None:
        path = tmp_path / "list.json"
        path.write_text("[]")
        with pytest.raises(TypeError):
            FileDataProvider(path)


class TestCreateProvider:
    def test_default_is_static(self) -> None:
        assert isinstance(create_provider(), StaticDataProvider)

    def test_explicit_path(self, config_file: Path) -> None:
        provider = create_provider(str(config_file))
        assert isinstance(provider, FileDataProvider)

    def test_env_path(self, config_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RATE_CONFIG_PATH", str(config_file))
        provider = create_provider()
        assert isinstance(provider, FileDataProvider)
        assert provider.markets() == ["DAI", "LINK"]

    def test_missing_file_falls_back(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="src.data.provider_factory"):
            provider = create_provider(str(tmp_path / "missing.json"))
        assert isinstance(provider, StaticDataProvider)
        assert "not found" in caplog.text

    @pytest.mark.parametrize(
        "content",
        [
            "{not json",
            "[]",
            json.dumps({"X": {"curve": {"kink": 1.5, "slope_below": 0, "slope_above": 0}}}),
            json.dumps({"X": {"curve": {"kink": 0.5}}}),
            json.dumps({"X": {"curve": {"kink": 0.5, "slope_below": 0, "slope_above": 0}, "fee_bps": 20000}}),
            json.dumps({"X": {"curve": {"kink": 0.5, "slope_below": 0, "slope_above": 0}, "state": {"cash": -1}}}),
        ],
    )
    def test_invalid_file_falls_back(
        self, tmp_path: Path, content: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        path = tmp_path / "rates.json"
        path.write_text(content)
        with caplog.at_level(logging.WARNING, logger="src.data.provider_factory"):
            provider = create_provider(str(path))
        assert isinstance(provider, StaticDataProvider)
        assert "Invalid rate config" in caplog.text
