"""
Тесты для Curve Model: построение и функция резервов

Проверяет:
1. Вывод y0, x0, k из целевой FDV
2. Отказ InvalidConfig на нулях и переполнениях
3. Y(step), X(Y), snapshot
4. Инварианты x0 * y0 == k и X * Y <= k
"""

import pytest

from src.core.curve import Curve, build_curve
from src.core.domain import CurveConfig
from src.core.errors import InvalidConfig, OutOfRange
from src.core.math import AMOUNT_MAX


@pytest.fixture
def config() -> CurveConfig:
    """Базовая конфигурация: 1e9 supply, 80% через кривую, FDV 1e9 sats."""
    return CurveConfig(
        total_supply=1_000_000_000,
        sell_amount=800_000_000,
        vt=200_000_000,
        mc_target_sats=1_000_000_000,
    )


@pytest.fixture
def curve(config: CurveConfig) -> Curve:
    return Curve.from_config(config)


# =============================================================================
# ПОСТРОЕНИЕ
# =============================================================================


class TestCurveConstruction:
    """Тесты Curve.from_config"""

    def test_derived_invariants(self, curve: Curve) -> None:
        """y0 = vt + sell, x0 = mc * vt^2 / (y0 * supply), k = x0 * y0"""
        assert curve.y0 == 1_000_000_000
        # 1e9 * 4e16 / (1e9 * 1e9) = 4e7
        assert curve.x0 == 40_000_000
        assert curve.k == 40_000_000 * 1_000_000_000

    def test_config_copied(self, curve: Curve) -> None:
        assert curve.total_supply == 1_000_000_000
        assert curve.sell_amount == 800_000_000
        assert curve.vt == 200_000_000
        assert curve.max_step() == 800_000_000

    def test_build_curve_equivalent(self, config: CurveConfig, curve: Curve) -> None:
        assert build_curve(config) == curve

    def test_curve_immutable(self, curve: Curve) -> None:
        with pytest.raises(AttributeError):
            curve.k = 1  # type: ignore

    @pytest.mark.parametrize(
        "field", ["total_supply", "sell_amount", "vt", "mc_target_sats"]
    )
    def test_zero_field_is_invalid_config(self, config: CurveConfig, field: str) -> None:
        cfg = config.model_copy(update={field: 0})
        with pytest.raises(InvalidConfig):
            Curve.from_config(cfg)

    def test_y0_overflow(self) -> None:
        """vt + sell_amount > 2**128 - 1"""
        cfg = CurveConfig(
            total_supply=1, sell_amount=1, vt=AMOUNT_MAX, mc_target_sats=1
        )
        with pytest.raises(InvalidConfig):
            Curve.from_config(cfg)

    def test_x0_rounds_to_zero(self) -> None:
        cfg = CurveConfig(
            total_supply=1_000_000_000, sell_amount=800_000_000, vt=1, mc_target_sats=1
        )
        with pytest.raises(InvalidConfig):
            Curve.from_config(cfg)

    def test_k_overflow(self) -> None:
        """x0 помещается в 128 бит, но x0 * y0 — нет"""
        # x0 = floor(2**10 * 2**120 / (2**60 + 1)) ~ 2**70, y0 ~ 2**60
        cfg = CurveConfig(
            total_supply=1, sell_amount=1, vt=2**60, mc_target_sats=2**10
        )
        with pytest.raises(InvalidConfig):
            Curve.from_config(cfg)

    def test_x0_overflow(self) -> None:
        cfg = CurveConfig(
            total_supply=1, sell_amount=1, vt=2**64, mc_target_sats=2**100
        )
        with pytest.raises(InvalidConfig):
            Curve.from_config(cfg)

    def test_wide_intermediate_products(self) -> None:
        """mc * vt^2 далеко за 128 битами, но результат точный"""
        cfg = CurveConfig(
            total_supply=10**18,
            sell_amount=8 * 10**17,
            vt=2 * 10**17,
            mc_target_sats=10**15,
        )
        curve = Curve.from_config(cfg)
        # 1e15 * 4e34 / (1e18 * 1e18) = 4e13
        assert curve.x0 == 4 * 10**13
        assert curve.x0 * curve.y0 == curve.k
        assert curve.k <= AMOUNT_MAX


# =============================================================================
# ФУНКЦИЯ РЕЗЕРВОВ
# =============================================================================


class TestReserveFunction:
    """Тесты y_at, x_from_y, snapshot"""

    def test_y_at_bounds(self, curve: Curve) -> None:
        assert curve.y_at(0) == curve.y0
        assert curve.y_at(curve.sell_amount) == curve.vt

    def test_y_at_out_of_range(self, curve: Curve) -> None:
        with pytest.raises(OutOfRange):
            curve.y_at(curve.sell_amount + 1)

    def test_y_at_rejects_negative_step(self, curve: Curve) -> None:
        with pytest.raises(ValueError):
            curve.y_at(-1)

    def test_y_non_increasing(self, curve: Curve) -> None:
        steps = [0, 1, 1_000, 24_390_244, 400_000_000, 799_999_999, 800_000_000]
        ys = [curve.y_at(s) for s in steps]
        assert ys == sorted(ys, reverse=True)

    def test_x_from_y_floor(self, curve: Curve) -> None:
        assert curve.x_from_y(curve.y0) == curve.x0
        assert curve.x_from_y(curve.vt) == 200_000_000
        # 4e16 / 975_609_756 = 41_000_000.0001...
        assert curve.x_from_y(975_609_756) == 41_000_000

    def test_snapshot(self, curve: Curve) -> None:
        snap = curve.snapshot(0)
        assert (snap.step, snap.x, snap.y) == (0, 40_000_000, 1_000_000_000)

        end = curve.snapshot(curve.sell_amount)
        assert (end.x, end.y) == (200_000_000, 200_000_000)

    def test_snapshot_out_of_range(self, curve: Curve) -> None:
        with pytest.raises(OutOfRange):
            curve.snapshot(curve.sell_amount + 1)

    def test_product_never_exceeds_k(self, curve: Curve) -> None:
        """floor(k / Y) * Y <= k на любом достижимом step"""
        for step in [0, 7, 123_456_789, 333_333_333, 799_999_999, 800_000_000]:
            snap = curve.snapshot(step)
            assert snap.x * snap.y <= curve.k
            assert curve.k - snap.x * snap.y < snap.y
