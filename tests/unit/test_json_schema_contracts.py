"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов (amount только как десятичная строка)
- Детекция нарушений constraints (pattern/enum/additionalProperties)
"""

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    CurveConfigValidator,
    CurveErrorValidator,
    CurveSnapshotValidator,
    MintResultValidator,
    SchemaLoader,
    validate_curve_config,
    validate_curve_error,
    validate_curve_snapshot,
    validate_mint_result,
)


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_curve_config():
    """Валидный curve_config для тестирования."""
    return {
        "total_supply": "1000000000",
        "sell_amount": "800000000",
        "vt": "200000000",
        "mc_target_sats": "1000000000",
    }


@pytest.fixture
def valid_curve_snapshot():
    """Валидный curve_snapshot для тестирования."""
    return {"step": "0", "x": "40000000", "y": "1000000000"}


@pytest.fixture
def valid_mint_result():
    """Валидный mint_result для тестирования."""
    return {"new_step": "24390244", "asset_out": "24390244"}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    @pytest.mark.parametrize(
        "name", ["curve_config", "curve_snapshot", "mint_result", "curve_error"]
    )
    def test_all_schemas_load(self, name: str) -> None:
        schema = SchemaLoader().load_schema(name)
        assert schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("curve_config") is loader.load_schema("curve_config")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")


# =============================================================================
# CURVE CONFIG CONTRACT
# =============================================================================


class TestCurveConfigContract:
    """Тесты curve_config контракта"""

    def test_valid(self, valid_curve_config) -> None:
        validate_curve_config(valid_curve_config)
        assert CurveConfigValidator().is_valid(valid_curve_config)

    def test_max_width_value(self, valid_curve_config) -> None:
        valid_curve_config["total_supply"] = str(2**128 - 1)
        validate_curve_config(valid_curve_config)

    def test_zero_is_schema_valid(self, valid_curve_config) -> None:
        """Ноль отвергает построение кривой, а не контракт"""
        valid_curve_config["vt"] = "0"
        validate_curve_config(valid_curve_config)

    def test_missing_required(self, valid_curve_config) -> None:
        del valid_curve_config["vt"]
        with pytest.raises(ValidationError):
            validate_curve_config(valid_curve_config)

    def test_number_instead_of_string(self, valid_curve_config) -> None:
        valid_curve_config["vt"] = 200000000
        with pytest.raises(ValidationError):
            validate_curve_config(valid_curve_config)

    @pytest.mark.parametrize("bad", ["-1", "01", "1.5", "1e9", "", " 1", "0x10"])
    def test_non_canonical_decimal(self, valid_curve_config, bad: str) -> None:
        valid_curve_config["sell_amount"] = bad
        with pytest.raises(ValidationError):
            validate_curve_config(valid_curve_config)

    def test_additional_properties(self, valid_curve_config) -> None:
        valid_curve_config["fee_bps"] = "30"
        with pytest.raises(ValidationError):
            validate_curve_config(valid_curve_config)

    def test_iter_errors_reports_all(self) -> None:
        errors = list(CurveConfigValidator().iter_errors({"vt": 1}))
        # missing-required + тип vt
        assert len(errors) >= 2


# =============================================================================
# RESULT CONTRACTS
# =============================================================================


class TestResultContracts:
    """Тесты curve_snapshot / mint_result / curve_error"""

    def test_snapshot_valid(self, valid_curve_snapshot) -> None:
        validate_curve_snapshot(valid_curve_snapshot)
        assert CurveSnapshotValidator().is_valid(valid_curve_snapshot)

    def test_snapshot_missing_y(self, valid_curve_snapshot) -> None:
        del valid_curve_snapshot["y"]
        assert not CurveSnapshotValidator().is_valid(valid_curve_snapshot)

    def test_mint_result_valid(self, valid_mint_result) -> None:
        validate_mint_result(valid_mint_result)
        assert MintResultValidator().is_valid(valid_mint_result)

    def test_mint_result_wrong_type(self, valid_mint_result) -> None:
        valid_mint_result["asset_out"] = 24390244
        with pytest.raises(ValidationError):
            validate_mint_result(valid_mint_result)

    @pytest.mark.parametrize(
        "kind", ["InvalidConfig", "OutOfRange", "ZeroInput", "ExceedsPool"]
    )
    def test_error_kinds(self, kind: str) -> None:
        validate_curve_error({"kind": kind, "message": "x"})
        validate_curve_error({"kind": kind})

    def test_unknown_error_kind(self) -> None:
        assert not CurveErrorValidator().is_valid({"kind": "Overflow"})
