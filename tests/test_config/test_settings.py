# tests/test_config/test_settings.py
import os
import json
import pytest
from pydantic import ValidationError
from fluidcss.config.settings import (
    FluidSettings,
    config_fileRead,
    settings_build,
)


def setup_function():
    for k in list(os.environ):
        if k.upper().startswith("FLUID_"):
            del os.environ[k]


def teardown_function():
    for k in list(os.environ):
        if k.upper().startswith("FLUID_"):
            del os.environ[k]


def test_default_settings():
    settings = FluidSettings()
    assert settings.tokensPath == "./src/assets/tokens.css"
    assert settings.minBreakpoint == 21.25
    assert settings.maxBreakpoint == 80.0
    assert settings.basePxSize == 16.0
    assert settings.precision == 4
    assert settings.beQuiet is False
    assert settings.noComplain is False


def test_env_override():
    os.environ["FLUID_TOKENSPATH"] = "/tmp/tokens.css"
    os.environ["FLUID_MINBREAKPOINT"] = "20"
    os.environ["FLUID_MAXBREAKPOINT"] = "96"
    os.environ["FLUID_BASEPXSIZE"] = "10"
    os.environ["FLUID_PRECISION"] = "3"

    settings = FluidSettings()
    assert settings.tokensPath == "/tmp/tokens.css"
    assert settings.minBreakpoint == 20
    assert settings.maxBreakpoint == 96
    assert settings.basePxSize == 10
    assert settings.precision == 3


def test_config_case_insensitive():
    os.environ["fluid_bequiet"] = "true"
    assert FluidSettings().beQuiet is True


def test_equal_breakpoints_rejected():
    with pytest.raises(ValidationError, match="must differ"):
        FluidSettings(minBreakpoint=40, maxBreakpoint=40)


@pytest.mark.parametrize("value", [0, -16])
def test_base_px_size_must_be_positive(value):
    with pytest.raises(ValidationError):
        FluidSettings(basePxSize=value)


@pytest.mark.parametrize("value", [-1, 11])
def test_precision_range(value):
    with pytest.raises(ValidationError):
        FluidSettings(precision=value)


def test_config_file_missing(tmp_path):
    assert config_fileRead(tmp_path / "config.json") == {}


def test_config_file_malformed(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert config_fileRead(path) == {}


def test_config_file_not_an_object(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert config_fileRead(path) == {}


def test_config_file_unknown_keys_dropped(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"precision": 2, "colour": "red"}), encoding="utf-8")
    assert config_fileRead(path) == {"precision": 2}


def test_build_precedence(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps({"minBreakpoint": 20, "maxBreakpoint": 96, "precision": 2}),
        encoding="utf-8",
    )
    os.environ["FLUID_BASEPXSIZE"] = "10"
    os.environ["FLUID_PRECISION"] = "6"

    settings = settings_build({"maxBreakpoint": 120, "tokensPath": None}, config_file=path)
    assert settings.minBreakpoint == 20  # config file
    assert settings.maxBreakpoint == 120  # override
    assert settings.precision == 2  # config file beats env
    assert settings.basePxSize == 10  # env
    assert settings.tokensPath == "./src/assets/tokens.css"  # None ignored


def test_build_ignores_non_setting_options(tmp_path):
    settings = settings_build(
        {"pattern": "**/*.css", "precision": 5}, config_file=tmp_path / "none.json"
    )
    assert settings.precision == 5
    assert not hasattr(settings, "pattern")


def test_build_rejects_degenerate_range(tmp_path):
    with pytest.raises(ValidationError):
        settings_build(
            {"minBreakpoint": 50, "maxBreakpoint": 50},
            config_file=tmp_path / "none.json",
        )
