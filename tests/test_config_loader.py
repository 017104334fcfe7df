"""Tests for runtime configuration loader."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from common.config import error_mode_from_policy, load_runtime_config
from common.errors import AnalyzerError, ErrorCode

DEFAULTS_PATH = Path(__file__).resolve().parents[1] / "config" / "defaults.json"


def test_load_plays_profile_defaults() -> None:
    config = load_runtime_config("plays", config_path=DEFAULTS_PATH)
    assert config.profile.folder == "plays"
    assert config.profile.extension == ".txt"
    assert config.global_settings.encoding == "utf-8"
    assert config.global_settings.error_policy == "fail-fast"


def test_error_mode_resolution() -> None:
    assert error_mode_from_policy("fail-fast") == "strict"
    assert error_mode_from_policy("strict") == "strict"
    assert error_mode_from_policy("replace") == "replace"


def test_profile_overrides_applied(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, _config_payload())
    config = load_runtime_config(
        "plays",
        config_path=config_path,
        overrides={"global": {"error_policy": "replace"}, "profile": {"extension": ".md"}},
    )
    assert config.global_settings.error_policy == "replace"
    assert config.profile.extension == ".md"


def test_missing_profile_raises_analyzer_error(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, _config_payload())
    with pytest.raises(AnalyzerError) as exc:
        load_runtime_config("missing", config_path=config_path)
    assert exc.value.code == ErrorCode.CONFIG_ERROR
    assert exc.value.context["available"] == ["plays"]


def test_invalid_error_policy_rejected(tmp_path: Path) -> None:
    payload = _config_payload()
    payload["global"]["error_policy"] = "panic"
    config_path = _write_config(tmp_path, payload)
    with pytest.raises(AnalyzerError) as exc:
        load_runtime_config("plays", config_path=config_path)
    assert "error_policy" in str(exc.value)


def test_blank_folder_rejected(tmp_path: Path) -> None:
    payload = _config_payload()
    payload["profiles"]["plays"]["folder"] = " "
    config_path = _write_config(tmp_path, payload)
    with pytest.raises(AnalyzerError) as exc:
        load_runtime_config("plays", config_path=config_path)
    assert exc.value.code == ErrorCode.CONFIG_ERROR


def test_extension_without_dot_rejected(tmp_path: Path) -> None:
    payload = _config_payload()
    payload["profiles"]["plays"]["extension"] = "txt"
    config_path = _write_config(tmp_path, payload)
    with pytest.raises(AnalyzerError) as exc:
        load_runtime_config("plays", config_path=config_path)
    assert "extension" in str(exc.value)


def test_invalid_json_rejected(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text("{not json", encoding="utf-8")
    with pytest.raises(AnalyzerError) as exc:
        load_runtime_config("plays", config_path=config_path)
    assert exc.value.code == ErrorCode.CONFIG_ERROR


def test_missing_file_rejected(tmp_path: Path) -> None:
    with pytest.raises(AnalyzerError) as exc:
        load_runtime_config("plays", config_path=tmp_path / "absent.json")
    assert "not found" in str(exc.value)


def _write_config(tmp_path: Path, payload: dict) -> Path:
    path = tmp_path / "config.json"
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return path


def _config_payload() -> dict:
    return {
        "version": 1,
        "global": {"encoding": "utf-8", "error_policy": "fail-fast"},
        "profiles": {"plays": {"description": "tmp", "folder": "plays", "extension": ".txt"}},
    }
