# topmark:header:start
#
#   project      : YamlBlock
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the layered configuration model (`MutableConfig` / `Config`)."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.conftest import make_config, make_mutable_config
from yamlblock.config import Config, ConfigError, MutableConfig, WriteStrategy


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults_freeze_to_default_config() -> None:
    cfg = MutableConfig.from_defaults().freeze()

    assert cfg == Config()
    assert cfg.explicit_start is False
    assert cfg.input_encoding == "utf-8"
    assert cfg.output_encoding == "utf-8"
    assert cfg.write_strategy is WriteStrategy.ATOMIC
    assert cfg.diagnostics == ()


def test_empty_draft_freezes_to_defaults() -> None:
    assert MutableConfig().freeze() == Config()


def test_from_toml_file_reads_all_sections(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "yamlblock.toml",
        "[render]\nexplicit_start = true\n\n"
        '[input]\nencoding = "latin-1"\n\n'
        '[output]\nencoding = "utf-16"\nstrategy = "inplace"\n',
    )

    draft = MutableConfig.from_toml_file(path)

    assert draft is not None
    assert draft.explicit_start is True
    assert draft.input_encoding == "latin-1"
    assert draft.output_encoding == "utf-16"
    assert draft.write_strategy == "inplace"
    assert draft.config_files == [path]
    assert draft.freeze().write_strategy is WriteStrategy.INPLACE


def test_partial_file_leaves_other_fields_unset(tmp_path: Path) -> None:
    path = _write(tmp_path / "yamlblock.toml", '[output]\nstrategy = "inplace"\n')

    draft = MutableConfig.from_toml_file(path)

    assert draft is not None
    assert draft.explicit_start is None
    assert draft.input_encoding is None


def test_pyproject_without_tool_table_is_skipped(tmp_path: Path) -> None:
    path = _write(tmp_path / "pyproject.toml", '[project]\nname = "demo"\n')

    assert MutableConfig.from_toml_file(path) is None


def test_pyproject_tool_table_is_used(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "pyproject.toml",
        '[project]\nname = "demo"\n\n[tool.yamlblock.render]\nexplicit_start = true\n',
    )

    draft = MutableConfig.from_toml_file(path)

    assert draft is not None
    assert draft.explicit_start is True


def test_unknown_keys_and_sections_are_reported(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "yamlblock.toml",
        "[render]\nexplicit_start = true\nindent = 4\n\n[colors]\nkey = 1\n",
    )

    draft = MutableConfig.from_toml_file(path)

    assert draft is not None
    assert draft.explicit_start is True
    assert "Ignoring unknown config key colors" in draft.diagnostics
    assert "Ignoring unknown config key render.indent" in draft.diagnostics


def test_wrongly_typed_values_are_reported_and_ignored(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "yamlblock.toml",
        '[render]\nexplicit_start = "yes"\n\n[output]\nstrategy = 3\n',
    )

    draft = MutableConfig.from_toml_file(path)

    assert draft is not None
    assert draft.explicit_start is None
    assert draft.write_strategy is None
    assert any("Expected boolean in render.explicit_start" in d for d in draft.diagnostics)
    assert any("Expected string in output.strategy" in d for d in draft.diagnostics)


def test_section_that_is_not_a_table_is_reported(tmp_path: Path) -> None:
    path = _write(tmp_path / "yamlblock.toml", "render = 1\n")

    draft = MutableConfig.from_toml_file(path)

    assert draft is not None
    assert any("Expected table [render]" in d for d in draft.diagnostics)


def test_unknown_strategy_fails_at_freeze() -> None:
    draft = make_mutable_config(write_strategy="sideways")

    with pytest.raises(ConfigError, match="Unknown write strategy 'sideways'"):
        draft.freeze()


def test_strategy_names_are_case_insensitive() -> None:
    assert make_config(write_strategy="INPLACE").write_strategy is WriteStrategy.INPLACE


@pytest.mark.parametrize("field", ["input_encoding", "output_encoding"])
def test_unknown_encoding_fails_at_freeze(field: str) -> None:
    with pytest.raises(ConfigError, match="encoding 'no-such-codec'"):
        make_config(**{field: "no-such-codec"})


def test_merge_with_prefers_values_set_in_other() -> None:
    base = MutableConfig(explicit_start=True, input_encoding="latin-1")
    other = MutableConfig(explicit_start=False, write_strategy="inplace")

    merged = base.merge_with(other)

    assert merged.explicit_start is False
    assert merged.input_encoding == "latin-1"
    assert merged.write_strategy == "inplace"


def test_load_merged_precedence(tmp_path: Path) -> None:
    _write(
        tmp_path / "pyproject.toml",
        '[tool.yamlblock.render]\nexplicit_start = true\n\n'
        '[tool.yamlblock.output]\nstrategy = "inplace"\n',
    )
    _write(tmp_path / "yamlblock.toml", "[render]\nexplicit_start = false\n")
    extra = _write(tmp_path / "extra.toml", '[output]\nencoding = "latin-1"\n')

    cfg = MutableConfig.load_merged(start=tmp_path, extra_config_files=[extra]).freeze()

    assert cfg.explicit_start is False  # yamlblock.toml overrides pyproject.toml
    assert cfg.write_strategy is WriteStrategy.INPLACE  # only set in pyproject.toml
    assert cfg.output_encoding == "latin-1"  # explicit file
    assert cfg.config_files == (
        tmp_path / "pyproject.toml",
        tmp_path / "yamlblock.toml",
        extra,
    )


def test_load_merged_no_config_skips_discovery(tmp_path: Path) -> None:
    _write(tmp_path / "yamlblock.toml", "[render]\nexplicit_start = true\n")
    extra = _write(tmp_path / "extra.toml", '[output]\nstrategy = "inplace"\n')

    cfg = MutableConfig.load_merged(
        start=tmp_path, extra_config_files=[extra], no_config=True
    ).freeze()

    assert cfg.explicit_start is False
    assert cfg.write_strategy is WriteStrategy.INPLACE
    assert cfg.config_files == (extra,)


def test_discover_local_config_files_order(tmp_path: Path) -> None:
    _write(tmp_path / "yamlblock.toml", "")
    _write(tmp_path / "pyproject.toml", "")

    assert MutableConfig.discover_local_config_files(tmp_path) == [
        tmp_path / "pyproject.toml",
        tmp_path / "yamlblock.toml",
    ]


def test_apply_cli_args_ignores_none() -> None:
    draft = MutableConfig(explicit_start=True, output_encoding="latin-1")

    draft.apply_cli_args(
        {
            "explicit_start": None,
            "input_encoding": "utf-16",
            "output_encoding": None,
            "write_strategy": WriteStrategy.INPLACE,
        }
    )

    assert draft.explicit_start is True
    assert draft.input_encoding == "utf-16"
    assert draft.output_encoding == "latin-1"
    assert draft.write_strategy == "inplace"


def test_thaw_freeze_round_trip() -> None:
    cfg = make_config(explicit_start=True, write_strategy="inplace")

    assert cfg.thaw().freeze() == cfg


def test_to_toml_dict_mirrors_file_schema() -> None:
    cfg = make_config(explicit_start=True)

    assert cfg.to_toml_dict() == {
        "render": {"explicit_start": True},
        "input": {"encoding": "utf-8"},
        "output": {"encoding": "utf-8", "strategy": "atomic"},
    }


def test_config_is_immutable() -> None:
    cfg = Config()

    with pytest.raises(AttributeError):
        cfg.explicit_start = True  # type: ignore[misc]
