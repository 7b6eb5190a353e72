#!/usr/bin/env python3
import argparse
import json
from pathlib import Path

import nbtlib
import pytest
from nbtlib import Compound, Int, String

import litemeta.core.config as cfg
from litemeta.cli import show
from litemeta.cli.__main__ import main
from litemeta.core.app_context import build_context


# --- Helpers --- #

def _write_schematic(path: Path, name: str = "Hall") -> Path:
    tree = Compound({
        "Version": Int(6),
        "Metadata": Compound({"Name": String(name)}),
        "Regions": Compound({"Main": Compound()}),
    })
    nbtlib.File(tree, gzipped=True).save(path)
    return path


def _ctx(**config):
    base = {"extensions": [".litematic"], "output_format": "text", "logging": {"level": "WARNING"}}
    base.update(config)
    return build_context(config=base, configure_logging=False)


def _args(files, recursive=False, fmt=None):
    return argparse.Namespace(files=[str(f) for f in files], recursive=recursive, format=fmt)


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(cfg, "GLOBAL_CONFIG_PATH", tmp_path / "missing.json", raising=False)
    monkeypatch.chdir(tmp_path)
    for var in ("LITEMETA_EXTENSIONS", "LITEMETA_OUTPUT_FORMAT", "LITEMETA_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


# --- show --- #

def test_show_single_file_text(tmp_path: Path, capsys):
    path = _write_schematic(tmp_path / "hall.litematic")
    assert show.show(_args([path]), _ctx()) == 0
    out = capsys.readouterr().out
    assert out.startswith(str(path))
    assert "  Name:            Hall" in out
    assert "Read " not in out


def test_show_json_format(tmp_path: Path, capsys):
    path = _write_schematic(tmp_path / "hall.litematic")
    assert show.show(_args([path], fmt="json"), _ctx()) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["name"] == "Hall"
    assert data["region_count"] == 1


def test_show_uses_configured_format(tmp_path: Path, capsys):
    path = _write_schematic(tmp_path / "hall.litematic")
    assert show.show(_args([path]), _ctx(output_format="json")) == 0
    assert json.loads(capsys.readouterr().out)["version"] == 6


def test_show_rejects_unknown_configured_format(tmp_path: Path, capsys):
    path = _write_schematic(tmp_path / "hall.litematic")
    assert show.show(_args([path]), _ctx(output_format="xml")) == 1
    assert "Unsupported output format 'xml'" in capsys.readouterr().out


def test_show_directory_with_failure(tmp_path: Path, capsys):
    _write_schematic(tmp_path / "a.litematic", name="A")
    (tmp_path / "b.litematic").write_bytes(b"not gzip")

    assert show.show(_args([tmp_path]), _ctx()) == 1
    out = capsys.readouterr().out
    assert "  Name:            A" in out
    assert "b.litematic: Failed to read metadata" in out
    assert "  - IoFailure: " in out
    assert "Read 1/2 schematic(s)." in out


def test_show_no_files(tmp_path: Path, capsys):
    assert show.show(_args([tmp_path]), _ctx()) == 1
    assert "No schematic files found." in capsys.readouterr().out


# --- main --- #

def test_main_show(tmp_path: Path, capsys, isolated_config):
    path = _write_schematic(tmp_path / "hall.litematic")
    with pytest.raises(SystemExit) as exc:
        main(["show", "--format", "yaml", str(path)])
    assert exc.value.code == 0
    assert "name: Hall" in capsys.readouterr().out


def test_main_config_show(capsys, isolated_config):
    with pytest.raises(SystemExit) as exc:
        main(["config", "show"])
    assert exc.value.code == 0
    assert json.loads(capsys.readouterr().out)["extensions"] == [".litematic"]


def test_main_without_command_prints_help(capsys, isolated_config):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 1
    assert "usage: litemeta" in capsys.readouterr().out
