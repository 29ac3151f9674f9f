"""Unit tests for config file resolution."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from tsconfig.core.errors import ConfigNotFoundError, TsconfigError
from tsconfig.core.resolver import CONFIG_FILENAME, find, find_steps, resolve
from tsconfig.core.runtime import StatRequest


class TestFind:
    def test_in_start_directory(self, tmp_path: Path, marker: str):
        config = tmp_path / marker
        config.write_text("{}")
        assert find(tmp_path, config_filename=marker) == config

    def test_in_ancestor(self, tmp_path: Path, nested_dir: Path, marker: str):
        config = tmp_path / "a" / marker
        config.write_text("{}")
        assert find(nested_dir, config_filename=marker) == config

    def test_nearest_wins(self, tmp_path: Path, nested_dir: Path, marker: str):
        (tmp_path / marker).write_text("{}")
        closer = nested_dir.parent / marker
        closer.write_text("{}")
        assert find(nested_dir, config_filename=marker) == closer

    def test_directory_named_like_marker_is_skipped(self, tmp_path: Path, nested_dir: Path, marker: str):
        (nested_dir / marker).mkdir()
        config = tmp_path / marker
        config.write_text("{}")
        assert find(nested_dir, config_filename=marker) == config

    def test_absent_returns_none(self, nested_dir: Path, marker: str):
        assert find(nested_dir, config_filename=marker) is None

    def test_ascent_stops_at_root(self, nested_dir: Path, marker: str):
        steps = find_steps(nested_dir, config_filename=marker)
        probed = []
        result = None
        try:
            while True:
                request = steps.send(result)
                assert isinstance(request, StatRequest)
                probed.append(request.path)
                result = request.perform()
        except StopIteration as stop:
            assert stop.value is None

        assert len(probed) == len(nested_dir.parts)
        assert probed[0] == nested_dir / marker
        assert probed[-1] == Path(nested_dir.anchor) / marker

    def test_relative_directory(self, tmp_path: Path, nested_dir: Path, marker: str, monkeypatch):
        config = tmp_path / marker
        config.write_text("{}")
        monkeypatch.chdir(nested_dir)
        assert find(".", config_filename=marker) == config

    def test_default_marker_name(self):
        assert CONFIG_FILENAME == "tsconfig.json"


class TestResolve:
    def test_without_filename_searches_upwards(self, tmp_path: Path, nested_dir: Path, marker: str):
        config = tmp_path / marker
        config.write_text("{}")
        assert resolve(nested_dir, config_filename=marker) == config
        assert resolve(nested_dir, "", config_filename=marker) == config

    def test_without_filename_absent(self, nested_dir: Path, marker: str):
        assert resolve(nested_dir, config_filename=marker) is None

    def test_explicit_file(self, tmp_path: Path):
        config = tmp_path / "tsconfig.build.json"
        config.write_text("{}")
        assert resolve(tmp_path, "tsconfig.build.json") == config

    def test_explicit_file_relative_to_cwd(self, tmp_path: Path, nested_dir: Path):
        config = tmp_path / "a" / "base.json"
        config.write_text("{}")
        assert resolve(nested_dir, "../../base.json") == config

    def test_explicit_absolute_file(self, tmp_path: Path, nested_dir: Path):
        config = tmp_path / "abs.json"
        config.write_text("{}")
        assert resolve(nested_dir, str(config)) == config

    def test_explicit_directory(self, tmp_path: Path):
        project = tmp_path / "project"
        project.mkdir()
        (project / CONFIG_FILENAME).write_text("{}")
        assert resolve(tmp_path, "project") == project / CONFIG_FILENAME

    def test_explicit_directory_custom_marker(self, tmp_path: Path, marker: str):
        (tmp_path / marker).write_text("{}")
        assert resolve(tmp_path, ".", config_filename=marker) == tmp_path / marker

    def test_explicit_directory_without_marker(self, tmp_path: Path):
        (tmp_path / "somedir").mkdir()
        with pytest.raises(ConfigNotFoundError) as excinfo:
            resolve(tmp_path, "somedir")
        assert excinfo.value.filename == "somedir"
        assert str(excinfo.value) == (
            "Cannot find a tsconfig.json file at the specified directory: somedir"
        )

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigNotFoundError) as excinfo:
            resolve(tmp_path, "missing.json")
        assert excinfo.value.filename == "missing.json"
        assert str(excinfo.value) == "The specified path does not exist: missing.json"

    def test_not_found_is_file_not_found_error(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            resolve(tmp_path, "missing.json")
        with pytest.raises(TsconfigError):
            resolve(tmp_path, "missing.json")

    def test_path_is_not_symlink_resolved(self, tmp_path: Path):
        real = tmp_path / "real.json"
        real.write_text("{}")
        link = tmp_path / "link.json"
        try:
            link.symlink_to(real)
        except (OSError, NotImplementedError):
            pytest.skip("symlinks unavailable")
        assert resolve(tmp_path, "link.json") == link

    @pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="requires mkfifo")
    def test_fifo_counts_as_file(self, tmp_path: Path):
        fifo = tmp_path / "pipe.json"
        os.mkfifo(fifo)
        assert resolve(tmp_path, "pipe.json") == fifo
