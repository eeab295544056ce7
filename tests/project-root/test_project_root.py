"""Tests for resolve_base_path: finds the git working tree root."""

import pytest
from git import Repo

from repokit.project_root import resolve_base_path

pytestmark = pytest.mark.integration


class TestResolveBasePath:

    def test_returns_working_tree_root_from_subdirectory(self, tmp_path):
        Repo.init(tmp_path)
        subdir = tmp_path / "src" / "app"
        subdir.mkdir(parents=True)

        assert resolve_base_path(subdir).resolve() == tmp_path.resolve()

    def test_falls_back_to_start_outside_repository(self, tmp_path, monkeypatch):
        monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path.parent))

        assert resolve_base_path(tmp_path) == tmp_path

    def test_falls_back_for_missing_directory(self, tmp_path):
        missing = tmp_path / "missing"

        assert resolve_base_path(missing) == missing

    def test_defaults_to_current_directory(self, tmp_path, monkeypatch):
        monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path.parent))
        monkeypatch.chdir(tmp_path)

        assert resolve_base_path().resolve() == tmp_path.resolve()
