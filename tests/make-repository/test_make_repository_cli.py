"""Tests for the make-repository Click command."""

import click
import pytest
from click.testing import CliRunner
from git import Repo

from repokit.cli import main
from repokit.make_repository.cli import register_commands

pytestmark = pytest.mark.integration


def _invoke(args, **kwargs):
    return CliRunner().invoke(main, ["make-repository", *args], **kwargs)


class TestCreatesRepository:

    def test_reports_created_class(self, tmp_path):
        result = _invoke(["userProfile", "--base-path", str(tmp_path)])

        assert result.exit_code == 0
        assert "Repository created successfully." in result.output
        assert "Created Repository : UserProfile" in result.output
        assert (tmp_path / "app" / "repositories" / "user_profile.py").is_file()

    def test_model_option(self, tmp_path):
        result = _invoke(["widget", "--model", "app.domain.Widget", "--base-path", str(tmp_path)])

        assert result.exit_code == 0
        source = (tmp_path / "app" / "repositories" / "widget.py").read_text()
        assert 'model_path = r"app.domain.Widget"' in source

    def test_short_model_option(self, tmp_path):
        result = _invoke(["widget", "-M", "app.domain.Widget", "--base-path", str(tmp_path)])

        assert result.exit_code == 0
        assert "# setup the model" in (tmp_path / "app" / "repositories" / "widget.py").read_text()

    def test_root_package_from_environment(self, tmp_path):
        result = _invoke(["order", "--base-path", str(tmp_path)],
                         env={"REPOKIT_ROOT_PACKAGE": "shop"})

        assert result.exit_code == 0
        assert (tmp_path / "shop" / "repositories" / "order.py").is_file()

    def test_base_path_from_environment(self, tmp_path):
        result = _invoke(["order"], env={"REPOKIT_BASE_PATH": str(tmp_path)})

        assert result.exit_code == 0
        assert (tmp_path / "app" / "repositories" / "order.py").is_file()

    def test_defaults_to_git_working_tree_root(self, tmp_path, monkeypatch):
        Repo.init(tmp_path)
        subdir = tmp_path / "docs" / "notes"
        subdir.mkdir(parents=True)
        monkeypatch.chdir(subdir)

        result = _invoke(["order"])

        assert result.exit_code == 0
        assert (tmp_path / "app" / "repositories" / "order.py").is_file()


class TestFailures:

    def test_missing_class_is_usage_error(self, tmp_path):
        result = _invoke(["--base-path", str(tmp_path)])

        assert result.exit_code == 2
        assert "Missing required argument class name" in result.output
        assert not (tmp_path / "app").exists()

    def test_existing_repository_exits_with_error(self, tmp_path):
        first = _invoke(["order", "--base-path", str(tmp_path)])
        target = tmp_path / "app" / "repositories" / "order.py"
        contents = target.read_text()

        second = _invoke(["order", "-M", "app.models.Order", "--base-path", str(tmp_path)])

        assert first.exit_code == 0
        assert second.exit_code == 1
        assert "Repository already exists!" in second.output
        assert target.read_text() == contents

    def test_unresolved_placeholder_is_reported_without_side_effects(self, tmp_path):
        result = _invoke(["order", "-M", "app.{{x}}.Model", "--base-path", str(tmp_path)])

        assert result.exit_code == 1
        assert "Unresolved placeholders" in result.output
        assert isinstance(result.exception, SystemExit)
        assert not (tmp_path / "app").exists()


class TestRegistration:

    def test_listed_in_main_help(self):
        result = CliRunner().invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "make-repository" in result.output

    def test_register_commands_on_host_group(self, tmp_path):
        @click.group()
        def host():
            """Host application CLI."""

        register_commands(host)
        result = CliRunner().invoke(host, ["make-repository", "order", "--base-path", str(tmp_path)])

        assert result.exit_code == 0
        assert (tmp_path / "app" / "repositories" / "order.py").is_file()
