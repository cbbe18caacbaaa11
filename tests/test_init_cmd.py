"""
Tests for InitCommand — Taskfile bootstrap from package.json
"""

import json
import os
from unittest.mock import patch

import pytest

from fcli.commands.init_cmd import TASKFILE_CONTENT, InitCommand
from fcli.errors import CommandError


@pytest.fixture
def cli(flow_factory):
    return flow_factory.create_cli()


@pytest.fixture
def command(cli):
    return InitCommand(cli)


def write_package(project_dir, data):
    path = project_dir / "package.json"
    if isinstance(data, str):
        path.write_text(data, encoding="utf-8")
    else:
        path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestInitSuccess:
    """Taskfile creation."""

    def test_creates_taskfile(self, flow_factory, cli, command):
        write_package(flow_factory.project_dir, {"scripts": {"dev": "bun --hot index.ts"}})

        command.run([])

        taskfile = flow_factory.project_dir / "Taskfile.yml"
        assert taskfile.read_text(encoding="utf-8") == (
            'version: "3"\n'
            "\n"
            "tasks:\n"
            "  dev:\n"
            "    cmds:\n"
            "      - bun dev\n"
        )
        assert flow_factory.out(cli) == "Created Taskfile.yml with dev task running bun dev.\n"

    def test_content_constant(self):
        assert TASKFILE_CONTENT.endswith("      - bun dev\n")

    def test_no_temp_files_left(self, flow_factory, command):
        write_package(flow_factory.project_dir, {"scripts": {"dev": "vite"}})

        command.run([])

        names = sorted(path.name for path in flow_factory.project_dir.iterdir())
        assert names == ["Taskfile.yml", "package.json"]

    def test_dispatch_through_cli(self, flow_factory, cli):
        write_package(flow_factory.project_dir, {"scripts": {"dev": "vite"}})
        assert cli.dispatch(["init"]) == 0
        assert (flow_factory.project_dir / "Taskfile.yml").exists()


class TestInitFailures:
    """Every refusal leaves the project untouched."""

    def taskfile(self, flow_factory):
        return flow_factory.project_dir / "Taskfile.yml"

    def test_missing_package_json(self, flow_factory, command):
        with pytest.raises(CommandError, match="package.json not found in the current directory."):
            command.run([])
        assert not self.taskfile(flow_factory).exists()

    def test_invalid_json(self, flow_factory, command):
        write_package(flow_factory.project_dir, "{not json")

        with pytest.raises(CommandError) as exc_info:
            command.run([])

        assert str(exc_info.value).startswith("package.json is not valid JSON: ")
        assert not self.taskfile(flow_factory).exists()

    def test_unreadable_package_json(self, flow_factory, command):
        """A directory named package.json cannot be read."""
        (flow_factory.project_dir / "package.json").mkdir()

        with pytest.raises(CommandError) as exc_info:
            command.run([])

        assert str(exc_info.value).startswith("Unable to read package.json: ")

    @pytest.mark.parametrize("data", [
        {},
        {"scripts": {}},
        {"scripts": {"dev": ""}},
        {"scripts": {"dev": "   "}},
        {"scripts": {"dev": 42}},
        {"scripts": ["dev"]},
        ["scripts"],
    ])
    def test_no_dev_script(self, flow_factory, command, data):
        write_package(flow_factory.project_dir, data)

        with pytest.raises(CommandError) as exc_info:
            command.run([])

        assert str(exc_info.value) == "No dev script found in package.json."
        assert not self.taskfile(flow_factory).exists()

    def test_existing_taskfile_untouched(self, flow_factory, command):
        write_package(flow_factory.project_dir, {"scripts": {"dev": "vite"}})
        self.taskfile(flow_factory).write_text("custom: true\n")

        with pytest.raises(CommandError) as exc_info:
            command.run([])

        assert str(exc_info.value) == "Taskfile.yml already exists. Aborting to avoid overwriting."
        assert self.taskfile(flow_factory).read_text() == "custom: true\n"

    def test_rejects_arguments(self, flow_factory, command):
        write_package(flow_factory.project_dir, {"scripts": {"dev": "vite"}})

        with pytest.raises(CommandError, match="Unexpected arguments for init: extra"):
            command.run(["extra"])

        assert not self.taskfile(flow_factory).exists()

    def test_write_failure_cleans_up(self, flow_factory, command):
        """A failed link reports the error and removes the temp file."""
        write_package(flow_factory.project_dir, {"scripts": {"dev": "vite"}})

        with patch("fcli.commands.init_cmd.os.link", side_effect=OSError("disk full")):
            with pytest.raises(CommandError, match="Failed to write Taskfile.yml: disk full"):
                command.run([])

        names = sorted(path.name for path in flow_factory.project_dir.iterdir())
        assert names == ["package.json"]

    def test_failure_exit_code(self, flow_factory, cli):
        assert cli.dispatch(["init"]) == 1
        assert flow_factory.err(cli) == "package.json not found in the current directory.\n"

    def test_taskfile_created_during_init_is_kept(self, flow_factory, command):
        """A Taskfile that appears after the existence check is not replaced."""
        taskfile = self.taskfile(flow_factory)
        taskfile.write_text("custom: true\n")

        with pytest.raises(CommandError) as exc_info:
            command._write_exclusive(taskfile, TASKFILE_CONTENT)

        assert str(exc_info.value) == "Taskfile.yml already exists. Aborting to avoid overwriting."
        assert taskfile.read_text() == "custom: true\n"
        assert [path.name for path in flow_factory.project_dir.iterdir()] == ["Taskfile.yml"]

    def test_race_through_run(self, flow_factory, command):
        """Same guarantee when the file shows up between run()'s check and the write."""
        write_package(flow_factory.project_dir, {"scripts": {"dev": "vite"}})
        taskfile = self.taskfile(flow_factory)
        real_link = os.link

        def link_after_competitor(src, dst):
            taskfile.write_text("custom: true\n")
            real_link(src, dst)

        with patch("fcli.commands.init_cmd.os.link", side_effect=link_after_competitor):
            with pytest.raises(CommandError, match="Taskfile.yml already exists"):
                command.run([])

        assert taskfile.read_text() == "custom: true\n"
        names = sorted(path.name for path in flow_factory.project_dir.iterdir())
        assert names == ["Taskfile.yml", "package.json"]
