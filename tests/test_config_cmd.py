"""
Tests for ConfigCommand — `f config` show/get/set
"""

import pytest
import yaml


@pytest.fixture
def cli(flow_factory):
    return flow_factory.create_cli()


class TestShow:

    def test_show(self, flow_factory, cli):
        assert cli.dispatch(["config"]) == 0
        out = flow_factory.out(cli)
        assert out.startswith("Configuration:")
        assert "Symbols: auto" in out


class TestGet:

    def test_get_value(self, flow_factory, cli):
        assert cli.dispatch(["config", "get", "log.level"]) == 0
        assert flow_factory.out(cli) == "warning\n"

    def test_get_unknown(self, flow_factory, cli):
        assert cli.dispatch(["config", "get", "nope"]) == 1
        assert flow_factory.err(cli) == "Unknown setting: nope. Valid: display.symbols, log.level\n"


class TestSet:

    def test_set_project(self, flow_factory, cli, monkeypatch):
        monkeypatch.setenv("F_SYMBOLS", "ascii")
        cli = flow_factory.create_cli()

        assert cli.dispatch(["config", "set", "log.level=Debug"]) == 0

        path = flow_factory.project_dir / ".f" / "config.yaml"
        assert yaml.safe_load(path.read_text(encoding="utf-8")) == {"log": {"level": "debug"}}
        assert flow_factory.out(cli) == "[OK] Set log.level = debug (project)\n"

    def test_set_user(self, flow_factory, cli):
        assert cli.dispatch(["config", "set", "--user", "display.symbols=unicode"]) == 0
        assert (flow_factory.user_dir / "config.yaml").exists()
        assert flow_factory.out(cli).endswith("Set display.symbols = unicode (user)\n")

    def test_set_without_equals(self, flow_factory, cli):
        assert cli.dispatch(["config", "set", "log.level"]) == 1
        assert "Use format KEY=VALUE" in flow_factory.err(cli)

    def test_set_invalid_value(self, flow_factory, cli):
        assert cli.dispatch(["config", "set", "log.level=loud"]) == 1
        assert "Unknown log level 'loud'" in flow_factory.err(cli)

    @pytest.mark.parametrize("argv", [
        ["config", "get"],
        ["config", "set"],
        ["config", "set", "--user"],
        ["config", "remove", "x"],
    ])
    def test_usage_errors(self, flow_factory, cli, argv):
        assert cli.dispatch(argv) == 1
        assert flow_factory.err(cli) == "Usage: f config [get KEY | set KEY=VALUE [--user]]\n"
