"""Tests for FleetSettings — unified settings with TOML source."""

from __future__ import annotations

from pathlib import Path

import click
import pytest
from pydantic import ValidationError

from fleetctl.config.models import DEFAULT_DB_PATH
from fleetctl.config.settings import FleetSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("FLEETCTL_CONFIG", "FLEETCTL_DB_PATH", "FLEETCTL_DATABASE__PATH"):
        monkeypatch.delenv(var, raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = FleetSettings.from_cli(project_root=tmp_path)
        assert settings.project_root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.database.echo is False
        assert settings.database_path == tmp_path / DEFAULT_DB_PATH

    def test_frozen(self, tmp_path: Path) -> None:
        settings = FleetSettings.from_cli(project_root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_database_section(self, tmp_path: Path) -> None:
        (tmp_path / "fleetctl.toml").write_text('[database]\npath = "var/fleets.db"\necho = true\n')
        settings = FleetSettings.from_cli(project_root=tmp_path)
        assert settings.database.echo is True
        assert settings.database_path == tmp_path / "var" / "fleets.db"

    def test_root_follows_discovered_config(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "fleetctl.toml").write_text('[database]\npath = "fleets.db"\n')
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        settings = FleetSettings.from_cli()
        assert settings.project_root == tmp_path
        assert settings.database_path == tmp_path / "fleets.db"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[database]\npath = "/srv/fleet.db"\n')
        settings = FleetSettings.from_cli(config_path=str(custom), project_root=tmp_path)
        assert settings.config_path == custom
        assert settings.database_path == Path("/srv/fleet.db")

    def test_invalid_section_values(self, tmp_path: Path) -> None:
        (tmp_path / "fleetctl.toml").write_text("[database]\necho = [1, 2]\n")
        with pytest.raises(ValidationError):
            FleetSettings.from_cli(project_root=tmp_path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "fleetctl.toml").write_text("[database\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            FleetSettings.from_cli(project_root=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "fleetctl.toml").write_text('[database]\npath = "toml.db"\n')
        monkeypatch.setenv("FLEETCTL_DATABASE__PATH", "env.db")
        settings = FleetSettings.from_cli(project_root=tmp_path)
        assert settings.database_path == tmp_path / "env.db"

    def test_db_flag_overrides_everything(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "fleetctl.toml").write_text('[database]\npath = "toml.db"\n')
        monkeypatch.setenv("FLEETCTL_DATABASE__PATH", "env.db")
        settings = FleetSettings.from_cli(project_root=tmp_path, db_path=Path("flag.db"))
        assert settings.database_path == tmp_path / "flag.db"

    def test_none_flags_are_dropped(self, tmp_path: Path) -> None:
        settings = FleetSettings.from_cli(project_root=tmp_path, db_path=None, quiet=True)
        assert settings.db_path is None
        assert settings.quiet is True
