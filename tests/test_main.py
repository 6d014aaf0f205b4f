"""
Application and command line tests.

The backend client is replaced with a mock; everything else runs for real.
"""

import json
from unittest.mock import patch

import pytest

from src.weather_profiles.main import WeatherProfilesApp, main


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    for name in ("CONFIG_FILE", "API_BASE_URL", "DISPLAY_TIMEZONE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"logging": {"file": ""}}), encoding="utf-8")
    return str(path)


@pytest.fixture
def api(sample_data):
    with patch("src.weather_profiles.main.WeatherProfilesAPI") as api_class:
        client = api_class.return_value
        client.get_profiles.return_value = sample_data["profiles"]
        client.get_profile_data.return_value = sample_data["telemetry"]
        yield client


class TestWeatherProfilesApp:
    """Test cases for WeatherProfilesApp."""

    def test_requires_initialization(self, config_file):
        app = WeatherProfilesApp(config_file)
        with pytest.raises(RuntimeError):
            app.list_profiles()

    def test_list_profiles(self, config_file, api):
        app = WeatherProfilesApp(config_file)
        app.initialize_components()

        profiles = app.list_profiles()

        assert [p.display_name for p in profiles] == ["Kandy", "Galle Fort"]

    def test_select_looks_up_name(self, config_file, api):
        app = WeatherProfilesApp(config_file)
        app.initialize_components()

        view = app.select("p2")

        api.get_profile_data.assert_called_once_with("p2")
        assert view.title == "Time-Series Data - Galle Fort"
        assert view.has_data
        assert len(view.table_rows) == 6

    def test_close(self, config_file, api):
        app = WeatherProfilesApp(config_file)
        app.initialize_components()
        app.close()
        api.close.assert_called_once()


class TestCommandLine:
    """Test cases for the command line entry point."""

    def test_profiles_command(self, config_file, api, capsys):
        main(["--config", config_file, "profiles"])

        out = capsys.readouterr().out.splitlines()
        assert out == ["p1\tKandy\t7.2906, 80.6337", "p2\tGalle Fort\t6.0269, 80.2170"]

    def test_show_command(self, config_file, api, capsys):
        main(["--config", config_file, "show", "p1", "--name", "Kandy"])

        data = json.loads(capsys.readouterr().out)
        assert data["title"] == "Time-Series Data - Kandy"
        assert len(data["charts"]["temperature"]) == 4
        api.get_profiles.assert_not_called()

    def test_missing_config_exits(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--config", str(tmp_path / "absent.json"), "profiles"])

        assert exc.value.code == 1
        assert "Invalid configuration" in capsys.readouterr().out
