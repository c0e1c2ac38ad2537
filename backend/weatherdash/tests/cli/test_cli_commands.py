from typer.testing import CliRunner

from weatherdash.cli import main as cli


def test_presets_command_lists_locations():
    runner = CliRunner()
    result = runner.invoke(cli.app, ["presets"])
    assert result.exit_code == 0
    assert "tokyo" in result.stdout
    assert "Australia/Sydney" in result.stdout


def test_dashboard_command_prints_aligned_table(monkeypatch, tokyo_provider):
    monkeypatch.setattr(cli, "build_provider", lambda: tokyo_provider)
    runner = CliRunner()
    result = runner.invoke(cli.app, ["dashboard", "--location", "tokyo", "--date", "2024-01-10"])
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[0] == "Tokyo, Japan / 2024-01-10 / Asia/Tokyo"
    assert "00\t10.0\t7.0\tmin" in lines
    assert "01\t11.0\t6.0\tmax" in lines
    assert "00 SUN" in result.stdout


def test_dashboard_command_marks_custom_location(monkeypatch, tokyo_provider):
    monkeypatch.setattr(cli, "build_provider", lambda: tokyo_provider)
    runner = CliRunner()
    result = runner.invoke(
        cli.app,
        ["dashboard", "--lat", "35.0", "--lon", "139.0", "--timezone", "Asia/Tokyo", "--date", "2024-01-10"],
    )
    assert result.exit_code == 0
    assert result.stdout.splitlines()[0] == "Selected location (custom) / 2024-01-10 / Asia/Tokyo"
    assert tokyo_provider.calls[0] == ("forecast", "35.0,139.0", "2024-01-10")


def test_dashboard_command_upstream_failure_exits_1(monkeypatch, failing_provider):
    monkeypatch.setattr(cli, "build_provider", lambda: failing_provider)
    runner = CliRunner()
    result = runner.invoke(cli.app, ["dashboard", "--location", "london", "--date", "2024-01-10"])
    assert result.exit_code == 1


def test_dashboard_command_rejects_unknown_preset():
    runner = CliRunner()
    result = runner.invoke(cli.app, ["dashboard", "--location", "atlantis"])
    assert result.exit_code == 2


def test_search_command(monkeypatch, tokyo_provider):
    monkeypatch.setattr(cli, "build_provider", lambda: tokyo_provider)
    runner = CliRunner()
    result = runner.invoke(cli.app, ["search", "tokyo", "--count", "2"])
    assert result.exit_code == 0
    assert "Tokyo, Japan" in result.stdout
    assert tokyo_provider.calls[-1][:3] == ("search", "tokyo", 2)


def test_search_command_no_match(monkeypatch, tokyo_provider):
    tokyo_provider.locations = []
    monkeypatch.setattr(cli, "build_provider", lambda: tokyo_provider)
    runner = CliRunner()
    result = runner.invoke(cli.app, ["search", "zzzz"])
    assert result.exit_code == 0
    assert "No matching locations" in result.stdout


def test_search_command_upstream_failure_exits_1(monkeypatch, failing_provider):
    monkeypatch.setattr(cli, "build_provider", lambda: failing_provider)
    runner = CliRunner()
    result = runner.invoke(cli.app, ["search", "osaka"])
    assert result.exit_code == 1
    assert "No matching locations" not in result.stdout
