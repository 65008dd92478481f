import pytest

from config import get_settings_module


@pytest.mark.parametrize(
    "env,expected",
    [
        ("production", "config.production"),
        ("prod", "config.production"),
        ("TESTING", "config.testing"),
        ("anything-else", "config.development"),
    ],
)
def test_settings_module_from_app_env(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == expected


def test_create_app_registers_routes(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")

    from safety_checkin.main import create_app

    app = create_app()
    rules = {r.rule for r in app.url_map.iter_rules()}

    assert app.config["TESTING"] is True
    assert "/api/worker/streak" in rules
    assert "/api/worker/can-report-incident" in rules
    assert "/api/teams/<team_id>/streaks" in rules
