from __future__ import annotations

import contextlib

import pytest
from typer.testing import CliRunner

from pom_kit.cli import login_cli

from .conftest import BASE_URL, FakeDriver


runner = CliRunner()


@pytest.fixture
def fake_session(monkeypatch):
    driver = FakeDriver()
    opened = {}

    @contextlib.contextmanager
    def session(chrome_bin=None, headless=True, timeout_ms=None):
        opened.update(chrome_bin=chrome_bin, headless=headless)
        yield driver

    monkeypatch.setattr(login_cli, "session", session)
    monkeypatch.delenv("HEADLESS", raising=False)
    driver.opened = opened
    return driver


def test_login_success(fake_session):
    result = runner.invoke(
        login_cli.app,
        ["login", "tomsmith", "SuperSecretPassword!", "--base-url", BASE_URL],
    )
    assert result.exit_code == 0
    assert "logged_in=True" in result.output
    assert fake_session.visited == [f"{BASE_URL}/login"]
    assert fake_session.opened["headless"] is True


def test_login_failure_exit_code(fake_session):
    result = runner.invoke(
        login_cli.app,
        ["login", "tomsmith", "bad password", "--base-url", BASE_URL, "--headed"],
    )
    assert result.exit_code == 1
    assert "logged_in=False" in result.output
    assert fake_session.opened["headless"] is False


def test_login_page_not_loaded(fake_session):
    fake_session.unreachable.add(f"{BASE_URL}/login")
    result = runner.invoke(login_cli.app, ["login", "u", "p", "--base-url", BASE_URL])
    assert result.exit_code == 2
    assert "navigation to" in result.output


def test_visible(fake_session):
    result = runner.invoke(
        login_cli.app,
        ["visible", "/login", "button", "--base-url", BASE_URL],
    )
    assert result.exit_code == 0
    assert "displayed=True" in result.output


def test_visible_absolute_url(fake_session):
    result = runner.invoke(
        login_cli.app,
        ["visible", "http://other.test/page", ".flash", "--base-url", BASE_URL],
    )
    assert result.exit_code == 0
    assert fake_session.visited == ["http://other.test/page"]
