"""Tests for the click command group."""

from __future__ import annotations

import json
import logging

import pytest
from click.testing import CliRunner

import toydesk.cli.chat as chat_module
from toydesk.cli.app import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Commands reconfigure the root logger; put the original handlers back."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_toys_add_and_list(runner, active_settings):
    result = runner.invoke(cli, ["toys", "add", "Drone", "5"])
    assert result.exit_code == 0, result.output
    assert "Added" in result.output

    result = runner.invoke(cli, ["toys", "list"])
    assert result.exit_code == 0
    assert "Drone" in result.output
    assert "5" in result.output


def test_toys_json_backend_writes_file(runner, active_settings):
    runner.invoke(cli, ["toys", "--backend", "json", "add", "Drone", "5"])
    runner.invoke(cli, ["toys", "--backend", "json", "add", "Drone", "2"])
    result = runner.invoke(cli, ["toys", "--backend", "json", "category", "Holiday"])
    assert result.exit_code == 0

    data = json.loads(active_settings.toys_json_path.read_text(encoding="utf-8"))
    assert [(d["name"], d["amount"], d["category"]) for d in data] == [
        ("Drone", 5, "Holiday"),
        ("Drone", 2, "Holiday"),
    ]


def test_toys_update_unknown_name(runner, active_settings):
    result = runner.invoke(cli, ["toys", "update", "Kite", "3"])
    assert result.exit_code == 0
    assert "no matching toy" in result.output


def test_toys_rejects_negative_amount(runner, active_settings):
    result = runner.invoke(cli, ["toys", "add", "Drone", "-1"])
    assert result.exit_code != 0


def test_toys_store_unavailable_aborts(runner, active_settings):
    active_settings.toys_db_path.mkdir(parents=True)
    result = runner.invoke(cli, ["toys", "list"])
    assert result.exit_code == 1


def test_ask_prints_reply(runner, active_settings, monkeypatch):
    async def fake_ask_once(settings, question):
        assert question == "hello there"
        return "General Kenobi"

    monkeypatch.setattr(chat_module, "ask_once", fake_ask_once)
    result = runner.invoke(cli, ["ask", "hello", "there"])
    assert result.exit_code == 0
    assert "General Kenobi" in result.output


def test_ask_prints_placeholder_without_reply(runner, active_settings, monkeypatch):
    async def fake_ask_once(settings, question):
        return None

    monkeypatch.setattr(chat_module, "ask_once", fake_ask_once)
    result = runner.invoke(cli, ["ask", "hello"])
    assert result.exit_code == 0
    assert "[No response]" in result.output


def test_ask_requires_api_key(runner, active_settings):
    active_settings.openai_api_key = ""
    result = runner.invoke(cli, ["ask", "hello"])
    assert result.exit_code == 1
    assert "OPENAI_API_KEY" in result.output


def test_ask_rejects_empty_question(runner, active_settings, monkeypatch):
    async def fake_ask_once(settings, question):
        raise AssertionError("should not be called")

    monkeypatch.setattr(chat_module, "ask_once", fake_ask_once)
    result = runner.invoke(cli, ["ask", ""])
    assert result.exit_code == 2
    assert "must not be empty" in result.output
    assert not isinstance(result.exception, ValueError)


def test_toys_help_does_not_open_store(runner, active_settings):
    result = runner.invoke(cli, ["toys", "add", "--help"])
    assert result.exit_code == 0
    assert not active_settings.toys_db_path.exists()
    assert not active_settings.toys_json_path.exists()


def test_toys_list_shows_uncategorized(runner, active_settings):
    runner.invoke(cli, ["toys", "add", "Drone", "5"])
    result = runner.invoke(cli, ["toys", "list"])
    assert "Uncategorized" in result.output
