"""Tests for configuration helpers."""

from __future__ import annotations

import types

from budget_buddy import config


def test_configure_logging_installs_sinks_once(monkeypatch, tmp_path) -> None:
    added = []
    monkeypatch.setattr(config, '_LOGGING_CONFIGURED', False)
    fake_logger = types.SimpleNamespace(
        remove=lambda *args: None,
        add=lambda sink, **kwargs: added.append((sink, kwargs)),
    )
    monkeypatch.setattr(config, 'logger', fake_logger)

    log_file = str(tmp_path / 'budget.log')
    config.configure_logging(level='debug', log_file=log_file)
    config.configure_logging(level='debug', log_file=log_file)

    assert len(added) == 2
    assert added[0][1]['level'] == 'DEBUG'
    assert added[1][0] == log_file
    assert added[1][1]['rotation'] == '1 day'


def test_mock_flag_and_api_url(monkeypatch) -> None:
    monkeypatch.setattr(config, 'USE_MOCK_DATA', True)
    monkeypatch.setattr(config, 'API_URL', 'http://localhost:5001/api/transactions')
    assert config.use_mock_data() is True
    assert config.get_api_url() == 'http://localhost:5001/api/transactions'
