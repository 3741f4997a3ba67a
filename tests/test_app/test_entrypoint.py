"""Testes do entrypoint de linha de comando e da fábrica da aplicação."""

from __future__ import annotations

import pytest

from app.app import create_app, main, parse_args
from app.infra.stores.memory_message_store import MemoryMessageStore
from config.settings import SMTPSettings, get_http_settings, get_smtp_settings
from smtp.server import SMTPCaptureServer


class TestParseArgs:
    """Flags --smtp e --http."""

    def test_defaults_follow_settings(self, monkeypatch) -> None:
        monkeypatch.delenv("SMTP_PORT", raising=False)
        monkeypatch.delenv("HTTP_PORT", raising=False)
        get_smtp_settings.cache_clear()
        get_http_settings.cache_clear()

        args = parse_args([])

        assert args.smtp == 1025
        assert args.http == 8025

    def test_flags_override_ports(self) -> None:
        args = parse_args(["--smtp", "2525", "--http", "9000"])

        assert args.smtp == 2525
        assert args.http == 9000


class TestCreateApp:
    """Wiring do store compartilhado."""

    def test_store_shared_with_smtp_server(self) -> None:
        store = MemoryMessageStore()
        settings = SMTPSettings(host="127.0.0.1", port=0)

        app = create_app(store, settings)

        assert app.state.message_store is store
        assert isinstance(app.state.smtp_server, SMTPCaptureServer)
        assert not app.state.smtp_server.is_serving

    def test_smtp_disabled(self) -> None:
        app = create_app(MemoryMessageStore(), enable_smtp=False)

        assert app.state.smtp_server is None


class TestMain:
    """Validação das portas recebidas pela linha de comando."""

    def test_out_of_range_port_aborts_before_serving(self, monkeypatch) -> None:
        import uvicorn

        def _fail(*args, **kwargs) -> None:
            raise AssertionError("uvicorn.run não deveria ser chamado")

        monkeypatch.setattr(uvicorn, "run", _fail)

        with pytest.raises(SystemExit) as exc_info:
            main(["--smtp", "70000", "--http", "0"])

        message = str(exc_info.value)
        assert "SMTP_PORT fora do intervalo: 70000" in message
        assert "HTTP_PORT fora do intervalo: 0" in message
