"""
Tests for configuration and process entry points.

Covers environment loading, the CLI argument parser and the WSGI adapter.
"""

import json
import logging
from unittest.mock import patch
from wsgiref.util import setup_testing_defaults

from healthmock.__main__ import build_parser, main
from healthmock.core.config import Settings, settings
from healthmock.shared.logging import configure_logging


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch) -> None:
        monkeypatch.delenv("PORT", raising=False)
        monkeypatch.delenv("NODE_ENV", raising=False)
        settings = Settings(_env_file=None)
        assert settings.port == 3000
        assert settings.environment == "development"
        assert settings.is_development
        assert settings.cors_allow_origins == ["*"]

    def test_reads_port_and_node_env(self, monkeypatch) -> None:
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("NODE_ENV", "production")
        settings = Settings(_env_file=None)
        assert settings.port == 8080
        assert settings.environment == "production"
        assert not settings.is_development

    def test_empty_node_env_means_development(self, monkeypatch) -> None:
        monkeypatch.setenv("NODE_ENV", "")
        assert Settings(_env_file=None).environment == "development"


class TestLogging:
    """Tests for the logging setup."""

    def test_uvicorn_loggers_are_quietened(self) -> None:
        configure_logging(level="DEBUG")
        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("uvicorn.access").level == logging.WARNING
        assert logging.getLogger("uvicorn.error").level == logging.WARNING


class TestCli:
    """Tests for the python -m healthmock runner."""

    def test_parser_overrides(self) -> None:
        args = build_parser().parse_args(["--host", "127.0.0.1", "--port", "4000"])
        assert args.host == "127.0.0.1"
        assert args.port == 4000

    def test_main_starts_uvicorn(self) -> None:
        with patch.object(settings, "port", settings.port), patch(
            "healthmock.__main__.uvicorn.run"
        ) as run:
            main(["--port", "4100"])
        run.assert_called_once()
        assert run.call_args.args == ("healthmock.main:app",)
        assert run.call_args.kwargs["port"] == 4100
        assert run.call_args.kwargs["http"] == "httptools"


class TestWsgi:
    """Tests for the WSGI compatibility layer."""

    def test_application_serves_requests(self) -> None:
        """The WSGI app answers a fixed-status endpoint like the ASGI app."""
        from healthmock.wsgi import application

        environ: dict = {"PATH_INFO": "/health/503"}
        setup_testing_defaults(environ)
        started = []

        def start_response(status, headers, exc_info=None):
            started.append(status)

        chunks = application(environ, start_response)
        try:
            body = b"".join(chunks)
        finally:
            if hasattr(chunks, "close"):
                chunks.close()

        assert started[0].startswith("503")
        assert json.loads(body)["statusCode"] == 503
