"""Tests for the paygate CLI."""

import argparse
from unittest.mock import patch

import pytest

from paygate.cli import cmd_gateways, cmd_serve, main


class TestGatewaysCommand:
    """Tests for `paygate gateways`."""

    def test_prints_default_and_available(self, tmp_path, capsys):
        path = tmp_path / "config.yaml"
        path.write_text("paymob:\n  api_key: sk-cli\n")

        code = cmd_gateways(argparse.Namespace(config=str(path)))

        assert code == 0
        out = capsys.readouterr().out
        assert "Default: paymob (PaymobPaymentService)" in out
        assert "  - mock" in out
        assert "  - paymob" in out

    def test_invalid_config_returns_error(self, tmp_path, capsys):
        path = tmp_path / "config.yaml"
        path.write_text("paymob:\n  base_url: nowhere\n")

        code = cmd_gateways(argparse.Namespace(config=str(path)))

        assert code == 1
        assert "Invalid configuration" in capsys.readouterr().err


class TestServeCommand:
    """Tests for `paygate serve`."""

    def test_serve_passes_overrides(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("server:\n  port: 9300\n")
        args = argparse.Namespace(config=str(path), host="0.0.0.0", port=None, log_level=None)

        with patch("paygate.server.app.run_server") as run_server:
            cmd_serve(args)

        kwargs = run_server.call_args.kwargs
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] is None
        assert kwargs["config"].server.port == 9300
        assert kwargs["log_level"] == "info"


class TestMain:
    """Tests for argument dispatch."""

    def test_no_command_exits(self):
        with patch("sys.argv", ["paygate"]):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 1

    def test_gateways_dispatch(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        with patch("sys.argv", ["paygate", "gateways", "-c", str(path)]):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 0
