"""Tests for the neuralcore command-line interface."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from neuralcore.cli import main, parse_args
from neuralcore.debug.client import DebugClientError


@pytest.fixture(autouse=True)
def no_log_handlers():
    """Keep main() from attaching handlers to pytest's captured streams."""
    with patch("neuralcore.utils.logging.setup_logging"):
        yield


@pytest.fixture
def config(tmp_path: Path) -> Path:
    path = tmp_path / "neuralcore.yaml"
    path.write_text(
        "vision:\n  iterations: 2\n  interval: 0.0\n  seed: 5\n"
        "endpoint:\n  host: 127.0.0.1\n  port: 9123\n"
    )
    return path


class TestParseArgs:
    def test_command(self) -> None:
        args = parse_args(["command", "ping"])
        assert args.command == "command"
        assert args.name == "ping"

    def test_log(self) -> None:
        args = parse_args(["-v", "log", "boot", "hello world"])
        assert args.verbose is True
        assert (args.tag, args.message) == ("boot", "hello world")

    def test_vision_overrides(self) -> None:
        args = parse_args(["vision", "--iterations", "3", "--interval", "0.5", "--seed", "9"])
        assert (args.iterations, args.interval, args.seed) == (3, 0.5, 9)


class TestVisionCommand:
    def test_runs_loop(self, config: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["-c", str(config), "vision"])
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "[EYES] Inicializando visão neural..."
        assert lines[-1] == "[EYES] Encerrando visão neural."
        assert sum(line.startswith("[EYES] Captura de quadro #") for line in lines) == 2

    def test_iterations_flag(self, config: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["-c", str(config), "vision", "--iterations", "4"])
        out = capsys.readouterr().out
        assert out.count("[EYES] Interpretação IA →") == 4

    def test_zero_iterations_rejected(self, config: Path) -> None:
        with pytest.raises(ValueError, match="iterations"):
            main(["-c", str(config), "vision", "--iterations", "0"])


class TestClientCommands:
    def _client(self) -> MagicMock:
        client = MagicMock()
        client.__enter__.return_value = client
        client.get_system_status.return_value = "Uptime: 3s | Status: OK"
        client.run_command.return_value = "[NEURAL-CORE] Pong! Conexão estável."
        return client

    def test_status(self, config: Path, capsys: pytest.CaptureFixture[str]) -> None:
        client = self._client()
        with patch("neuralcore.debug.client.HttpDebugClient", return_value=client):
            with pytest.raises(SystemExit) as exc_info:
                main(["-c", str(config), "status"])
        assert exc_info.value.code == 0
        assert "Uptime: 3s | Status: OK" in capsys.readouterr().out

    def test_command(self, config: Path, capsys: pytest.CaptureFixture[str]) -> None:
        client = self._client()
        with patch("neuralcore.debug.client.HttpDebugClient", return_value=client):
            with pytest.raises(SystemExit):
                main(["-c", str(config), "command", "ping"])
        client.run_command.assert_called_once_with("ping")
        assert "Pong!" in capsys.readouterr().out

    def test_log(self, config: Path) -> None:
        client = self._client()
        with patch("neuralcore.debug.client.HttpDebugClient", return_value=client):
            with pytest.raises(SystemExit):
                main(["-c", str(config), "log", "boot", "ready"])
        client.log_message.assert_called_once_with("boot", "ready")

    def test_unreachable_endpoint_exits_nonzero(self, config: Path) -> None:
        client = self._client()
        client.__enter__.side_effect = DebugClientError("refused", endpoint="x")
        with patch("neuralcore.debug.client.HttpDebugClient", return_value=client):
            with pytest.raises(SystemExit) as exc_info:
                main(["-c", str(config), "status"])
        assert exc_info.value.code == 1


class TestServeCommand:
    def test_uses_configured_endpoint(self, config: Path) -> None:
        with patch("uvicorn.run") as run:
            main(["-c", str(config), "serve"])
        run.assert_called_once()
        assert run.call_args.kwargs == {"host": "127.0.0.1", "port": 9123}
