import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from unittest.mock import patch

import pytest

from quantumn.supervisor import ModelSupervisor, SupervisorError


def _free_port():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


class _HealthHandler(BaseHTTPRequestHandler):
    def do_GET(self):
        self.send_response(200 if self.path == "/health" else 404)
        self.end_headers()

    def log_message(self, *args):
        pass


@pytest.fixture
def model_file(tmp_path):
    path = tmp_path / "llama.gguf"
    path.write_bytes(b"")
    return path


@pytest.fixture
def listener():
    sock = socket.socket()
    sock.bind(("127.0.0.1", 0))
    sock.listen()
    yield sock
    sock.close()


def test_new_supervisor():
    supervisor = ModelSupervisor()
    assert supervisor.active_model() is None
    assert not supervisor.is_running()
    assert supervisor.base_url() == "http://localhost:8080"


def test_custom_port():
    supervisor = ModelSupervisor(9090)
    assert supervisor.base_url() == "http://localhost:9090"


def test_add_model_path():
    supervisor = ModelSupervisor()
    supervisor.add_model_path("llama3.2", "/models/llama3.2.gguf")
    assert supervisor.model_paths["llama3.2"] == Path("/models/llama3.2.gguf")


def test_ensure_unconfigured_model_raises():
    supervisor = ModelSupervisor()
    with pytest.raises(SupervisorError, match="Model path not configured"):
        supervisor.ensure("unknown")


def test_ensure_missing_model_file_raises(tmp_path):
    supervisor = ModelSupervisor()
    supervisor.add_model_path("m", tmp_path / "absent.gguf")
    with pytest.raises(SupervisorError, match="Model file not found"):
        supervisor.ensure("m")
    assert not supervisor.is_running()


def test_ensure_missing_draft_model_raises(tmp_path, model_file):
    supervisor = ModelSupervisor()
    supervisor.add_model_path("m", model_file)
    supervisor.set_speculative_decoding(tmp_path / "draft.gguf", 16, 0, 0.75)
    with pytest.raises(SupervisorError, match="Draft model file not found"):
        supervisor.ensure("m")


def test_ensure_starts_once_and_stop_kills(model_file, listener):
    port = listener.getsockname()[1]
    supervisor = ModelSupervisor(port)
    supervisor.add_model_path("m", model_file)
    with patch("subprocess.Popen") as popen:
        popen.return_value.poll.return_value = None
        supervisor.ensure("m")
        supervisor.ensure("m")
        assert popen.call_count == 1
        assert popen.call_args.args[0] == [
            "llama-server",
            f"--model={model_file}",
            f"--port={port}",
            "--ctx-size=8192",
        ]
        assert supervisor.active_model() == "m"
        assert supervisor.is_running()
        supervisor.stop()
        assert popen.return_value.kill.call_count == 1
        assert popen.return_value.wait.call_count == 1
    assert not supervisor.is_running()
    assert supervisor.active_model() is None


def test_ensure_other_model_restarts(tmp_path, model_file, listener):
    other_file = tmp_path / "other.gguf"
    other_file.write_bytes(b"")
    supervisor = ModelSupervisor(listener.getsockname()[1])
    supervisor.add_model_path("m", model_file)
    supervisor.add_model_path("o", other_file)
    with patch("subprocess.Popen") as popen:
        popen.return_value.poll.return_value = None
        supervisor.ensure("m")
        supervisor.ensure("o")
        assert popen.call_count == 2
        assert popen.return_value.kill.call_count == 1
        assert supervisor.active_model() == "o"
        supervisor.stop()


def test_speculative_decoding_arguments(tmp_path, model_file, listener):
    draft_file = tmp_path / "draft.gguf"
    draft_file.write_bytes(b"")
    supervisor = ModelSupervisor(listener.getsockname()[1])
    supervisor.add_model_path("m", model_file)
    supervisor.set_speculative_decoding(draft_file, 8, 2, 0.5)
    with patch("subprocess.Popen") as popen:
        popen.return_value.poll.return_value = None
        supervisor.ensure("m")
        argv = popen.call_args.args[0]
        supervisor.stop()
    assert argv[4:] == [
        f"--spec-draft-model={draft_file}",
        "--spec-draft-n-max=8",
        "--spec-draft-n-min=2",
        "--spec-draft-p-min=0.5",
    ]


def test_process_exit_during_startup_raises(model_file):
    supervisor = ModelSupervisor(_free_port())
    supervisor.add_model_path("m", model_file)
    with patch("subprocess.Popen") as popen:
        popen.return_value.poll.return_value = 1
        with pytest.raises(SupervisorError, match="exited unexpectedly"):
            supervisor.ensure("m")
        supervisor.stop()


def test_start_failure_raises(model_file):
    supervisor = ModelSupervisor(_free_port())
    supervisor.add_model_path("m", model_file)
    with patch("subprocess.Popen", side_effect=FileNotFoundError("llama-server")):
        with pytest.raises(SupervisorError, match="Failed to start llama-server"):
            supervisor.ensure("m")
    assert not supervisor.is_running()


def test_health_check_without_server():
    supervisor = ModelSupervisor(_free_port())
    assert supervisor.health_check() is False


def test_health_check_with_server():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _HealthHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        supervisor = ModelSupervisor(server.server_address[1])
        assert supervisor.health_check() is True
    finally:
        server.shutdown()
        server.server_close()


def test_context_manager_stops(model_file, listener):
    with patch("subprocess.Popen") as popen:
        popen.return_value.poll.return_value = None
        with ModelSupervisor(listener.getsockname()[1]) as supervisor:
            supervisor.add_model_path("m", model_file)
            supervisor.ensure("m")
            assert supervisor.is_running()
        assert not supervisor.is_running()
        assert popen.return_value.kill.call_count == 1