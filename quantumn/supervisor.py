"""Supervision of a local llama.cpp server process."""

from __future__ import annotations

import http.client
import logging
import os
import socket
import subprocess
import time
import urllib.request
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8080
STARTUP_TIMEOUT_SECS = 60.0
HEALTH_CHECK_INTERVAL_SECS = 0.5


class SupervisorError(Exception):
    """Raised when the model server cannot be started, stopped or reached."""


class ModelSupervisor:
    """Starts, stops and checks a llama-server process for one model at a time."""

    def __init__(self, port: int = DEFAULT_PORT) -> None:
        self.port = port
        self.model_paths: dict[str, Path] = {}
        self.draft_model_path: Path | None = None
        self.draft_max = 16
        self.draft_min = 0
        self.draft_p_min = 0.75
        self._active_model: str | None = None
        self._process: subprocess.Popen[bytes] | None = None

    def __enter__(self) -> ModelSupervisor:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def __del__(self) -> None:
        process = getattr(self, "_process", None)
        if process is not None:
            try:
                process.kill()
            except OSError:
                pass

    def add_model_path(self, model_name: str, path: str | os.PathLike[str]) -> None:
        """Map a model name to its GGUF file."""
        self.model_paths[model_name] = Path(path)

    def set_speculative_decoding(
        self,
        draft_model_path: str | os.PathLike[str] | None,
        draft_max: int,
        draft_min: int,
        draft_p_min: float,
    ) -> None:
        """Configure speculative decoding for servers started from now on."""
        self.draft_model_path = None if draft_model_path is None else Path(draft_model_path)
        self.draft_max = draft_max
        self.draft_min = draft_min
        self.draft_p_min = draft_p_min

    def base_url(self) -> str:
        """Base URL of the server."""
        return f"http://localhost:{self.port}"

    def active_model(self) -> str | None:
        """Name of the model currently being served, if any."""
        return self._active_model

    def is_running(self) -> bool:
        """Whether a server process has been started and not stopped."""
        return self._process is not None

    def ensure(self, model: str) -> None:
        """Make sure ``model`` is being served, restarting the server if needed."""
        if self._active_model == model and self.is_running():
            return
        self.stop()
        self._start(model)
        self._wait_for_ready()

    def _start(self, model: str) -> None:
        model_path = self.model_paths.get(model)
        if model_path is None:
            raise SupervisorError(f"Model path not configured for: {model}")
        if not model_path.exists():
            raise SupervisorError(f"Model file not found: {str(model_path)!r}")

        argv = [
            "llama-server",
            f"--model={model_path}",
            f"--port={self.port}",
            "--ctx-size=8192",
        ]
        if self.draft_model_path is not None:
            if not self.draft_model_path.exists():
                raise SupervisorError(
                    f"Draft model file not found: {str(self.draft_model_path)!r}"
                )
            argv += [
                f"--spec-draft-model={self.draft_model_path}",
                f"--spec-draft-n-max={self.draft_max}",
                f"--spec-draft-n-min={self.draft_min}",
                f"--spec-draft-p-min={self.draft_p_min}",
            ]

        try:
            process = subprocess.Popen(argv)
        except OSError as exc:
            raise SupervisorError(
                f"Failed to start llama-server for model: {model}"
            ) from exc

        self._process = process
        self._active_model = model
        logger.info(
            "Started llama.cpp server for model '%s' on port %s", model, self.port
        )

    def stop(self) -> None:
        """Kill the running server, if any, and wait for it to exit."""
        process, self._process = self._process, None
        if process is not None:
            try:
                process.kill()
            except OSError as exc:
                raise SupervisorError("Failed to kill llama-server process") from exc
            try:
                process.wait()
            except OSError as exc:
                raise SupervisorError(
                    "Failed to wait for llama-server process"
                ) from exc
            logger.info("Stopped llama.cpp server")
        self._active_model = None

    def _port_open(self) -> bool:
        try:
            with socket.create_connection(
                ("127.0.0.1", self.port), timeout=HEALTH_CHECK_INTERVAL_SECS
            ):
                return True
        except OSError:
            return False

    def _wait_for_ready(self) -> None:
        deadline = time.monotonic() + STARTUP_TIMEOUT_SECS
        while time.monotonic() < deadline:
            process = self._process
            if process is None:
                raise SupervisorError("No process running")
            try:
                status = process.poll()
            except OSError as exc:
                raise SupervisorError(f"Failed to check process status: {exc}") from exc
            if status is not None:
                raise SupervisorError(
                    f"llama-server process exited unexpectedly with status: {status}"
                )
            if self._port_open():
                logger.info("llama.cpp server is ready")
                return
            time.sleep(HEALTH_CHECK_INTERVAL_SECS)
        raise SupervisorError("Timeout waiting for llama.cpp server to become ready")

    def health_check(self) -> bool:
        """Whether the server's health endpoint answers with a success status."""
        url = f"{self.base_url()}/health"
        try:
            with urllib.request.urlopen(url, timeout=5) as response:
                return 200 <= response.status < 300
        except (OSError, http.client.HTTPException):
            return False