"""Systemd controller - drives systemctl and journalctl as external commands."""

import logging
import subprocess

from ._AbstractController import _AbstractController
from .ServiceCommandError import ServiceCommandError

logger = logging.getLogger(__name__)


class SystemdController(_AbstractController):
    """Service controller backed by the systemctl and journalctl binaries.

    Only exit codes are interpreted. ``--user`` is inserted as the first
    argument when the controller manages the per-user instance.
    """

    systemctl = "systemctl"
    journalctl = "journalctl"

    def _args(self, *args: str) -> list[str]:
        return ["--user", *args] if self.user else list(args)

    def _query(self, *args: str) -> bool:
        command = [self.systemctl, *self._args(*args)]
        try:
            result = subprocess.run(command, capture_output=True, text=True, check=False)
        except OSError as exc:
            logger.debug(f"{' '.join(command)} could not run: {exc}")
            return False
        return result.returncode == 0

    def _run(self, *args: str) -> None:
        command = [self.systemctl, *self._args(*args)]
        logger.info(f"Running {' '.join(command)}")
        try:
            subprocess.run(command, capture_output=True, text=True, check=True)
        except subprocess.CalledProcessError as e:
            raise ServiceCommandError(command, e.returncode, e.stderr or "") from e
        except OSError as e:
            raise ServiceCommandError(command, None, str(e)) from e

    def is_active(self, unit: str) -> bool:
        return self._query("is-active", "--quiet", unit)

    def is_enabled(self, unit: str) -> bool:
        return self._query("is-enabled", "--quiet", unit)

    def start(self, unit: str) -> None:
        self._run("start", unit)

    def stop(self, unit: str) -> None:
        self._run("stop", unit)

    def daemon_reload(self) -> None:
        self._run("daemon-reload")

    def follow_logs(self, unit: str) -> None:
        # Attached to the terminal: output is not captured
        command = [self.journalctl, *self._args("-u", unit, "-f")]
        try:
            result = subprocess.run(command, check=False)
        except OSError as e:
            raise ServiceCommandError(command, None, str(e)) from e
        if result.returncode != 0:
            raise ServiceCommandError(command, result.returncode)
