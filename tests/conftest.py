"""Shared pytest configuration and fixtures for all tests."""

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from units.api.service._AbstractController import _AbstractController
from units.api.service.ServiceCommandError import ServiceCommandError


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external processes")
    config.addinivalue_line("markers", "integration: multi-component scenarios")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Service manager double
# =============================================================================


class FakeController(_AbstractController):
    """In-memory service manager.

    ``start`` makes the unit active and ``stop`` makes it inactive, like
    systemd would. Operations named in ``fail`` raise ServiceCommandError.
    """

    def __init__(self, user: bool = False, active: bool = False, enabled: bool = False):
        super().__init__(user)
        self.active = active
        self.enabled = enabled
        self.fail: set[str] = set()
        self.calls: list[tuple[str, ...]] = []

    def _mutate(self, op: str, *args: str) -> None:
        self.calls.append((op, *args))
        if op in self.fail:
            raise ServiceCommandError(["systemctl", op, *args], 1, f"{op} failed")

    def is_active(self, unit: str) -> bool:
        self.calls.append(("is-active", unit))
        return self.active

    def is_enabled(self, unit: str) -> bool:
        self.calls.append(("is-enabled", unit))
        return self.enabled

    def start(self, unit: str) -> None:
        self._mutate("start", unit)
        self.active = True

    def stop(self, unit: str) -> None:
        self._mutate("stop", unit)
        self.active = False

    def daemon_reload(self) -> None:
        self._mutate("daemon-reload")

    def follow_logs(self, unit: str) -> None:
        self._mutate("logs", unit)

    @property
    def mutations(self) -> list[tuple[str, ...]]:
        return [call for call in self.calls if call[0] not in ("is-active", "is-enabled")]


@pytest.fixture
def controller() -> FakeController:
    return FakeController()


@pytest.fixture
def controller_factory(controller: FakeController) -> Callable[[bool], FakeController]:
    """Factory handing out the shared ``controller`` with the requested scope."""

    def factory(user: bool) -> FakeController:
        controller.user = user
        return controller

    return factory


# =============================================================================
# Filesystem helpers
# =============================================================================


def write_app(
    root: Path,
    name: str,
    files: dict[str, str],
    install_location: Path,
    use_user: bool = False,
) -> Path:
    """Create ``<root>/<name>`` with a config.toml and the given files."""
    app_dir = root / name
    app_dir.mkdir(parents=True, exist_ok=True)
    (app_dir / "config.toml").write_text(
        f'[systemd]\ninstall_location = "{install_location}"\nuse_user = {"true" if use_user else "false"}\n'
    )
    for rel, content in files.items():
        path = app_dir / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return app_dir


@pytest.fixture(name="write_app")
def write_app_fixture() -> Callable[..., Path]:
    return write_app


@pytest.fixture
def fleet_root(tmp_path: Path) -> Path:
    root = tmp_path / "apps"
    root.mkdir()
    return root


@pytest.fixture
def install_dir(tmp_path: Path) -> Path:
    target = tmp_path / "units"
    target.mkdir()
    return target


# =============================================================================
# Environment isolation
# =============================================================================


@pytest.fixture(autouse=True)
def units_env(tmp_path: Path, monkeypatch) -> Path:
    """Keep logs out of the real home and ignore a UNITS_ROOT from the shell."""
    units_home = tmp_path / ".units"
    monkeypatch.setenv("UNITS_HOME", str(units_home))
    monkeypatch.delenv("UNITS_ROOT", raising=False)
    yield units_home
    logger = logging.getLogger("units")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture(name="run_cmd")
def run_cmd_fixture():
    return run_cmd
