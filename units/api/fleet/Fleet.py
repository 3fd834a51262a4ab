"""Fleet public API - discovers applications and runs operations across them."""

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

from ..app.App import App, ControllerFactory
from ..app.AppStatus import AppStatus
from ..config.ConfigError import ConfigError

logger = logging.getLogger(__name__)


class Fleet:
    """Every application found under a common root directory.

    Membership is recomputed from the directory listing on every call. Batch
    operations handle one app at a time in listing order and stop at the
    first error.
    """

    def __init__(
        self,
        root: Path,
        force: bool = False,
        dry_run: bool = False,
        confirm: Callable[[str], bool] | None = None,
        controller_factory: ControllerFactory | None = None,
    ):
        self.root = root
        self.force = force
        self.dry_run = dry_run
        self.confirm = confirm
        self.controller_factory = controller_factory

    def get_app(self, name: str) -> App:
        return App.load(self.root, name, controller_factory=self.controller_factory)

    def discover_apps(self) -> list[App]:
        """Build an App for each non-hidden directory under the root.

        Raises:
            ConfigError: If the root cannot be listed or any candidate has no valid config
        """
        try:
            entries = sorted(self.root.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise ConfigError(f"Cannot list fleet root: {e.strerror or e}", self.root) from e

        apps = []
        for path in entries:
            if path.name.startswith(".") or not path.is_dir():
                continue
            apps.append(self.get_app(path.name))
        logger.debug(f"Discovered {len(apps)} apps in {self.root}")
        return apps

    def _select(self, name: str | None) -> list[App]:
        if name is not None:
            return [self.get_app(name)]
        return self.discover_apps()

    def status(self, name: str | None = None) -> Iterator[tuple[App, AppStatus]]:
        for app in self._select(name):
            yield app, app.get_status()

    def install_apps(self, name: str | None = None) -> Iterator[tuple[App, list[str]]]:
        for app in self._select(name):
            logger.info(f"Installing app {app.name}")
            yield app, app.install(dry_run=self.dry_run, force=self.force)

    def uninstall_apps(self, name: str | None = None) -> Iterator[tuple[App, list[str] | None]]:
        for app in self._select(name):
            logger.info(f"Uninstalling app {app.name}")
            yield app, app.uninstall(dry_run=self.dry_run, force=self.force, confirm=self.confirm)

    def show_logs(self, name: str) -> None:
        app = self.get_app(name)
        logger.info(f"Showing logs for {name}")
        app.logs()
