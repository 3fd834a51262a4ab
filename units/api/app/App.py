"""App public API - status, install, uninstall and logs for one application."""

import logging
import shutil
from collections.abc import Callable
from pathlib import Path

from ...constants import CONFIG_FILE_NAME, SERVICE_SUFFIX
from ..config.AppConfig import AppConfig
from ..service._AbstractController import _AbstractController
from ..service.ServiceCommandError import ServiceCommandError
from ..service.SystemdController import SystemdController
from ._walk_app_files import _walk_app_files
from .AppStatus import AppStatus
from .CollisionError import CollisionError
from .CopyError import CopyError
from .EmptyManifestError import EmptyManifestError

logger = logging.getLogger(__name__)

ControllerFactory = Callable[[bool], _AbstractController]


class App:
    """An application: a directory of unit files installed into a systemd directory.

    The manifest is every file under ``app_dir`` except ``config.toml``. The app
    counts as installed when each manifest file exists under ``install_location``
    at the same relative path.
    """

    def __init__(
        self,
        name: str,
        app_dir: Path,
        install_location: Path,
        use_user: bool = False,
        controller: _AbstractController | None = None,
    ):
        self.name = name
        self.app_dir = app_dir
        self.install_location = install_location
        self.use_user = use_user
        self.controller = controller if controller is not None else SystemdController(user=use_user)

    @classmethod
    def load(cls, root: Path, name: str, controller_factory: ControllerFactory | None = None) -> "App":
        """Build an app from ``<root>/<name>/config.toml``.

        Raises:
            ConfigError: If the configuration file is missing or invalid
        """
        app_dir = root / name
        config = AppConfig.load(app_dir / CONFIG_FILE_NAME)
        use_user = config.systemd.use_user
        controller = controller_factory(use_user) if controller_factory is not None else None
        return cls(
            name=name,
            app_dir=app_dir,
            install_location=config.systemd.install_location,
            use_user=use_user,
            controller=controller,
        )

    @property
    def service_name(self) -> str:
        """Primary unit started after install."""
        return f"{self.name}{SERVICE_SUFFIX}"

    def get_app_files(self) -> list[Path]:
        """Absolute source paths of the manifest.

        Raises:
            ManifestError: If the source tree cannot be walked
        """
        return _walk_app_files(self.app_dir)

    def target_path(self, source: Path) -> Path:
        """Where a manifest file lives once installed."""
        return self.install_location / source.relative_to(self.app_dir)

    def files_installed(self) -> bool:
        """Whether every manifest file exists at its target path."""
        for source in self.get_app_files():
            if not self.target_path(source).exists():
                return False
        return True

    def get_status(self) -> AppStatus:
        """Compute the status from the target directory and the service manager."""
        if not self.files_installed():
            return AppStatus.NOT_INSTALLED
        if self.controller.is_active(self.service_name):
            return AppStatus.RUNNING
        if self.controller.is_enabled(self.service_name):
            return AppStatus.STOPPED
        return AppStatus.INSTALLED

    def _scope_suffix(self) -> str:
        return " as user" if self.use_user else ""

    def install(self, dry_run: bool = False, force: bool = False) -> list[str]:
        """Copy the manifest into the install location, reload systemd and start the service.

        Args:
            dry_run: Only report what would be done
            force: Overwrite files that already exist in the install location

        Returns:
            Actions performed (or planned, for a dry run), in order

        Raises:
            EmptyManifestError: If the app has no files
            CollisionError: If a target exists and ``force`` is false; nothing is copied
            CopyError: If a copy fails or a target is a directory; files copied before it are left in place
            ServiceCommandError: If daemon-reload or start fails
        """
        app_files = self.get_app_files()
        if not app_files:
            raise EmptyManifestError(self.name)

        actions: list[str] = []
        if dry_run:
            logger.info(f"[DRY RUN] Would install app {self.name}")
            for source in app_files:
                actions.append(f"copy {source} -> {self.target_path(source)}")
            actions.append(f"reload systemd and start {self.service_name}{self._scope_suffix()}")
            for action in actions:
                logger.info(f"[DRY RUN] Would {action}")
            return actions

        # Check every target before touching anything
        if not force:
            for source in app_files:
                target = self.target_path(source)
                # A dangling symlink still occupies the target path
                if target.exists() or target.is_symlink():
                    raise CollisionError(target)

        for source in app_files:
            target = self.target_path(source)
            if target.is_dir() and not target.is_symlink():
                raise CopyError(source, target, "target is a directory")
            try:
                target.parent.mkdir(parents=True, exist_ok=True)
                # Replace a symlink instead of writing through it
                if target.is_symlink():
                    target.unlink()
                shutil.copy2(source, target)
            except OSError as e:
                raise CopyError(source, target, e.strerror or str(e)) from e
            logger.info(f"Copied {source} to {target}")
            actions.append(f"copy {source} -> {target}")

        self.controller.daemon_reload()
        actions.append("daemon-reload")
        self.controller.start(self.service_name)
        actions.append(f"start {self.service_name}")
        logger.info(f"App {self.name} installed and started")
        return actions

    def uninstall(
        self,
        dry_run: bool = False,
        force: bool = False,
        confirm: Callable[[str], bool] | None = None,
    ) -> list[str] | None:
        """Stop the service, remove installed files and reload systemd.

        Stopping and per-file removal are best effort: failures are logged and
        the uninstall carries on. The final daemon-reload must succeed.

        Args:
            dry_run: Only report what would be done
            force: Skip the confirmation prompt
            confirm: Asked a yes/no question when ``force`` is false

        Returns:
            Actions performed (or planned), or None if the user declined

        Raises:
            EmptyManifestError: If the app has no files
            ServiceCommandError: If the final daemon-reload fails
        """
        app_files = self.get_app_files()
        if not app_files:
            raise EmptyManifestError(self.name)

        if dry_run:
            actions = [f"stop {self.service_name}{self._scope_suffix()}"]
            actions.extend(f"remove {self.target_path(source)}" for source in app_files)
            for action in actions:
                logger.info(f"[DRY RUN] Would {action}")
            return actions

        if not force:
            prompt = f"Are you sure you want to uninstall {self.name}?"
            if confirm is None or not confirm(prompt):
                logger.info(f"Uninstall of {self.name} cancelled")
                return None

        actions = []
        try:
            self.controller.stop(self.service_name)
            actions.append(f"stop {self.service_name}")
        except ServiceCommandError as e:
            logger.warning(f"Could not stop {self.service_name}: {e}")

        for source in app_files:
            target = self.target_path(source)
            try:
                target.unlink()
            except OSError as e:
                logger.warning(f"Could not remove {target}: {e.strerror or e}")
                continue
            logger.info(f"Removed file {target}")
            actions.append(f"remove {target}")

        self.controller.daemon_reload()
        actions.append("daemon-reload")
        logger.info(f"App {self.name} uninstalled")
        return actions

    def logs(self) -> None:
        """Follow the journal of the primary unit until interrupted.

        Raises:
            ServiceCommandError: If the log viewer exits non-zero
        """
        self.controller.follow_logs(self.service_name)
