"""Unit tests for units.api.fleet.Fleet."""

import pytest

from units.api.app.AppStatus import AppStatus
from units.api.app.CollisionError import CollisionError
from units.api.app.EmptyManifestError import EmptyManifestError
from units.api.config.ConfigError import ConfigError
from units.api.fleet.Fleet import Fleet


@pytest.fixture
def fleet(fleet_root, controller_factory) -> Fleet:
    return Fleet(fleet_root, controller_factory=controller_factory)


def test_discover_apps_sorted_and_skips_hidden(fleet, fleet_root, install_dir, write_app):
    write_app(fleet_root, "zeta", {"zeta.service": ""}, install_dir)
    write_app(fleet_root, "alpha", {"alpha.service": ""}, install_dir)
    (fleet_root / ".git").mkdir()
    (fleet_root / "README.md").write_text("")

    assert [app.name for app in fleet.discover_apps()] == ["alpha", "zeta"]


def test_discover_is_recomputed_each_call(fleet, fleet_root, install_dir, write_app):
    assert fleet.discover_apps() == []
    write_app(fleet_root, "webapp", {"webapp.service": ""}, install_dir)
    assert [app.name for app in fleet.discover_apps()] == ["webapp"]


def test_discover_fails_on_candidate_without_config(fleet, fleet_root, install_dir, write_app):
    write_app(fleet_root, "webapp", {"webapp.service": ""}, install_dir)
    (fleet_root / "broken").mkdir()
    with pytest.raises(ConfigError):
        fleet.discover_apps()


def test_discover_missing_root(tmp_path):
    with pytest.raises(ConfigError, match="Cannot list fleet root"):
        Fleet(tmp_path / "missing").discover_apps()


def test_status_all(fleet, fleet_root, install_dir, write_app, controller):
    write_app(fleet_root, "api", {"api.service": ""}, install_dir)
    write_app(fleet_root, "web", {"web.service": ""}, install_dir)
    (install_dir / "web.service").write_text("")
    controller.enabled = True

    statuses = [(app.name, status) for app, status in fleet.status()]

    assert statuses == [("api", AppStatus.NOT_INSTALLED), ("web", AppStatus.STOPPED)]


def test_status_single_name_skips_discovery(fleet, fleet_root, install_dir, write_app):
    write_app(fleet_root, "web", {"web.service": ""}, install_dir)
    (fleet_root / "broken").mkdir()
    assert [app.name for app, _ in fleet.status("web")] == ["web"]


def test_status_unknown_name(fleet):
    with pytest.raises(ConfigError):
        list(fleet.status("nope"))


def test_install_all_in_order(fleet_root, install_dir, write_app, controller_factory, controller):
    write_app(fleet_root, "b", {"b.service": ""}, install_dir)
    write_app(fleet_root, "a", {"a.service": ""}, install_dir)
    fleet = Fleet(fleet_root, controller_factory=controller_factory)

    names = [app.name for app, _ in fleet.install_apps()]

    assert names == ["a", "b"]
    starts = [call for call in controller.mutations if call[0] == "start"]
    assert starts == [("start", "a.service"), ("start", "b.service")]


def test_install_batch_stops_at_first_error(fleet_root, install_dir, write_app, controller_factory, controller):
    write_app(fleet_root, "a", {"a.service": ""}, install_dir)
    write_app(fleet_root, "b", {"b.service": ""}, install_dir)
    write_app(fleet_root, "c", {"c.service": ""}, install_dir)
    (install_dir / "b.service").write_text("existing")
    fleet = Fleet(fleet_root, controller_factory=controller_factory)

    done = []
    with pytest.raises(CollisionError):
        for app, _ in fleet.install_apps():
            done.append(app.name)

    assert done == ["a"]
    assert not (install_dir / "c.service").exists()


def test_install_uses_fleet_policy(fleet_root, install_dir, write_app, controller_factory, controller):
    write_app(fleet_root, "a", {"a.service": "new"}, install_dir)
    (install_dir / "a.service").write_text("old")

    dry = Fleet(fleet_root, dry_run=True, controller_factory=controller_factory)
    list(dry.install_apps("a"))
    assert (install_dir / "a.service").read_text() == "old"
    assert controller.calls == []

    forced = Fleet(fleet_root, force=True, controller_factory=controller_factory)
    list(forced.install_apps("a"))
    assert (install_dir / "a.service").read_text() == "new"


def test_install_empty_app_aborts(fleet, fleet_root, install_dir, write_app):
    write_app(fleet_root, "empty", {}, install_dir)
    with pytest.raises(EmptyManifestError):
        list(fleet.install_apps())


def test_uninstall_passes_confirm(fleet_root, install_dir, write_app, controller_factory):
    write_app(fleet_root, "a", {"a.service": ""}, install_dir)
    write_app(fleet_root, "b", {"b.service": ""}, install_dir)
    (install_dir / "a.service").write_text("")
    (install_dir / "b.service").write_text("")
    prompts = []

    def confirm(prompt: str) -> bool:
        prompts.append(prompt)
        return prompt.endswith("b?")

    fleet = Fleet(fleet_root, confirm=confirm, controller_factory=controller_factory)
    results = {app.name: actions for app, actions in fleet.uninstall_apps()}

    assert results["a"] is None
    assert results["b"] is not None
    assert (install_dir / "a.service").exists()
    assert not (install_dir / "b.service").exists()
    assert len(prompts) == 2


def test_show_logs(fleet, fleet_root, install_dir, write_app, controller):
    write_app(fleet_root, "web", {"web.service": ""}, install_dir)
    fleet.show_logs("web")
    assert controller.mutations == [("logs", "web.service")]
