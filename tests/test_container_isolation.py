"""ServiceContainer instance isolation and override behaviour."""
import pytest

from eventflow.core.container import ServiceContainer, Services
from eventflow.core.service_registry import build_container


def test_instance_isolation():
    """Two containers should NOT share state."""
    c1 = ServiceContainer()
    c2 = ServiceContainer()
    c2.register("test", lambda: "hello")

    assert c2.get("test") == "hello"
    with pytest.raises(KeyError, match="'test' not registered"):
        c1.get("test")


def test_lazy_singleton():
    calls = []
    c = ServiceContainer()
    c.register("svc", lambda: calls.append(1) or object())
    assert calls == []

    first = c.get("svc")
    assert c.get("svc") is first
    assert len(calls) == 1


def test_override_wins_over_factory(settings):
    c = build_container(settings)
    fake = object()
    c.override(Services.GITHUB, fake)
    assert c.get(Services.GITHUB) is fake


def test_built_container_wires_settings(settings):
    c = build_container(settings)
    assert c.get(Services.GITHUB).settings is settings
    assert c.get(Services.SITE_DATA).path == settings.site_data_path
    assert c.get(Services.SCRIPT_RUNNER).cwd == settings.SITE_ROOT
