import pytest


@pytest.fixture
def simulate():
    from ridhelper.runtime.host import HostEnvironment

    return HostEnvironment.simulate


@pytest.fixture(autouse=True)
def _pin_default_host(monkeypatch):
    # Lookups without `host=` use the process-wide default; pin it to a known host.
    import ridhelper.runtime.host as hmod

    monkeypatch.setattr(hmod, "HOST", hmod.HostEnvironment.simulate("linux", "x64"))
