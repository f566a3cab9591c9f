"""Basic import tests to verify package structure."""


def test_import_pulsesim():
    """Verify main package imports."""
    import pulsesim
    assert pulsesim.__version__ == "0.1.0"


def test_import_core():
    """Verify core module structure exists."""
    from pulsesim import core
    assert hasattr(core, "__doc__")
    assert hasattr(core, "run_tick")


def test_import_analysis():
    """Verify analysis module structure exists."""
    from pulsesim import analysis
    assert hasattr(analysis, "compose_periods")


def test_import_viz():
    """Verify viz module structure exists."""
    from pulsesim import viz
    assert hasattr(viz, "plot_pulse_counts")
