"""
Basic tests to ensure pytest is working correctly.
"""


def test_import_project():
    """Test that project modules can be imported."""
    import doodle_dash.ai  # noqa: F401
    import doodle_dash.client  # noqa: F401
    import doodle_dash.shared  # noqa: F401


def test_version():
    """Test that version info is available."""
    from doodle_dash import __version__

    assert __version__ == "0.1.0"
    assert isinstance(__version__, str)


def test_client_entrypoint():
    """The console script target exists."""
    from doodle_dash.client.main import main

    assert callable(main)
