import pytest
from unittest.mock import patch

from sysfetch.internal.logging import setup_logging
from tests.kernel.mocks import ARCH_ART, FALLBACK_ART



@pytest.fixture(autouse=True)
def quiet_logging():
    """
    Route logs to a NullHandler for every test so nothing leaks onto stdout.
    Tests that exercise logging reset the flag themselves.
    """
    with patch("sysfetch.internal.logging._LOGGING_CONFIGURED", False):
        setup_logging(log_level_name="DEBUG", console_output=False)
        yield


@pytest.fixture
def logo_dir(tmp_path):
    """A logo directory with the fallback and an arch logo, but no ubuntu logo."""
    directory = tmp_path / "logo"
    directory.mkdir()
    (directory / "unknown.txt").write_text(FALLBACK_ART, encoding="utf-8")
    (directory / "arch.txt").write_text(ARCH_ART, encoding="utf-8")
    return directory


@pytest.fixture
def empty_logo_dir(tmp_path):
    """A logo directory missing even the fallback."""
    directory = tmp_path / "empty_logo"
    directory.mkdir()
    return directory
