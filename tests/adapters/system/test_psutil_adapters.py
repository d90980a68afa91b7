from types import SimpleNamespace
from unittest.mock import MagicMock

import psutil

from sysfetch.adapters.hardware import CPUINFO_PATH, PsutilHardwareProbe
from sysfetch.adapters.processes import PsutilProcessLister
from tests.kernel.mocks import FakeFileReader


def fake_proc(name=None, error=None):
    proc = MagicMock()
    proc.info = {"name": name}
    if error is not None:
        proc.name.side_effect = error
    else:
        proc.name.return_value = name
    return proc


def test_process_names_in_iteration_order(mocker):
    mocker.patch(
        "sysfetch.adapters.processes.psutil.process_iter",
        return_value=[fake_proc("systemd"), fake_proc("sway"), fake_proc("bash")],
    )
    assert list(PsutilProcessLister().process_names()) == ["systemd", "sway", "bash"]


def test_processes_that_vanish_are_skipped(mocker):
    mocker.patch(
        "sysfetch.adapters.processes.psutil.process_iter",
        return_value=[
            fake_proc(None, error=psutil.NoSuchProcess(42)),
            fake_proc(None, error=psutil.AccessDenied(43)),
            fake_proc("kwin_x11"),
        ],
    )
    assert list(PsutilProcessLister().process_names()) == ["kwin_x11"]


def test_cpu_model_from_cpuinfo():
    reader = FakeFileReader({
        CPUINFO_PATH: b"processor\t: 0\nvendor_id\t: AuthenticAMD\nmodel name\t: AMD Ryzen 7 5800X 8-Core Processor\n",
    })
    assert PsutilHardwareProbe(reader).cpu_model() == "AMD Ryzen 7 5800X 8-Core Processor"


def test_cpu_model_falls_back_to_platform(mocker):
    mocker.patch("sysfetch.adapters.hardware.platform.processor", return_value="arm")
    assert PsutilHardwareProbe(FakeFileReader()).cpu_model() == "arm"


def test_cpu_model_survives_read_error(mocker):
    mocker.patch("sysfetch.adapters.hardware.platform.processor", return_value="x86_64")
    reader = FakeFileReader(error=PermissionError(13, "Permission denied"))
    assert PsutilHardwareProbe(reader).cpu_model() == "x86_64"


def test_memory_usage_format(mocker):
    gib = 1024 ** 3
    mocker.patch(
        "sysfetch.adapters.hardware.psutil.virtual_memory",
        return_value=SimpleNamespace(total=16 * gib, available=12 * gib),
    )
    assert PsutilHardwareProbe(FakeFileReader()).memory_usage() == "4.00 GiB / 16.00 GiB (25%)"
