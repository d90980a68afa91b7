import pytest

from sysfetch.kernel.packages import (
    PACKAGE_MANAGERS,
    UNSUPPORTED,
    count_packages,
    resolve_package_manager,
)
from sysfetch.kernel.contracts import PackageManagerBinding
from sysfetch.internal.constants import UNKNOWN_DISTRO
from tests.kernel.mocks import FakeCommandRunner


@pytest.mark.parametrize("distro_id, manager, command", [
    ("ubuntu", "dpkg", "dpkg -l | wc -l"),
    ("debian", "dpkg", "dpkg -l | wc -l"),
    ("fedora", "rpm", "rpm -qa | wc -l"),
    ("centos", "rpm", "rpm -qa | wc -l"),
    ("arch", "pacman", "pacman -Q | wc -l"),
    ("artix", "pacman", "pacman -Q | wc -l"),
    ("cachyos", "pacman", "pacman -Q | wc -l"),
])
def test_known_distributions(distro_id, manager, command):
    binding = resolve_package_manager(distro_id)
    assert binding == PackageManagerBinding(manager, command)
    assert binding.is_supported


@pytest.mark.parametrize("aliases", [
    ("ubuntu", "debian"),
    ("fedora", "centos"),
    ("arch", "artix", "cachyos"),
])
def test_aliases_share_a_binding(aliases):
    bindings = {resolve_package_manager(a) for a in aliases}
    assert len(bindings) == 1


@pytest.mark.parametrize("distro_id", [
    UNKNOWN_DISTRO, "gentoo", "nixos", "Ubuntu", "ARCH", "", "opensuse-tumbleweed",
])
def test_unknown_distributions_are_unsupported(distro_id):
    runner = FakeCommandRunner()
    binding = resolve_package_manager(distro_id)

    assert binding.name == "unknown"
    assert binding.count_command == ""
    assert not binding.is_supported
    assert count_packages(binding, runner) == "Package manager not supported."
    assert runner.calls == []


def test_table_has_no_entry_for_unsupported():
    assert UNSUPPORTED not in PACKAGE_MANAGERS.values()


def test_count_runs_command_through_shell():
    runner = FakeCommandRunner({("sh", "-c", "pacman -Q | wc -l"): "1203"})
    assert count_packages(resolve_package_manager("arch"), runner) == "1203"
    assert runner.calls == [("sh", "-c", "pacman -Q | wc -l")]


def test_count_passes_error_text_through():
    runner = FakeCommandRunner({("sh", "-c", "rpm -qa | wc -l"): "Error: exit status 127"})
    assert count_packages(resolve_package_manager("fedora"), runner) == "Error: exit status 127"
