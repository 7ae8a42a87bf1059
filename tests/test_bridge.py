import pytest

from objdemos.bridge import (
    Computer,
    Lenovo,
    LinuxOS,
    Mac,
    OperatingSystem,
    UnixOS,
    WindowsOS,
    main,
)


@pytest.mark.parametrize(
    "computer, expected",
    [
        (Mac(LinuxOS()), "This is MAC, Install Linux OS"),
        (Lenovo(WindowsOS()), "This is Lenovo, Install Windows OS"),
        (Lenovo(UnixOS()), "This is Lenovo, Install Unix OS"),
        (Mac(UnixOS()), "This is MAC, Install Unix OS"),
    ],
)
def test_install_os_combines_both_sides(computer, expected):
    assert computer.install_os() == expected


def test_install_os_is_info_followed_by_system_message():
    system = WindowsOS()
    computer = Mac(system)
    assert computer.install_os() == computer.info() + system.install_message()


def test_abstract_classes_cannot_be_instantiated():
    with pytest.raises(TypeError):
        OperatingSystem()
    with pytest.raises(TypeError):
        Computer(LinuxOS())


def test_main_prints_three_reports(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [
        "This is MAC, Install Linux OS",
        "This is Lenovo, Install Windows OS",
        "This is Lenovo, Install Unix OS",
    ]