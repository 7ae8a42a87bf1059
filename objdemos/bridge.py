"""Bridge pattern: computers combined with whichever operating system they are given."""

from __future__ import annotations

from abc import ABC, abstractmethod


class OperatingSystem(ABC):
    """The implementation side of the bridge."""

    @abstractmethod
    def install_message(self) -> str:
        """Return the line reported when this system is installed."""


class LinuxOS(OperatingSystem):
    def install_message(self) -> str:
        return "Install Linux OS"


class WindowsOS(OperatingSystem):
    def install_message(self) -> str:
        return "Install Windows OS"


class UnixOS(OperatingSystem):
    def install_message(self) -> str:
        return "Install Unix OS"


class Computer(ABC):
    """The abstraction side of the bridge; holds an operating system."""

    def __init__(self, os: OperatingSystem) -> None:
        self.os = os

    @abstractmethod
    def info(self) -> str:
        """Return the prefix that names this computer."""

    def install_os(self) -> str:
        """Return the report of installing the held system on this computer."""
        return self.info() + self.os.install_message()


class Mac(Computer):
    def info(self) -> str:
        return "This is MAC, "


class Lenovo(Computer):
    def info(self) -> str:
        return "This is Lenovo, "


def main(argv: list[str] | None = None) -> int:
    """Install three system/computer combinations and print the reports."""
    computers = [Mac(LinuxOS()), Lenovo(WindowsOS()), Lenovo(UnixOS())]
    for computer in computers:
        print(computer.install_os())
    return 0