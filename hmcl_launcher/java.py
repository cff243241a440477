"""Locating a Java installation through environment variables and the registry."""

from __future__ import annotations

import os
from collections.abc import Iterator, Mapping
from typing import Protocol

from hmcl_launcher.version import Version

try:
    import winreg
except ImportError:  # not on Windows
    winreg = None  # type: ignore[assignment]

JAVA_8 = Version.parse("1.8")
JAVA_11 = Version.parse("11")

JDK_NEW = "SOFTWARE\\JavaSoft\\JDK"
JRE_NEW = "SOFTWARE\\JavaSoft\\JRE"
JDK_OLD = "SOFTWARE\\JavaSoft\\Java Development Kit"
JRE_OLD = "SOFTWARE\\JavaSoft\\Java Runtime Environment"

REGISTRY_KEYS = (JDK_NEW, JRE_NEW, JDK_OLD, JRE_OLD)
ENVIRONMENT_VARIABLES = ("HMCL_JAVA_HOME", "JAVA_HOME")


class JavaRegistry(Protocol):
    """Anything that can list Java installations registered under a key."""

    def java_homes(self, sub_key: str) -> Iterator[tuple[str, str]]: ...


class WindowsRegistry:
    """Reads Java installations from ``HKEY_LOCAL_MACHINE``.

    On systems without a registry it reports no installations.
    """

    def java_homes(self, sub_key: str) -> Iterator[tuple[str, str]]:
        """Yield ``(version name, JavaHome)`` for each child of ``sub_key`` that has one."""
        if winreg is None:
            return
        try:
            key = winreg.OpenKey(
                winreg.HKEY_LOCAL_MACHINE,
                sub_key,
                0,
                winreg.KEY_WOW64_64KEY | winreg.KEY_READ,
            )
        except OSError:
            return
        with key:
            try:
                sub_key_count = winreg.QueryInfoKey(key)[0]
            except OSError:
                return
            for index in range(sub_key_count):
                try:
                    name = winreg.EnumKey(key, index)
                except OSError:
                    continue
                try:
                    with winreg.OpenKey(key, name, 0, winreg.KEY_READ) as java_key:
                        home, _ = winreg.QueryValueEx(java_key, "JavaHome")
                except OSError:
                    continue
                yield name, str(home)


class JavaFinder:
    """Finds a Java home directory, remembering whether only old Java was seen."""

    def __init__(
        self,
        registry: JavaRegistry | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.registry: JavaRegistry = WindowsRegistry() if registry is None else registry
        self.environ: Mapping[str, str] = os.environ if environ is None else environ
        self.old_java_found = False

    def find_by_registry_key(self, sub_key: str) -> str | None:
        """Return the first Java home of version 1.8 or later registered under ``sub_key``."""
        for name, home in self.registry.java_homes(sub_key):
            if Version.parse(name) < JAVA_8:
                self.old_java_found = True
            else:
                return home
        return None

    def find_in_registry(self) -> str | None:
        """Search the JDK and JRE keys, new layout first."""
        for sub_key in REGISTRY_KEYS:
            home = self.find_by_registry_key(sub_key)
            if home is not None:
                return home
        return None

    def find(self) -> str | None:
        """Return a Java home from ``HMCL_JAVA_HOME``, ``JAVA_HOME`` or the registry."""
        for variable in ENVIRONMENT_VARIABLES:
            value = self.environ.get(variable)
            if value:
                return value
        return self.find_in_registry()