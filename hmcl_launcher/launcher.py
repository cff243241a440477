"""Launch the bundled jar with the best Java runtime that can be found."""

from __future__ import annotations

import argparse
import locale
import os
import sys
import webbrowser
from collections.abc import Callable, Mapping
from enum import Enum

from hmcl_launcher.java import JavaFinder
from hmcl_launcher.osutil import (
    Architecture,
    create_process,
    get_architecture,
    get_folder_path,
    path_add_backslash,
    path_append,
    read_file_version,
)
from hmcl_launcher.version import Version

J8 = Version.parse("8")

DEFAULT_JVM_OPTIONS = "-XX:MinHeapFreeRatio=5 -XX:MaxHeapFreeRatio=15"

VENDOR_DIRS = (
    "Java",
    "Microsoft",
    "BellSoft",
    "Zulu",
    "Eclipse Foundation",
    "AdoptOpenJDK",
    "Semeru",
)

HELP_PAGE = "https://docs.hmcl.net/help.html"

ERROR_TITLE = "Java not found"
ERROR_TITLE_ZH = "未找到 Java"
ERROR_PROMPT = (
    "The Java runtime environment is required to run HMCL and Minecraft,\n"
    "Click 'OK' to start downloading java.\n"
    "Please restart HMCL after installing Java."
)
ERROR_PROMPT_ZH = (
    "运行 HMCL 以及 Minecraft 需要 Java 运行时环境，点击“确定”开始下载。\n"
    "请在安装 Java 完成后重新启动 HMCL。"
)

_DOWNLOAD_LINKS = {
    Architecture.ARM64: "https://docs.hmcl.net/downloads/windows/arm64.html",
    Architecture.X86_64: "https://docs.hmcl.net/downloads/windows/x86_64.html",
    Architecture.X86: "https://docs.hmcl.net/downloads/windows/x86.html",
}

_HMCL_JAVA_PLATFORMS = {
    Architecture.ARM64: "windows-arm64",
    Architecture.X86_64: "windows-x86_64",
    Architecture.X86: "windows-x86",
}

_BUNDLED_JRE = {
    Architecture.ARM64: "jre-arm64\\bin\\javaw.exe",
    Architecture.X86_64: "jre-x64\\bin\\javaw.exe",
}
_BUNDLED_JRE_X86 = "jre-x86\\bin\\javaw.exe"

Spawn = Callable[[str, str], bool]
VersionReader = Callable[[str], "Version | None"]


def build_command(java_path: str, jvm_options: str, jar_path: str) -> str:
    """Return the command line that runs ``jar_path`` with ``java_path``."""
    return f'"{java_path}" {jvm_options} -jar "{jar_path}"'


def error_message(use_chinese: bool) -> tuple[str, str]:
    """Return the ``(title, prompt)`` shown when no Java is found."""
    if use_chinese:
        return ERROR_TITLE_ZH, ERROR_PROMPT_ZH
    return ERROR_TITLE, ERROR_PROMPT


def download_link(architecture: Architecture) -> str:
    """Return the Java download page for ``architecture``."""
    return _DOWNLOAD_LINKS[architecture]


def hmcl_java_dir(
    architecture: Architecture, environ: Mapping[str, str] | None = None
) -> str | None:
    """Return the directory where HMCL keeps its own Java downloads, if known."""
    base = get_folder_path("appdata", environ) or get_folder_path("profile", environ)
    if base is None:
        return None
    for part in (".hmcl", "java", _HMCL_JAVA_PLATFORMS[architecture]):
        base = path_append(base, part)
    return path_add_backslash(base)


class Launcher:
    """Starts the jar with a given Java, checking its version where asked."""

    def __init__(
        self,
        workdir: str,
        jar_path: str,
        jvm_options: str,
        spawn: Spawn | None = None,
        version_reader: VersionReader | None = None,
    ) -> None:
        self.workdir = workdir
        self.jar_path = jar_path
        self.jvm_options = jvm_options
        self.spawn: Spawn = create_process if spawn is None else spawn
        self.version_reader: VersionReader = (
            read_file_version if version_reader is None else version_reader
        )

    def raw_launch(self, java_path: str) -> bool:
        """Start the jar with ``java_path`` unchecked; return whether it started."""
        command = build_command(java_path, self.jvm_options, self.jar_path)
        return self.spawn(command, self.workdir)

    def launch(self, java_path: str) -> bool:
        """Start the jar if ``java_path`` is Java 8 or later."""
        version = self.version_reader(java_path)
        if version is None or not J8 <= version:
            return False
        return self.raw_launch(java_path)

    def search_dir(self, base_dir: str) -> bool:
        """Try ``<child>/bin/javaw.exe`` for every child of ``base_dir``."""
        try:
            names = sorted(os.listdir(base_dir))
        except OSError:
            return False
        for name in names:
            javaw = os.path.join(base_dir, name, "bin", "javaw.exe")
            if os.path.exists(javaw) and self.launch(javaw):
                return True
        return False


def _prefers_chinese() -> bool:
    try:
        language = locale.getlocale()[0] or ""
    except ValueError:
        return False
    language = language.replace("-", "_").lower()
    return language.startswith(("zh_cn", "chinese (simplified)"))


def _split_exe_path(exe_path: str) -> tuple[str, str]:
    last_slash = max(exe_path.rfind("/"), exe_path.rfind("\\"))
    if last_slash != -1 and last_slash + 1 < len(exe_path):
        return exe_path[:last_slash], exe_path[last_slash + 1 :]
    return "", exe_path


def _report_missing_java(architecture: Architecture) -> None:
    title, prompt = error_message(_prefers_chinese())
    link = download_link(architecture)
    print(f"{title}\n{prompt}\n{link}", file=sys.stderr)
    if sys.stdin is not None and sys.stdin.isatty():
        try:
            answer = input("Open the download page? [Y/n] ").strip().lower()
        except EOFError:
            return
        if answer in ("", "y", "yes", "ok"):
            webbrowser.open(link)


def _vendor_dirs(program_files: str) -> list[str]:
    return [path_add_backslash(path_append(program_files, vendor)) for vendor in VENDOR_DIRS]


def main(argv: list[str] | None = None) -> int:
    """Find a suitable Java and start the jar; return 0 once it is started."""
    parser = argparse.ArgumentParser(description="Start HMCL with a suitable Java runtime.")
    parser.add_argument("jar", nargs="?", default=sys.argv[0], help="path of the jar to run")
    args = parser.parse_args(argv)

    workdir, jar_name = _split_exe_path(args.jar)
    jvm_options = os.environ.get("HMCL_JAVA_OPTS") or DEFAULT_JVM_OPTIONS
    architecture = get_architecture()
    launcher = Launcher(workdir, jar_name, jvm_options)

    bundled = [_BUNDLED_JRE[architecture]] if architecture in _BUNDLED_JRE else []
    bundled.append(_BUNDLED_JRE_X86)
    if any(launcher.raw_launch(java) for java in bundled):
        return 0

    java_home = JavaFinder().find()
    if java_home is not None and launcher.launch(java_home + "\\bin\\javaw.exe"):
        return 0

    search_dirs = _vendor_dirs(get_folder_path("program_files") or "C:\\Program Files\\")
    search_dirs += _vendor_dirs(
        get_folder_path("program_files_x86") or "C:\\Program Files (x86)\\"
    )
    if any(launcher.search_dir(directory) for directory in search_dirs):
        return 0

    if launcher.raw_launch("javaw"):
        return 0

    own_dir = hmcl_java_dir(architecture)
    if own_dir and launcher.search_dir(own_dir):
        return 0

    _report_missing_java(architecture)
    return 1


class _Exit(Enum):
    OK = 0
    FAILED = 1


if __name__ == "__main__":
    sys.exit(main())