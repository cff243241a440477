import os
import struct
import sys
import tempfile

import pytest

from hmcl_launcher.osutil import (
    Architecture,
    create_process,
    get_architecture,
    get_folder_path,
    parse_file_version,
    path_add_backslash,
    path_append,
    quote_path_for_command_line,
    read_file_version,
    temp_file_path,
)
from hmcl_launcher.version import Version


def _fixed_info(ms, ls, padding=b"\x00" * 8):
    return padding + struct.pack("<4I", 0xFEEF04BD, 0x00010000, ms, ls) + b"\x00" * 8


@pytest.mark.parametrize(
    ("env", "expected"),
    [
        ({"PROCESSOR_ARCHITECTURE": "AMD64"}, Architecture.X86_64),
        ({"PROCESSOR_ARCHITECTURE": "ARM64"}, Architecture.ARM64),
        ({"PROCESSOR_ARCHITECTURE": "x86"}, Architecture.X86),
        ({"PROCESSOR_ARCHITECTURE": "x86", "PROCESSOR_ARCHITEW6432": "AMD64"}, Architecture.X86_64),
        ({}, Architecture.X86),
    ],
)
def test_get_architecture(env, expected):
    assert get_architecture(env) is expected


def test_path_add_backslash():
    assert path_add_backslash("C:\\Java") == "C:\\Java\\"
    assert path_add_backslash("C:\\Java\\") == "C:\\Java\\"


def test_path_append():
    assert path_append("C:\\Program Files", "Java") == "C:\\Program Files\\Java"
    assert path_append("C:\\Program Files\\", "Java") == "C:\\Program Files\\Java"


def test_quote_plain_path():
    path = "C:\\Program Files\\HMCL.exe"
    assert quote_path_for_command_line(path) == '"' + path + '"'


def test_quote_trailing_backslash_doubled():
    assert quote_path_for_command_line("C:\\dir\\") == '"C:\\dir\\\\"'


def test_quote_embedded_quote_escaped():
    assert quote_path_for_command_line('a"b') == '"a\\"b"'


def test_quote_backslash_before_quote():
    assert quote_path_for_command_line('a\\"b') == '"a\\\\\\"b"'


def test_parse_file_version():
    data = _fixed_info((1 << 16) | 2, (3 << 16) | 4)
    assert parse_file_version(data) == Version.of(1, 2, 3, 4)


def test_parse_file_version_skips_unaligned_signature():
    data = b"\x00" + struct.pack("<I", 0xFEEF04BD) + b"\x00\x00\x00" + _fixed_info((8 << 16), 0)
    assert parse_file_version(data) == Version.of(8)


def test_parse_file_version_missing():
    assert parse_file_version(b"MZ" + b"\x00" * 64) is None


def test_read_file_version(tmp_path):
    exe = tmp_path / "javaw.exe"
    exe.write_bytes(_fixed_info((17 << 16), (2 << 16) | 8))
    assert read_file_version(exe) == Version.of(17, 0, 2, 8)


def test_read_file_version_missing_file(tmp_path):
    assert read_file_version(tmp_path / "absent.exe") is None


def test_temp_file_path_shape():
    path = temp_file_path("hmcl-", "ps1")
    name = os.path.basename(path)
    assert os.path.dirname(path) == tempfile.gettempdir()
    assert name.startswith("hmcl-{")
    assert name.endswith("}.ps1")


def test_temp_file_path_unique():
    assert len({temp_file_path("x", "tmp") for _ in range(20)}) == 20


def test_create_process_success(tmp_path):
    command = quote_path_for_command_line(sys.executable) + ' -c "pass"'
    assert create_process(command, str(tmp_path)) is True


def test_create_process_failure(tmp_path):
    missing = str(tmp_path / "no-such-program")
    assert create_process(quote_path_for_command_line(missing), "") is False


def test_get_folder_path_from_environment():
    env = {"APPDATA": "C:\\Users\\u\\AppData\\Roaming", "USERPROFILE": "C:\\Users\\u"}
    assert get_folder_path("appdata", env) == "C:\\Users\\u\\AppData\\Roaming"
    assert get_folder_path("profile", env) == "C:\\Users\\u"
    assert get_folder_path("program_files", env) is None


def test_get_folder_path_program_files_x86():
    env = {"ProgramFiles(x86)": "D:\\Apps86"}
    assert get_folder_path("program_files_x86", env) == "D:\\Apps86"


def test_get_folder_path_unknown_name():
    with pytest.raises(ValueError):
        get_folder_path("desktop", {})