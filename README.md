# hmcl-launcher

Starts the HMCL Minecraft launcher jar with the first suitable Java runtime
it can find on a Windows machine.

## Usage

Install the package and run:

```
hmcl-launcher [JAR]
```

`JAR` is the path of the jar to start. Without it, the path of the running
program is used. The directory part of that path becomes the working
directory of the Java process, and the file name is passed to `-jar`.

The command exits with status 0 as soon as a Java process has been started,
and with status 1 if no Java could be started.

## Where it looks for Java

Candidates are tried in this order, and the first that starts wins:

1. A runtime bundled next to the jar: `jre-arm64\bin\javaw.exe` on ARM64,
   `jre-x64\bin\javaw.exe` on x86-64, then `jre-x86\bin\javaw.exe` on every
   machine.
2. The Java home named by `HMCL_JAVA_HOME`, then `JAVA_HOME`, then the
   JavaSoft keys under `HKEY_LOCAL_MACHINE` (`JDK`, `JRE`,
   `Java Development Kit`, `Java Runtime Environment`, in that order).
   Registry entries whose version is older than 1.8 are skipped. On systems
   without a registry only the environment variables are consulted.
3. Every subdirectory of the vendor directories `Java`, `Microsoft`,
   `BellSoft`, `Zulu`, `Eclipse Foundation`, `AdoptOpenJDK` and `Semeru`
   under `Program Files` and then `Program Files (x86)`, looking for
   `bin\javaw.exe`.
4. `javaw` on the `PATH`.
5. Runtimes downloaded by HMCL into `.hmcl\java\windows-arm64`,
   `windows-x86_64` or `windows-x86` (by architecture) under the directory
   named by `APPDATA`, or `USERPROFILE` if that is not set.

Runtimes from steps 2, 3 and 5 are only used if the executable carries an
embedded file version of 8 or later. Bundled runtimes and `javaw` on the
`PATH` are started without that check.

The native architecture is taken from `PROCESSOR_ARCHITEW6432` or
`PROCESSOR_ARCHITECTURE`, falling back to the machine type reported by
Python. The `Program Files` directories come from the `ProgramFiles` and
`ProgramFiles(x86)` variables, with `C:\Program Files\` and
`C:\Program Files (x86)\` as defaults.

## JVM options

Set `HMCL_JAVA_OPTS` to pass your own options to the JVM. Without it the
defaults are:

```
-XX:MinHeapFreeRatio=5 -XX:MaxHeapFreeRatio=15
```

The command line built for each candidate is:

```
"<javaw>" <options> -jar "<jar>"
```

## When no Java is found

A message is written to standard error, in Chinese when the current locale
is Simplified Chinese and in English otherwise, together with the Java
download page for the machine's architecture. When standard input is a
terminal, it asks whether to open that page and opens it in the web browser
on an empty answer or `y`, `yes` or `ok`.

There is no dialog window: the message and the question are shown on the
console only.

## Using it as a library

```python
from hmcl_launcher.version import Version

Version.parse("1.8.0_292") < Version.of(11)   # True
```

- `hmcl_launcher.version.Version` holds a four-part version; `parse` reads
  strings split by `.` and `_`, `of` builds one from up to four integers.
- `hmcl_launcher.java.JavaFinder` looks up a Java home with `find()`, from
  the environment and then a registry (`WindowsRegistry` by default, or any
  object with a `java_homes(sub_key)` method). Its `old_java_found` attribute
  tells whether only pre-1.8 registry entries were seen.
- `hmcl_launcher.launcher.Launcher` starts a JVM for a working directory,
  jar and options: `raw_launch` without a version check, `launch` with one,
  and `search_dir` over the subdirectories of a directory. The process
  starter and version reader can be passed in.
- `hmcl_launcher.osutil` has the helpers: `get_architecture`,
  `get_folder_path`, `path_append`, `path_add_backslash`,
  `quote_path_for_command_line`, `read_file_version`, `parse_file_version`,
  `temp_file_path` and `create_process`.

## Tests

```
pip install -e ".[test]"
pytest
```