"""Local execution dispatcher: one handler per supported language."""

from __future__ import annotations

import secrets
import shutil
import sys
from pathlib import Path

from leetlocal import harness
from leetlocal.config import Config
from leetlocal.exceptions import JavaClassNameNotFoundError, ToolchainStartError
from leetlocal.metadata import extract_java_class_name
from leetlocal.models import Language
from leetlocal.process import run_command

TEMP_PREFIX = "leetcode_temp_"

CSHARP_NOT_IMPLEMENTED = (
    "C# local execution is not yet fully implemented. Please use the Test or Submit buttons."
)


def generate_temp_name(extension: str = "") -> str:
    """Return ``leetcode_temp_<32 hex chars>[.ext]`` with a random suffix."""
    name = f"{TEMP_PREFIX}{secrets.token_hex(16)}"
    return f"{name}.{extension}" if extension else name


class TempArtifacts:
    """Tracks every file and directory a run creates and removes them all.

    Paths are registered as soon as they are allocated, so release() also
    covers artifacts a failed step only partially produced (e.g. a binary
    the compiler never wrote).
    """

    def __init__(self, directory: Path, log=None) -> None:
        self.directory = directory
        self.paths: list[Path] = []
        self._log = log

    def new_path(self, extension: str = "") -> Path:
        path = self.directory / generate_temp_name(extension)
        self.paths.append(path)
        return path

    def write(self, extension: str, content: str) -> Path:
        path = self.new_path(extension)
        path.write_text(content, encoding="utf-8")
        return path

    def release(self) -> None:
        """Remove every registered path; a path that cannot be removed is skipped."""
        for path in reversed(self.paths):
            if path.is_dir():
                shutil.rmtree(path, ignore_errors=True)
            elif path.exists():
                try:
                    path.unlink(missing_ok=True)
                except OSError as e:
                    if self._log:
                        self._log(f"Could not remove {path.name}: {e}")
                    continue
            else:
                continue
            if self._log:
                self._log(f"Removed {path.name}")
        self.paths.clear()

    def __enter__(self) -> TempArtifacts:
        return self

    def __exit__(self, *exc_info) -> None:
        self.release()


class LocalExecutor:
    """Generates a harness for a solution file and runs it with the local toolchain."""

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or Config()
        self._handlers = {
            Language.PYTHON: self._run_python,
            Language.JAVASCRIPT: self._run_javascript,
            Language.JAVA: self._run_java,
            Language.CPP: self._run_cpp,
            Language.GOLANG: self._run_go,
            Language.CSHARP: self._run_csharp,
        }

    async def execute(
        self,
        file_path: str | Path,
        language: str,
        test_input: str,
        file_content: str,
    ) -> str:
        """Run *file_content* (read from *file_path*) against *test_input*.

        Raises UnsupportedLanguageError before touching the filesystem when
        the language tag has no handler.
        """
        handler = self._handlers[Language.from_tag(language)]
        directory = Path(file_path).resolve().parent
        return await handler(directory, test_input, file_content)

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    async def _run_python(self, directory: Path, test_input: str, source: str) -> str:
        with TempArtifacts(directory, self._verbose_log) as artifacts:
            input_file = artifacts.write("txt", test_input)
            script = artifacts.write("py", harness.build_python_harness(source, input_file))
            args = harness.python_bootstrap_args(script)
            first, *fallbacks = self.config.python_commands
            try:
                return await self._command(first, args, directory)
            except ToolchainStartError as error:
                for command in fallbacks:
                    try:
                        return await self._command(command, args, directory)
                    except ToolchainStartError:
                        continue
                raise error

    async def _run_javascript(self, directory: Path, test_input: str, source: str) -> str:
        with TempArtifacts(directory, self._verbose_log) as artifacts:
            input_file = artifacts.write("txt", test_input)
            script = artifacts.write("js", harness.build_javascript_harness(source, input_file))
            return await self._command(self.config.node_command, [str(script)], directory)

    async def _run_java(self, directory: Path, test_input: str, source: str) -> str:
        class_name = extract_java_class_name(source)
        if not class_name:
            raise JavaClassNameNotFoundError()

        with TempArtifacts(directory, self._verbose_log) as artifacts:
            input_file = artifacts.write("txt", test_input)
            # javac wants the public class in <ClassName>.java, so the
            # source and its .class files live in one random directory.
            build_dir = artifacts.new_path()
            build_dir.mkdir()
            java_file = build_dir / f"{class_name}.java"
            java_file.write_text(
                harness.build_java_harness(source, input_file), encoding="utf-8"
            )
            await self._command(
                self.config.javac_command,
                ["-d", str(build_dir), str(java_file)],
                directory,
            )
            return await self._command(
                self.config.java_command,
                ["-cp", str(build_dir), harness.JAVA_MAIN_CLASS],
                directory,
            )

    async def _run_cpp(self, directory: Path, test_input: str, source: str) -> str:
        with TempArtifacts(directory, self._verbose_log) as artifacts:
            input_file = artifacts.write("txt", test_input)
            cpp_file = artifacts.write("cpp", harness.build_cpp_harness(source, input_file))
            binary = artifacts.new_path("out")
            await self._command(
                self.config.cxx_command,
                ["-o", str(binary), str(cpp_file)],
                directory,
            )
            return await self._command(str(binary), [], directory)

    async def _run_go(self, directory: Path, test_input: str, source: str) -> str:
        with TempArtifacts(directory, self._verbose_log) as artifacts:
            input_file = artifacts.write("txt", test_input)
            go_file = artifacts.write("go", harness.build_go_harness(source, input_file))
            return await self._command(
                self.config.go_command, ["run", str(go_file)], directory
            )

    async def _run_csharp(self, directory: Path, test_input: str, source: str) -> str:
        return CSHARP_NOT_IMPLEMENTED

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _command(self, command: str, args: list[str], cwd: Path) -> str:
        self._verbose_log(f"$ {command} {' '.join(args)}")
        return await run_command(command, args, cwd=cwd)

    def _verbose_log(self, message: str) -> None:
        if self.config.verbose:
            print(message, file=sys.stderr)
