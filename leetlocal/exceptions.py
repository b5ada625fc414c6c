"""Errors raised while running a solution locally."""


class LocalRunError(RuntimeError):
    """Base exception for local run failures."""


class UnsupportedLanguageError(LocalRunError):
    """Raised when the marker line names a language with no local runner."""

    def __init__(self, tag: str) -> None:
        super().__init__(f"Language {tag} is not yet supported for local execution.")
        self.tag = tag


class JavaClassNameNotFoundError(LocalRunError):
    """Raised when Java source declares no public class."""

    def __init__(self) -> None:
        super().__init__("Could not find Java class name")


class ToolchainStartError(LocalRunError):
    """Raised when a compiler or interpreter cannot be started at all."""

    def __init__(self, command: str, reason: str = "") -> None:
        message = (
            f"Failed to start '{command}'. "
            "Check that it is installed and available on your PATH."
        )
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.command = command


class CommandFailedError(LocalRunError):
    """Raised when a compile or run step exits with a non-zero code."""

    def __init__(self, exit_code: int, stderr: str) -> None:
        super().__init__(f"Command failed with exit code {exit_code}\n{stderr}")
        self.exit_code = exit_code
        self.stderr = stderr
