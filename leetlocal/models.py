"""Data models for leetlocal."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from leetlocal.exceptions import UnsupportedLanguageError


class Language(enum.Enum):
    PYTHON = "python"
    JAVASCRIPT = "javascript"
    JAVA = "java"
    CPP = "cpp"
    GOLANG = "golang"
    CSHARP = "csharp"

    @classmethod
    def from_tag(cls, tag: str) -> Language:
        """Map a marker-line ``lang`` value to a language, or raise."""
        try:
            return _TAGS[tag]
        except KeyError:
            raise UnsupportedLanguageError(tag) from None


_TAGS: dict[str, Language] = {
    "python": Language.PYTHON,
    "python3": Language.PYTHON,
    "javascript": Language.JAVASCRIPT,
    "typescript": Language.JAVASCRIPT,
    "java": Language.JAVA,
    "cpp": Language.CPP,
    "c": Language.CPP,
    "golang": Language.GOLANG,
    "csharp": Language.CSHARP,
}


class RunStatus(enum.Enum):
    COMPLETED = "completed"
    FAILED = "failed"
    ABORTED = "aborted"  # user declined to provide input


@dataclass(frozen=True)
class ProblemMetadata:
    app: str
    id: str
    lang: str


@dataclass
class ExecutionResult:
    stdout: str
    stderr: str
    exit_code: int

    @property
    def output(self) -> str:
        return self.stdout or self.stderr


@dataclass
class RunOutcome:
    status: RunStatus
    metadata: ProblemMetadata | None = None
    result: str = ""
    error: str = ""
