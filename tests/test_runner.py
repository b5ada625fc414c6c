"""Tests for the top-level run_local action."""

from __future__ import annotations

import asyncio
import os
import sys
from unittest.mock import AsyncMock, MagicMock

from leetlocal.config import Config
from leetlocal.exceptions import CommandFailedError, UnsupportedLanguageError
from leetlocal.models import RunStatus
from leetlocal.output import BANNER, Notifier, OutputChannel
from leetlocal.runner import (
    COMPLETED_MESSAGE,
    FAILED_MESSAGE,
    NO_FILE_MESSAGE,
    NO_METADATA_MESSAGE,
    run_local,
)

SOURCE = """\
# @lc app=leetcode id=1 lang=python3
class Solution:
    def twoSum(self, nums, target):
        seen = {}
        for i, n in enumerate(nums):
            if target - n in seen:
                return [seen[target - n], i]
            seen[n] = i
"""


def _run(file_path, **kwargs):
    channel = OutputChannel()
    notifier = Notifier()
    kwargs.setdefault("config", Config(python_commands=[sys.executable]))
    outcome = asyncio.run(run_local(file_path, channel, notifier, **kwargs))
    return outcome, channel, notifier


def _solution(tmp_path, source=SOURCE):
    path = tmp_path / "1.two-sum.py"
    path.write_text(source, encoding="utf-8")
    return path


def test_completed_run_logs_result_block(tmp_path):
    path = _solution(tmp_path)
    outcome, channel, notifier = _run(path, test_input="[2,7,11,15], 9")

    assert outcome.status is RunStatus.COMPLETED
    assert outcome.metadata.id == "1"
    assert "Output: [0, 1]" in outcome.result
    assert channel.lines[:4] == [
        "Running local test for 1...",
        "Language: python3",
        "Test input: [2,7,11,15], 9",
        "",
    ]
    assert channel.lines[4:7] == [BANNER, "Local Test Results:", BANNER]
    assert channel.lines[-1] == BANNER
    assert not any(line.startswith("Error:") for line in channel.lines)
    assert notifier.messages == [("info", COMPLETED_MESSAGE)]
    assert sorted(os.listdir(tmp_path)) == ["1.two-sum.py"]


def test_prompt_supplies_input(tmp_path):
    path = _solution(tmp_path)
    prompt = MagicMock(return_value="[3,3], 6")
    outcome, _, _ = _run(path, prompt=prompt)
    prompt.assert_called_once_with()
    assert "Output: [0, 1]" in outcome.result


def test_explicit_input_skips_prompt(tmp_path):
    path = _solution(tmp_path)
    prompt = MagicMock()
    _run(path, test_input="[3,3], 6", prompt=prompt)
    prompt.assert_not_called()


def test_cancelled_prompt_aborts_silently(tmp_path):
    path = _solution(tmp_path)
    executor = MagicMock()
    executor.execute = AsyncMock()
    outcome, channel, notifier = _run(path, prompt=lambda: None, executor=executor)
    assert outcome.status is RunStatus.ABORTED
    assert channel.lines == []
    assert notifier.messages == []
    executor.execute.assert_not_called()


def test_empty_input_aborts(tmp_path):
    path = _solution(tmp_path)
    outcome, channel, _ = _run(path, test_input="")
    assert outcome.status is RunStatus.ABORTED
    assert channel.lines == []


def test_missing_metadata(tmp_path):
    path = _solution(tmp_path, "class Solution:\n    pass\n")
    outcome, channel, notifier = _run(path, test_input="1")
    assert outcome.status is RunStatus.FAILED
    assert outcome.error == NO_METADATA_MESSAGE
    assert notifier.messages == [("error", NO_METADATA_MESSAGE)]
    assert channel.lines == []
    assert os.listdir(tmp_path) == ["1.two-sum.py"]


def test_missing_file(tmp_path):
    outcome, _, notifier = _run(tmp_path / "nope.py", test_input="1")
    assert outcome.status is RunStatus.FAILED
    assert notifier.messages == [("error", NO_FILE_MESSAGE)]


def test_no_file_path():
    outcome, _, notifier = _run(None, test_input="1")
    assert outcome.status is RunStatus.FAILED
    assert notifier.messages == [("error", NO_FILE_MESSAGE)]


def test_unsupported_language_reported_in_channel(tmp_path):
    path = tmp_path / "main.rs"
    path.write_text("// @lc app=leetcode id=9 lang=rust\nfn main() {}\n")
    outcome, channel, notifier = _run(path, test_input="1")
    assert outcome.status is RunStatus.FAILED
    assert channel.lines[-1] == "Error: Language rust is not yet supported for local execution."
    assert notifier.messages == [("error", FAILED_MESSAGE)]
    assert BANNER not in channel.lines


def test_toolchain_failure_reported_not_result(tmp_path):
    path = _solution(tmp_path)
    executor = MagicMock()
    executor.execute = AsyncMock(side_effect=CommandFailedError(2, "syntax error"))
    outcome, channel, notifier = _run(path, test_input="1", executor=executor)
    assert outcome.status is RunStatus.FAILED
    assert "Command failed with exit code 2" in outcome.error
    assert channel.lines[-1] == "Error: Command failed with exit code 2\nsyntax error"
    assert BANNER not in channel.lines
    assert notifier.messages == [("error", FAILED_MESSAGE)]


def test_executor_receives_file_content(tmp_path):
    path = _solution(tmp_path)
    executor = MagicMock()
    executor.execute = AsyncMock(side_effect=UnsupportedLanguageError("python3"))
    _run(path, test_input="x", executor=executor)
    executor.execute.assert_awaited_once_with(path, "python3", "x", SOURCE)
