"""Top-level "run locally" action: metadata, input, dispatch, report."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from leetlocal.config import Config
from leetlocal.executor import LocalExecutor
from leetlocal.metadata import extract_metadata
from leetlocal.models import RunOutcome, RunStatus
from leetlocal.output import BANNER, Notifier, OutputChannel

NO_FILE_MESSAGE = "Please open a LeetCode problem file."
NO_METADATA_MESSAGE = "Unable to detect LeetCode problem metadata in this file."
COMPLETED_MESSAGE = "Local test completed! Check LeetCode output channel for results."
FAILED_MESSAGE = "Failed to run local test. Please open the output channel for details."


async def run_local(
    file_path: str | Path | None,
    channel: OutputChannel,
    notifier: Notifier,
    config: Config | None = None,
    test_input: str | None = None,
    prompt: Callable[[], str | None] | None = None,
    executor: LocalExecutor | None = None,
) -> RunOutcome:
    """Run the solution at *file_path* once and report to *channel*.

    *test_input* wins over *prompt*; with neither, the run is aborted. Any
    failure after the input is known is caught here: the notifier gets the
    generic failure message and the channel gets ``Error: <message>``.
    """
    config = config or Config()
    executor = executor or LocalExecutor(config)

    if not file_path or not Path(file_path).is_file():
        notifier.error(NO_FILE_MESSAGE)
        return RunOutcome(RunStatus.FAILED, error=NO_FILE_MESSAGE)

    metadata = None
    try:
        file_content = Path(file_path).read_text(encoding="utf-8")

        metadata = extract_metadata(file_content)
        if metadata is None:
            notifier.error(NO_METADATA_MESSAGE)
            return RunOutcome(RunStatus.FAILED, error=NO_METADATA_MESSAGE)

        if test_input is None and prompt is not None:
            test_input = prompt()
        if not test_input:
            return RunOutcome(RunStatus.ABORTED, metadata=metadata)

        channel.append_line(f"Running local test for {metadata.id}...")
        channel.append_line(f"Language: {metadata.lang}")
        channel.append_line(f"Test input: {test_input}")
        channel.append_line("")

        result = await executor.execute(file_path, metadata.lang, test_input, file_content)
    except Exception as e:
        notifier.error(FAILED_MESSAGE)
        channel.append_line(f"Error: {e}")
        return RunOutcome(RunStatus.FAILED, metadata=metadata, error=str(e))

    channel.append_line(BANNER)
    channel.append_line("Local Test Results:")
    channel.append_line(BANNER)
    channel.append_line(result)
    channel.append_line(BANNER)
    notifier.info(COMPLETED_MESSAGE)
    return RunOutcome(RunStatus.COMPLETED, metadata=metadata, result=result)
