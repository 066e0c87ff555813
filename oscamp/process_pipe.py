"""Child processes, pipes and exit codes."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence


def run_command_with_result(program: str, args: Sequence[str] = ()) -> str:
    """Run ``program`` with ``args`` and return its standard output as text.

    Raises OSError when the program cannot be started and UnicodeDecodeError
    when its output is not valid UTF-8.
    """
    completed = subprocess.run([program, *args], stdout=subprocess.PIPE, check=False)
    return completed.stdout.decode("utf-8")


def run_command(program: str, args: Sequence[str] = ()) -> str:
    """Run ``program`` with ``args`` and return its standard output as text."""
    return run_command_with_result(program, args)


def _filter_through(command: Sequence[str], data: str) -> str:
    """Feed ``data`` to ``command`` on stdin and return what it writes to stdout."""
    with subprocess.Popen(
        list(command), stdin=subprocess.PIPE, stdout=subprocess.PIPE
    ) as child:
        output, _ = child.communicate(data.encode("utf-8"))
    return output.decode("utf-8")


def pipe_through_cat(input: str) -> str:  # noqa: A002 - name matches the public interface
    """Send ``input`` through ``cat`` and return what comes back."""
    return _filter_through(["cat"], input)


def get_exit_code(command: str) -> int:
    """Run ``sh -c command`` and return its exit code.

    Raises ChildProcessError if the shell was killed by a signal and so has no exit code.
    """
    completed = subprocess.run(["sh", "-c", command], check=False)
    if completed.returncode < 0:
        raise ChildProcessError(f"terminated by signal {-completed.returncode}")
    return completed.returncode


def pipe_through_grep(pattern: str, input: str) -> str:  # noqa: A002
    """Filter the lines of ``input`` through ``grep pattern`` and return the matches."""
    return _filter_through(["grep", pattern], input)