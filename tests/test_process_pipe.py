import pytest

from oscamp.process_pipe import (
    get_exit_code,
    pipe_through_cat,
    pipe_through_grep,
    run_command,
    run_command_with_result,
)


def test_run_echo():
    assert run_command("echo", ["hello"]).strip() == "hello"


def test_run_with_args():
    assert run_command("echo", ["-n", "no newline"]) == "no newline"


def test_pipe_cat():
    assert pipe_through_cat("hello pipe!") == "hello pipe!"


def test_pipe_multiline():
    text = "line1\nline2\nline3"
    assert pipe_through_cat(text) == text


def test_pipe_cat_empty():
    assert pipe_through_cat("") == ""


def test_exit_code_success():
    assert get_exit_code("true") == 0


def test_exit_code_failure():
    assert get_exit_code("false") == 1


def test_exit_code_explicit():
    assert get_exit_code("exit 7") == 7


def test_run_command_with_result_success():
    assert run_command_with_result("echo", ["hello"]).strip() == "hello"


def test_run_command_with_result_nonexistent():
    with pytest.raises(OSError):
        run_command_with_result("nonexistent_command_xyz", [])


def test_run_command_nonexistent():
    with pytest.raises(OSError):
        run_command("nonexistent_command_xyz")


def test_pipe_through_grep_basic():
    assert pipe_through_grep("a", "apple\nbanana\ncherry\n") == "apple\nbanana\n"


def test_pipe_through_grep_no_match():
    assert pipe_through_grep("z", "apple\nbanana\ncherry\n") == ""


def test_pipe_through_grep_multiline():
    text = "first line\nsecond line\nthird line\n"
    assert pipe_through_grep("second", text) == "second line\n"