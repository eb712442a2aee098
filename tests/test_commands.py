import sys

import pytest

from sentinel.commands import CommandError, run_command, run_command_and_capture


def test_capture_returns_stdout(capsys):
    out = run_command_and_capture(sys.executable, "-c", "print('hello')")
    assert out.strip() == "hello"
    logged = capsys.readouterr().out
    assert "Successfully captured output from:" in logged


def test_capture_ignores_stderr():
    out = run_command_and_capture(
        sys.executable, "-c", "import sys; sys.stderr.write('noise'); print('data')"
    )
    assert out.strip() == "data"


def test_capture_failure_raises():
    with pytest.raises(CommandError) as info:
        run_command_and_capture(sys.executable, "-c", "import sys; sys.exit(3)")
    assert info.value.returncode == 3
    assert "exit status 3" in str(info.value)


def test_missing_program_raises():
    with pytest.raises(CommandError) as info:
        run_command_and_capture("definitely-not-a-real-program-xyz")
    assert info.value.returncode is None
    assert info.value.command == ["definitely-not-a-real-program-xyz"]


def test_run_command_streams_output(capfd):
    run_command(sys.executable, "-c", "print('streamed')")
    out = capfd.readouterr().out
    assert "streamed" in out
    assert "Successfully executed:" in out


def test_run_command_failure_logs_and_raises(capfd):
    with pytest.raises(CommandError) as info:
        run_command(sys.executable, "-c", "import sys; sys.exit(2)")
    assert info.value.returncode == 2
    out = capfd.readouterr().out
    assert "Command finished with error" in out