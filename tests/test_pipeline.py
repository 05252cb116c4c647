import signal
import sys
import time

import pytest

from minish.environment import Environment
from minish.parser import Command
from minish.pipeline import check_pipeline, run_pipeline


def python(script, stdout=None):
    return Command(text="", argv=[sys.executable, "-c", script],
                   path=sys.executable, stdout=stdout)


def builtin(*argv, stdout=None):
    return Command(text="", argv=list(argv), stdout=stdout)


UPPER = "import sys; sys.stdout.write(sys.stdin.read().upper())"


def test_check_pipeline_accepts_programs_and_builtins():
    assert check_pipeline([python("pass"), builtin("echo", "x")])


def test_check_pipeline_rejects_empty_command():
    assert not check_pipeline([python("pass"), Command(text="")])


def test_check_pipeline_rejects_unknown_program():
    assert not check_pipeline([Command(text="", argv=["nosuchprogram"])])


def test_run_pipeline_rejects_empty_list():
    with pytest.raises(ValueError):
        run_pipeline([], Environment())


def test_exit_status_of_program():
    assert run_pipeline([python("import sys; sys.exit(3)")], Environment()) == 3


def test_status_of_last_builtin(capsys):
    status = run_pipeline([builtin("echo", "hello")], Environment())
    assert status == 0
    assert capsys.readouterr().out == "hello\n"


def test_builtin_feeds_program(tmp_path):
    out = tmp_path / "out.txt"
    with open(out, "wb") as sink:
        status = run_pipeline([builtin("echo", "hello"), python(UPPER, sink)], Environment())
    assert status == 0
    assert out.read_text() == "HELLO\n"


def test_program_feeds_program(tmp_path):
    out = tmp_path / "out.txt"
    with open(out, "wb") as sink:
        commands = [python("import sys; sys.stdout.write('abc')"), python(UPPER, sink)]
        assert run_pipeline(commands, Environment()) == 0
    assert out.read_text() == "ABC"


def test_redirected_stage_sends_nothing_downstream(tmp_path):
    first = tmp_path / "first.txt"
    second = tmp_path / "second.txt"
    with open(first, "wb") as a, open(second, "wb") as b:
        commands = [
            python("import sys; sys.stdout.write('data')", a),
            python("import sys; sys.stdout.write(sys.stdin.read().upper())", b),
        ]
        run_pipeline(commands, Environment())
    assert first.read_text() == "data"
    assert second.read_text() == ""


def test_builtin_output_redirected(tmp_path):
    out = tmp_path / "out.txt"
    with open(out, "wb") as sink:
        assert run_pipeline([builtin("echo", "-n", "word", stdout=sink)], Environment()) == 0
    assert out.read_text() == "word"


def test_environment_passed_to_program():
    environment = Environment(["ANSWER=42"])
    script = "import os, sys; sys.exit(int(os.environ['ANSWER']))"
    assert run_pipeline([python(script)], environment) == 42


def test_earlier_stage_killed_when_last_finishes():
    started = time.monotonic()
    commands = [python("import time; time.sleep(30)"), python("pass")]
    assert run_pipeline(commands, Environment()) == 0
    assert time.monotonic() - started < 20


def test_signal_number_becomes_status():
    script = "import os, signal; os.kill(os.getpid(), signal.SIGTERM)"
    assert run_pipeline([python(script)], Environment()) == signal.SIGTERM