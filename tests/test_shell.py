import io

import pytest

from fastbox.shell import (
    CLEAR_COMMAND,
    Shell,
    extract_quoted,
    matching_directories,
)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    (tmp_path / "alpha").mkdir()
    (tmp_path / "alpine").mkdir()
    (tmp_path / "beta").mkdir()
    (tmp_path / "alps.txt").write_text("x")
    monkeypatch.chdir(tmp_path)
    return tmp_path


class Recorder:
    def __init__(self, result=0):
        self.calls = []
        self.result = result

    def __call__(self, command):
        self.calls.append(command)
        return self.result


def make_shell(workdir, result=0):
    out = io.StringIO()
    runner = Recorder(result)
    return Shell(workdir, out, runner), out, runner


def test_matching_directories_only_dirs_with_prefix(workdir):
    assert matching_directories(workdir, "al") == ["alpha", "alpine"]
    assert matching_directories(workdir, "zz") == []


def test_extract_quoted_takes_first_to_last_quote():
    assert extract_quoted("print 'it's here'") == "it's here"


@pytest.mark.parametrize("command", ["print hello", "print 'hello"])
def test_extract_quoted_missing_quotes(command):
    with pytest.raises(ValueError):
        extract_quoted(command)


def test_prompt_shows_directory(workdir):
    shell, _, _ = make_shell(workdir)
    assert shell.prompt() == f"{workdir.resolve()}>> "


def test_complete_cd(workdir):
    shell, _, _ = make_shell(workdir)
    assert shell.complete("cd alp") == "cd alpha"
    assert shell.complete("cd be") == "cd beta"
    assert shell.complete("cd zz") == "cd zz"
    assert shell.complete("ls") == "ls"


def test_help_lists_commands(workdir):
    shell, out, _ = make_shell(workdir)
    assert shell.execute("help") is True
    assert "cd DIR         - Changes directory" in out.getvalue()


def test_exit_stops(workdir):
    shell, out, _ = make_shell(workdir)
    assert shell.execute("exit") is False
    assert out.getvalue() == "Exiting...\n"


def test_unknown_command(workdir):
    shell, out, _ = make_shell(workdir)
    shell.execute("frobnicate")
    assert out.getvalue() == "Unknown command. Type 'help'.\n"


def test_print(workdir):
    shell, out, _ = make_shell(workdir)
    shell.execute("print 'hello world'")
    shell.execute("print nothing")
    assert out.getvalue() == "hello world\nError: Missing quotes.\n"


def test_cd_changes_directory(workdir):
    shell, _, _ = make_shell(workdir)
    shell.execute("cd alpha")
    assert shell.cwd == (workdir / "alpha").resolve()
    shell.execute("cd ..")
    assert shell.cwd == workdir.resolve()


def test_cd_missing_directory(workdir):
    shell, out, _ = make_shell(workdir)
    shell.execute("cd nowhere")
    assert out.getvalue() == "Directory not found: nowhere\n"
    assert shell.cwd == workdir.resolve()


def test_exec_runs_then_clears(workdir):
    shell, out, runner = make_shell(workdir)
    shell.execute("exec 'echo hi'")
    assert runner.calls == ["echo hi", CLEAR_COMMAND]
    assert out.getvalue() == ""


def test_exec_failure_reported(workdir):
    shell, out, _ = make_shell(workdir, result=-1)
    shell.execute("exec 'broken'")
    assert out.getvalue() == "Failed to run.\n"


def test_clear_and_list(workdir):
    shell, _, runner = make_shell(workdir)
    shell.execute("clear")
    shell.execute("ls")
    assert runner.calls[0] == CLEAR_COMMAND
    assert str(workdir.resolve()) in runner.calls[1]


def test_nano_failure(workdir):
    shell, out, runner = make_shell(workdir, result=-1)
    shell.execute("nano")
    assert "fastbox.editor" in runner.calls[0]
    assert runner.calls[1] == CLEAR_COMMAND
    assert out.getvalue() == "Failed to start nano.\n"


def test_run_reads_keys_until_exit(workdir):
    shell, out, _ = make_shell(workdir)
    keys = iter("print 'a'\rexitx\b\r")
    shell.run(lambda: next(keys))
    text = out.getvalue()
    assert "a\n" in text
    assert text.endswith("Exiting...\n")


def test_run_tab_completion(workdir):
    shell, _, _ = make_shell(workdir)
    keys = iter("cd be\t\rexit\r")
    shell.run(lambda: next(keys))
    assert shell.cwd == (workdir / "beta").resolve()


def test_run_stops_at_end_of_input(workdir):
    shell, out, _ = make_shell(workdir)
    keys = iter(["h", ""])
    shell.run(lambda: next(keys))
    assert out.getvalue().endswith(">> h")