from pathlib import Path

import pytest

from jobrunner.app import AppState, JobEntry, TaskType, create_jobs, main
from jobrunner.conf import DEFAULT_CONFIG, Job, OptionItem, parse_config
from jobrunner.errors import ExecutionError
from jobrunner.shell import Shell


class FakeShell:
    def __init__(self, path="/bin/fake-sh"):
        self.path = path
        self.commands = []

    def execute(self, cmd):
        self.commands.append(cmd)
        return f"ran {cmd}\n"


class FailingShell(FakeShell):
    def execute(self, cmd):
        raise ExecutionError()


@pytest.fixture
def config():
    return parse_config(DEFAULT_CONFIG)


@pytest.fixture
def state(config):
    return AppState(create_jobs(config), FakeShell())


def test_create_jobs_task_types(config):
    entries = create_jobs(config)
    assert [e.job.label for e in entries] == ["Who am I", "Which", "Info", "Exit"]
    assert [e.task_type for e in entries] == [
        TaskType.DIRECT,
        TaskType.WITH_OPTIONS,
        TaskType.DIRECT,
        TaskType.DIRECT,
    ]


def test_direct_job_runs_command():
    shell = FakeShell()
    entry = JobEntry(Job(label="List", cmd="ls"), TaskType.DIRECT)
    assert entry.run(shell, None) == "List:\nran ls\n"
    assert shell.commands == ["ls"]


def test_option_job_runs_option():
    shell = FakeShell()
    option = OptionItem(label="python", cmd="which python")
    entry = JobEntry(Job(label="Which", options=[option]), TaskType.WITH_OPTIONS)
    assert entry.run(shell, option) == "Which python:\nran which python\n"


def test_option_job_without_option_is_empty():
    shell = FakeShell()
    option = OptionItem(label="python", cmd="which python")
    entry = JobEntry(Job(label="Which", options=[option]), TaskType.WITH_OPTIONS)
    assert entry.run(shell, None) == ""
    assert shell.commands == []


def test_info_reports_shell():
    entry = JobEntry(Job(label="Info"), TaskType.DIRECT)
    assert entry.run(FakeShell("/bin/zsh"), None) == "Which Shell:\n/bin/zsh"


def test_exit_raises_system_exit():
    entry = JobEntry(Job(label="Exit"), TaskType.DIRECT)
    with pytest.raises(SystemExit) as info:
        entry.run(FakeShell(), None)
    assert info.value.code == 0


def test_unknown_job_without_command_is_empty():
    entry = JobEntry(Job(label="Nothing"), TaskType.DIRECT)
    assert entry.run(FakeShell(), None) == ""


def test_execution_error_gives_empty_output():
    entry = JobEntry(Job(label="Who am I", cmd="who am i"), TaskType.DIRECT)
    assert entry.run(FailingShell(), None) == "Who am I:\n"


def test_real_shell_output():
    entry = JobEntry(Job(label="Echo", cmd="echo hello"), TaskType.DIRECT)
    assert entry.run(Shell("/bin/sh"), None) == "Echo:\nhello\n"


def test_move_down_wraps(state):
    for _ in range(len(state.jobs)):
        state.move_down()
    assert state.selected_index == 0


def test_move_up_wraps_to_last(state):
    state.move_up()
    assert state.selected_index == len(state.jobs) - 1


def test_option_index_uses_default(state):
    assert state.option_index(1) == 1
    assert state.option_index(0) == 0


def test_move_right_enters_option_selection_only_for_options(state):
    state.move_right()
    assert state.selecting_option is False
    state.move_down()
    state.move_right()
    assert state.selecting_option is True
    assert state.selected_job is state.jobs[1]


def test_option_navigation_wraps(state):
    state.move_down()
    state.move_right()
    count = len(state.jobs[1].job.options)
    state.move_down()
    assert state.option_index(1) == 2
    for _ in range(count):
        state.move_down()
    assert state.option_index(1) == 2
    state.move_up()
    state.move_up()
    state.move_up()
    assert state.option_index(1) == count - 1
    assert state.selected_index == 1


def test_move_left_leaves_option_selection(state):
    state.move_down()
    state.move_right()
    state.move_left()
    assert state.selecting_option is False
    state.move_down()
    assert state.selected_index == 2


def test_enter_runs_direct_job(state):
    state.enter()
    assert state.output_message == "Who am I:\nran who am i\n"
    assert state.selecting_option is False


def test_enter_on_options_then_runs_default_option(state):
    state.move_down()
    state.enter()
    assert state.selecting_option is True
    assert state.output_message == ""
    state.enter()
    assert state.output_message == "Which python:\nran which python\n"


def test_enter_runs_chosen_option(state):
    state.move_down()
    state.move_right()
    state.move_up()
    state.enter()
    assert state.output_message == "Which node:\nran which node\n"


def test_enter_info_job(state):
    state.move_down()
    state.move_down()
    state.enter()
    assert state.output_message == "Which Shell:\n/bin/fake-sh"


def test_main_fails_without_shell(monkeypatch, tmp_path, capsys):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("SHELL", raising=False)
    assert main([]) == 1
    assert "Shell Not Found" in capsys.readouterr().err
    assert (Path(tmp_path) / ".run.yml").read_text() == DEFAULT_CONFIG


def test_main_fails_with_bad_config(monkeypatch, tmp_path, capsys):
    monkeypatch.setenv("HOME", str(tmp_path))
    (tmp_path / ".run.yml").write_text("jobs: [")
    assert main([]) == 1
    assert "Failed to load configuration: Config Parse Error" in capsys.readouterr().err