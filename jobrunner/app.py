"""Interactive terminal menu that runs configured jobs through the user's shell."""

from __future__ import annotations

import argparse
import curses
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto

from jobrunner.conf import Conf, Job, OptionItem, load_config
from jobrunner.errors import ExecutionError, RunError
from jobrunner.shell import Shell, shell_from_env

POLL_TIMEOUT_MS = 500
MARGIN = 2
COLUMN_PERCENTAGES = (30, 30, 40)

_ESCAPE = 27
_ENTER_KEYS = frozenset({curses.KEY_ENTER, 10, 13})


class TaskType(Enum):
    """How a job is started."""

    DIRECT = auto()
    WITH_OPTIONS = auto()


def _run_command(shell: Shell, cmd: str) -> str:
    try:
        return shell.execute(cmd)
    except ExecutionError:
        return ""


@dataclass
class JobEntry:
    """A configured job paired with the way it is started."""

    job: Job
    task_type: TaskType

    def run(self, shell: Shell, option: OptionItem | None = None) -> str:
        """Run the job (or the chosen option) and return the text to display.

        The built-in ``Exit`` job raises ``SystemExit(0)``.
        """
        if self.task_type is TaskType.WITH_OPTIONS:
            if option is None:
                return ""
            return f"{self.job.label} {option.label}:\n{_run_command(shell, option.cmd)}"
        if self.job.cmd is not None:
            return f"{self.job.label}:\n{_run_command(shell, self.job.cmd)}"
        if self.job.label == "Info":
            return f"Which Shell:\n{shell.path}"
        if self.job.label == "Exit":
            raise SystemExit(0)
        return ""


def create_jobs(conf: Conf) -> list[JobEntry]:
    """Wrap every configured job in a JobEntry."""
    return [
        JobEntry(
            job=job,
            task_type=TaskType.DIRECT if job.options is None else TaskType.WITH_OPTIONS,
        )
        for job in conf.jobs
    ]


class AppState:
    """Selection state of the menu and the output of the last job run."""

    def __init__(self, jobs: list[JobEntry], shell: Shell) -> None:
        self.jobs = jobs
        self.shell = shell
        self.option_indices: dict[int, int] = {}
        self.selected_index = 0
        self.output_message = ""
        self.selecting_option = False
        self.selected_job: JobEntry | None = None

    @property
    def current(self) -> JobEntry:
        return self.jobs[self.selected_index]

    def option_index(self, job_index: int) -> int:
        """Highlighted option of a job, starting at its default option."""
        default = self.jobs[job_index].job.default_option or 0
        return self.option_indices.setdefault(job_index, default)

    def _step_option(self, step: int) -> None:
        if self.selected_job is None or self.selected_job.job.options is None:
            return
        count = len(self.selected_job.job.options)
        current = self.option_indices.get(
            self.selected_index, self.selected_job.job.default_option or 0
        )
        self.option_indices[self.selected_index] = (current + step) % count

    def move_down(self) -> None:
        """Select the next job, or the next option while choosing one."""
        if self.selecting_option:
            self._step_option(1)
        else:
            self.selected_index = (self.selected_index + 1) % len(self.jobs)

    def move_up(self) -> None:
        """Select the previous job, or the previous option while choosing one."""
        if self.selecting_option:
            self._step_option(-1)
        else:
            self.selected_index = (self.selected_index - 1) % len(self.jobs)

    def move_left(self) -> None:
        """Leave option selection."""
        self.selecting_option = False

    def move_right(self) -> None:
        """Enter option selection for a job that has options."""
        if self.selecting_option:
            return
        self.selected_job = self.current
        if self.selected_job.task_type is TaskType.WITH_OPTIONS:
            self.selecting_option = True

    def enter(self) -> None:
        """Run the selected job or option, or start choosing an option."""
        if not self.selecting_option:
            self.selected_job = self.current
            if self.selected_job.task_type is TaskType.DIRECT:
                self.output_message = self.selected_job.run(self.shell, None)
            else:
                self.selecting_option = True
            return
        job = self.selected_job
        if job is None or job.job.options is None:
            return
        current = self.option_indices.get(self.selected_index, job.job.default_option or 0)
        self.output_message = job.run(self.shell, job.job.options[current])


def _setup_colors() -> tuple[int, int]:
    """Return attributes for the active and the inactive highlight."""
    if not curses.has_colors():
        return curses.A_REVERSE, curses.A_REVERSE | curses.A_DIM
    curses.start_color()
    gray = 8 if curses.COLORS >= 16 else curses.COLOR_WHITE
    inactive_fg = curses.COLOR_WHITE if gray == 8 else curses.COLOR_BLACK
    curses.init_pair(1, curses.COLOR_WHITE, curses.COLOR_BLUE)
    curses.init_pair(2, inactive_fg, gray)
    return curses.color_pair(1), curses.color_pair(2)


def _put(win, y: int, x: int, text: str, width: int, attr: int = 0) -> None:
    if width <= 0:
        return
    try:
        win.addnstr(y, x, text, width, attr)
    except curses.error:
        pass


def _draw_box(win, y: int, x: int, height: int, width: int, title: str,
              lines: Sequence[tuple[str, int]]) -> None:
    if height < 2 or width < 2:
        return
    inner = width - 2
    _put(win, y, x, "┌" + "─" * inner + "┐", width)
    for row in range(1, height - 1):
        _put(win, y + row, x, "│", 1)
        _put(win, y + row, x + width - 1, "│", 1)
    _put(win, y + height - 1, x, "└" + "─" * inner + "┘", width)
    _put(win, y, x + 1, title, inner)
    for row, (text, attr) in enumerate(lines[: height - 2], start=1):
        _put(win, y + row, x + 1, text, inner, attr)


def _draw(stdscr, state: AppState, active: int, inactive: int) -> None:
    stdscr.erase()
    rows, cols = stdscr.getmaxyx()
    top, left = MARGIN, MARGIN
    height, width = rows - 2 * MARGIN, cols - 2 * MARGIN
    if height < 2 or width < 6:
        stdscr.refresh()
        return
    first = width * COLUMN_PERCENTAGES[0] // 100
    second = width * COLUMN_PERCENTAGES[1] // 100
    third = width - first - second

    job_highlight = inactive if state.selecting_option else active
    job_lines = [
        (entry.job.label, job_highlight if number == state.selected_index else 0)
        for number, entry in enumerate(state.jobs)
    ]
    _draw_box(stdscr, top, left, height, first, "Jobs", job_lines)

    options = state.current.job.options
    if options is not None:
        chosen = state.option_index(state.selected_index)
        option_highlight = active if state.selecting_option else inactive
        option_lines = [
            (option.label, option_highlight if number == chosen else 0)
            for number, option in enumerate(options)
        ]
        _draw_box(stdscr, top, left + first, height, second, "Options", option_lines)
    else:
        _draw_box(stdscr, top, left + first, height, second, "Option", [])

    output_lines = [(line, 0) for line in state.output_message.split("\n")]
    _draw_box(stdscr, top, left + first + second, height, third, "Output", output_lines)
    stdscr.refresh()


def run_ui(stdscr, state: AppState) -> None:
    """Draw the menu and handle keys until Escape is pressed."""
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    curses.set_escdelay(25)
    stdscr.keypad(True)
    stdscr.timeout(POLL_TIMEOUT_MS)
    active, inactive = _setup_colors()

    handlers = {
        curses.KEY_DOWN: state.move_down,
        curses.KEY_UP: state.move_up,
        curses.KEY_LEFT: state.move_left,
        curses.KEY_RIGHT: state.move_right,
    }
    while True:
        _draw(stdscr, state, active, inactive)
        key = stdscr.getch()
        if key == -1:
            continue
        if key == _ESCAPE:
            break
        if key in _ENTER_KEYS:
            state.enter()
        elif key in handlers:
            handlers[key]()


def main(argv: Sequence[str] | None = None) -> int:
    """Load the configuration and start the interactive menu."""
    parser = argparse.ArgumentParser(
        prog="run", description="Pick and run shell jobs from ~/.run.yml."
    )
    parser.parse_args(argv)

    try:
        config = load_config()
    except RunError as exc:
        print(f"Failed to load configuration: {exc}", file=sys.stderr)
        return 1
    try:
        shell = shell_from_env()
    except RunError as exc:
        print(exc, file=sys.stderr)
        return 1

    state = AppState(create_jobs(config), shell)
    curses.wrapper(run_ui, state)
    return 0


if __name__ == "__main__":
    sys.exit(main())