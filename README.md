# jobrunner

A small terminal menu for the shell commands you run often. You list jobs in
a YAML file. `jobrunner` shows them in three panes: the jobs, the options of
the selected job, and the output of the last command that ran.

The menu is drawn with the standard `curses` module. It therefore runs on
POSIX systems only.

## Installation

```
pip install .
```

## Usage

```
jobrunner
```

The configuration is read from `~/.run.yml`. If that file cannot be read, an
example configuration is written there and used. The program exits with
status 1 if `$HOME` or `$SHELL` is not set, or if the configuration is not
valid.

Commands run through the shell named in `$SHELL` with `-c`. The output pane
shows the command's standard output followed by its standard error. If the
shell cannot be started, the output is empty.

### Keys

| Key       | Action                                                                      |
|-----------|-----------------------------------------------------------------------------|
| Up / Down | Move through the jobs, or through the options when an option list is active |
| Right     | Enter the option list of a job that has options                             |
| Left      | Leave the option list                                                       |
| Enter     | Run the selected job, or the selected option                                |
| Esc       | Quit                                                                        |

Movement wraps around at both ends of a list. Two entries are always added
after your own jobs. **Info** shows the shell in use. **Exit** quits the
program.

## Configuration

```yaml
env:
jobs:
  - label: Who am I
    cmd: who am i

  - label: Which
    default_option: 1
    options:
      - label: node
        cmd: which node
      - label: python
        cmd: which python
```

Both `env` and `jobs` must be present; `env` may be left empty. A job has a
`label` and either a `cmd`, which runs directly, or a list of `options`, each
with its own `label` and `cmd`. `default_option` is the zero-based option
highlighted first. If it is not set, the first option is highlighted.

## Library use

The pieces behind the menu can be used on their own:

```python
from jobrunner.app import AppState, create_jobs
from jobrunner.conf import parse_config
from jobrunner.shell import Shell

with open("jobs.yml", encoding="utf-8") as handle:
    conf = parse_config(handle.read())

state = AppState(create_jobs(conf), Shell("/bin/sh"))
state.enter()
print(state.output_message)
```

- `jobrunner.conf`: `parse_config(text)` and `load_config(home=None)` return
  a `Conf` holding `Job` and `OptionItem` entries; invalid configuration
  raises `ConfigParseError`.
- `jobrunner.shell`: `Shell(path).execute(cmd)` runs a command and returns
  its output; `shell_from_env()` builds a `Shell` from `$SHELL`.
- `jobrunner.app`: `create_jobs(conf)` wraps jobs in `JobEntry` objects, and
  `AppState` holds the menu's selection with `move_up`, `move_down`,
  `move_left`, `move_right` and `enter`.
- `jobrunner.errors`: every error derives from `RunError`.

## Development

```
pip install -e .[test]
pytest
```