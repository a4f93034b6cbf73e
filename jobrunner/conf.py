"""Loading and validating the YAML job configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from jobrunner.errors import ConfigIOError, ConfigParseError, HomeNotFoundError

CONFIG_NAME = ".run.yml"

DEFAULT_CONFIG = """env:
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

      - label: go
        cmd: which go

      - label: rust
        cmd: which rust

      - label: java
        cmd: which java

      - label: kotlin
        cmd: which kotlin"""

BUILTIN_LABELS = ("Info", "Exit")


@dataclass
class OptionItem:
    """One selectable variant of a job."""

    label: str
    cmd: str

    def __str__(self) -> str:
        return f"Option Label: {self.label}, Command: {self.cmd}"


@dataclass
class Job:
    """A job: either a direct command or a list of options."""

    label: str
    cmd: str | None = None
    default_option: int | None = None
    options: list[OptionItem] | None = None

    def __str__(self) -> str:
        text = f"Job Label: {self.label}\n"
        if self.cmd is not None:
            text += f"  Command: {self.cmd}\n"
        if self.options is not None:
            text += "  Options:\n"
            text += "".join(f"    {option}\n" for option in self.options)
        return text


@dataclass
class Conf:
    """The whole configuration."""

    env: str
    jobs: list[Job] = field(default_factory=list)

    def __str__(self) -> str:
        header = f"Environment: {self.env}\nJobs:\n"
        return header + "".join(f"  {job}\n" for job in self.jobs)


def _string(data: dict, key: str, where: str, *, required: bool = True) -> str | None:
    if key not in data or data[key] is None:
        if required:
            raise ConfigParseError(f"{where}: missing field `{key}`")
        return None
    value = data[key]
    if not isinstance(value, str):
        raise ConfigParseError(f"{where}: field `{key}` must be a string")
    return value


def _mapping(value: Any, where: str) -> dict:
    if not isinstance(value, dict):
        raise ConfigParseError(f"{where}: expected a mapping")
    return value


def _list(value: Any, where: str) -> list:
    if not isinstance(value, list):
        raise ConfigParseError(f"{where}: expected a sequence")
    return value


def _option(value: Any, where: str) -> OptionItem:
    data = _mapping(value, where)
    return OptionItem(label=_string(data, "label", where), cmd=_string(data, "cmd", where))


def _job(value: Any, where: str) -> Job:
    data = _mapping(value, where)
    default_option = data.get("default_option")
    if default_option is not None and (
        isinstance(default_option, bool)
        or not isinstance(default_option, int)
        or default_option < 0
    ):
        raise ConfigParseError(f"{where}: `default_option` must be a non-negative integer")
    options = data.get("options")
    if options is not None:
        options = [
            _option(item, f"{where}.options[{number}]")
            for number, item in enumerate(_list(options, f"{where}.options"))
        ]
    return Job(
        label=_string(data, "label", where),
        cmd=_string(data, "cmd", where, required=False),
        default_option=default_option,
        options=options,
    )


def parse_config(text: str) -> Conf:
    """Parse configuration text and append the built-in Info and Exit jobs."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigParseError(str(exc)) from exc

    root = _mapping(data, "config")
    if "env" not in root:
        raise ConfigParseError("config: missing field `env`")
    env = root["env"]
    if env is None:
        env = ""
    elif not isinstance(env, str):
        raise ConfigParseError("config: field `env` must be a string")
    if "jobs" not in root:
        raise ConfigParseError("config: missing field `jobs`")

    jobs = [
        _job(item, f"jobs[{number}]")
        for number, item in enumerate(_list(root["jobs"], "jobs"))
    ]
    jobs.extend(Job(label=label) for label in BUILTIN_LABELS)
    return Conf(env=env, jobs=jobs)


def load_config(home: str | os.PathLike | None = None) -> Conf:
    """Load ``.run.yml`` from the home directory, creating a default one if unreadable."""
    if home is None:
        home = os.environ.get("HOME")
        if home is None:
            raise HomeNotFoundError()
    path = Path(home) / CONFIG_NAME
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        try:
            path.write_text(DEFAULT_CONFIG, encoding="utf-8")
        except OSError as exc:
            raise ConfigIOError(exc) from exc
        text = DEFAULT_CONFIG
    return parse_config(text)