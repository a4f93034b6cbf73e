"""Exceptions raised while loading configuration and running jobs."""


class RunError(Exception):
    """Base class for every error the job runner raises."""

    message = "Run Error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.message)


class ShellNotFoundError(RunError):
    """The SHELL environment variable is not set."""

    message = "Shell Not Found"


class HomeNotFoundError(RunError):
    """The HOME environment variable is not set."""

    message = "home Not Found"


class ConfigParseError(RunError):
    """The configuration file is not valid."""

    message = "Config Parse Error"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__()
        self.detail = detail


class ExecutionError(RunError):
    """A command could not be started."""

    message = "Execution Error"


class ConfigIOError(RunError):
    """Reading or writing the configuration file failed."""

    def __init__(self, cause: OSError) -> None:
        super().__init__(f"IO Error: {cause}")
        self.cause = cause