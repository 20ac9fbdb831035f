import os


class ExportException(Exception):
    """Base class for every failure that aborts an export."""

    def __init__(
        self,
        message: str,
        *,
        path: os.PathLike | str | None = None,
        stage: str | None = None,
    ):
        self.path = path
        self.stage = stage
        super().__init__(message)

    def describe(self) -> str:
        if self.path is None:
            return str(self)

        return f"{os.fspath(self.path)}: {self}"
