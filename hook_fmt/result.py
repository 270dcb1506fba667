"""The outcome of one formatting attempt."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FormatResult:
    """Terminal value of a hook run: whether the file was formatted, and by what.

    :param bool formatted: ``True`` only when a formatter exited successfully.
    :param formatter: Display name of the formatter that ran, if any.
    :type formatter: str | None
    :param str message: Human-readable summary for the hook response.
    """

    formatted: bool
    formatter: str | None
    message: str

    @classmethod
    def success(cls, formatter: str) -> "FormatResult":
        return cls(True, formatter, f"Formatted with {formatter}")

    @classmethod
    def error(cls, formatter: str, error: str) -> "FormatResult":
        return cls(False, formatter, f"{formatter} error: {error}")

    @classmethod
    def no_formatter(cls, label: str) -> "FormatResult":
        return cls(False, None, f"No formatter found for {label}")

    @classmethod
    def unsupported(cls, ext: str) -> "FormatResult":
        return cls(False, None, f"Unsupported file extension: {ext}")

    @classmethod
    def skipped(cls, file_name: str) -> "FormatResult":
        return cls(False, None, f"Skipped {file_name}")
