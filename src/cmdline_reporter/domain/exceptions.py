"""Domain exceptions: all public errors of cmdline_reporter.

Hexagonal architecture: all exceptions visible to users defined in domain.
Application/Infrastructure raise these, not define their own public exceptions.
"""

from __future__ import annotations


class ReporterError(Exception):
    """Base for all cmdline_reporter error exceptions.

    Allows: except ReporterError to catch all library errors.
    """


class InvalidArgumentError(ReporterError, ValueError):
    """Argument rejected at the point of misuse.

    Inherits ValueError for semantic correctness (bad value).
    """


class UnknownOptionError(InvalidArgumentError):
    """Option key not in the operation's allow-list.

    Attributes:
        unknown: Rejected keys, sorted.
        allowed: Keys the operation accepts.
    """

    def __init__(self, unknown: tuple[str, ...], allowed: tuple[str, ...]) -> None:
        """Initialize with rejected and accepted keys."""
        self.unknown = unknown
        self.allowed = allowed
        super().__init__(
            f"unknown option(s) {', '.join(unknown)}; allowed: {', '.join(allowed)}"
        )


class InvalidAlignmentError(InvalidArgumentError):
    """Alignment is not left, right or center.

    Attributes:
        value: Rejected alignment value.
    """

    def __init__(self, value: object) -> None:
        """Initialize with rejected value."""
        self.value = value
        super().__init__(f"align must be one of left, right, center, got {value!r}")


class InvalidColorError(InvalidArgumentError):
    """Color keyword cannot be parsed as a style.

    Attributes:
        color: Rejected color keyword.
    """

    def __init__(self, color: str) -> None:
        """Initialize with rejected color."""
        self.color = color
        super().__init__(f"invalid color {color!r}")


class InvalidCountError(InvalidArgumentError):
    """Numeric argument cannot be coerced to an acceptable integer.

    Attributes:
        name: Argument name.
        value: Rejected value.
        reason: Constraint the value violates.
    """

    def __init__(self, name: str, value: object, reason: str) -> None:
        """Initialize with argument name, value and violated constraint."""
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"{name} {reason}, got {value!r}")


class InvalidFormatterError(InvalidArgumentError):
    """Formatter name cannot be resolved, or object is not a formatter.

    Attributes:
        value: Name or object that failed to resolve.
    """

    def __init__(self, value: object) -> None:
        """Initialize with failed name or object."""
        self.value = value
        super().__init__("Invalid formatter specified")


class PreconditionFailedError(ReporterError, RuntimeError):
    """Caller configuration bug. Operation aborts without output.

    Inherits RuntimeError: not recoverable by retrying with the same input.
    """


class TitleTooLongError(PreconditionFailedError):
    """Section title longer than section width.

    Attributes:
        title: Offending title.
        width: Section width.
    """

    def __init__(self, title: str, width: int) -> None:
        """Initialize with title and width."""
        self.title = title
        self.width = width
        super().__init__(f"title length {len(title)} exceeds width {width}")


class TimestampTooLongError(PreconditionFailedError):
    """Rendered timestamp longer than the field width.

    Attributes:
        text: Rendered timestamp.
        width: Field width.
    """

    def __init__(self, text: str, width: int) -> None:
        """Initialize with rendered text and width."""
        self.text = text
        self.width = width
        super().__init__(f"timestamp {text!r} exceeds width {width}")


class TableStateError(ReporterError, RuntimeError):
    """row() or column() called outside an enclosing table() / row().

    Inherits RuntimeError for semantic correctness (invalid state).
    """

    def __init__(self, operation: str, parent: str) -> None:
        """Initialize with misused operation and required parent."""
        self.operation = operation
        self.parent = parent
        super().__init__(f"{operation}() called outside {parent}()")
