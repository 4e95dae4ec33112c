"""
Error taxonomy for the sentiment pipeline.

Every failure raised by the pipeline derives from
`SentimentPipelineError`.  None of these errors are recovered locally:
the batch driver lets them propagate so the whole run aborts and no
partial output is written.
"""

from __future__ import annotations

from pathlib import Path


class SentimentPipelineError(Exception):
    """Base class for all pipeline errors."""


class MissingSource(SentimentPipelineError, FileNotFoundError):
    """A required training or inference file does not exist."""

    reason = "file not found"

    def __init__(self, path, role: str = "source") -> None:
        self.path = Path(path)
        self.role = role
        super().__init__(f"{role.capitalize()} {self.reason}: {self.path}")


class EmptySource(MissingSource):
    """A source file exists but holds no data rows below its header."""

    reason = "file contains no rows"


class MalformedSource(SentimentPipelineError):
    """A source file is unreadable, has an unsupported format or lacks a required column."""


class InvalidLabel(SentimentPipelineError, ValueError):
    """A label string is not one of the recognised sentiment categories."""

    def __init__(self, value, row: int | None = None) -> None:
        self.value = value
        self.row = row
        message = f"Invalid sentiment value: {value!r}"
        if row is not None:
            message += f" (row {row})"
        super().__init__(message)


class InsufficientClassDiversity(SentimentPipelineError):
    """Training data holds fewer than two distinct categories."""


class SinkWriteFailure(SentimentPipelineError):
    """The output file could not be created or overwritten."""


class ModelFormatError(SentimentPipelineError):
    """A serialized model payload is unreadable or has an unsupported version."""


class ClassifierRequestError(SentimentPipelineError):
    """The remote classifier failed or returned an unusable response."""


class EmptyVocabulary(SentimentPipelineError):
    """The training texts yield no features at all, e.g. every text is blank."""
