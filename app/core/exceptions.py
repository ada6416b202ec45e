"""Error taxonomy of the generation and read pipelines.

Every error carries a human readable ``message`` and the HTTP status the API
layer answers with. None of them is retried internally.
"""

from __future__ import annotations


class PipelineError(Exception):
    """Base class for failures surfaced to the caller as a request failure."""

    status_code: int = 500

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def __str__(self) -> str:
        return self.message


class GenerationUnreachableError(PipelineError):
    """The external generator could not be called or returned no text."""

    status_code = 502


class MalformedGenerationError(PipelineError):
    """The sanitized generator output is not valid JSON."""

    status_code = 502


class SchemaMismatchError(PipelineError):
    """Valid JSON, but not the expected document shape."""

    status_code = 502


class PersistenceError(PipelineError):
    """A store operation failed during a cascading write; the transaction was rolled back."""

    status_code = 500


class NotFoundError(PipelineError):
    status_code = 404


class InsufficientDataError(PipelineError):
    """A sampling pool holds fewer rows than the requested sample size."""

    status_code = 409
