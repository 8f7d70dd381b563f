class PipelineError(Exception):
    """Base exception for pipeline failures."""


class ConfigurationError(PipelineError, ValueError):
    """Raised at build start when the hierarchy configuration cannot produce a tree."""


class DuplicateRecordError(PipelineError):
    """Raised in strict mode when two records share an id."""

    def __init__(self, record_id: str):
        super().__init__(f"Duplicate record id: {record_id}")
        self.record_id = record_id


class BuildExecutionError(PipelineError):
    """Raised when building a source fails."""
