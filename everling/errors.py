"""
everling/errors.py - Error Taxonomy

Raised where the failure happens, propagated to the caller of the run.
"""


class EverlingError(Exception):
    """Base for every error raised by everling. Never catch silently."""
    pass


class IoError(EverlingError, OSError):
    """A vocabulary, morpheme or report file could not be opened, read or written."""
    pass


class SerializationError(EverlingError, ValueError):
    """File content is not valid JSON or does not match its schema."""
    pass


class InvalidConfiguration(EverlingError, ValueError):
    """Simulation parameters cannot produce a meaningful run."""
    pass
