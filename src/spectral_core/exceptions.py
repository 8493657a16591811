"""
Exceptions raised by spectral_core.
"""


class InvalidArgumentError(ValueError):
    """Raised when an operation receives sequences it cannot work with.

    Covers mismatched lengths for two-sequence operations and inputs that
    are too short (empty for ``mean``, fewer than two samples for
    ``variance``/``covariance``).
    """
