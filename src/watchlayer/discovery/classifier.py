"""
Naming-convention classifiers for discovered resources.
"""

ERROR_QUEUE_SUFFIX = "_error"


def is_error_queue(name: str) -> bool:
    """Return True for dead-letter queues, which carry the ``_error`` suffix."""
    return name.endswith(ERROR_QUEUE_SUFFIX)
