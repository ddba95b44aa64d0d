# Author: gadwant
from __future__ import annotations


class InvalidArgument(ValueError):
    """Raised when a caller passes an input that violates a precondition."""
