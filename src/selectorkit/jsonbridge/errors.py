"""JSON bridge error types."""

import json


class ParseError(json.JSONDecodeError):
    """Raised when JSON text cannot be parsed.

    Carries the decoder's own ``msg``, ``doc``, ``pos``, ``lineno`` and
    ``colno`` so callers catching :class:`json.JSONDecodeError` see the
    underlying failure.
    """
