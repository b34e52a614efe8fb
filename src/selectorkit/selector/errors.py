"""Selector builder error types."""


class SelectorError(ValueError):
    """Base class for errors raised while building a selector."""


class DuplicateFragmentError(SelectorError):
    """Raised when element, id or pseudo-element is given twice."""

    def __init__(
        self,
        message: str = (
            "Element, id and pseudo-element should not occur more then one "
            "time inside the selector"
        ),
    ):
        super().__init__(message)


class OrderViolationError(SelectorError):
    """Raised when a fragment is appended after a later-ordered one."""

    def __init__(
        self,
        message: str = (
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        ),
    ):
        super().__init__(message)
