"""Plain-text leaf errors.

Lets callers create simple text errors to use as the terminal cause of a
chain without reaching for a project-specific exception class.
"""


class TextError(Exception):
    """Leaf error that renders as the given text."""

    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text

    def __str__(self) -> str:
        return self.text


def new(text: str) -> TextError:
    """Return an error that formats as the given text.

    Intended to be used as the error argument to ``E``.
    """
    return TextError(text)


def errorf(format: str, *args: object) -> TextError:
    """Return an error whose text is ``format % args``.

    Example:
        >>> str(errorf("user %s not found", "bob"))
        'user bob not found'
    """
    return TextError(format % args if args else format)
