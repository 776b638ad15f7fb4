"""Location of a query parameter inside its URL.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

__all__ = ["ParamSpan"]


@dataclass(frozen=True, slots=True)
class ParamSpan:
    """Offsets of one parameter in the original URL.

    Attributes:
        start: Index of the delimiter before the parameter ('?' for the
            first parameter, the separator otherwise)
        key_end: Index of '=' or ``end`` when the parameter has no value
        end: Index of the next separator or of the fragment start

    Example:
        >>> span = ParamSpan(start=4, key_end=7, end=9)
        >>> span.raw("http?ab=1&c")
        'ab=1'
    """

    start: int
    key_end: int
    end: int

    def __post_init__(self) -> None:
        """Validate ParamSpan invariants.

        Raises:
            ValueError: If start is negative or offsets are out of order.
        """
        if self.start < 0:
            msg = f"ParamSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if not self.start <= self.key_end <= self.end:
            msg = (
                f"ParamSpan offsets must satisfy start <= key_end <= end, "
                f"got ({self.start}, {self.key_end}, {self.end})"
            )
            raise ValueError(msg)

    @property
    def has_value(self) -> bool:
        """True if the parameter contains the value separator '='."""
        return self.key_end != self.end

    def raw(self, url: str) -> str:
        """Return the parameter text (key, '=' and value) without its delimiter."""
        return url[self.start + 1 : self.end]
