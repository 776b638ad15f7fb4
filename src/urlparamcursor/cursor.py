"""Editable cursor over the query parameters of a URL.

Walks the parameters of ``scheme://host/path?k1=v1&k2=v2#fragment`` one at a
time and records removals and insertions without touching the original
string. Edits are kept in append-only buffers and only materialized when
the URL is rendered, so the query is scanned once no matter how many edits
are made.

Design Philosophy:
    - The source URL is never modified; offsets index into it
    - advance() only moves forward; exhaustion is idempotent
    - Parameters already passed by the cursor are frozen into an
      accumulated buffer, only the last edited one stays pending
    - Keys and values are opaque: no percent-decoding or encoding

Example:
    >>> cursor = ParamCursor("http://site?c=2&d")
    >>> for key, value in cursor:
    ...     if cursor.is_first:
    ...         cursor.insert_before("b", "1")
    ...     if key == "d" and value != "3":
    ...         cursor.remove()
    ...         cursor.insert_after("d", "3")
    ...     if cursor.is_last:
    ...         cursor.insert_after("e", "4")
    >>> cursor.insert_first("a", "0")
    >>> cursor.insert_last("f", "5")
    >>> cursor.render()
    'http://site?a=0&b=1&c=2&d=3&e=4&f=5'

Thread Safety:
    Not thread-safe. Instances are mutable; use one cursor per thread or
    guard shared cursors with an external lock.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import cast

from urlparamcursor.config import CursorConfig, validate_separator
from urlparamcursor.constants import (
    DEFAULT_PARAM_SEP,
    FRAGMENT_SEP,
    LOG_TRUNCATE_LENGTH,
    QUERY_SEP,
    UNSET,
    VALUE_SEP,
)
from urlparamcursor.diagnostics import (
    ErrorTemplate,
    IllegalStateError,
    InvalidArgumentError,
)
from urlparamcursor.span import ParamSpan

__all__ = ["EditBuffers", "EditedParam", "ParamCursor"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class EditedParam:
    """Last edited parameter not yet moved into the accumulated buffer.

    Attributes:
        start: Offset of the delimiter before the parameter
        end: Offset after the end of the parameter
        removed: Parameter is excluded from the rendered URL
    """

    start: int
    end: int
    removed: bool = False


@dataclass(slots=True)
class EditBuffers:
    """Pending edits, one raw parameter text per entry.

    Entries never contain the leading separator; rendering joins them.
    A single ``accumulated`` entry may span several untouched parameters.

    Attributes:
        accumulated: Finalized text of parameters already passed by edits
        before: Insertions before the edited parameter
        after: Insertions after the edited parameter
        first: Insertions before every other parameter
        last: Insertions after every other parameter
    """

    accumulated: list[str] = field(default_factory=list)
    before: list[str] = field(default_factory=list)
    after: list[str] = field(default_factory=list)
    first: list[str] = field(default_factory=list)
    last: list[str] = field(default_factory=list)


def _find(text: str, char: str, begin: int, end: int) -> int:
    """Return the index of char in text[begin:end], or end if not found."""
    index = text.find(char, begin, end)
    return end if index == -1 else index


def _truncate(url: str) -> str:
    if len(url) > LOG_TRUNCATE_LENGTH:
        return url[:LOG_TRUNCATE_LENGTH] + "..."
    return url


class ParamCursor:
    """Forward-only cursor that reads and edits the parameters of a URL.

    The query section starts at the first '?' before the fragment and ends
    at the first '#' (or the end of the URL). Each parameter is the text
    between two separators; its key ends at the first '='.

    Notes:
        - Keys are never None once a parameter is selected; values are None
          when the parameter has no '='.
        - Once advance() returns False, further calls keep returning False
          and the last parameter stays selected.
        - Edits never change which parameters advance() visits.
        - Repeated insertions through the same method keep call order.

    Example:
        >>> cursor = ParamCursor("AA?k=v&k=&k&=&")
        >>> list(cursor)
        [('k', 'v'), ('k', ''), ('k', None), ('', ''), ('', None)]
    """

    __slots__ = (
        "_buffers",
        "_edited",
        "_end",
        "_fragment_start",
        "_key_cache",
        "_key_end",
        "_query_start",
        "_render_cache",
        "_separator",
        "_start",
        "_url",
        "_value_cache",
    )

    def __init__(
        self,
        url: str,
        separator: str | None = None,
        *,
        config: CursorConfig | None = None,
    ) -> None:
        """Create a cursor positioned before the first parameter.

        Args:
            url: URL whose query parameters are traversed
            separator: Parameter separator; overrides ``config.separator``
            config: Cursor configuration (default: ``&`` separator)

        Raises:
            InvalidArgumentError: If url is None or not a string, or the
                separator is not a single non-reserved character.
        """
        if url is None:
            raise InvalidArgumentError(ErrorTemplate.url_required())
        if not isinstance(url, str):
            raise InvalidArgumentError(ErrorTemplate.url_type(url))

        if separator is not None:
            self._separator = validate_separator(separator)
        elif config is not None:
            self._separator = config.separator
        else:
            self._separator = DEFAULT_PARAM_SEP

        self._url = url
        self._fragment_start = _find(url, FRAGMENT_SEP, 0, len(url))
        self._query_start = _find(url, QUERY_SEP, 0, self._fragment_start)

        self._start = self._end = self._key_end = UNSET
        self._key_cache: str | None = None
        self._value_cache: str | None = None
        self._render_cache: str | None = url
        self._buffers: EditBuffers | None = None
        self._edited: EditedParam | None = None

        logger.debug(
            "ParamCursor created for %r (query_start=%d, fragment_start=%d)",
            _truncate(url),
            self._query_start,
            self._fragment_start,
        )

    # ------------------------------------------------------------------
    # Read-only attributes
    # ------------------------------------------------------------------

    @property
    def url(self) -> str:
        """Original URL, never modified by edits."""
        return self._url

    @property
    def separator(self) -> str:
        """Parameter separator character."""
        return self._separator

    @property
    def query_start(self) -> int:
        """Index of '?', or ``fragment_start`` when the URL has no query."""
        return self._query_start

    @property
    def fragment_start(self) -> int:
        """Index of '#', or the URL length when there is no fragment."""
        return self._fragment_start

    @property
    def has_query(self) -> bool:
        """True if the URL contains a query section (even an empty one)."""
        return self._query_start < self._fragment_start

    @property
    def is_modified(self) -> bool:
        """True once any remove or insert method has been called."""
        return self._buffers is not None

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def advance(self) -> bool:
        """Select the next parameter.

        Returns:
            True if a parameter was selected; False when there are no more
            parameters, in which case the previous selection is kept.
        """
        # '?' for the first parameter, the previous end separator otherwise
        candidate = self._query_start if self._start == UNSET else self._end
        if candidate >= self._fragment_start:
            return False
        self._start = candidate
        self._end = _find(self._url, self._separator, candidate + 1, self._fragment_start)
        self._key_end = _find(self._url, VALUE_SEP, candidate + 1, self._end)
        self._key_cache = self._value_cache = None
        return True

    def __iter__(self) -> Iterator[tuple[str, str | None]]:
        """Advance through the remaining parameters yielding (key, value).

        The cursor itself moves, so edits made inside the loop body apply to
        the pair just yielded.
        """
        while self.advance():
            yield cast(str, self.key), self.value

    @property
    def is_first(self) -> bool:
        """True if the selected parameter is the first one."""
        return self._start == self._query_start

    @property
    def is_last(self) -> bool:
        """True if the selected parameter is the last one."""
        return self._end == self._fragment_start

    @property
    def key(self) -> str | None:
        """Key of the selected parameter.

        Returns:
            The key (possibly ``""``), or None if no parameter is selected
        """
        if self._key_cache is None and self._start != UNSET:
            self._key_cache = self._url[self._start + 1 : self._key_end]
        return self._key_cache

    @property
    def value(self) -> str | None:
        """Value of the selected parameter.

        Returns:
            The value after '=' (possibly ``""``), or None if the parameter
            has no '=' or no parameter is selected
        """
        if self._value_cache is None and self._key_end != self._end:
            self._value_cache = self._url[self._key_end + 1 : self._end]
        return self._value_cache

    @property
    def span(self) -> ParamSpan | None:
        """Offsets of the selected parameter, or None if none is selected."""
        if self._start == UNSET:
            return None
        return ParamSpan(start=self._start, key_end=self._key_end, end=self._end)

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def remove(self) -> None:
        """Remove the selected parameter from the rendered URL.

        Raises:
            IllegalStateError: If no parameter is selected
        """
        edited = self._prepare_edit("remove")
        edited.removed = True

    def insert_before(self, key: str, value: str | None = None) -> None:
        """Insert a parameter before the selected one.

        The new parameter goes after earlier insert_before() calls for the
        same selected parameter.

        Args:
            key: Raw parameter key
            value: Raw parameter value, or None to omit '='

        Raises:
            InvalidArgumentError: If key is None or not a string, or value is
                neither a string nor None
            IllegalStateError: If no parameter is selected
        """
        param = self._format_param("insert_before", key, value)
        self._prepare_edit("insert_before")
        cast(EditBuffers, self._buffers).before.append(param)

    def insert_after(self, key: str, value: str | None = None) -> None:
        """Insert a parameter after the selected one.

        The new parameter goes after earlier insert_after() calls for the
        same selected parameter.

        Raises:
            InvalidArgumentError: If key or value is invalid
            IllegalStateError: If no parameter is selected
        """
        param = self._format_param("insert_after", key, value)
        self._prepare_edit("insert_after")
        cast(EditBuffers, self._buffers).after.append(param)

    def insert_first(self, key: str, value: str | None = None) -> None:
        """Insert a parameter before all the other parameters.

        Works regardless of the cursor position.

        Raises:
            InvalidArgumentError: If key or value is invalid
        """
        param = self._format_param("insert_first", key, value)
        self._ensure_buffers().first.append(param)
        self._render_cache = None

    def insert_last(self, key: str, value: str | None = None) -> None:
        """Insert a parameter after all the other parameters.

        Works regardless of the cursor position.

        Raises:
            InvalidArgumentError: If key or value is invalid
        """
        param = self._format_param("insert_last", key, value)
        self._ensure_buffers().last.append(param)
        self._render_cache = None

    @staticmethod
    def _format_param(operation: str, key: object, value: object) -> str:
        """Validate an inserted parameter and return its raw text."""
        if key is None:
            raise InvalidArgumentError(ErrorTemplate.key_required(operation))
        if not isinstance(key, str):
            raise InvalidArgumentError(ErrorTemplate.key_type(operation, key))
        if value is None:
            return key
        if not isinstance(value, str):
            raise InvalidArgumentError(ErrorTemplate.value_type(operation, value))
        return f"{key}{VALUE_SEP}{value}"

    def _ensure_buffers(self) -> EditBuffers:
        if self._buffers is None:
            self._buffers = EditBuffers()
        return self._buffers

    def _prepare_edit(self, operation: str) -> EditedParam:
        """Track the selected parameter as the one being edited.

        When the selection moved past the previously edited parameter, that
        parameter, its pending insertions and the untouched parameters up to
        the selection are finalized into the accumulated buffer.

        Raises:
            IllegalStateError: If no parameter is selected
        """
        if self._start == UNSET:
            raise IllegalStateError(ErrorTemplate.no_parameter_selected(operation))

        buffers = self._ensure_buffers()
        edited = self._edited
        if edited is None:
            if self._query_start < self._start:
                buffers.accumulated.append(self._url[self._query_start + 1 : self._start])
            edited = self._edited = EditedParam(start=self._start, end=self._end)
            logger.debug("First edit at offset %d (%s)", self._start, operation)
        elif edited.start < self._start:
            self._accumulate(edited, buffers)
            edited.start = self._start
            edited.end = self._end

        self._render_cache = None
        return edited

    def _accumulate(self, edited: EditedParam, buffers: EditBuffers) -> None:
        """Finalize the previously edited parameter into the accumulated buffer."""
        buffers.accumulated.extend(buffers.before)
        buffers.before.clear()
        if edited.removed:
            # Flag belongs to the parameter being left behind
            edited.removed = False
        else:
            buffers.accumulated.append(self._url[edited.start + 1 : edited.end])
        buffers.accumulated.extend(buffers.after)
        buffers.after.clear()
        if edited.end < self._start:
            buffers.accumulated.append(self._url[edited.end + 1 : self._start])
        logger.debug(
            "Accumulated edits up to offset %d (%d pieces)",
            self._start,
            len(buffers.accumulated),
        )

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> str:
        """Return the original URL with all recorded edits applied.

        The result is cached until the next edit.
        """
        if self._render_cache is not None:
            return self._render_cache

        url = self._url
        pieces: list[str] = []
        buffers = self._buffers
        edited = self._edited

        if buffers is not None:
            pieces.extend(buffers.first)

        if edited is not None and buffers is not None:
            pieces.extend(buffers.accumulated)
            pieces.extend(buffers.before)
            if not edited.removed:
                pieces.append(url[edited.start + 1 : edited.end])
            pieces.extend(buffers.after)
            if edited.end < self._fragment_start:
                pieces.append(url[edited.end + 1 : self._fragment_start])
        elif self.has_query:
            pieces.append(url[self._query_start + 1 : self._fragment_start])

        if buffers is not None:
            pieces.extend(buffers.last)

        parts = [url[: self._query_start]]
        if pieces:
            parts.append(QUERY_SEP)
            parts.append(self._separator.join(pieces))
        parts.append(url[self._fragment_start :])

        self._render_cache = "".join(parts)
        logger.debug("Rendered %d query pieces for %r", len(pieces), _truncate(url))
        return self._render_cache

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"ParamCursor(url={_truncate(self._url)!r}, "
            f"separator={self._separator!r}, span={self.span!r})"
        )
