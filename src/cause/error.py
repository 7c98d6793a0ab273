"""Generic error wrapper keyed by an error kind."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from cause.render import debug_text, render

T = TypeVar("T")


class Cause(Exception, Generic[T]):
    """An exception that wraps an error kind.

    The kind is usually an enum member describing what went wrong. A message
    and a lower-level source error can be attached; both transforms return a
    new ``Cause`` and leave the receiver untouched::

        err = Cause(ErrorType.InternalError).with_message("oops!").with_source(io_err)

    Public attributes of the kind are readable through the wrapper, and
    ``match`` sees the kind as the first positional sub-pattern::

        match err:
            case Cause(ErrorType.NotFound):
                status = 404
    """

    __match_args__ = ("kind",)

    def __init__(self, kind: T) -> None:
        super().__init__(kind)
        self._kind = kind
        self._message: str | None = None
        self._source: BaseException | None = None

    @classmethod
    def new(cls, kind: T) -> Cause[T]:
        return cls(kind)

    @property
    def kind(self) -> T:
        """The wrapped error kind."""
        return self._kind

    @property
    def cause(self) -> T:
        """Alias for :attr:`kind`."""
        return self._kind

    @property
    def message(self) -> str | None:
        return self._message

    @property
    def source(self) -> BaseException | None:
        """The lower-level error this one was caused by, if any."""
        return self._source

    def with_message(self, text: object) -> Cause[T]:
        """Return a copy carrying ``text`` as its message, replacing any previous one."""
        return self._evolve(_message=str(text))

    def with_source(self, source: BaseException) -> Cause[T]:
        """Return a copy chained to ``source``, replacing any previous source.

        Raises:
            TypeError: If ``source`` is not an exception instance
        """
        if not isinstance(source, BaseException):
            raise TypeError(
                f"source must be an exception instance, got {type(source).__name__}"
            )
        return self._evolve(_source=source)

    def _evolve(self, **changes: Any) -> Cause[T]:
        cls = type(self)
        clone = cls.__new__(cls, self._kind)
        clone.__dict__.update(self.__dict__)
        clone.__dict__.update(changes)
        if "__notes__" in clone.__dict__:
            clone.__notes__ = list(clone.__notes__)
        if clone._source is not None:
            clone.__cause__ = clone._source
        return clone

    def __getattr__(self, name: str) -> Any:
        # only reached when normal lookup fails
        if name.startswith("_"):
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")
        try:
            kind = self.__dict__["_kind"]
        except KeyError:
            raise AttributeError(name) from None
        try:
            return getattr(kind, name)
        except AttributeError:
            raise AttributeError(
                f"{type(self).__name__!r} object and its kind {debug_text(kind)} "
                f"have no attribute {name!r}"
            ) from None

    def __str__(self) -> str:
        return render(self._kind, self._message, self._source)

    def __repr__(self) -> str:
        parts = [debug_text(self._kind)]
        if self._message is not None:
            parts.append(f"message={self._message!r}")
        if self._source is not None:
            parts.append(f"source={self._source!r}")
        return f"{type(self).__name__}({', '.join(parts)})"
