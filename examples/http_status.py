from __future__ import annotations

from enum import Enum, auto

from cause import Cause, cause


class ErrorType(Enum):
    InvalidArgumentsError = auto()
    InternalError = auto()
    NotFoundError = auto()


def load_profile(path: str) -> str:
    try:
        with open(path) as fh:
            return fh.read()
    except FileNotFoundError as e:
        raise cause(ErrorType.NotFoundError, f"no profile at {path}").with_source(e)
    except OSError as e:
        raise Cause(ErrorType.InternalError).with_source(e).with_message("profile unreadable")


def http_status(err: Cause[ErrorType]) -> int:
    match err:
        case Cause(ErrorType.InvalidArgumentsError):
            return 400
        case Cause(ErrorType.NotFoundError):
            return 404
        case _:
            return 500


if __name__ == "__main__":
    try:
        load_profile("/nonexistent/profile.txt")
    except Cause as err:
        print(http_status(err))
        print(err)
