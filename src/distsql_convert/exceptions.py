"""Exceptions raised while converting configuration into DistSQL."""

from __future__ import annotations
from enum import Enum
from typing import Any


class SQLState(str, Enum):
    """X/Open SQL states attached to conversion errors."""

    NOT_FOUND = "42S02"
    CHECK_OPTION_VIOLATION = "44000"
    GENERAL_ERROR = "HY000"


class DistSQLConvertError(Exception):
    """Base error carrying a SQL state, a vendor code and a templated reason."""

    def __init__(self, sql_state: SQLState, error_code: int, reason_template: str, *args: Any):
        self.sql_state = sql_state
        self.error_code = error_code
        self.reason = reason_template % args if args else reason_template
        super().__init__(self.reason)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(sql_state={self.sql_state.value!r}, error_code={self.error_code}, reason={self.reason!r})"


class ValidationError(DistSQLConvertError, ValueError):
    """Raised when a required field is missing or the input is malformed."""

    def __init__(self, reason_template: str, *args: Any):
        super().__init__(SQLState.CHECK_OPTION_VIOLATION, 11000, reason_template, *args)


class FileIOError(DistSQLConvertError):
    """Raised when a configuration file cannot be read."""

    def __init__(self, cause: BaseException):
        super().__init__(SQLState.GENERAL_ERROR, 18000, "File access failed, reason is: %s", cause)
        self.__cause__ = cause


class SingleTableNotFoundError(DistSQLConvertError):
    """Raised by the metadata catalog when a single table does not exist."""

    def __init__(self, table_name: str):
        super().__init__(SQLState.NOT_FOUND, 17000, "Single table `%s` does not exist", table_name)
        self.table_name = table_name
