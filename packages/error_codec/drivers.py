"""Storage-driver constraint-violation adapter.

Driver exceptions are recognized only through their vendor error code, never
through message text. Supporting another driver means adding rows to
``DRIVER_CODES`` and, when the family is new, one branch in ``vendor_code``.
"""

from __future__ import annotations

import sqlite3
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from sqlalchemy.exc import DBAPIError

from .errors.factories import create, detail
from .errors.kinds import ErrorKind
from .errors.types import ErrorValue


class DriverFamily(str, Enum):
    """Database driver families with a known vendor-code table."""

    MYSQL = "mysql"
    SQLITE = "sqlite"
    POSTGRES = "postgres"


class ConstraintViolation(str, Enum):
    """Constraint violations the adapter knows how to classify."""

    UNIQUE = "unique"
    FOREIGN_KEY = "foreign_key"

    @property
    def kind(self) -> ErrorKind:
        """Error kind reported for this violation."""
        return _VIOLATION_KINDS[self]


_VIOLATION_KINDS: Mapping[ConstraintViolation, ErrorKind] = MappingProxyType(
    {
        ConstraintViolation.UNIQUE: ErrorKind.DUPLICATE_RESOURCE,
        ConstraintViolation.FOREIGN_KEY: ErrorKind.BAD_REQUEST,
    }
)

DRIVER_CODES: Mapping[tuple[DriverFamily, int | str], ConstraintViolation] = MappingProxyType(
    {
        # ER_DUP_ENTRY
        (DriverFamily.MYSQL, 1062): ConstraintViolation.UNIQUE,
        # ER_NO_REFERENCED_ROW, ER_NO_REFERENCED_ROW_2
        (DriverFamily.MYSQL, 1216): ConstraintViolation.FOREIGN_KEY,
        (DriverFamily.MYSQL, 1452): ConstraintViolation.FOREIGN_KEY,
        (DriverFamily.SQLITE, 2067): ConstraintViolation.UNIQUE,
        (DriverFamily.SQLITE, 1555): ConstraintViolation.UNIQUE,
        (DriverFamily.SQLITE, 787): ConstraintViolation.FOREIGN_KEY,
        (DriverFamily.SQLITE, "SQLITE_CONSTRAINT_UNIQUE"): ConstraintViolation.UNIQUE,
        (DriverFamily.SQLITE, "SQLITE_CONSTRAINT_PRIMARYKEY"): ConstraintViolation.UNIQUE,
        (DriverFamily.SQLITE, "SQLITE_CONSTRAINT_FOREIGNKEY"): ConstraintViolation.FOREIGN_KEY,
        (DriverFamily.POSTGRES, "23505"): ConstraintViolation.UNIQUE,
        (DriverFamily.POSTGRES, "23503"): ConstraintViolation.FOREIGN_KEY,
    }
)

_MYSQL_MODULE_PREFIXES = ("pymysql", "MySQLdb", "mysql.connector")


def unwrap_driver_error(exc: BaseException) -> BaseException:
    """Return the DB-API exception wrapped by SQLAlchemy, if any."""
    if isinstance(exc, DBAPIError) and isinstance(exc.orig, BaseException):
        return exc.orig
    return exc


def vendor_code(exc: object) -> tuple[DriverFamily, int | str] | None:
    """Identify the driver family and vendor error code of one exception."""
    if not isinstance(exc, BaseException):
        return None
    orig = unwrap_driver_error(exc)

    if isinstance(orig, sqlite3.Error):
        code = getattr(orig, "sqlite_errorcode", None)
        if isinstance(code, int):
            return DriverFamily.SQLITE, code
        name = getattr(orig, "sqlite_errorname", None)
        if isinstance(name, str):
            return DriverFamily.SQLITE, name
        return None

    if type(orig).__module__.startswith(_MYSQL_MODULE_PREFIXES):
        code = getattr(orig, "errno", None)
        if not isinstance(code, int) and orig.args:
            code = orig.args[0]
        if isinstance(code, int) and not isinstance(code, bool):
            return DriverFamily.MYSQL, code
        return None

    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if isinstance(sqlstate, str):
        return DriverFamily.POSTGRES, sqlstate
    return None


def constraint_violation(exc: object) -> ConstraintViolation | None:
    """Classify one driver exception as a known constraint violation."""
    key = vendor_code(exc)
    if key is None:
        return None
    return DRIVER_CODES.get(key)


def driver_error_to_error(exc: object) -> ErrorValue | None:
    """Map a driver constraint violation into a structured error."""
    key = vendor_code(exc)
    if key is None:
        return None
    violation = DRIVER_CODES.get(key)
    if violation is None:
        return None

    family, code = key
    return create(
        violation.kind,
        _VIOLATION_MESSAGES[violation],
        detail("driver", family.value),
        detail("vendor_code", code),
        detail("constraint", violation.value),
    )


_VIOLATION_MESSAGES: Mapping[ConstraintViolation, str] = MappingProxyType(
    {
        ConstraintViolation.UNIQUE: "resource already exists",
        ConstraintViolation.FOREIGN_KEY: "referenced resource does not exist",
    }
)
