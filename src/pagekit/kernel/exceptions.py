"""Unified exception hierarchy for PageKit.

All library exceptions inherit from PageKitException, enabling unified
error handling. Pagination parsing failures form their own branch under
ValidationException so callers can catch every malformed-input case at
once, or a single kind by its concrete class.

Categories:
- BusinessException: Domain rule violations, validation errors
- PaginationException: Malformed page/size/sort input and result content
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class PageKitException(Exception):
    """Base exception for all PageKit errors.

    Carries an optional error code and context dict for structured error data.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "PAGINATION_INVALID_PAGE").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Business Exceptions
# =============================================================================


class BusinessException(PageKitException):
    """Domain rule violations and business logic errors."""


class ValidationException(BusinessException):
    """Input validation failures."""


# =============================================================================
# Pagination Exceptions
# =============================================================================


class PaginationException(ValidationException):
    """Base class for every pagination request or result error.

    Subclasses fix their own message and code; only the context varies.
    """

    default_message: str = "Invalid pagination request"
    default_code: str = "PAGINATION_ERROR"

    def __init__(self, message: str | None = None, context: dict | None = None) -> None:
        super().__init__(message or self.default_message, code=self.default_code, context=context)


class WrongPageValueCountException(PaginationException):
    """The page parameter was supplied with a number of values other than one."""

    default_message = "Wrong number of page parameter values, expected 1"
    default_code = "PAGINATION_WRONG_PAGE_COUNT"


class InvalidPageValueException(PaginationException):
    """The page value is non-numeric or negative."""

    default_message = "Page value must be numeric greater or equal than 0"
    default_code = "PAGINATION_INVALID_PAGE"


class WrongSizeValueCountException(PaginationException):
    """The size parameter was supplied with a number of values other than one."""

    default_message = "Wrong number of size parameter values, expected 1"
    default_code = "PAGINATION_WRONG_SIZE_COUNT"


class InvalidSizeValueException(PaginationException):
    """The size value is non-numeric or lower than one."""

    default_message = "Size value must be numeric greater or equal than 1"
    default_code = "PAGINATION_INVALID_SIZE"


class EmptySortClauseException(PaginationException):
    """A sort clause does not name any property."""

    default_message = "Wrong sort value provided: expected <p1>,<p2>,...,<pN>,<dir>"
    default_code = "PAGINATION_EMPTY_SORT"


class InvalidDirectionException(PaginationException):
    """A direction token is neither 'asc' nor 'desc'."""

    default_message = "Invalid value for order given! It has to be either 'asc' or 'desc' (case insensitive)"
    default_code = "PAGINATION_INVALID_DIRECTION"


class InvalidNullHandlingException(PaginationException):
    """A null handling token is not one of the supported values."""

    default_message = (
        "Invalid value for null handling given! It has to be 'native', 'nullsFirst' or 'nullsLast'"
    )
    default_code = "PAGINATION_INVALID_NULL_HANDLING"


class InvalidContentException(PaginationException):
    """Page content is not a sequence."""

    default_message = "Invalid content provided: expected a sequence"
    default_code = "PAGINATION_INVALID_CONTENT"
