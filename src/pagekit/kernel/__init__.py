"""PageKit Kernel — Foundation layer with zero external dependencies."""

from pagekit.kernel.exceptions import (
    BusinessException,
    EmptySortClauseException,
    InvalidContentException,
    InvalidDirectionException,
    InvalidNullHandlingException,
    InvalidPageValueException,
    InvalidSizeValueException,
    PageKitException,
    PaginationException,
    ValidationException,
    WrongPageValueCountException,
    WrongSizeValueCountException,
)

__all__ = [
    "BusinessException",
    "EmptySortClauseException",
    "InvalidContentException",
    "InvalidDirectionException",
    "InvalidNullHandlingException",
    "InvalidPageValueException",
    "InvalidSizeValueException",
    "PageKitException",
    "PaginationException",
    "ValidationException",
    "WrongPageValueCountException",
    "WrongSizeValueCountException",
]
