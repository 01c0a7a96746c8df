"""
Exception hierarchy for pymtrs.

All exceptions inherit from MtrsError to allow catching any library-specific
error. Absence (an out-of-range ``get``, the determinant of a non-square
matrix) is reported as ``None`` and never raises.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class MtrsError(Exception):
    """Base exception for all pymtrs errors."""
    pass


class ValidationError(MtrsError):
    """
    Input validation failed.

    Raised when user-provided inputs (sizes, element types, arrays) fail
    validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when a data sequence does not hold exactly ``height * width``
    elements, or when the operands of ``add``, ``sub`` or a matrix product
    have incompatible shapes. These signal programmer error and are not
    meant to be handled locally.
    """
    pass


class OutOfBoundsError(ValidationError):
    """
    A write targeted a location outside the matrix.

    Raised by ``Matrix.set`` when either axis of the location is out of
    range. The matrix is left unmodified.

    Attributes:
        location: The (row, column) pair that was requested
        size: The (height, width) of the matrix at the time of the call
    """

    def __init__(
        self,
        message: str,
        location: tuple[int, int] | None = None,
        size: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.location = location
        self.size = size
