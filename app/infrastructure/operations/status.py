"""Operation status enumeration.

Status codes for operation results, used to classify the outcome of a
geolocation lookup so callers can tell a bad input from a missing record
from a broken database.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        INVALID_ADDRESS: Input could not be parsed as an IPv4/IPv6 address
        NOT_FOUND: Address has no entry in the database
        IO_FAILURE: Database could not be read
    """

    SUCCESS = "success"
    INVALID_ADDRESS = "invalid_address"
    NOT_FOUND = "not_found"
    IO_FAILURE = "io_failure"
