"""Domain errors

Only input validation is raised as an exception. Missing records and store
failures are reported by use cases as coded Results (CUSTOMER_NOT_FOUND,
INVOICE_NOT_FOUND, STORE_ERROR).
"""

from typing import Dict, Optional


class DomainError(Exception):
    """Base class for domain failures"""


class ValidationError(DomainError):
    """
    Raised when input values are missing or out of range

    Args:
        fields: mapping of field name -> human-readable problem
    """

    def __init__(self, fields: Dict[str, str], message: Optional[str] = None):
        self.fields = dict(fields)
        super().__init__(message or "Invalid input: " + ", ".join(sorted(self.fields)))
