"""Error builders shared by use cases"""

from typing import Dict
from libs.result import Error
from goldbill.domain.errors import ValidationError


def validation_failed(exc: ValidationError, prefix: str = "") -> Error:
    """
    Convert a domain ValidationError into a VALIDATION_ERROR

    Args:
        exc: Raised validation error
        prefix: Prepended to every field name (e.g., "items.0.")
    """
    fields: Dict[str, str] = {f"{prefix}{name}": problem for name, problem in exc.fields.items()}
    return Error(
        code="VALIDATION_ERROR",
        message="Invalid input: " + ", ".join(sorted(fields)),
        details={"fields": fields},
    )


def store_failed(action: str, exc: Exception) -> Error:
    return Error(
        code="STORE_ERROR",
        message=f"Failed to {action}",
        reason=str(exc),
    )
