"""
Centralized validation rules for domain inputs.

Each validator returns ``(is_valid, error_message)``; callers decide which
exception to raise.
"""
from numbers import Real
from typing import Optional, Tuple

MAX_NAME_LENGTH = 100


def validate_product_name(name: str) -> Tuple[bool, str]:
    """
    Validate a product name.

    Args:
        name: Product name as entered by the caller

    Returns:
        (is_valid, error_message)
    """
    if not isinstance(name, str):
        return False, "Product name must be a string"

    if not name.strip():
        return False, "Product name cannot be empty"

    if len(name.strip()) > MAX_NAME_LENGTH:
        return False, f"Product name cannot exceed {MAX_NAME_LENGTH} characters"

    return True, ""


def validate_quantity(qty: int, allow_negative: bool = False, min_val: Optional[int] = None) -> Tuple[bool, str]:
    """
    Validate an integer quantity.

    Args:
        qty: Quantity to validate
        allow_negative: Whether negative values are allowed
        min_val: Minimum allowed value (inclusive)

    Returns:
        (is_valid, error_message)
    """
    if isinstance(qty, bool) or not isinstance(qty, int):
        return False, "Quantity must be an integer"

    if not allow_negative and qty < 0:
        return False, "Quantity cannot be negative"

    if min_val is not None and qty < min_val:
        return False, f"Quantity must be at least {min_val}"

    return True, ""


def validate_sale_quantity(qty: int) -> Tuple[bool, str]:
    """Sale quantities must be strictly positive integers."""
    return validate_quantity(qty, min_val=1)


def validate_price(value: float, field_name: str = "price") -> Tuple[bool, str]:
    """
    Validate a unit cost or unit price.

    Returns:
        (is_valid, error_message)
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        return False, f"{field_name} must be a number"

    if value != value:  # NaN
        return False, f"{field_name} must be a number"

    if value < 0:
        return False, f"{field_name} cannot be negative"

    return True, ""


def validate_capacity(capacity: int) -> Tuple[bool, str]:
    """History capacity (days retained) must be an integer >= 1."""
    return validate_quantity(capacity, min_val=1)
