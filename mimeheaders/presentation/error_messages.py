from mimeheaders.domain.address_validator import InvalidAddressError


def get_error_message(exc: Exception) -> str:
    """Map an exception to a user-facing message.

    - invalid address: name the offending address
    - others: generic failure with the exception text
    """
    if isinstance(exc, InvalidAddressError):
        return f"Invalid email address: {exc.address}"
    return f"Failed to build header: {str(exc)}"
