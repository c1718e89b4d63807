# techsupport/errors.py
# Exceptions raised by the validator, the DALs and the controller.


class TechSupportError(Exception):
    """Base class for every error raised by the techsupport package."""


class InvalidArgument(TechSupportError, ValueError):
    """A required value was missing, empty or out of range."""

    def __init__(self, message: str, param_name: str = None):
        super().__init__(message)
        self.param_name = param_name


class NotFound(TechSupportError, LookupError):
    """A customer, product, technician or incident could not be resolved."""

    def __init__(self, kind: str, value):
        super().__init__(f"{kind} not found: {value!r}")
        self.kind = kind
        self.value = value


class StorageFault(TechSupportError):
    """Wraps an error raised by the database driver."""
