"""Custom exceptions for manylicenses."""


class ManyLicensesError(Exception):
    """Base exception for all manylicenses errors."""

    pass


class InventoryError(ManyLicensesError):
    """Exception raised when the inventory input cannot be used."""

    pass


class ConfigurationError(ManyLicensesError):
    """Exception raised when configuration is invalid."""

    pass
