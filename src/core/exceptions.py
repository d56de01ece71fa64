"""Custom exception classes for Quillpress.

This module defines application-specific exceptions following Google Python
Style Guide.
"""


class QuillpressError(Exception):
    """Base exception for all Quillpress errors."""

    pass


class ConfigurationError(QuillpressError):
    """Raised when there is a configuration error."""

    pass


class RoleNotFoundError(ConfigurationError):
    """Raised when a required role is missing from the reference data."""

    def __init__(self, name: str):
        """Initialize the exception.

        Args:
            name: The name of the role that was not found.
        """
        self.name = name
        super().__init__(f"Role '{name}' not found")


class CategoryNotFoundError(QuillpressError):
    """Raised when a requested category cannot be found."""

    def __init__(self, category_id: int):
        """Initialize the exception.

        Args:
            category_id: The ID of the category that was not found.
        """
        self.category_id = category_id
        super().__init__(f"Category '{category_id}' not found")


class ImageUploadError(QuillpressError):
    """Raised when an uploaded profile picture cannot be stored."""

    pass
