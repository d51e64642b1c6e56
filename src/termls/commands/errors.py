"""
Custom exceptions for listing generation
"""

class ListingError(Exception):
    """Base class for listing-related exceptions"""
    pass

class PathNotFoundError(ListingError):
    """Raised when a path given on the command line does not exist"""

    def __init__(self, path):
        self.path = path
        super().__init__(f"cannot access {path}: no such file or directory")

class PathPermissionError(ListingError):
    """Raised when a path cannot be read because of its permissions"""

    def __init__(self, path):
        self.path = path
        super().__init__(f"open {path}: permission denied")

class MalformedMetadataError(ListingError):
    """Raised when the metadata of an entry cannot be interpreted"""
    pass

class ListingIOError(ListingError):
    """Raised when a directory or an entry cannot be read"""
    pass
