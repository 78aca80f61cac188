class InvalidArgument(ValueError):
    """Raised for a None key, or a rank outside the range of the tree"""


class EmptyCollection(LookupError):
    """Raised when a query needs at least one key but the tree is empty"""
