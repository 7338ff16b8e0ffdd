"""Version information for neo-blobstore."""

__version__ = "1.0.0"
