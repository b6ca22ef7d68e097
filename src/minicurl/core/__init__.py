"""Core configuration, arguments and errors."""

from minicurl.core.config import Settings, get_settings
from minicurl.core.exceptions import (
    ArgumentError,
    DataFileError,
    MiniCurlError,
    OutputError,
    RequestError,
    SizeParseError,
    TransferError,
)

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    # Errors
    "MiniCurlError",
    "ArgumentError",
    "SizeParseError",
    "DataFileError",
    "RequestError",
    "TransferError",
    "OutputError",
]
