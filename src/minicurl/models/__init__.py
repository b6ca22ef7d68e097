"""Models for minicurl."""

from minicurl.models.base import MiniCurlModel
from minicurl.models.request import RequestConfig
from minicurl.models.transfer import TransferStats

__all__ = [
    "MiniCurlModel",
    "RequestConfig",
    "TransferStats",
]
