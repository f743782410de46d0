"""Amazon SP-API infrastructure adapter."""

from .auth import LwaTokenProvider
from .client import SpApiClient
from .mapper import AmazonOrderMapper

__all__ = ["LwaTokenProvider", "SpApiClient", "AmazonOrderMapper"]
