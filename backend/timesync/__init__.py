"""TimeSync: find a common meeting hour across time zones."""

__version__ = "0.1.0"
