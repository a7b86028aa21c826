"""Employee leave balance bookkeeping with overlap detection."""

__version__ = "0.1.0"
