"""Paperwork — grade-gated signing and execution of office forms."""

__version__ = "0.1.0"
