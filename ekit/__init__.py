"""Generic helpers for sequences, thread-safe containers, priority and delay queues, and database column values."""

__version__ = "0.1.0"