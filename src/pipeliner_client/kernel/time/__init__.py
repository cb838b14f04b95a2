"""Kernel time – datetime helpers shared by entities and queries."""
from pipeliner_client.kernel.time.formatting import format_datetime, to_utc

__all__ = ["format_datetime", "to_utc"]
