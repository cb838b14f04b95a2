"""Adapters – HTTP transport and REST implementations of the kernel ports."""
