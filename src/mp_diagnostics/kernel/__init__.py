"""Kernel – clock and error primitives shared by every layer."""
