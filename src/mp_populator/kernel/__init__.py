"""Kernel – error hierarchy shared by every layer of the populator."""
