#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Shared helpers: dependency checks, timing and I/O."""
