#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Shared helpers for md2docx parsers and renderers."""
