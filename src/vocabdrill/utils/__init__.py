"""
Shared utilities for the vocabulary drill.

This package contains reusable components used across the engine and CLIs:
- file_io.py: JSON reading/writing and stage directory paths
- language_utils.py: Language codes, names, flags and locale tags
- logging_config.py: Structured logging, loguru bridging
"""

__all__ = [
    "file_io",
    "language_utils",
    "logging_config",
]
