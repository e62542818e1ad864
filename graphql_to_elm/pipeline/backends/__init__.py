"""
Code generation backends.
"""

from __future__ import annotations

from .elm_backend import ElmBackend

__all__ = [
    "ElmBackend",
]
