"""
Fli CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .colors import ColorsMeta, OneColors, get_one_theme

__all__ = [
    "OneColors",
    "get_one_theme",
    "ColorsMeta",
]
