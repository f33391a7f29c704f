"""
Fli CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .app import App
from .command import Command
from .context import CallbackContext
from .resolver import Resolution, Resolver
from .version import __version__

logger = logging.getLogger("fli")


__all__ = [
    "App",
    "Command",
    "CallbackContext",
    "Resolution",
    "Resolver",
    "__version__",
]
