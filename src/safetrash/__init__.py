# Filename: __init__.py
# Author: Rich Lewis @RichLewis007
# Description: Top-level package initialization for Safe Trash. Re-exports the batch
#              trash operation and its result types.

from .models.outcome import MoveOptions, MoveOutcome
from .services.trash import move_paths_to_trash

__all__ = [
    "MoveOptions",
    "MoveOutcome",
    "__author__",
    "__version__",
    "move_paths_to_trash",
]

__version__ = "0.1.0"
__author__ = "Rich Lewis"
