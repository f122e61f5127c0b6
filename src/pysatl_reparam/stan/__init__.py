"""
Stan code for centered and reparameterized models.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .program import StanProgram
from .snippets import available_snippets, eight_schools_program, get_snippet, render_snippet

__all__ = [
    "StanProgram",
    "available_snippets",
    "eight_schools_program",
    "get_snippet",
    "render_snippet",
]
