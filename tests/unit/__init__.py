"""
PySATL Reparam
==============

Unit tests for distribution families, reparametrizations, hierarchical
models and Stan snippets.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
