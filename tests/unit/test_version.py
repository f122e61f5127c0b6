from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import metadata

import pysatl_reparam


def test_version_comes_from_installed_distribution() -> None:
    meta = metadata("pysatl-reparam")

    assert pysatl_reparam.__version__ == meta["Version"]
    assert meta["Name"] == "pysatl-reparam"


def test_public_api_is_importable() -> None:
    missing = [name for name in pysatl_reparam.__all__ if not hasattr(pysatl_reparam, name)]

    assert missing == []
