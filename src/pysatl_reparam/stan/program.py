"""
Block-structured Stan programs.

A :class:`StanProgram` holds the statements of each Stan block and renders
them in the canonical block order. Programs are text only; nothing here
compiles or runs Stan.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, fields

INDENT = "  "


@dataclass(frozen=True, slots=True)
class StanProgram:
    """
    Statements of a Stan program, one tuple per block.

    Empty blocks are omitted from the rendered program except ``model``,
    which Stan expects even when the density is implicit (uniform).

    Parameters
    ----------
    data, parameters, transformed_parameters, model, generated_quantities : tuple[str, ...]
        Statements of the corresponding block, without indentation.
    """

    data: tuple[str, ...] = ()
    parameters: tuple[str, ...] = ()
    transformed_parameters: tuple[str, ...] = ()
    model: tuple[str, ...] = ()
    generated_quantities: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for block in fields(self):
            statements = getattr(self, block.name)
            if isinstance(statements, str):
                raise TypeError(f"Block '{block.name}' must be a sequence of statements")
            object.__setattr__(self, block.name, tuple(statements))

    @staticmethod
    def _render_block(title: str, statements: tuple[str, ...]) -> str:
        body = "".join(f"{INDENT}{line}\n" for line in statements)
        return f"{title} {{\n{body}}}"

    def render(self) -> str:
        """Stan source code, blocks separated by blank lines."""
        blocks = []
        for block in fields(self):
            statements = getattr(self, block.name)
            if statements or block.name == "model":
                blocks.append(self._render_block(block.name.replace("_", " "), statements))
        return "\n\n".join(blocks) + "\n"

    def __str__(self) -> str:
        return self.render()
