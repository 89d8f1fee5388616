"""Type aliases used across cargomap."""

from __future__ import annotations

from collections.abc import Callable

Header = str
Score = float
CellValue = str
ShapePredicate = Callable[[str], bool]
