"""Formatter interface shared by the text, JSON and SARIF reports."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from scalpel.core.types import AnalysisResult


class Formatter(ABC):
    """Renders an AnalysisResult for a terminal, a script or a code scanner."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Value accepted by ``--output`` for this formatter."""
        pass

    @abstractmethod
    def format(self, result: AnalysisResult, include_fixes: bool = True) -> str:
        """Render a result as a string.

        Args:
            result: Diagnostics and per-file errors from a check or fix run.
            include_fixes: Whether proposed byte replacements are rendered.

        Returns:
            Report text without a trailing newline.
        """
        pass

    def write(
        self,
        result: AnalysisResult,
        path: Union[str, Path],
        include_fixes: bool = True,
    ) -> Path:
        """Render a result into a UTF-8 file, replacing any existing content."""
        target = Path(path)
        target.write_text(self.format(result, include_fixes) + "\n", encoding="utf-8")
        return target
