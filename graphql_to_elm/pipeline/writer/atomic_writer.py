"""
Atomic file writer for generated Elm modules.

Ensures that a module is either written whole or not at all.
"""

from __future__ import annotations

import logging
import tempfile
from collections.abc import Callable
from pathlib import Path

from ..errors import OutputWriteError

logger = logging.getLogger(__name__)


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(self, validate_elm: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate_elm: Optional validation function for Elm code
        """
        self._validate_elm = validate_elm or self._default_validate_elm

    def write(self, path: Path, content: str, validate: bool = True, atomic: bool = True) -> None:
        """Write content to file, atomically by default.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing
            atomic: Whether to go through a temporary file; when False the
                content is validated first and written in place

        Raises:
            OutputWriteError: If validation or a file operation fails
        """
        try:
            if atomic:
                self._write_atomic(path, content, validate)
            else:
                if validate:
                    self.validate(content)
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(f"Cannot write {path}: {e}") from e

        logger.info("Wrote %s", path)

    def validate(self, content: str) -> None:
        """Run the configured Elm validation on content.

        Raises:
            OutputWriteError: If validation fails
        """
        self._validate_elm(content)

    def _write_atomic(self, path: Path, content: str, validate: bool) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )

        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)

            if validate:
                self.validate(content)

            temp_path.replace(path)

        except Exception:
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    logger.warning("Could not remove temporary file %s", temp_path)
            raise

    def _default_validate_elm(self, content: str) -> None:
        """Default Elm validation.

        Args:
            content: Elm code to validate

        Raises:
            OutputWriteError: If validation fails
        """
        if not content.startswith("module "):
            raise OutputWriteError("Generated Elm code is missing the module declaration")

        open_parens = content.count("(")
        close_parens = content.count(")")
        if open_parens != close_parens:
            raise OutputWriteError(f"Generated Elm code has unbalanced parentheses: {open_parens} open, {close_parens} close")
