"""Line source for plain-text documents on disk."""
import logging
import os
from typing import Iterator

from config import INPUT_ENCODING
from services.errors import SourceNotFoundError, SourceUnreadableError

logger = logging.getLogger(__name__)


class DocumentSource:
    """Validates a document path and yields its lines lazily."""

    def __init__(self, path: str, encoding: str = INPUT_ENCODING):
        """
        Initialize DocumentSource.

        Args:
            path: Path of the plain-text document
            encoding: Text encoding of the document
        """
        self.path = path
        self.encoding = encoding

    def validate(self) -> None:
        """
        Check the path before any line is requested.

        Raises:
            SourceNotFoundError: If the path does not exist
            SourceUnreadableError: If the path is not a readable regular file
        """
        if not os.path.exists(self.path):
            logger.error(f"Input file not found: {self.path}")
            raise SourceNotFoundError(
                f"Input file doesn't exist: {self.path}",
                details={"path": self.path},
            )

        if not os.path.isfile(self.path):
            raise SourceUnreadableError(
                f"Input path is not a regular file: {self.path}",
                details={"path": self.path},
            )

        if not os.access(self.path, os.R_OK):
            raise SourceUnreadableError(
                f"Input file is not readable: {self.path}",
                details={"path": self.path},
            )

    def lines(self) -> Iterator[str]:
        """
        Yield the document's lines without trailing newline characters.

        Validation runs eagerly, so a missing file is reported by this call
        rather than on first iteration.

        Raises:
            SourceNotFoundError: If the path does not exist
            SourceUnreadableError: If the file cannot be opened, read or decoded
        """
        self.validate()
        logger.info(f"Reading input file: {self.path}")
        return self._read_lines()

    def _read_lines(self) -> Iterator[str]:
        try:
            with open(self.path, "r", encoding=self.encoding) as f:
                for line in f:
                    yield line.rstrip("\r\n")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading {self.path}: {e}")
            raise SourceUnreadableError(
                f"Error reading the input file: {self.path}",
                details={"path": self.path, "reason": str(e)},
            ) from e
