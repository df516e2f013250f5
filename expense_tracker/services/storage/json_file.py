"""
JSON File Storage Implementation

DESIGN DECISION: A single pretty-printed JSON file is the backing store because:
1. Users can read and back up their data with any text editor
2. No database setup required
3. The whole ledger is small enough to rewrite on every change

TRADEOFFS:
- Whole-file rewrite per mutation (fine for one person's expenses)
- No locking; the last writer wins

Writes go to a temporary file in the same directory which then replaces
the target with os.replace, so a crash mid-write never leaves a
half-written ledger behind.
"""

import contextlib
import os
import tempfile
from pathlib import Path
from typing import Union

from pydantic import ValidationError as SchemaValidationError
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from expense_tracker.logging_setup import get_logger
from expense_tracker.models.expense import ExpenseLedger
from expense_tracker.services.storage.interface import (
    CorruptDataError,
    ExpenseStorageInterface,
    StorageError,
)


logger = get_logger(__name__)


class JsonFileExpenseStorage(ExpenseStorageInterface):
    """
    Stores the ledger as one JSON document on the local filesystem.
    """

    def __init__(self, path: Union[str, Path], fsync: bool = True):
        self._path = Path(path)
        self._fsync = fsync

    @property
    def path(self) -> Path:
        return self._path

    @property
    def location(self) -> str:
        return str(self._path)

    def load(self) -> ExpenseLedger:
        """Read and parse the ledger; a missing file is an empty ledger."""
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("ledger_file_missing", path=str(self._path))
            return ExpenseLedger()
        except UnicodeDecodeError as e:
            raise CorruptDataError(f"{self._path} is not UTF-8 text: {e}") from e
        except OSError as e:
            raise StorageError(f"Failed to read {self._path}: {e}") from e

        try:
            return ExpenseLedger.model_validate_json(raw)
        except SchemaValidationError as e:
            raise CorruptDataError(
                f"{self._path} is not a valid expense file: "
                f"{e.error_count()} problems, first: {e.errors()[0]['msg']}"
            ) from e

    def save(self, ledger: ExpenseLedger) -> None:
        """Atomically replace the file with the serialized ledger."""
        text = ledger.model_dump_json(indent=2)
        try:
            self._write_atomic(text)
        except OSError as e:
            raise StorageError(f"Failed to save expenses to {self._path}: {e}") from e

    @retry(
        retry=retry_if_exception_type(OSError),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.1, min=0.1, max=1),
        reraise=True,
    )
    def _write_atomic(self, text: str) -> None:
        """
        Write text to a sibling temp file, then rename it over the target.

        The temp file lives in the target's directory so os.replace stays
        on one filesystem.
        """
        directory = self._path.parent
        directory.mkdir(parents=True, exist_ok=True)

        fd, temp_name = tempfile.mkstemp(
            prefix=f".{self._path.name}-",
            suffix=".tmp",
            dir=directory,
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(text)
                handle.write("\n")
                handle.flush()
                if self._fsync:
                    os.fsync(handle.fileno())
            os.chmod(temp_name, 0o644)
            os.replace(temp_name, self._path)
        except Exception:
            with contextlib.suppress(FileNotFoundError):
                os.unlink(temp_name)
            logger.warning("ledger_write_attempt_failed", path=str(self._path))
            raise

        logger.debug("ledger_saved", path=str(self._path), size=len(text))
