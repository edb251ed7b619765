"""
Whole-document storage for stations and programs.

Every mutation reads the full document, changes it in memory and writes the
full document back. There is no locking: two concurrent writers can lose one
another's change. ``DocumentStorage`` is the seam for a transactional store.
"""
import abc
import asyncio
import json
import logging
import os
import tempfile

from app.models.document import RadioDocument

logger = logging.getLogger(__name__)


class DocumentStorage(abc.ABC):
    @abc.abstractmethod
    async def read_document(self) -> RadioDocument: ...

    @abc.abstractmethod
    async def write_document(self, document: RadioDocument) -> None: ...


class JsonFileStorage(DocumentStorage):
    """Stores the document as pretty-printed JSON in a single file."""

    def __init__(self, path: str, seed_default: bool = True):
        self.path = path
        self.seed_default = seed_default

    def _ensure_file(self) -> None:
        if os.path.exists(self.path):
            return
        if self.seed_default:
            from app.data.default_schedule import build_default_document
            document = build_default_document()
        else:
            document = RadioDocument()
        self._write(document)
        logger.info(
            "Created %s with %d stations and %d programs",
            self.path, len(document.stations), len(document.programs),
        )

    def _read(self) -> RadioDocument:
        self._ensure_file()
        with open(self.path, encoding="utf-8") as f:
            return RadioDocument.model_validate(json.load(f))

    def _write(self, document: RadioDocument) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        payload = document.model_dump(mode="json", exclude_none=True)
        # Write to a sibling temp file and swap it in so readers never see a partial file
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".data-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except BaseException:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise

    async def read_document(self) -> RadioDocument:
        logger.debug("Reading data from %s", self.path)
        return await asyncio.to_thread(self._read)

    async def write_document(self, document: RadioDocument) -> None:
        await asyncio.to_thread(self._write, document)
        logger.info("Saved %s", self.path)
