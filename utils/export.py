"""Save a rendered QR code into the media gallery.

An export runs through a fixed sequence of states::

    NOT_REQUESTED -> REQUESTING -> GRANTED | DENIED -> WRITING -> REGISTERED | FAILED

``REQUESTING`` is skipped when storage permission is already held.  A denied
request ends the export before anything touches the filesystem.  Once the
permission is granted the image is written to the documents directory and
then registered as a gallery asset inside the target album.  Failures are
final for that export; the caller may start a new one.
"""

import base64
import binascii
import io
import logging
import os
import sqlite3
from enum import Enum

from PIL import Image

from .errors import PermissionDenied, WriteFailed


logger = logging.getLogger(__name__)

DEFAULT_ALBUM = "Download"
DEFAULT_FILENAME = "qrcode.png"


class ExportState(Enum):
    NOT_REQUESTED = "not_requested"
    REQUESTING = "requesting"
    GRANTED = "granted"
    DENIED = "denied"
    WRITING = "writing"
    REGISTERED = "registered"
    FAILED = "failed"


class StoragePermission:
    """Storage permission whose status lives in the app settings.

    ``prompt`` is called when permission has to be requested and returns the
    user's answer.  Without a prompt every request is denied.  ``persist``,
    when given, receives the settings after each answer.
    """

    def __init__(self, settings, prompt=None, persist=None):
        self.settings = settings
        self.prompt = prompt
        self.persist = persist

    @property
    def status(self):
        return self.settings.get("storage_permission", "undetermined")

    def is_granted(self):
        return self.status == "granted"

    def request(self):
        granted = bool(self.prompt()) if self.prompt is not None else False
        self.settings["storage_permission"] = "granted" if granted else "denied"
        if self.persist is not None:
            try:
                self.persist(self.settings)
            except OSError as exc:
                # Answer applies to this export only.
                logger.warning("Could not store storage permission answer: %s", exc)
        return granted


class DocumentStore:
    """The app's private documents directory."""

    def __init__(self, directory):
        self.directory = directory

    def write_bytes(self, filename, data):
        os.makedirs(self.directory, exist_ok=True)
        path = os.path.join(self.directory, filename)
        with open(path, "wb") as file_obj:
            file_obj.write(data)
        return path


def decode_image_data(image):
    """Return PNG bytes from raw bytes, a ``data:`` URL or a base64 string."""
    if isinstance(image, (bytes, bytearray)):
        data = bytes(image)
    else:
        text = str(image or "").strip()
        if text.startswith("data:"):
            _, _, text = text.partition(",")
        text = "".join(text.split())
        try:
            data = base64.b64decode(text, validate=True)
        except binascii.Error as exc:
            raise ValueError("Image data is not valid base64") from exc

    if not data:
        raise ValueError("Image data is empty")
    with Image.open(io.BytesIO(data)) as img:
        img.verify()
    return data


class ExportPipeline:
    def __init__(self, permission, documents, library, album=DEFAULT_ALBUM, filename=DEFAULT_FILENAME):
        self.permission = permission
        self.documents = documents
        self.library = library
        self.album = album
        self.filename = filename
        self.state = ExportState.NOT_REQUESTED
        self.history = [self.state]

    def _advance(self, state):
        logger.debug("Export %s -> %s", self.state.value, state.value)
        self.state = state
        self.history.append(state)

    def _discard(self, asset):
        """Unregister an asset whose album registration failed."""
        try:
            self.library.delete_asset(asset)
        except (OSError, sqlite3.Error) as exc:
            logger.warning("Could not remove partially saved asset %s: %s", asset.uri, exc)

    def run(self, image):
        if self.state is not ExportState.NOT_REQUESTED:
            raise RuntimeError(f"Export already ran (state: {self.state.value})")

        granted = self.permission.is_granted()
        if not granted:
            self._advance(ExportState.REQUESTING)
            granted = self.permission.request()
        if not granted:
            self._advance(ExportState.DENIED)
            logger.info("Storage permission denied; export aborted")
            raise PermissionDenied()
        self._advance(ExportState.GRANTED)

        self._advance(ExportState.WRITING)
        asset = None
        try:
            data = decode_image_data(image)
            path = self.documents.write_bytes(self.filename, data)
            asset = self.library.create_asset(path)
            self.library.create_album(self.album, asset)
        except (OSError, ValueError, SyntaxError, sqlite3.Error) as exc:
            self._advance(ExportState.FAILED)
            logger.error("Saving QR code failed: %s", exc)
            if asset is not None:
                self._discard(asset)
            raise WriteFailed() from exc

        self._advance(ExportState.REGISTERED)
        logger.info("Saved QR code to album %r as %s", self.album, asset.uri)
        return asset


def export_image(image, permission, documents, library, album=DEFAULT_ALBUM, filename=DEFAULT_FILENAME):
    """Run a fresh export of *image* and return the registered asset.

    Raises ``PermissionDenied`` or ``WriteFailed``.
    """
    pipeline = ExportPipeline(permission, documents, library, album=album, filename=filename)
    return pipeline.run(image)
