import pytest

from settings_store import DEFAULT_SETTINGS
from utils.qr_generator import qr_png_bytes


class RecordingDocuments:
    """Documents store that records writes instead of touching disk."""

    def __init__(self):
        self.calls = []

    def write_bytes(self, filename, data):
        self.calls.append((filename, data))
        return filename


class RecordingLibrary:
    def __init__(self):
        self.calls = []

    def create_asset(self, path):
        self.calls.append(("create_asset", path))
        raise AssertionError("library should not be reached")

    def create_album(self, title, asset):
        self.calls.append(("create_album", title))
        raise AssertionError("library should not be reached")


class RecordingOpener:
    def __init__(self, result=True, error=None):
        self.result = result
        self.error = error
        self.calls = []

    def __call__(self, uri):
        self.calls.append(uri)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def settings():
    return DEFAULT_SETTINGS.copy()


@pytest.fixture
def png_bytes():
    return qr_png_bytes("https://example.com")


@pytest.fixture
def recording_documents():
    return RecordingDocuments()


@pytest.fixture
def recording_library():
    return RecordingLibrary()


@pytest.fixture
def make_opener():
    return RecordingOpener
