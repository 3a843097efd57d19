import json
import logging
import os


logger = logging.getLogger(__name__)

SETTINGS_FILE = "app_settings.json"


DEFAULT_SETTINGS = {
    "documents_dir": "documents",
    "gallery_dir": "gallery",
    "media_db": "media.db",
    "album_name": "Download",
    "export_filename": "qrcode.png",
    "qr_box_size": 10,
    "qr_border": 5,
    "qr_fill_color": "black",
    "qr_back_color": "white",
    "show_label": False,
    "storage_permission": "undetermined",
}


def load_settings(path=SETTINGS_FILE):
    settings = DEFAULT_SETTINGS.copy()
    if os.path.exists(path):
        try:
            with open(path, "r", encoding="utf-8") as file_obj:
                data = json.load(file_obj)
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
            return settings
        if isinstance(data, dict):
            settings.update(data)
        else:
            logger.warning("Ignoring settings file %s: expected a JSON object", path)
    return settings


def save_settings(settings, path=SETTINGS_FILE):
    merged = DEFAULT_SETTINGS.copy()
    merged.update(settings or {})
    with open(path, "w", encoding="utf-8") as file_obj:
        json.dump(merged, file_obj, indent=2)
    return merged
