"""Shared media gallery: a directory of image files indexed in sqlite.

Exported QR codes are copied into the gallery directory and registered as
assets.  Assets can be grouped into named albums.
"""

import logging
import os
import shutil
import sqlite3
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Asset:
    id: int
    filename: str
    uri: str
    created_at: str


@dataclass(frozen=True)
class Album:
    id: int
    title: str
    asset_count: int


class MediaLibrary:
    def __init__(self, db_path="media.db", gallery_dir="gallery"):
        self.db_path = db_path
        self.gallery_dir = gallery_dir

    def _connect(self):
        return sqlite3.connect(self.db_path)

    def init_library(self):
        conn = self._connect()
        c = conn.cursor()

        c.execute("""
            CREATE TABLE IF NOT EXISTS assets (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                filename TEXT,
                uri TEXT
            )
        """)
        c.execute("""
            CREATE TABLE IF NOT EXISTS albums (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                title TEXT UNIQUE
            )
        """)
        c.execute("""
            CREATE TABLE IF NOT EXISTS album_assets (
                album_id INTEGER,
                asset_id INTEGER,
                PRIMARY KEY (album_id, asset_id)
            )
        """)
        # ensure created_at column exists for older databases
        c.execute("PRAGMA table_info(assets)")
        cols = [row[1] for row in c.fetchall()]
        if "created_at" not in cols:
            c.execute("ALTER TABLE assets ADD COLUMN created_at TEXT")

        conn.commit()
        conn.close()

    def create_asset(self, source_path) -> Asset:
        """Copy *source_path* into the gallery and register it."""
        if not os.path.isfile(source_path):
            raise FileNotFoundError(source_path)

        os.makedirs(self.gallery_dir, exist_ok=True)
        base, ext = os.path.splitext(os.path.basename(source_path))
        file_name = f"{base}_{uuid.uuid4().hex[:10]}{ext}"
        uri = os.path.join(self.gallery_dir, file_name)
        shutil.copyfile(source_path, uri)

        created_at = datetime.now().isoformat(timespec="seconds")
        conn = self._connect()
        try:
            c = conn.cursor()
            c.execute(
                "INSERT INTO assets (filename, uri, created_at) VALUES (?, ?, ?)",
                (file_name, uri, created_at),
            )
            asset_id = c.lastrowid
            conn.commit()
        except sqlite3.Error:
            # An unregistered copy must not stay in the gallery.
            os.remove(uri)
            raise
        finally:
            conn.close()

        logger.info("Registered asset %s at %s", asset_id, uri)
        return Asset(asset_id, file_name, uri, created_at)

    def delete_asset(self, asset: Asset):
        """Remove *asset* from every album, the index and the gallery directory."""
        conn = self._connect()
        try:
            c = conn.cursor()
            c.execute("DELETE FROM album_assets WHERE asset_id = ?", (asset.id,))
            c.execute("DELETE FROM assets WHERE id = ?", (asset.id,))
            conn.commit()
        finally:
            conn.close()
        if os.path.exists(asset.uri):
            os.remove(asset.uri)
        logger.info("Deleted asset %s", asset.id)

    def create_album(self, title, asset: Asset) -> Album:
        """Add *asset* to album *title*, creating the album if needed."""
        conn = self._connect()
        try:
            c = conn.cursor()
            c.execute("SELECT id FROM albums WHERE title = ?", (title,))
            row = c.fetchone()
            if row:
                album_id = row[0]
            else:
                c.execute("INSERT INTO albums (title) VALUES (?)", (title,))
                album_id = c.lastrowid
                logger.info("Created album %r", title)
            c.execute(
                "INSERT OR IGNORE INTO album_assets (album_id, asset_id) VALUES (?, ?)",
                (album_id, asset.id),
            )
            c.execute("SELECT COUNT(*) FROM album_assets WHERE album_id = ?", (album_id,))
            count = c.fetchone()[0]
            conn.commit()
        finally:
            conn.close()
        return Album(album_id, title, count)

    def get_album(self, title) -> Optional[Album]:
        conn = self._connect()
        c = conn.cursor()
        c.execute(
            """
            SELECT albums.id, albums.title, COUNT(album_assets.asset_id)
            FROM albums
            LEFT JOIN album_assets ON album_assets.album_id = albums.id
            WHERE albums.title = ?
            GROUP BY albums.id
            """,
            (title,),
        )
        row = c.fetchone()
        conn.close()
        return Album(*row) if row else None

    def get_album_assets(self, title) -> List[Asset]:
        conn = self._connect()
        c = conn.cursor()
        c.execute(
            """
            SELECT assets.id, assets.filename, assets.uri, assets.created_at
            FROM assets
            JOIN album_assets ON album_assets.asset_id = assets.id
            JOIN albums ON albums.id = album_assets.album_id
            WHERE albums.title = ?
            ORDER BY assets.id ASC
            """,
            (title,),
        )
        data = c.fetchall()
        conn.close()
        return [Asset(*row) for row in data]

    def get_all_assets(self) -> List[Asset]:
        conn = self._connect()
        c = conn.cursor()
        c.execute("SELECT id, filename, uri, created_at FROM assets ORDER BY id ASC")
        data = c.fetchall()
        conn.close()
        return [Asset(*row) for row in data]
