"""Category/status/priority colors and category positions.

Each setting domain is one flat JSON object stored as a file on the remote
content server. Changing a single entry downloads the whole document,
patches it and uploads it again. When the server hands out an ETag the
upload is conditional and a concurrent change surfaces as
SettingsConflictError; without one the last writer wins and an interleaved
write from another request is silently lost.
"""

import json
import logging
from typing import Callable, Dict, List, Optional, Tuple

from database import utcnow
from errors import RemoteServerError
from models import CategoryColor, CategoryPosition

logger = logging.getLogger(__name__)

STATUS_COLOR_DEFAULTS = {
    'active': '#10b981',
    'completed': '#6b7280',
    'on-hold': '#f59e0b',
    'cancelled': '#ef4444',
}

PRIORITY_COLOR_DEFAULTS = {
    'low': '#10b981',
    'medium': '#f59e0b',
    'high': '#ef4444',
    'urgent': '#dc2626',
}


class SettingsDocument:
    """One settings file: load, save and read-modify-write."""

    def __init__(self, remote, directory: str, filename: str, defaults: Optional[Dict] = None):
        self.remote = remote
        self.directory = directory
        self.filename = filename
        self.defaults = defaults or {}

    @property
    def path(self) -> str:
        return f'{self.directory}/{self.filename}'

    def load(self) -> Tuple[Dict, Optional[str]]:
        """Return (mapping, etag). Falls back to the defaults when the file is unavailable."""
        try:
            text, etag = self.remote.download_file(self.path)
        except RemoteServerError as e:
            logger.warning('Could not load %s, using defaults: %s', self.path, e)
            return dict(self.defaults), None

        try:
            data = json.loads(text)
        except ValueError as e:
            logger.error('Settings file %s is not valid JSON: %s', self.path, e)
            return dict(self.defaults), etag

        if not isinstance(data, dict):
            logger.error('Settings file %s does not hold an object', self.path)
            return dict(self.defaults), etag
        return data, etag

    def save(self, mapping: Dict, etag: Optional[str] = None):
        content = json.dumps(mapping, indent=2)
        self.remote.upload_file(self.directory, self.filename, content, etag=etag)
        logger.info('Saved %s (%d entries)', self.path, len(mapping))

    def update(self, mutate: Callable[[Dict], None]) -> Dict:
        mapping, etag = self.load()
        mutate(mapping)
        self.save(mapping, etag=etag)
        return mapping


class SettingsStore:
    def __init__(self, remote, directory: str = 'project_data'):
        self.category_colors = SettingsDocument(remote, directory, 'category_colors.json')
        self.status_colors = SettingsDocument(
            remote, directory, 'status_colors.json', STATUS_COLOR_DEFAULTS)
        self.priority_colors = SettingsDocument(
            remote, directory, 'priority_colors.json', PRIORITY_COLOR_DEFAULTS)
        self.category_positions = SettingsDocument(remote, directory, 'category_positions.json')

    # ------------------------------------------------------------------
    # Category colors
    # ------------------------------------------------------------------

    def get_category_colors(self) -> List[CategoryColor]:
        colors, _etag = self.category_colors.load()
        now = utcnow()
        return [
            CategoryColor(index + 1, name, color, now, now)
            for index, (name, color) in enumerate(colors.items())
        ]

    def set_category_color(self, category_name: str, color: str) -> CategoryColor:
        def mutate(colors):
            colors[category_name] = color

        colors = self.category_colors.update(mutate)
        now = utcnow()
        return CategoryColor(list(colors).index(category_name) + 1, category_name, color, now, now)

    def delete_category_color(self, category_name: str):
        self.category_colors.update(lambda colors: colors.pop(category_name, None))

    # ------------------------------------------------------------------
    # Status and priority colors
    # ------------------------------------------------------------------

    def get_status_colors(self) -> Dict[str, str]:
        return self.status_colors.load()[0]

    def set_status_color(self, status: str, color: str):
        self.status_colors.update(lambda colors: colors.__setitem__(status, color))

    def get_priority_colors(self) -> Dict[str, str]:
        return self.priority_colors.load()[0]

    def set_priority_color(self, priority: str, color: str):
        self.priority_colors.update(lambda colors: colors.__setitem__(priority, color))

    # ------------------------------------------------------------------
    # Category positions
    # ------------------------------------------------------------------

    def get_category_positions(self) -> List[CategoryPosition]:
        positions, _etag = self.category_positions.load()
        now = utcnow()
        records = []
        for name, position in positions.items():
            if isinstance(position, bool) or not isinstance(position, (int, float)):
                logger.warning('Skipping category %s with non-numeric position %r', name, position)
                continue
            records.append(CategoryPosition(name, position, now, now))
        return sorted(records, key=lambda record: record.position)

    def set_category_positions(self, positions: List[Dict]):
        """Replace the whole document with the given [{categoryName, position}] list"""
        mapping = {item['categoryName']: item['position'] for item in positions}
        self.category_positions.save(mapping)

    def update_category_position(self, category_name: str, position: int) -> CategoryPosition:
        self.category_positions.update(lambda positions: positions.__setitem__(category_name, position))
        now = utcnow()
        return CategoryPosition(category_name, position, now, now)
