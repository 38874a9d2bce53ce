import json
import logging
import os

logger = logging.getLogger(__name__)


class LocalJsonStore:
    """A JSON array kept in one file, read and rewritten wholesale."""

    def __init__(self, data_dir, filename):
        self.data_dir = data_dir
        self.path = os.path.join(data_dir, filename)

    def load(self):
        """Return the stored list; missing, corrupt or non-list files read as []"""
        if not os.path.exists(self.path):
            return []
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                records = json.load(f)
        except (OSError, ValueError) as e:
            logger.error('Error reading %s: %s', self.path, e)
            return []
        return records if isinstance(records, list) else []

    def save(self, records):
        os.makedirs(self.data_dir, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(records, f, indent=2)

    def append(self, record):
        records = self.load()
        records.append(record)
        self.save(records)
        return record

    def find(self, record_id):
        for record in self.load():
            if isinstance(record, dict) and str(record.get('id')) == str(record_id):
                return record
        return None
