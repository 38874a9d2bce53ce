import logging
from typing import Any, Optional, Tuple

import requests
from requests.auth import HTTPBasicAuth

from errors import RemoteServerError, SettingsConflictError

logger = logging.getLogger(__name__)


class RemoteServerClient:
    """Thin client for the remote content server.

    The server keeps workspace documents behind a small REST API and flat
    settings files behind /api/files. Every call authenticates with the same
    Basic-auth pair. Nothing is retried: a failed call raises
    RemoteServerError and the caller decides whether to fall back.
    """

    def __init__(self, base_url: str, username: str, password: str,
                 timeout: Optional[float] = None):
        self.base_url = base_url.rstrip('/')
        self._auth = HTTPBasicAuth(username, password)
        self.timeout = timeout

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _send(self, method: str, path: str, **kwargs) -> requests.Response:
        url = self._url(path)
        try:
            return requests.request(method, url, auth=self._auth, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            logger.error('Remote server unreachable: %s %s (%s)', method, url, e)
            raise RemoteServerError(f'Could not reach remote server: {e}') from e

    @staticmethod
    def _raise_for_status(response: requests.Response, action: str):
        if response.status_code == 412:
            raise SettingsConflictError(
                f'Failed to {action}: document changed on the server',
                status_code=412,
            )
        if not 200 <= response.status_code < 300:
            reason = response.reason or ''
            detail = (response.text or '').strip()
            message = f'Failed to {action}: {response.status_code} {reason}'.rstrip()
            if detail:
                message = f'{message} {detail}'
            logger.error('Remote server error: %s', message)
            raise RemoteServerError(message, status_code=response.status_code)

    def request_json(self, method: str, path: str, payload: Any = None,
                     action: Optional[str] = None) -> Any:
        """Issue a JSON request; returns the decoded body (None for an empty body)"""
        action = action or f'{method} {path}'
        kwargs = {'headers': {'Content-Type': 'application/json'}}
        if payload is not None:
            kwargs['json'] = payload

        response = self._send(method, path, **kwargs)
        self._raise_for_status(response, action)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise RemoteServerError(f'Failed to {action}: response is not JSON') from e

    def download_file(self, path: str) -> Tuple[str, Optional[str]]:
        """Download a file; returns (text, etag). The etag is None when the server sends none."""
        response = self._send('GET', '/api/files/download', params={'path': path})
        self._raise_for_status(response, f'download {path}')
        return response.text, response.headers.get('ETag')

    def upload_file(self, directory: str, filename: str, content: str,
                    etag: Optional[str] = None) -> Any:
        """Upload a whole file as multipart/form-data field 'file'.

        With an etag the upload is conditional (If-Match) and a 412 answer
        raises SettingsConflictError.
        """
        headers = {}
        if etag:
            headers['If-Match'] = etag
        files = {'file': (filename, content.encode('utf-8'), 'application/json')}

        response = self._send('POST', '/api/files/upload', params={'path': directory},
                              files=files, headers=headers)
        self._raise_for_status(response, f'save {filename}')
        logger.debug('Uploaded %s/%s (%d bytes)', directory, filename, len(content))

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text
