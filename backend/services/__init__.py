from .remote_server import RemoteServerClient
from .local_store import LocalJsonStore
from .relational_store import RelationalStore
from .workspace_store import WorkspaceStore
from .settings_store import SettingsStore
from .storage import IStorage, DatabaseStorage

__all__ = [
    'RemoteServerClient',
    'LocalJsonStore',
    'RelationalStore',
    'WorkspaceStore',
    'SettingsStore',
    'IStorage',
    'DatabaseStorage',
]
