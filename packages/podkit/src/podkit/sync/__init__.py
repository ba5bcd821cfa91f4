from .resolver import (
    RuleSyncMapResolver,
    StaticSyncMapResolver,
    SyncMap,
    SyncMapResolver,
    load_sync_map,
)

__all__ = [
    "RuleSyncMapResolver",
    "StaticSyncMapResolver",
    "SyncMap",
    "SyncMapResolver",
    "load_sync_map",
]
