"""recstore - In-memory record store with write notifications."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("recstore")
except PackageNotFoundError:
    __version__ = "0+local"
from recstore.config import StoreConfig
from recstore.events import AfterWriteEvent, BeforeWriteEvent
from recstore.exceptions import RecordIdError, RecstoreConfigError, RecstoreError
from recstore.factory import create_store, get_shared_store, reset_shared_stores
from recstore.hub import NotificationHub, Subscription
from recstore.loader import RecordHandler, StoreRecordHandler, feed_records
from recstore.records import BaseRecord, HasId, Pokemon, record_id
from recstore.store import RecordStore

__all__ = [
    "__version__",
    "AfterWriteEvent",
    "BaseRecord",
    "BeforeWriteEvent",
    "HasId",
    "NotificationHub",
    "Pokemon",
    "RecordHandler",
    "RecordIdError",
    "RecordStore",
    "RecstoreConfigError",
    "RecstoreError",
    "StoreConfig",
    "StoreRecordHandler",
    "Subscription",
    "create_store",
    "feed_records",
    "get_shared_store",
    "record_id",
    "reset_shared_stores",
]
