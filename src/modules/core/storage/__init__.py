"""Record store package.

``DjangoRecordStore`` lives in ``modules.core.storage.django_store`` and
is imported from there, since it needs the app registry to be ready.
"""

from modules.core.storage.interfaces import IRecordStore
from modules.core.storage.memory import InMemoryRecordStore

__all__ = ["IRecordStore", "InMemoryRecordStore"]
