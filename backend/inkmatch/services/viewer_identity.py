"""Anonymous viewer identity.

A viewer is whoever holds a given client-side storage (a browser cookie jar
at the HTTP surface). The storage is always passed in; there is no
module-level identity.
"""

import logging
import uuid
from typing import MutableMapping, Optional

from ..core.config import settings

logger = logging.getLogger(__name__)


def new_viewer_id() -> str:
    return uuid.uuid4().hex


class ViewerIdentity:
    def __init__(self, key: Optional[str] = None) -> None:
        self.key = key or settings.VIEWER_COOKIE_NAME

    def get_or_create_viewer_id(self, storage: MutableMapping[str, str]) -> str:
        """Return the stored viewer id, creating and storing one if missing.

        When the storage cannot be read or written an ephemeral id is
        returned for this call only; the viewer then simply has no history.
        """
        try:
            existing = storage.get(self.key)
        except Exception as exc:
            logger.warning("Viewer storage unreadable, using ephemeral id: %s", exc)
            return new_viewer_id()
        if existing:
            return existing

        viewer_id = new_viewer_id()
        try:
            storage[self.key] = viewer_id
        except Exception as exc:
            logger.warning("Viewer storage unwritable, id %s is ephemeral: %s", viewer_id, exc)
        return viewer_id
