import logging
import threading
from typing import Dict, List, Optional

from core.exceptions import StaleResultError
from schemas.draft_schema import TripDraft, TripDraftUpdate
from schemas.packing_schema import PackingCategory
from schemas.travel_schema import TravelEstimate

logger = logging.getLogger(__name__)

class TripDraftStore:
    """
    In-memory store of each user's current trip draft.

    Every write of the trip parameters bumps the draft's version and drops the
    results derived from the old parameters. Results computed in the background
    carry the version they were computed for and are only applied if the draft
    still has that version.
    """

    def __init__(self):
        self._drafts: Dict[str, TripDraft] = {}
        self._versions: Dict[str, int] = {}
        self._lock = threading.Lock()

    def get(self, user_id: str) -> Optional[TripDraft]:
        with self._lock:
            draft = self._drafts.get(user_id)
            return draft.model_copy(deep=True) if draft else None

    def put(self, user_id: str, update: TripDraftUpdate) -> TripDraft:
        with self._lock:
            # Versions keep counting across clears so an old result can never match a new draft
            version = self._versions.get(user_id, 0) + 1
            self._versions[user_id] = version
            draft = TripDraft(**update.model_dump(), version=version)
            self._drafts[user_id] = draft
            logger.debug("Draft for user %s is now version %d", user_id, version)
            return draft.model_copy(deep=True)

    def clear(self, user_id: str) -> bool:
        with self._lock:
            return self._drafts.pop(user_id, None) is not None

    def _apply(self, user_id: str, version: int, field: str, value) -> TripDraft:
        with self._lock:
            draft = self._drafts.get(user_id)
            if draft is None or draft.version != version:
                logger.info("Discarding %s computed for outdated draft of user %s", field, user_id)
                raise StaleResultError("The trip draft changed while this result was being computed.")
            setattr(draft, field, value)
            return draft.model_copy(deep=True)

    def apply_travel_options(self, user_id: str, version: int, options: List[TravelEstimate]) -> TripDraft:
        return self._apply(user_id, version, "travel_options", options)

    def apply_packing_list(self, user_id: str, version: int, categories: List[PackingCategory]) -> TripDraft:
        return self._apply(user_id, version, "packing_list", categories)


draft_store = TripDraftStore()
