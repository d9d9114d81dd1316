"""
Request dashboard of one manufacturer.

Holds the four loaded lists (inquiries, quotations, orders, ratings), one
selection per list, the ``submitting`` flag and the notifications raised by
the last actions. Every store call runs through ``sync_to_async`` so the
four list fetches can be awaited together.
"""
import asyncio
import logging
from typing import Any, Dict, List, Optional

from asgiref.sync import sync_to_async

from .exceptions import StoreError, SubmissionValidationError
from .selection import ListSelection
from .store import LIST_TYPES, ORDERS, RecordStore, model_for
from .submission import build_submission

logger = logging.getLogger(__name__)

SUCCESS = 'success'
ERROR = 'error'
WARNING = 'warning'


class DashboardMessages:
    LOAD_FAILED = "Failed to load your requests"
    SUBMITTED = "Your {interaction_type} has been sent"
    SUBMIT_FAILED = "Failed to submit request"
    SUBMIT_IN_PROGRESS = "Please wait for the current request to finish"
    DELETED = "Deleted {count} {list_type}"
    DELETE_FAILED = "Failed to delete the selected {list_type}"
    RECORD_DELETED = "Record deleted"
    RECORD_NOT_FOUND = "Record not found"
    CLEARED = "Removed all requests with this provider"
    CLEAR_FAILED = "Failed to remove requests with this provider"


class RequestDashboard:

    def __init__(self, manufacturer, store: Optional[RecordStore] = None):
        self.manufacturer = manufacturer
        self.store = store or RecordStore()
        self.lists: Dict[str, List[Any]] = {list_type: [] for list_type in LIST_TYPES}
        self.selections: Dict[str, ListSelection] = {list_type: ListSelection() for list_type in LIST_TYPES}
        self.notifications: List[Dict[str, str]] = []
        self.submitting = False
        self.loading = False

    def notify(self, level: str, message: str) -> None:
        self.notifications.append({'level': level, 'message': message})

    def selection(self, list_type: str) -> ListSelection:
        model_for(list_type)
        return self.selections[list_type]

    async def fetch_all_requests(self) -> bool:
        """
        Reload all four lists at once.

        The lists are replaced only when every fetch succeeded; any failure
        keeps the previous lists and raises a single error notification.
        """
        self.loading = True
        try:
            results = await asyncio.gather(*[
                sync_to_async(self.store.fetch)(list_type, self.manufacturer)
                for list_type in LIST_TYPES
            ])
        except StoreError:
            self.notify(ERROR, DashboardMessages.LOAD_FAILED)
            return False
        finally:
            self.loading = False

        self.lists = dict(zip(LIST_TYPES, results))
        for selection in self.selections.values():
            selection.reset()
        return True

    async def submit(self, interaction_type: str, provider, form: Dict[str, Any]):
        """
        Validate ``form`` and insert exactly one record.

        Returns the created record, or None when the store call failed.
        Raises SubmissionValidationError before any store call when the form
        is invalid.
        """
        if self.submitting:
            self.notify(WARNING, DashboardMessages.SUBMIT_IN_PROGRESS)
            return None

        self.submitting = True
        try:
            try:
                list_type, values = build_submission(
                    interaction_type, self.manufacturer, provider, form, orders=self.lists[ORDERS]
                )
            except SubmissionValidationError as exc:
                self.notify(ERROR, exc.messages[0])
                raise

            try:
                record = await sync_to_async(self.store.insert)(list_type, values)
            except StoreError:
                self.notify(ERROR, DashboardMessages.SUBMIT_FAILED)
                return None

            self.notify(SUCCESS, DashboardMessages.SUBMITTED.format(interaction_type=interaction_type))
            await self.fetch_all_requests()
            return record
        finally:
            self.submitting = False

    async def delete_selected(self, list_type: str) -> bool:
        selection = self.selection(list_type)
        if not len(selection):
            return False

        record_ids = selection.begin_delete()
        ok = await sync_to_async(self.store.delete_many)(list_type, self.manufacturer, sorted(record_ids))
        selection.finish_delete(ok)
        if not ok:
            self.notify(ERROR, DashboardMessages.DELETE_FAILED.format(list_type=list_type))
            return False

        self.notify(SUCCESS, DashboardMessages.DELETED.format(count=self.store.last_deleted_count, list_type=list_type))
        await self.fetch_all_requests()
        return True

    async def delete_one(self, list_type: str, record_id: int) -> bool:
        model_for(list_type)
        try:
            deleted = await sync_to_async(self.store.delete)(list_type, self.manufacturer, record_id)
        except StoreError:
            self.notify(ERROR, DashboardMessages.DELETE_FAILED.format(list_type=list_type))
            return False
        if not deleted:
            self.notify(ERROR, DashboardMessages.RECORD_NOT_FOUND)
            return False

        self.notify(SUCCESS, DashboardMessages.RECORD_DELETED)
        await self.fetch_all_requests()
        return True

    async def clear_provider(self, provider) -> Optional[Dict[str, int]]:
        try:
            counts = await sync_to_async(self.store.delete_all_for_provider)(self.manufacturer, provider)
        except StoreError:
            self.notify(ERROR, DashboardMessages.CLEAR_FAILED)
            return None

        self.notify(SUCCESS, DashboardMessages.CLEARED)
        await self.fetch_all_requests()
        return counts
