"""Per-visit registration form state"""
import logging
from typing import Callable

from core.log import redact
from core.models import FieldName, FormFields, SessionStatus

logger = logging.getLogger(__name__)

Listener = Callable[["FormSession"], None]


class UnknownFieldError(ValueError):
    """Raised when an update names a field the form does not track"""

    def __init__(self, name):
        super().__init__(f"Unknown form field: {name!r}")
        self.name = name


class FormSession:
    """
    Field values and registration status for one visit to the form.

    The field record is never mutated in place: each update swaps in a copy
    with one field changed. Status only ever moves from editing to registered.
    """

    def __init__(self, fields: FormFields | None = None):
        self._fields = fields or FormFields()
        self._status = SessionStatus.EDITING
        self._listeners: list[Listener] = []

    @property
    def fields(self) -> FormFields:
        return self._fields

    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def registered(self) -> bool:
        return self._status is SessionStatus.REGISTERED

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call listener after every state change; returns an unsubscribe function"""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def update_field(self, name, value: str) -> FormFields:
        """Replace the record with a copy where only `name` holds `value`"""
        try:
            field = FieldName(name)
        except ValueError:
            raise UnknownFieldError(name) from None

        if self.registered:
            logger.debug("Ignoring update to %s after registration", field.value)
            return self._fields

        self._fields = self._fields.with_field(field, value)
        self._notify()
        return self._fields

    def submit(self) -> None:
        """Mark the session registered; repeated calls change nothing"""
        if self.registered:
            return

        logger.info("Form submitted with: %s", redact(self._fields.model_dump()))
        self._status = SessionStatus.REGISTERED
        self._notify()

    def _notify(self):
        for listener in list(self._listeners):
            listener(self)
