"""
Display status of marketplace records.

The stored ``status`` / ``order_status`` / ``payment_status`` columns can be
written by the manufacturer as well as by the provider, so they are not
proof that the provider acted. The functions here read the provider-only
fields of a row as evidence and demote self-reported progress to
``pending`` when that evidence is missing.

Everything in this module is pure and total: any record, including ``None``
and rows with missing or malformed fields, resolves to a status string.
"""
from collections.abc import Mapping
from typing import Any, Dict, Optional

PENDING = 'pending'
RECEIVED = 'received'
COMPLETED = 'completed'

POSITIVE = 'positive'
NEUTRAL = 'neutral'
NEGATIVE = 'negative'
UNKNOWN = 'unknown'

STATUS_BUCKETS = {
    'completed': POSITIVE,
    'delivered': POSITIVE,
    'accepted': POSITIVE,
    'received': POSITIVE,
    'paid': POSITIVE,
    'pending': NEUTRAL,
    'processing': NEUTRAL,
    'confirmed': NEUTRAL,
    'rejected': NEGATIVE,
    'cancelled': NEGATIVE,
}

QUOTATION_CONTENT_FIELDS = ('delivery_timeline', 'payment_terms', 'additional_notes')
QUOTATION_TIMESTAMP_FIELDS = ('provider_response_date', 'responded_at')
ORDER_CONFIRMATION_FIELDS = ('provider_confirmation_date', 'provider_response_date', 'confirmed_by_provider', 'actual_delivery_date')
ORDER_CONFIRMATION_TEXT_FIELDS = ('provider_order_number', 'tracking_number')
PAYMENT_EVIDENCE_FIELDS = ('actual_delivery_date', 'provider_confirmation_date')


def _field(record: Any, name: str) -> Any:
    if record is None:
        return None
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _has_text(value: Any) -> bool:
    return value is not None and str(value).strip() != ''


def _positive_number(value: Any) -> bool:
    if value is None or isinstance(value, bool):
        return False
    try:
        return float(value) > 0
    except (TypeError, ValueError):
        return False


def _normalize(value: Any) -> str:
    if not _has_text(value):
        return PENDING
    return str(value).strip().lower()


def quotation_has_response(record: Any) -> bool:
    """True when the provider filled in an answer AND stamped when it did."""
    has_content = (
        any(_has_text(_field(record, name)) for name in QUOTATION_CONTENT_FIELDS)
        or _positive_number(_field(record, 'validity_period'))
    )
    has_timestamp = any(_field(record, name) for name in QUOTATION_TIMESTAMP_FIELDS)
    return has_content and has_timestamp


def order_has_provider_confirmation(record: Any) -> bool:
    return (
        any(_field(record, name) for name in ORDER_CONFIRMATION_FIELDS)
        or any(_has_text(_field(record, name)) for name in ORDER_CONFIRMATION_TEXT_FIELDS)
    )


def derive_status(record_type: str, record: Any = None, stored_status: Optional[str] = None) -> str:
    """
    Compute the status a record should be displayed with.

    Args:
        record_type: ``inquiry``, ``quotation``, ``order`` or ``payment``
        record: mapping or model instance, fields may be missing or null
        stored_status: the raw stored value; read from the record's
            ``status`` field when omitted

    Returns:
        Lower-cased status label, ``pending`` when nothing better is known
    """
    if stored_status is None:
        stored_status = _field(record, 'status')

    if record is None:
        return _normalize(stored_status)

    if record_type == 'quotation':
        return RECEIVED if quotation_has_response(record) else PENDING

    if record_type == 'order':
        if order_has_provider_confirmation(record):
            return _normalize(_field(record, 'order_status'))
        return PENDING

    if record_type == 'payment':
        payment_status = _normalize(_field(record, 'payment_status'))
        if payment_status == COMPLETED and not any(_field(record, name) for name in PAYMENT_EVIDENCE_FIELDS):
            return PENDING
        return payment_status

    return _normalize(stored_status)


def status_bucket(status: Any) -> str:
    """Severity bucket of a status label: positive, neutral, negative or unknown."""
    if not _has_text(status):
        return UNKNOWN
    return STATUS_BUCKETS.get(str(status).strip().lower(), UNKNOWN)


def status_label(status: str) -> str:
    return status.replace('_', ' ').capitalize()


def status_badge(record_type: str, record: Any = None, stored_status: Optional[str] = None) -> Dict[str, str]:
    status = derive_status(record_type, record, stored_status)
    return {
        'status': status,
        'label': status_label(status),
        'bucket': status_bucket(status),
    }
