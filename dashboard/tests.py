"""
Tests for the manufacturer request dashboard: display status derivation,
row selection, form submission, bulk deletion and the HTTP endpoints
"""
from datetime import date
from decimal import Decimal
from types import SimpleNamespace
from unittest import mock

from django.db import DatabaseError
from django.test import SimpleTestCase, TestCase
from django.utils import timezone
from rest_framework import status

from dashboard.controller import RequestDashboard, DashboardMessages, ERROR, SUCCESS
from dashboard.exceptions import StoreError, SubmissionValidationError
from dashboard.selection import ListSelection, IDLE, SELECTING, DELETING
from dashboard.status import derive_status, status_bucket, status_badge, status_label
from dashboard.store import RecordStore, LIST_TYPES, INQUIRIES, QUOTATIONS, ORDERS, RATINGS
from dashboard.submission import build_submission, build_order
from inquiries.models import Inquiry
from orders.models import Order
from project.test_utils import TestDataFactory, AuthenticatedAPIClient
from quotations.models import Quotation
from ratings.models import Rating


class QuotationStatusDerivationTests(SimpleTestCase):

    def test_content_without_timestamp_is_pending(self):
        self.assertEqual(derive_status('quotation', {'validity_period': 30, 'responded_at': None}), 'pending')

    def test_content_with_timestamp_is_received(self):
        self.assertEqual(derive_status('quotation', {'validity_period': 30, 'responded_at': '2024-01-01'}), 'received')

    def test_stored_status_is_ignored(self):
        self.assertEqual(derive_status('quotation', {'status': 'accepted'}), 'pending')
        record = {'status': 'rejected', 'payment_terms': '30 days', 'provider_response_date': '2024-01-01'}
        self.assertEqual(derive_status('quotation', record), 'received')

    def test_blank_content_does_not_count(self):
        record = {'delivery_timeline': '   ', 'additional_notes': '', 'validity_period': 0,
                  'provider_response_date': '2024-01-01'}
        self.assertEqual(derive_status('quotation', record), 'pending')

    def test_every_content_field_counts(self):
        for field in ('delivery_timeline', 'payment_terms', 'additional_notes'):
            record = {field: 'x', 'provider_response_date': '2024-01-01'}
            self.assertEqual(derive_status('quotation', record), 'received', field)

    def test_non_numeric_validity_is_not_content(self):
        record = {'validity_period': 'soon', 'responded_at': '2024-01-01'}
        self.assertEqual(derive_status('quotation', record), 'pending')

    def test_model_instance(self):
        quotation = Quotation(delivery_timeline='5 days', provider_response_date=timezone.now(), status='pending')
        self.assertEqual(derive_status('quotation', quotation), 'received')


class OrderStatusDerivationTests(SimpleTestCase):

    def test_unconfirmed_order_is_pending(self):
        self.assertEqual(derive_status('order', {'order_status': 'delivered'}), 'pending')

    def test_each_confirmation_signal(self):
        signals = {
            'provider_confirmation_date': '2024-01-01',
            'provider_response_date': '2024-01-01',
            'confirmed_by_provider': True,
            'provider_order_number': 'P-1',
            'tracking_number': 'TRK',
            'actual_delivery_date': '2024-01-02',
        }
        for field, value in signals.items():
            record = {'order_status': 'Processing', field: value}
            self.assertEqual(derive_status('order', record), 'processing', field)

    def test_blank_text_signal_ignored(self):
        self.assertEqual(derive_status('order', {'order_status': 'processing', 'tracking_number': ' '}), 'pending')

    def test_confirmed_without_stored_status_defaults_pending(self):
        self.assertEqual(derive_status('order', {'confirmed_by_provider': True, 'order_status': None}), 'pending')


class PaymentStatusDerivationTests(SimpleTestCase):

    def test_completed_without_evidence_is_pending(self):
        record = {'order_status': 'completed', 'payment_status': 'completed',
                  'actual_delivery_date': None, 'provider_confirmation_date': None}
        self.assertEqual(derive_status('payment', record), 'pending')

    def test_completed_with_evidence(self):
        for field in ('actual_delivery_date', 'provider_confirmation_date'):
            record = {'payment_status': 'completed', field: '2024-01-01'}
            self.assertEqual(derive_status('payment', record), 'completed', field)

    def test_other_values_pass_through(self):
        self.assertEqual(derive_status('payment', {'payment_status': 'PAID'}), 'paid')
        self.assertEqual(derive_status('payment', {}), 'pending')

    def test_never_completed_without_evidence(self):
        for value in ('completed', 'Completed', ' COMPLETED '):
            self.assertEqual(derive_status('payment', {'payment_status': value}), 'pending')


class DerivationTotalityTests(SimpleTestCase):

    def test_missing_record_uses_stored_status(self):
        self.assertEqual(derive_status('quotation', None), 'pending')
        self.assertEqual(derive_status('order', None, 'Confirmed'), 'confirmed')

    def test_inquiry_and_unknown_types_use_stored_status(self):
        self.assertEqual(derive_status('inquiry', {'status': 'responded'}), 'responded')
        self.assertEqual(derive_status('inquiry', {'status': None}), 'pending')
        self.assertEqual(derive_status('widget', {'status': 'odd'}), 'odd')

    def test_odd_records_do_not_raise(self):
        for record in (object(), {}, {'validity_period': object()}, SimpleNamespace(payment_status=3)):
            for record_type in ('inquiry', 'quotation', 'order', 'payment', ''):
                self.assertIsInstance(derive_status(record_type, record), str)


class StatusBucketTests(SimpleTestCase):

    def test_buckets(self):
        for label in ('completed', 'delivered', 'accepted', 'received', 'paid'):
            self.assertEqual(status_bucket(label), 'positive')
        for label in ('pending', 'processing', 'confirmed'):
            self.assertEqual(status_bucket(label), 'neutral')
        for label in ('rejected', 'cancelled'):
            self.assertEqual(status_bucket(label), 'negative')

    def test_unknown_bucket(self):
        self.assertEqual(status_bucket('responded'), 'unknown')
        self.assertEqual(status_bucket(None), 'unknown')
        self.assertEqual(status_bucket(''), 'unknown')

    def test_badge(self):
        self.assertEqual(
            status_badge('payment', {'payment_status': 'paid'}),
            {'status': 'paid', 'label': 'Paid', 'bucket': 'positive'}
        )
        self.assertEqual(status_label('in_transit'), 'In transit')


class ListSelectionTests(SimpleTestCase):

    def test_toggle_moves_between_idle_and_selecting(self):
        selection = ListSelection()
        self.assertEqual(selection.state, IDLE)
        self.assertTrue(selection.toggle(1))
        self.assertEqual(selection.state, SELECTING)
        self.assertFalse(selection.toggle(1))
        self.assertEqual(selection.state, IDLE)

    def test_explicit_checked_value(self):
        selection = ListSelection()
        selection.toggle(1, True)
        selection.toggle(1, True)
        self.assertEqual(selection.selected, frozenset({1}))
        selection.toggle(2, False)
        self.assertEqual(len(selection), 1)

    def test_toggle_all_covers_loaded_rows_only(self):
        selection = ListSelection()
        selection.toggle(99, True)
        selection.toggle_all(True, [1, 2, 3])
        self.assertEqual(selection.selected, frozenset({1, 2, 3}))
        selection.toggle_all(False, [1, 2, 3])
        self.assertEqual(selection.state, IDLE)

    def test_delete_success_clears(self):
        selection = ListSelection()
        selection.toggle_all(True, [1, 2])
        self.assertEqual(selection.begin_delete(), frozenset({1, 2}))
        self.assertEqual(selection.state, DELETING)
        selection.finish_delete(True)
        self.assertEqual(selection.state, IDLE)

    def test_delete_failure_keeps_selection(self):
        selection = ListSelection()
        selection.toggle(5, True)
        selection.begin_delete()
        selection.finish_delete(False)
        self.assertEqual(selection.state, SELECTING)
        self.assertIn(5, selection)

    def test_changes_ignored_while_deleting(self):
        selection = ListSelection()
        selection.toggle(5, True)
        selection.begin_delete()
        selection.toggle(6, True)
        selection.toggle_all(False, [5])
        self.assertEqual(selection.selected, frozenset({5}))

    def test_begin_delete_guards(self):
        selection = ListSelection()
        with self.assertRaises(RuntimeError):
            selection.begin_delete()
        selection.toggle(1, True)
        selection.begin_delete()
        with self.assertRaises(RuntimeError):
            selection.begin_delete()

    def test_reset(self):
        selection = ListSelection()
        selection.toggle(1, True)
        selection.begin_delete()
        selection.reset()
        self.assertEqual(selection.state, IDLE)


MANUFACTURER = SimpleNamespace(pk=10)
PROVIDER = SimpleNamespace(pk=1)


class SubmissionTests(SimpleTestCase):

    def test_inquiry_requires_message(self):
        with self.assertRaises(SubmissionValidationError) as ctx:
            build_submission('inquiry', MANUFACTURER, PROVIDER, {'message': '  '})
        self.assertIn('message', ctx.exception.message_dict)

    def test_inquiry_optional_fields(self):
        list_type, values = build_submission('inquiry', MANUFACTURER, PROVIDER, {'message': 'Need coal'})
        self.assertEqual(list_type, INQUIRIES)
        self.assertEqual(values['unit'], 'MT')
        self.assertEqual(values['status'], 'pending')
        self.assertIsNone(values.get('quantity'))

    def test_inquiry_budget_range(self):
        with self.assertRaises(SubmissionValidationError):
            build_submission('inquiry', MANUFACTURER, PROVIDER, {
                'message': 'x', 'budget_range_min': '500', 'budget_range_max': '100',
            })

    def test_quotation_total_and_no_inquiry_link(self):
        list_type, values = build_submission('quotation', MANUFACTURER, PROVIDER, {
            'item_type': 'indian_coal', 'quantity': '12.5', 'price_per_unit': '8000',
            'delivery_location': 'Patna', 'inquiry': 42,
        })
        self.assertEqual(list_type, QUOTATIONS)
        self.assertEqual(values['total_amount'], Decimal('100000.00'))
        self.assertIsNone(values['inquiry'])

    def test_quotation_requirements(self):
        with self.assertRaises(SubmissionValidationError) as ctx:
            build_submission('quotation', MANUFACTURER, PROVIDER, {'quantity': '0', 'delivery_location': ''})
        errors = ctx.exception.message_dict
        for field in ('item_type', 'quantity', 'delivery_location'):
            self.assertIn(field, errors)

    def test_order_defaults(self):
        values = build_order(MANUFACTURER, PROVIDER, {
            'item_type': 'road_transport', 'quantity': '2', 'price_per_unit': '1500.50',
            'delivery_location': 'Gaya', 'expected_delivery_date': '2025-01-10', 'quotation': 9,
        })
        self.assertRegex(values['order_number'], r'^ORD-\d+$')
        self.assertEqual(values['total_amount'], Decimal('3001.00'))
        self.assertIsNone(values['quotation'])
        self.assertEqual(values['order_status'], 'pending')
        self.assertEqual(values['payment_status'], 'pending')
        self.assertEqual(values['expected_delivery_date'], date(2025, 1, 10))

    def test_rating_without_orders_rejected(self):
        with self.assertRaises(SubmissionValidationError):
            build_submission('rating', MANUFACTURER, PROVIDER, {'order_number': 'ORD-1', 'rating': 5, 'comment': 'x'})

    def test_rating_must_match_a_loaded_order_of_the_provider(self):
        orders = [SimpleNamespace(provider_id=2, order_number='ORD-1')]
        with self.assertRaises(SubmissionValidationError):
            build_submission('rating', MANUFACTURER, PROVIDER, {'order_number': 'ORD-1', 'rating': 5, 'comment': 'x'}, orders)

    def test_rating_requires_comment(self):
        orders = [SimpleNamespace(provider_id=1, order_number='ORD-1')]
        with self.assertRaises(SubmissionValidationError) as ctx:
            build_submission('rating', MANUFACTURER, PROVIDER, {'order_number': 'ORD-1', 'rating': 5, 'comment': ' '}, orders)
        self.assertIn('comment', ctx.exception.message_dict)

    def test_rating_values(self):
        order = SimpleNamespace(provider_id=1, order_number='ORD-1')
        for score, recommend in ((4, True), (3, False)):
            list_type, values = build_submission(
                'rating', MANUFACTURER, PROVIDER,
                {'order_number': 'ORD-1', 'rating': score, 'comment': 'Timely'}, [order]
            )
            self.assertEqual(list_type, RATINGS)
            self.assertIs(values['order'], order)
            self.assertEqual(values['would_recommend'], recommend)
            self.assertEqual(
                (values['quality_rating'], values['delivery_rating'], values['service_rating']),
                (score, score, score)
            )
            self.assertEqual(values['review_text'], 'Timely')

    def test_unknown_interaction_type(self):
        with self.assertRaises(SubmissionValidationError):
            build_submission('complaint', MANUFACTURER, PROVIDER, {})


class FakeStore:
    """In-memory stand-in for RecordStore that records every call."""

    def __init__(self, rows=None, failing_fetch=(), fail_insert=False, delete_many_ok=True):
        self.rows = {list_type: list((rows or {}).get(list_type, [])) for list_type in LIST_TYPES}
        self.failing_fetch = set(failing_fetch)
        self.fail_insert = fail_insert
        self.delete_many_ok = delete_many_ok
        self.last_deleted_count = 0
        self.calls = []

    def fetch_count(self):
        return sum(1 for call in self.calls if call[0] == 'fetch')

    def mutations(self):
        return [call for call in self.calls if call[0] != 'fetch']

    def fetch(self, list_type, manufacturer):
        self.calls.append(('fetch', list_type))
        if list_type in self.failing_fetch:
            raise StoreError(f"Could not load {list_type}")
        return list(self.rows[list_type])

    def insert(self, list_type, values):
        self.calls.append(('insert', list_type, values))
        if self.fail_insert:
            raise StoreError("Could not save")
        record = SimpleNamespace(pk=len(self.rows[list_type]) + 1, **values)
        self.rows[list_type].append(record)
        return record

    def delete(self, list_type, manufacturer, record_id):
        self.calls.append(('delete', list_type, record_id))
        before = len(self.rows[list_type])
        self.rows[list_type] = [r for r in self.rows[list_type] if r.pk != record_id]
        return len(self.rows[list_type]) < before

    def delete_many(self, list_type, manufacturer, record_ids):
        self.calls.append(('delete_many', list_type, list(record_ids)))
        if not self.delete_many_ok:
            return False
        kept = [r for r in self.rows[list_type] if r.pk not in record_ids]
        self.last_deleted_count = len(self.rows[list_type]) - len(kept)
        self.rows[list_type] = kept
        return True

    def delete_all_for_provider(self, manufacturer, provider):
        self.calls.append(('delete_all_for_provider', provider.pk))
        counts = {}
        for list_type in (INQUIRIES, QUOTATIONS, ORDERS):
            kept = [r for r in self.rows[list_type] if r.provider is not provider]
            counts[list_type] = len(self.rows[list_type]) - len(kept)
            self.rows[list_type] = kept
        return counts


def rows(list_type, *ids):
    return {list_type: [SimpleNamespace(pk=pk, provider=PROVIDER) for pk in ids]}


class RequestDashboardTests(SimpleTestCase):

    INQUIRY_FORM = {'message': 'Need 100 MT of coal'}
    QUOTATION_FORM = {'item_type': 'indian_coal', 'quantity': '10', 'price_per_unit': '100', 'delivery_location': 'Patna'}

    async def test_fetch_all_loads_four_lists(self):
        store = FakeStore(rows=rows(INQUIRIES, 1, 2))
        dashboard = RequestDashboard(MANUFACTURER, store=store)
        self.assertTrue(await dashboard.fetch_all_requests())
        self.assertEqual([r.pk for r in dashboard.lists[INQUIRIES]], [1, 2])
        self.assertEqual(store.fetch_count(), 4)
        self.assertFalse(dashboard.loading)

    async def test_any_failed_fetch_keeps_all_lists(self):
        store = FakeStore(rows=rows(INQUIRIES, 1))
        dashboard = RequestDashboard(MANUFACTURER, store=store)
        await dashboard.fetch_all_requests()

        store.rows[INQUIRIES].append(SimpleNamespace(pk=2, provider=PROVIDER))
        store.failing_fetch = {RATINGS}
        self.assertFalse(await dashboard.fetch_all_requests())
        self.assertEqual([r.pk for r in dashboard.lists[INQUIRIES]], [1])
        self.assertEqual(dashboard.notifications[-1], {'level': ERROR, 'message': DashboardMessages.LOAD_FAILED})
        self.assertEqual(len([n for n in dashboard.notifications if n['level'] == ERROR]), 1)

    async def test_submit_inserts_once_and_refetches_once(self):
        store = FakeStore()
        dashboard = RequestDashboard(MANUFACTURER, store=store)
        record = await dashboard.submit('inquiry', PROVIDER, self.INQUIRY_FORM)

        self.assertEqual(record.message, 'Need 100 MT of coal')
        self.assertEqual([c[0] for c in store.mutations()], ['insert'])
        self.assertEqual(store.fetch_count(), 4)
        self.assertEqual(dashboard.notifications[-1]['level'], SUCCESS)
        self.assertFalse(dashboard.submitting)
        self.assertEqual(len(dashboard.lists[INQUIRIES]), 1)

    async def test_standalone_quotation_after_inquiry(self):
        store = FakeStore()
        dashboard = RequestDashboard(MANUFACTURER, store=store)
        await dashboard.submit('inquiry', PROVIDER, self.INQUIRY_FORM)
        quotation = await dashboard.submit('quotation', PROVIDER, self.QUOTATION_FORM)

        self.assertIsNone(quotation.inquiry)
        self.assertEqual(quotation.total_amount, Decimal('1000.00'))
        self.assertEqual(len(store.rows[INQUIRIES]), 1)
        self.assertEqual(len(store.rows[QUOTATIONS]), 1)
        self.assertEqual(store.rows[ORDERS], [])

    async def test_validation_error_issues_no_store_call(self):
        store = FakeStore()
        dashboard = RequestDashboard(MANUFACTURER, store=store)
        with self.assertRaises(SubmissionValidationError):
            await dashboard.submit('quotation', PROVIDER, {'item_type': 'coal', 'quantity': '-1'})
        self.assertEqual(store.calls, [])
        self.assertEqual(dashboard.notifications[-1]['level'], ERROR)
        self.assertFalse(dashboard.submitting)

    async def test_rating_without_orders_issues_no_store_call(self):
        store = FakeStore()
        dashboard = RequestDashboard(MANUFACTURER, store=store)
        await dashboard.fetch_all_requests()
        store.calls.clear()
        with self.assertRaises(SubmissionValidationError):
            await dashboard.submit('rating', PROVIDER, {'order_number': 'ORD-1', 'rating': 5, 'comment': 'Good'})
        self.assertEqual(store.calls, [])

    async def test_rating_uses_loaded_order(self):
        order = SimpleNamespace(pk=3, provider_id=PROVIDER.pk, provider=PROVIDER, order_number='ORD-3')
        store = FakeStore(rows={ORDERS: [order]})
        dashboard = RequestDashboard(MANUFACTURER, store=store)
        await dashboard.fetch_all_requests()
        rating = await dashboard.submit('rating', PROVIDER, {'order_number': 'ORD-3', 'rating': 2, 'comment': 'Late'})
        self.assertIs(rating.order, order)
        self.assertFalse(rating.would_recommend)

    async def test_store_failure_is_generic_and_not_retried(self):
        store = FakeStore(fail_insert=True)
        dashboard = RequestDashboard(MANUFACTURER, store=store)
        self.assertIsNone(await dashboard.submit('inquiry', PROVIDER, self.INQUIRY_FORM))
        self.assertEqual(len(store.mutations()), 1)
        self.assertEqual(store.fetch_count(), 0)
        self.assertEqual(dashboard.notifications[-1], {'level': ERROR, 'message': DashboardMessages.SUBMIT_FAILED})
        self.assertFalse(dashboard.submitting)

    async def test_submitting_flag_blocks_double_submit(self):
        store = FakeStore()
        dashboard = RequestDashboard(MANUFACTURER, store=store)
        dashboard.submitting = True
        self.assertIsNone(await dashboard.submit('inquiry', PROVIDER, self.INQUIRY_FORM))
        self.assertEqual(store.calls, [])

    async def test_bulk_delete_success(self):
        store = FakeStore(rows=rows(INQUIRIES, 1, 2, 3, 4))
        dashboard = RequestDashboard(MANUFACTURER, store=store)
        await dashboard.fetch_all_requests()
        store.calls.clear()

        for record_id in (1, 2, 3):
            dashboard.selections[INQUIRIES].toggle(record_id, True)
        self.assertTrue(await dashboard.delete_selected(INQUIRIES))

        self.assertEqual(store.mutations(), [('delete_many', INQUIRIES, [1, 2, 3])])
        self.assertEqual(store.fetch_count(), 4)
        self.assertEqual(dashboard.selections[INQUIRIES].state, IDLE)
        self.assertEqual([r.pk for r in dashboard.lists[INQUIRIES]], [4])
        self.assertEqual(dashboard.notifications[-1], {
            'level': SUCCESS, 'message': DashboardMessages.DELETED.format(count=3, list_type=INQUIRIES),
        })

    async def test_bulk_delete_reports_rows_actually_removed(self):
        store = FakeStore(rows=rows(ORDERS, 1, 2))
        dashboard = RequestDashboard(MANUFACTURER, store=store)
        await dashboard.fetch_all_requests()

        for record_id in (1, 99):
            dashboard.selections[ORDERS].toggle(record_id, True)
        self.assertTrue(await dashboard.delete_selected(ORDERS))
        self.assertEqual(
            dashboard.notifications[-1]['message'],
            DashboardMessages.DELETED.format(count=1, list_type=ORDERS)
        )

    async def test_bulk_delete_failure_keeps_selection(self):
        store = FakeStore(rows=rows(ORDERS, 1, 2), delete_many_ok=False)
        dashboard = RequestDashboard(MANUFACTURER, store=store)
        await dashboard.fetch_all_requests()
        store.calls.clear()

        dashboard.selections[ORDERS].toggle_all(True, [r.pk for r in dashboard.lists[ORDERS]])
        self.assertFalse(await dashboard.delete_selected(ORDERS))

        self.assertEqual(dashboard.selections[ORDERS].selected, frozenset({1, 2}))
        self.assertEqual(dashboard.selections[ORDERS].state, SELECTING)
        self.assertEqual(store.fetch_count(), 0)
        self.assertEqual(len(dashboard.lists[ORDERS]), 2)
        self.assertEqual(dashboard.notifications[-1]['level'], ERROR)

    async def test_bulk_delete_with_empty_selection_is_noop(self):
        store = FakeStore()
        dashboard = RequestDashboard(MANUFACTURER, store=store)
        self.assertFalse(await dashboard.delete_selected(QUOTATIONS))
        self.assertEqual(store.calls, [])

    async def test_delete_one_bypasses_selection(self):
        store = FakeStore(rows=rows(QUOTATIONS, 1, 2))
        dashboard = RequestDashboard(MANUFACTURER, store=store)
        await dashboard.fetch_all_requests()
        store.calls.clear()
        dashboard.selections[QUOTATIONS].toggle(1, True)

        self.assertTrue(await dashboard.delete_one(QUOTATIONS, 2))
        self.assertEqual(store.mutations(), [('delete', QUOTATIONS, 2)])
        self.assertEqual([r.pk for r in dashboard.lists[QUOTATIONS]], [1])

    async def test_delete_one_missing_record(self):
        dashboard = RequestDashboard(MANUFACTURER, store=FakeStore())
        self.assertFalse(await dashboard.delete_one(RATINGS, 7))
        self.assertEqual(dashboard.notifications[-1]['message'], DashboardMessages.RECORD_NOT_FOUND)

    async def test_clear_provider(self):
        store = FakeStore(rows={**rows(INQUIRIES, 1), **rows(ORDERS, 1, 2)})
        dashboard = RequestDashboard(MANUFACTURER, store=store)
        counts = await dashboard.clear_provider(PROVIDER)
        self.assertEqual(counts, {INQUIRIES: 1, QUOTATIONS: 0, ORDERS: 2})
        self.assertEqual(store.fetch_count(), 4)

    def test_unknown_list_type(self):
        dashboard = RequestDashboard(MANUFACTURER, store=FakeStore())
        with self.assertRaises(ValueError):
            dashboard.selection('shipments')


class RecordStoreTests(TestCase):

    def setUp(self):
        self.store = RecordStore()
        self.manufacturer = TestDataFactory.create_manufacturer()
        self.provider = TestDataFactory.create_provider()

    def test_fetch_is_scoped_to_manufacturer(self):
        mine = TestDataFactory.create_inquiry(self.manufacturer, self.provider)
        TestDataFactory.create_inquiry(TestDataFactory.create_manufacturer(), self.provider)
        self.assertEqual(self.store.fetch(INQUIRIES, self.manufacturer), [mine])

    def test_insert_validates(self):
        with self.assertRaises(StoreError):
            self.store.insert(QUOTATIONS, {
                'manufacturer': self.manufacturer, 'provider': self.provider,
                'item_type': 'coal', 'quantity': Decimal('1'), 'status': 'bogus',
            })
        self.assertFalse(Quotation.objects.exists())

    def test_insert_rating_checks_order(self):
        order = TestDataFactory.create_order(TestDataFactory.create_manufacturer(), self.provider)
        with self.assertRaises(StoreError):
            self.store.insert(RATINGS, {
                'manufacturer': self.manufacturer, 'provider': self.provider, 'order': order, 'rating': 5,
            })

    def test_delete_only_own_rows(self):
        foreign = TestDataFactory.create_inquiry(TestDataFactory.create_manufacturer(), self.provider)
        self.assertFalse(self.store.delete(INQUIRIES, self.manufacturer, foreign.id))
        self.assertTrue(Inquiry.objects.filter(id=foreign.id).exists())

    def test_delete_many(self):
        orders = [TestDataFactory.create_order(self.manufacturer, self.provider) for _ in range(3)]
        self.assertTrue(self.store.delete_many(ORDERS, self.manufacturer, [o.id for o in orders[:2]]))
        self.assertEqual(list(Order.objects.values_list('id', flat=True)), [orders[2].id])
        self.assertEqual(self.store.last_deleted_count, 2)

    def test_delete_many_skips_foreign_rows_in_count(self):
        mine = TestDataFactory.create_order(self.manufacturer, self.provider)
        foreign = TestDataFactory.create_order(TestDataFactory.create_manufacturer(), self.provider)
        self.assertTrue(self.store.delete_many(ORDERS, self.manufacturer, [mine.id, foreign.id]))
        self.assertEqual(self.store.last_deleted_count, 1)
        self.assertTrue(Order.objects.filter(id=foreign.id).exists())

    def test_delete_many_reports_failure(self):
        with mock.patch.object(Order.objects, 'filter', side_effect=DatabaseError('locked')):
            self.assertFalse(self.store.delete_many(ORDERS, self.manufacturer, [1]))

    def test_fetch_wraps_database_errors(self):
        with mock.patch.object(Rating.objects, 'filter', side_effect=DatabaseError('gone')):
            with self.assertRaises(StoreError):
                self.store.fetch(RATINGS, self.manufacturer)

    def test_delete_all_for_provider(self):
        other_provider = TestDataFactory.create_provider()
        TestDataFactory.create_inquiry(self.manufacturer, self.provider)
        TestDataFactory.create_quotation(self.manufacturer, self.provider)
        order = TestDataFactory.create_order(self.manufacturer, self.provider)
        TestDataFactory.create_rating(order)
        kept = TestDataFactory.create_order(self.manufacturer, other_provider)

        counts = self.store.delete_all_for_provider(self.manufacturer, self.provider)
        self.assertEqual(counts, {INQUIRIES: 1, QUOTATIONS: 1, ORDERS: 1})
        self.assertEqual(list(Order.objects.all()), [kept])
        self.assertFalse(Rating.objects.exists())


class DashboardAPITests(TestCase):

    def setUp(self):
        self.manufacturer = TestDataFactory.create_manufacturer()
        self.provider = TestDataFactory.create_provider()
        self.client = AuthenticatedAPIClient().authenticate_user(self.manufacturer)

    def test_requests_lists_with_badges(self):
        TestDataFactory.create_quotation(self.manufacturer, self.provider, status='accepted')
        TestDataFactory.create_order(self.manufacturer, self.provider, order_status='completed', payment_status='completed')

        response = self.client.get('/api/dashboard/requests/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.data['data']
        self.assertEqual(set(data), set(LIST_TYPES))
        self.assertEqual(data['quotations'][0]['status_badge']['status'], 'pending')
        self.assertEqual(data['orders'][0]['order_status_badge']['status'], 'pending')
        self.assertEqual(data['orders'][0]['payment_status_badge']['status'], 'pending')

    def test_requests_forbidden_for_providers(self):
        client = AuthenticatedAPIClient().authenticate_user(self.provider.user)
        response = client.get('/api/dashboard/requests/')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_submit_inquiry(self):
        response = self.client.post('/api/dashboard/submit/inquiry/', {
            'provider': self.provider.id,
            'message': 'Need 100 MT of Assam coal',
            'quantity': '100',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['data']['list_type'], INQUIRIES)
        self.assertEqual(len(response.data['data']['requests']['inquiries']), 1)
        self.assertEqual(Inquiry.objects.get().manufacturer, self.manufacturer)

    def test_submit_order(self):
        response = self.client.post('/api/dashboard/submit/order/', {
            'provider': self.provider.id,
            'item_type': 'indian_coal',
            'quantity': '5',
            'price_per_unit': '9000',
            'delivery_location': 'Patna',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        order = Order.objects.get()
        self.assertEqual(order.total_amount, Decimal('45000.00'))
        self.assertIsNone(order.quotation)
        self.assertTrue(order.order_number.startswith('ORD-'))

    def test_submit_validation_error(self):
        response = self.client.post('/api/dashboard/submit/quotation/', {
            'provider': self.provider.id, 'item_type': 'indian_coal', 'quantity': '0',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('quantity', response.data['errors'])
        self.assertFalse(Quotation.objects.exists())

    def test_submit_rating_requires_order(self):
        response = self.client.post('/api/dashboard/submit/rating/', {
            'provider': self.provider.id, 'order_number': 'ORD-404', 'rating': 5, 'comment': 'Great',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(Rating.objects.exists())

    def test_submit_rating(self):
        order = TestDataFactory.create_order(self.manufacturer, self.provider)
        response = self.client.post('/api/dashboard/submit/rating/', {
            'provider': self.provider.id, 'order_number': order.order_number, 'rating': 4, 'comment': 'On time',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        rating = Rating.objects.get()
        self.assertEqual(rating.order, order)
        self.assertTrue(rating.would_recommend)
        self.assertEqual(rating.service_rating, 4)

    def test_submit_when_requests_cannot_be_loaded(self):
        order = TestDataFactory.create_order(self.manufacturer, self.provider)
        with mock.patch.object(RecordStore, 'fetch', side_effect=StoreError('Could not load orders')):
            response = self.client.post('/api/dashboard/submit/rating/', {
                'provider': self.provider.id, 'order_number': order.order_number, 'rating': 4,
            }, format='json')
        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        self.assertEqual(response.data['error'], DashboardMessages.LOAD_FAILED)
        self.assertFalse(Rating.objects.exists())

    def test_submit_unknown_provider_and_type(self):
        response = self.client.post('/api/dashboard/submit/inquiry/', {'provider': 999999, 'message': 'x'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        response = self.client.post('/api/dashboard/submit/complaint/', {'provider': self.provider.id}, format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_bulk_delete(self):
        inquiries = [TestDataFactory.create_inquiry(self.manufacturer, self.provider) for _ in range(3)]
        foreign = TestDataFactory.create_inquiry(TestDataFactory.create_manufacturer(), self.provider)

        response = self.client.post('/api/dashboard/inquiries/bulk-delete/', {
            'ids': [inquiries[0].id, inquiries[1].id, foreign.id],
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([row['id'] for row in response.data['data']['inquiries']], [inquiries[2].id])
        self.assertTrue(Inquiry.objects.filter(id=foreign.id).exists())
        self.assertEqual(response.data['message'], DashboardMessages.DELETED.format(count=2, list_type=INQUIRIES))

    def test_bulk_delete_requires_ids(self):
        response = self.client.post('/api/dashboard/orders/bulk-delete/', {'ids': []}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_unknown_list(self):
        response = self.client.post('/api/dashboard/shipments/bulk-delete/', {'ids': [1]}, format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_delete_one(self):
        quotation = TestDataFactory.create_quotation(self.manufacturer, self.provider)
        response = self.client.delete(f'/api/dashboard/quotations/{quotation.id}/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(Quotation.objects.exists())

        response = self.client.delete(f'/api/dashboard/quotations/{quotation.id}/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_clear_provider(self):
        TestDataFactory.create_inquiry(self.manufacturer, self.provider)
        TestDataFactory.create_order(self.manufacturer, self.provider)
        response = self.client.post(f'/api/dashboard/providers/{self.provider.id}/clear/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['deleted'], {'inquiries': 1, 'quotations': 0, 'orders': 1})
