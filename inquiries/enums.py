"""
Enums and messages for inquiries app.
"""
from django.db import models


class InquiryStatus(models.TextChoices):
    """Stored status of an inquiry; no transitions are enforced"""
    PENDING = 'pending', 'Pending'
    RESPONDED = 'responded', 'Responded'
    CLOSED = 'closed', 'Closed'


class InquiryType(models.TextChoices):
    GENERAL = 'general_inquiry', 'General Inquiry'
    QUOTATION = 'quotation_inquiry', 'Quotation Inquiry'
    ORDER = 'order_inquiry', 'Order Inquiry'


class ResponseType(models.TextChoices):
    TEXT_RESPONSE = 'text_response', 'Text Response'
    TEXT_RESPONSE_EDITED = 'text_response_edited', 'Edited Text Response'


class ErrorMessages:
    INQUIRY_NOT_FOUND = "Inquiry not found"
    NOT_ADDRESSED_TO_YOU = "This inquiry was not sent to you"
    EMPTY_RESPONSE = "Response text cannot be empty"
    NOTHING_TO_EDIT = "This inquiry has no response to edit yet"


class ResponseMessages:
    RESPONSE_ADDED = "Response sent to the manufacturer"
    RESPONSE_EDITED = "Response updated successfully"
