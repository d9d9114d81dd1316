from django.core.exceptions import ValidationError


class SubmissionValidationError(ValidationError):
    """A request form was rejected before anything was written."""


class StoreError(Exception):
    """A record store call failed. The underlying error is chained as ``__cause__``."""
