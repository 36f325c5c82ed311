"""Tests for classifying remote subscription errors."""

import pytest


class TestClassify:
    """Tests for classify."""

    def test_currency_mismatch(self):
        """Test the currency mismatch code becomes CurrencyMismatch."""
        from billing_backend.billing.domain import CurrencyMismatch, OutcomeKind
        from billing_backend.billing.external import ErrorEntry
        from billing_backend.billing.subscriptions import classify

        outcome = classify([ErrorEntry(code="currencies_does_not_match")])

        assert isinstance(outcome, CurrencyMismatch)
        assert outcome.kind == OutcomeKind.CURRENCY_MISMATCH
        assert outcome.should_confirm is False
        assert outcome.should_report is False

    def test_other_code_is_failure_with_message(self):
        """Test any other code becomes Failure carrying the remote message."""
        from billing_backend.billing.domain import Failure
        from billing_backend.billing.subscriptions import classify

        outcome = classify([{"code": "internal_error", "message": "boom"}])

        assert outcome == Failure(message="boom", code="internal_error")
        assert outcome.should_report is True

    def test_only_first_entry_counts(self):
        """Test a mismatch in a later entry is ignored."""
        from billing_backend.billing.domain import Failure
        from billing_backend.billing.subscriptions import classify

        outcome = classify([
            {"code": "value_is_invalid", "message": "bad date"},
            {"code": "currencies_does_not_match"},
        ])

        assert isinstance(outcome, Failure)
        assert outcome.message == "bad date"

    def test_first_mismatch_wins_over_later_failures(self):
        """Test a leading mismatch is not merged with later errors."""
        from billing_backend.billing.domain import CurrencyMismatch
        from billing_backend.billing.subscriptions import classify

        outcome = classify([
            {"code": "currencies_does_not_match", "message": "currencies differ"},
            {"code": "internal_error", "message": "boom"},
        ])

        assert outcome == CurrencyMismatch(code="currencies_does_not_match", message="currencies differ")

    def test_missing_message_uses_generic_message(self):
        """Test an entry without message falls back to the transport message."""
        from billing_backend.billing.shared.config import TRANSPORT_FAILURE_MESSAGE
        from billing_backend.billing.subscriptions import classify

        outcome = classify([{"code": "internal_error"}])

        assert outcome.message == TRANSPORT_FAILURE_MESSAGE

    def test_deterministic(self):
        """Test the same first code always yields the same outcome kind."""
        from billing_backend.billing.subscriptions import classify

        kinds = {
            classify([{"code": "internal_error", "message": str(i)}]).kind
            for i in range(5)
        }

        assert len(kinds) == 1

    def test_custom_mismatch_code(self):
        """Test the mismatch code can be overridden."""
        from billing_backend.billing.domain import CurrencyMismatch
        from billing_backend.billing.subscriptions import classify

        outcome = classify([{"code": "currency_conflict"}], mismatch_code="currency_conflict")

        assert isinstance(outcome, CurrencyMismatch)

    def test_empty_list_raises(self):
        """Test an empty error list is rejected."""
        from billing_backend.billing.shared.exceptions import SubscriptionError
        from billing_backend.billing.subscriptions import classify

        with pytest.raises(SubscriptionError) as exc_info:
            classify([])

        assert exc_info.value.code == "EMPTY_ERROR_LIST"


class TestClassifyTransportFailure:
    """Tests for classify_transport_failure."""

    def test_generic_message_for_plain_exception(self):
        """Test an arbitrary exception gets the generic message."""
        from billing_backend.billing.shared.config import TRANSPORT_FAILURE_MESSAGE
        from billing_backend.billing.subscriptions import classify_transport_failure

        outcome = classify_transport_failure(ConnectionError("reset by peer"))

        assert outcome.message == TRANSPORT_FAILURE_MESSAGE
        assert outcome.code == "TRANSPORT_ERROR"

    def test_billing_error_message_kept(self):
        """Test a BillingError keeps its own message and code."""
        from billing_backend.billing.shared.exceptions import BillingError
        from billing_backend.billing.subscriptions import classify_transport_failure

        outcome = classify_transport_failure(BillingError("Gateway timeout", code="GATEWAY_TIMEOUT"))

        assert outcome.message == "Gateway timeout"
        assert outcome.code == "GATEWAY_TIMEOUT"
