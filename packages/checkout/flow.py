"""
Checkout flow state machine.

    SELECTING_PLAN -> FILLING_DETAILS -> AWAITING_PAYMENT_INTENT
        -> CONFIRMING_PAYMENT -> SUCCEEDED | FAILED

A held client secret is bound to the amount it was issued for. Any change to
plan, seats or billing cycle that moves the amount discards it, and
confirmation refuses to run against a secret whose amount no longer matches.
"""

from typing import Optional, Union

from common.core.config import settings
from common.core.exceptions import (
    AppException,
    CheckoutStateError,
    StalePaymentIntentError,
    ValidationError,
)
from common.core.otel_axiom_exporter import trace_span, get_logger
from packages.checkout.catalog import PlanCatalog
from packages.checkout.client import (
    ORDER_SUBMIT_FAILED_MESSAGE,
    PAYMENT_INIT_FAILED_MESSAGE,
    CheckoutApiClient,
)
from packages.checkout.confirmation import PaymentConfirmationAdapter
from packages.checkout.models.domain.checkout import (
    ADDRESS_FIELDS,
    CONTACT_FIELDS,
    CheckoutState,
    CustomerDetails,
)
from packages.checkout.models.domain.confirmation import (
    ConfirmationOutcome,
    IssuedIntent,
    PaymentElement,
)
from packages.checkout.models.domain.enums import (
    BillingCycle,
    CheckoutStep,
    PaymentMethod,
    PaymentStatus,
)
from packages.checkout.models.domain.plans import Plan
from packages.checkout.pricing import compute_amount_cents, normalize_employee_count
from packages.checkout.providers.confirmation.interface import PaymentConfirmerInterface

logger = get_logger(__name__)

PAYMENT_CONFIRM_FAILED_MESSAGE = "Payment could not be completed. Please try again."


class CheckoutFlow:
    """Client-side controller for one checkout visit."""

    def __init__(
        self,
        catalog: PlanCatalog,
        plan_query: Optional[str] = None,
        currency: Optional[str] = None,
        return_url: Optional[str] = None,
    ):
        self.catalog = catalog
        self.currency = currency or settings.default_currency
        self.return_url = return_url or settings.checkout_return_url
        self.state = CheckoutState(customer=CustomerDetails())
        self._intent_in_flight = False
        self._confirmation_in_flight = False
        self._order_in_flight = False
        if plan_query is not None:
            self.select_plan_from_query(plan_query)

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    @property
    def step(self) -> CheckoutStep:
        return self.state.step

    @property
    def amount_cents(self) -> int:
        """Always recomputed from plan, seats and billing cycle."""
        if self.state.selected_plan is None:
            return 0
        return compute_amount_cents(
            self.state.selected_plan,
            self.state.employee_count,
            self.state.billing_cycle,
        )

    @property
    def client_secret(self) -> Optional[str]:
        return self.state.intent.client_secret if self.state.intent else None

    @property
    def in_flight(self) -> bool:
        return (
            self._intent_in_flight
            or self._confirmation_in_flight
            or self._order_in_flight
        )

    @property
    def has_valid_intent(self) -> bool:
        intent = self.state.intent
        return intent is not None and intent.amount_cents == self.amount_cents

    @property
    def can_submit(self) -> bool:
        return (
            not self.in_flight
            and self.state.selected_plan is not None
            and self.state.step
            not in (CheckoutStep.CONFIRMING_PAYMENT, CheckoutStep.SUCCEEDED)
        )

    def missing_fields(self) -> list[str]:
        """Required customer fields that are still empty.

        Invoice orders need a postal address; card payments collect it in
        the processor's address widget.
        """
        required = list(CONTACT_FIELDS)
        if self.state.payment_method == PaymentMethod.INVOICE:
            required.extend(ADDRESS_FIELDS)
        customer = self.state.customer
        return [field for field in required if not getattr(customer, field).strip()]

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def _ensure_editable(self) -> None:
        if self.in_flight:
            raise CheckoutStateError("Checkout is waiting for a payment response")
        if self.state.step in (CheckoutStep.CONFIRMING_PAYMENT, CheckoutStep.SUCCEEDED):
            raise CheckoutStateError("The order can no longer be changed")

    def _invalidate_intent(self, reason: str) -> None:
        if self.state.intent is None:
            return
        logger.info(
            "Discarding payment intent",
            extra={"reason": reason, "issued_amount": self.state.intent.amount_cents},
        )
        self.state.intent = None
        self.state.redirect_url = None
        if self.state.step == CheckoutStep.AWAITING_PAYMENT_INTENT:
            self.state.step = CheckoutStep.FILLING_DETAILS

    def _after_order_change(self) -> None:
        if self.state.intent is not None and not self.has_valid_intent:
            self._invalidate_intent("amount changed")
        if self.state.selected_plan is None:
            self.state.step = CheckoutStep.SELECTING_PLAN
        elif self.state.step == CheckoutStep.SELECTING_PLAN:
            self.state.step = CheckoutStep.FILLING_DETAILS

    def select_plan(self, plan: Union[Plan, str, None]) -> Optional[Plan]:
        """Select a plan object or a plan name (case-insensitive)."""
        self._ensure_editable()
        if isinstance(plan, str):
            plan = self.catalog.find(plan)
        self.state.selected_plan = plan
        if plan is None:
            self._invalidate_intent("plan cleared")
        self._after_order_change()
        return plan

    def select_plan_from_query(self, plan_param: Optional[str]) -> Optional[Plan]:
        """Apply ?plan=. Unknown names leave no plan selected."""
        return self.select_plan(self.catalog.from_query(plan_param))

    def set_employee_count(self, employee_count: int) -> int:
        self._ensure_editable()
        self.state.employee_count = normalize_employee_count(employee_count)
        self._after_order_change()
        return self.state.employee_count

    def set_billing_cycle(self, billing_cycle: Union[BillingCycle, str]) -> None:
        self._ensure_editable()
        self.state.billing_cycle = BillingCycle(billing_cycle)
        self._after_order_change()

    def set_payment_method(self, payment_method: Union[PaymentMethod, str]) -> None:
        self._ensure_editable()
        method = PaymentMethod(payment_method)
        if method != self.state.payment_method:
            self._invalidate_intent("payment method changed")
        self.state.payment_method = method

    def update_customer(self, **fields: str) -> CustomerDetails:
        """Update customer fields; unknown field names are rejected."""
        self._ensure_editable()
        unknown = set(fields) - set(CustomerDetails.model_fields)
        if unknown:
            raise ValueError(f"Unknown customer fields: {', '.join(sorted(unknown))}")
        previous = self.state.customer
        self.state.customer = previous.model_copy(update=fields)
        if any(
            getattr(previous, field) != value
            for field, value in fields.items()
            if field in ADDRESS_FIELDS or field == "country"
        ):
            # Tax and shipping on a held intent were computed from the old address
            self._invalidate_intent("address changed")
        return self.state.customer

    def dismiss_error(self) -> None:
        """Close the error panel; a failed checkout returns to editing."""
        self.state.error_message = None
        if self.state.step == CheckoutStep.FAILED:
            self.state.step = (
                CheckoutStep.FILLING_DETAILS
                if self.state.selected_plan is not None
                else CheckoutStep.SELECTING_PLAN
            )
            self.state.payment_status = PaymentStatus.IDLE

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------

    def _require_submittable(self, method: PaymentMethod) -> Plan:
        plan = self.state.selected_plan
        if plan is None:
            raise CheckoutStateError("No plan selected")
        if self.in_flight:
            raise CheckoutStateError("A submission is already in progress")
        if self.state.step in (CheckoutStep.CONFIRMING_PAYMENT, CheckoutStep.SUCCEEDED):
            raise CheckoutStateError("The order can no longer be changed")
        if self.state.payment_method != method:
            raise CheckoutStateError(
                f"Payment method is {self.state.payment_method.value}"
            )
        missing = self.missing_fields()
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")
        return plan

    def _fail(self, message: str) -> None:
        self.state.step = CheckoutStep.FAILED
        self.state.payment_status = PaymentStatus.FAILED
        self.state.error_message = message

    def build_intent_request(self) -> dict:
        """Arguments for the payment intent endpoint."""
        plan = self.state.selected_plan
        if plan is None:
            raise CheckoutStateError("No plan selected")

        customer = self.state.customer
        metadata = {
            "plan": plan.name,
            "employee_count": str(self.state.employee_count),
            "billing_cycle": self.state.billing_cycle.value,
            "customer_name": customer.full_name,
            "customer_email": customer.email,
        }
        address = None
        if customer.has_address():
            address = {
                "line1": customer.address,
                "city": customer.city,
                "state": customer.state,
                "postal_code": customer.zip,
                "country": customer.country,
            }
        return {
            "amount_cents": self.amount_cents,
            "currency": self.currency,
            "metadata": metadata,
            "address": address,
        }

    @trace_span
    async def request_payment_intent(
        self, client: CheckoutApiClient
    ) -> Optional[IssuedIntent]:
        """
        Request a fresh payment intent for the current amount.

        Returns the issued intent, or None after moving to FAILED with the
        error shown in the panel.
        """
        self._require_submittable(PaymentMethod.CREDIT_CARD)

        self.state.intent = None
        self.state.redirect_url = None
        self.state.error_message = None
        self.state.step = CheckoutStep.AWAITING_PAYMENT_INTENT
        self.state.payment_status = PaymentStatus.SUBMITTING
        request = self.build_intent_request()

        self._intent_in_flight = True
        try:
            intent = await client.create_payment_intent(**request)
        except AppException as e:
            logger.warning(f"Payment initialization error: {e.message}")
            self._fail(e.public_message)
            return None
        except Exception as e:
            logger.exception(f"Unexpected payment initialization error: {e}")
            self._fail(PAYMENT_INIT_FAILED_MESSAGE)
            return None
        finally:
            self._intent_in_flight = False

        self.state.intent = intent
        self.state.payment_status = PaymentStatus.IDLE
        return intent

    def _on_payment_succeeded(self) -> None:
        self.state.step = CheckoutStep.SUCCEEDED
        self.state.payment_status = PaymentStatus.SUCCEEDED
        self.state.error_message = None
        logger.info(
            "Checkout payment succeeded",
            extra={
                "plan": self.state.selected_plan.name if self.state.selected_plan else None,
                "amount": self.amount_cents,
            },
        )

    @trace_span
    async def confirm_payment(
        self,
        confirmer: PaymentConfirmerInterface,
        element: PaymentElement,
    ) -> ConfirmationOutcome:
        """
        Confirm the held intent.

        Raises:
            CheckoutStateError: no intent held, or a submission is in flight
            StalePaymentIntentError: the amount changed since the intent was issued
        """
        if self.in_flight:
            raise CheckoutStateError("A submission is already in progress")
        if self.state.intent is None or self.state.step != CheckoutStep.AWAITING_PAYMENT_INTENT:
            raise CheckoutStateError("Payment intent has not been created")
        if not self.has_valid_intent:
            self._invalidate_intent("amount changed before confirmation")
            raise StalePaymentIntentError(
                "The order total changed. Please resubmit to refresh the payment."
            )

        adapter = PaymentConfirmationAdapter(
            confirmer=confirmer,
            client_secret=self.state.intent.client_secret,
            element=element,
            on_success=self._on_payment_succeeded,
            return_url=self.return_url,
        )

        self.state.step = CheckoutStep.CONFIRMING_PAYMENT
        self.state.payment_status = PaymentStatus.SUBMITTING
        self.state.error_message = None

        self._confirmation_in_flight = True
        try:
            outcome = await adapter.confirm()
        except AppException as e:
            logger.warning(f"Payment confirmation error: {e.message}")
            self.state.intent = None
            self._fail(e.public_message)
            return ConfirmationOutcome(success=False, error_message=e.public_message)
        except Exception as e:
            logger.exception(f"Unexpected payment confirmation error: {e}")
            self.state.intent = None
            self._fail(PAYMENT_CONFIRM_FAILED_MESSAGE)
            return ConfirmationOutcome(
                success=False, error_message=PAYMENT_CONFIRM_FAILED_MESSAGE
            )
        finally:
            self._confirmation_in_flight = False

        if outcome.success:
            return outcome

        if outcome.redirect_url:
            # Completion happens on the return URL after the redirect
            self.state.redirect_url = outcome.redirect_url
            self.state.payment_status = PaymentStatus.IDLE
            return outcome

        # A retry goes through a new intent for the then-current amount
        self.state.intent = None
        self._fail(outcome.error_message or "Payment failed")
        return outcome

    @trace_span
    async def submit_invoice_order(self, client: CheckoutApiClient) -> bool:
        """Forward an invoice order to sales. Returns True on acceptance."""
        plan = self._require_submittable(PaymentMethod.INVOICE)

        customer = self.state.customer
        payload = {
            "name": customer.full_name,
            "email": customer.email,
            "phone": customer.phone,
            "company": customer.company_name,
            "address": customer.address,
            "city": customer.city,
            "state": customer.state,
            "zip": customer.zip,
            "planName": plan.name,
            "billingCycle": self.state.billing_cycle.value,
            "employeeCount": self.state.employee_count,
            "isWaitlist": False,
        }

        self.state.error_message = None
        self.state.payment_status = PaymentStatus.SUBMITTING
        self._order_in_flight = True
        try:
            await client.submit_contact(payload)
        except AppException as e:
            logger.warning(f"Invoice order submission error: {e.message}")
            self._fail(e.public_message)
            return False
        except Exception as e:
            logger.exception(f"Unexpected invoice order submission error: {e}")
            self._fail(ORDER_SUBMIT_FAILED_MESSAGE)
            return False
        finally:
            self._order_in_flight = False

        self.state.step = CheckoutStep.SUCCEEDED
        self.state.payment_status = PaymentStatus.SUCCEEDED
        return True
