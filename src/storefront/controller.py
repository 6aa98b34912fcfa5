"""Cart controller, the single owner of the live cart.

The UI layer talks to the engine only through this class. It holds the one
``CartState`` instance, replaces it with the result of each reducer call, and
hands the order intent to the order submission collaborator at checkout.

All operations are synchronous and complete before returning. Callers are
expected to serialize access (one in-flight mutation at a time); the
controller does no locking of its own.
"""

from dataclasses import dataclass

from protean.exceptions import ObjectNotFoundError

from storefront.api.schemas import CartStateSchema
from storefront.cart import ledger
from storefront.cart.cart import CartState
from storefront.catalog.port import CatalogProduct, ProductCatalog
from storefront.checkout import get_submission
from storefront.checkout.errors import CheckoutError
from storefront.checkout.intent import OrderIntent
from storefront.checkout.submission_port import OrderSubmission, SubmissionResult
from storefront.checkout.validator import CartPhase, CheckoutValidator, phase_of
from storefront.config import CartSettings
from storefront.discounts.errors import InvalidDiscountCodeError
from storefront.discounts.resolver import DiscountResolver, apply_discount, remove_discount
from storefront.discounts.rule import DiscountRule
from storefront.pricing.calculator import Totals, subtotal_of, totals_for
from storefront.pricing.formatting import CurrencyFormatter, SymbolCurrencyFormatter
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DiscountApplication:
    """Outcome of applying a discount code to the cart."""

    rule: DiscountRule | None = None
    error: InvalidDiscountCodeError | None = None

    @property
    def applied(self) -> bool:
        return self.rule is not None


@dataclass(frozen=True)
class CheckoutReceipt:
    """The order intent emitted at checkout and what the submission made of it."""

    intent: OrderIntent
    submission: SubmissionResult


class CartController:
    def __init__(
        self,
        settings: CartSettings | None = None,
        resolver: DiscountResolver | None = None,
        validator: CheckoutValidator | None = None,
        submission: OrderSubmission | None = None,
        catalog: ProductCatalog | None = None,
        formatter: CurrencyFormatter | None = None,
    ) -> None:
        self.settings = settings or CartSettings.from_domain()
        self.resolver = resolver or DiscountResolver()
        self.validator = validator or CheckoutValidator(self.settings.minimum_chargeable_total)
        self.submission = submission
        self.catalog = catalog
        self.formatter = formatter or SymbolCurrencyFormatter()

        self.state = CartState.empty(
            currency_code=self.settings.currency_code,
            tax_rate=self.settings.tax_rate,
        )

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_to_cart(self, product: CatalogProduct | str, quantity: int = 1) -> None:
        """Add a product to the cart, by catalog record or by id.

        Passing an id requires a product catalog; the product's current price
        is captured on the cart line.
        """
        if not isinstance(product, CatalogProduct):
            product = self._lookup_product(product)

        self.state = ledger.add_item(self.state, product.id, product.unit_price, product.name, quantity)
        logger.debug("Added item to cart", product_id=str(product.id), quantity=quantity)

    def remove_from_cart(self, product_id) -> None:
        self.state = ledger.remove_item(self.state, product_id)
        logger.debug("Removed item from cart", product_id=str(product_id))

    def set_quantity(self, product_id, quantity: int) -> None:
        self.state = ledger.set_quantity(self.state, product_id, quantity)
        logger.debug("Updated cart quantity", product_id=str(product_id), quantity=quantity)

    def clear_cart(self) -> None:
        self.state = ledger.clear_cart(self.state)
        logger.debug("Cleared cart")

    def item_count(self) -> int:
        return ledger.item_count(self.state)

    # -------------------------------------------------------------------
    # Discounts
    # -------------------------------------------------------------------
    def apply_discount_code(self, code: str) -> DiscountApplication:
        """Resolve ``code`` against the current subtotal and apply it.

        A code that does not resolve leaves any previously applied discount in
        place and comes back as an ``InvalidDiscountCodeError`` on the result.
        """
        resolution = self.resolver.explain(code, subtotal_of(self.state.lines))
        if not resolution.ok:
            logger.info(
                "Discount code rejected",
                code=resolution.error.code,
                reason=resolution.error.reason.value,
            )
            return DiscountApplication(error=resolution.error)

        self.state = apply_discount(self.state, resolution.rule)
        logger.info("Discount code applied", code=resolution.rule.code)
        return DiscountApplication(rule=resolution.rule)

    def remove_discount(self) -> None:
        self.state = remove_discount(self.state)

    # -------------------------------------------------------------------
    # Pricing
    # -------------------------------------------------------------------
    def get_totals(self) -> Totals:
        return totals_for(self.state)

    def formatted_totals(self) -> dict[str, str]:
        totals = self.get_totals()
        currency_code = self.state.currency_code
        return {name: self.formatter.format(amount, currency_code) for name, amount in totals.to_dict().items()}

    def phase(self) -> CartPhase:
        return phase_of(self.state)

    # -------------------------------------------------------------------
    # Checkout
    # -------------------------------------------------------------------
    def checkout(self) -> CheckoutReceipt:
        """Validate the cart, submit the order intent, and empty the cart.

        Raises ``EmptyCartError`` or ``InvalidTotalError`` without touching the
        cart. Once the intent has been handed to the submission collaborator
        the cart is cleared, whatever the submission reports back; an exception
        raised by the collaborator propagates and leaves the cart as it was.
        """
        try:
            cleared, intent = self.validator.checkout(self.state)
        except CheckoutError as exc:
            logger.warning("Checkout rejected", error=str(exc), item_count=self.item_count())
            raise

        submission = self.submission or get_submission()
        result = submission.submit(intent)

        self.state = cleared
        logger.info(
            "Order intent submitted",
            total=intent.total,
            line_count=len(intent.lines),
            accepted=result.success,
            order_id=result.order_id,
            failure_reason=result.failure_reason,
        )
        return CheckoutReceipt(intent=intent, submission=result)

    # -------------------------------------------------------------------
    # Snapshots
    # -------------------------------------------------------------------
    def snapshot(self) -> dict:
        """JSON-ready view of the live cart, for the UI layer or debugging."""
        return CartStateSchema.from_state(self.state).model_dump()

    def _lookup_product(self, product_id) -> CatalogProduct:
        if self.catalog is None:
            raise ObjectNotFoundError(f"No product catalog configured to look up product {product_id}")

        product = self.catalog.get(product_id)
        if product is None:
            raise ObjectNotFoundError(f"Product {product_id} not found in catalog")
        return product
