"""
Order form state and submission.

An OrderDraft belongs to one order form. It always holds at least one line so
the user never ends up with an empty order, and it is only cleared after the
remote service accepted the order.
"""

import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Iterable, List, Optional

from core.errors import ConsoleError, DraftValidationError
from schemas.beer_orders import (
    BeerOrderRead,
    CreateBeerOrderCommand,
    OrderDraftIn,
    OrderLineCommand,
)
from services.beer_orders import BeerOrderService

logger = logging.getLogger(__name__)

LINE_FIELDS = ("beer_id", "order_quantity")


@dataclass
class DraftLine:
    beer_id: Optional[int] = None  # None = no beer selected yet
    order_quantity: int = 1


@dataclass
class OrderDraft:
    customer_ref: str = ""
    lines: List[DraftLine] = field(default_factory=lambda: [DraftLine()])

    @classmethod
    def from_form(cls, form: OrderDraftIn) -> "OrderDraft":
        lines = [DraftLine(beer_id=l.beer_id, order_quantity=l.order_quantity) for l in form.order_lines]
        return cls(customer_ref=form.customer_ref, lines=lines or [DraftLine()])

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.lines):
            raise IndexError(f"no order line at position {index}")

    def add_line(self) -> None:
        self.lines.append(DraftLine())

    def remove_line(self, index: int) -> bool:
        """Drop the line at `index`. The last remaining line cannot be removed."""
        self._check_index(index)
        if len(self.lines) <= 1:
            return False
        del self.lines[index]
        return True

    def update_line(self, index: int, field_name: str, value) -> None:
        if field_name not in LINE_FIELDS:
            raise ValueError(f"unknown order line field: {field_name}")
        self._check_index(index)
        line = self.lines[index]
        self.lines[index] = DraftLine(
            beer_id=value if field_name == "beer_id" else line.beer_id,
            order_quantity=value if field_name == "order_quantity" else line.order_quantity,
        )

    def reset(self) -> None:
        self.customer_ref = ""
        self.lines = [DraftLine()]

    def to_command(self, known_beer_ids: Optional[Iterable[int]] = None) -> CreateBeerOrderCommand:
        """Validate the draft and build the create command. Nothing is sent here."""
        customer_ref = (self.customer_ref or "").strip()
        if not customer_ref:
            raise DraftValidationError("Customer reference is required")
        if not self.lines:
            raise DraftValidationError("An order needs at least one line")

        known = set(known_beer_ids) if known_beer_ids is not None else None
        order_lines: List[OrderLineCommand] = []
        for i, line in enumerate(self.lines, start=1):
            if not line.beer_id:
                raise DraftValidationError(f"Line {i}: select a beer")
            if known is not None and line.beer_id not in known:
                raise DraftValidationError(f"Line {i}: unknown beer #{line.beer_id}")
            if line.order_quantity is None or line.order_quantity < 1:
                raise DraftValidationError(f"Line {i}: quantity must be at least 1")
            order_lines.append(OrderLineCommand(beer_id=line.beer_id, order_quantity=line.order_quantity))

        return CreateBeerOrderCommand(customer_ref=customer_ref, order_lines=order_lines)


class OrderComposer:
    """Submits an OrderDraft through the beer order service."""

    def __init__(
        self,
        service: BeerOrderService,
        draft: Optional[OrderDraft] = None,
        on_submitted: Optional[Callable[[], Awaitable[None]]] = None,
        known_beer_ids: Optional[Iterable[int]] = None,
    ):
        self.service = service
        self.draft = draft or OrderDraft()
        self.on_submitted = on_submitted
        self.known_beer_ids = list(known_beer_ids) if known_beer_ids is not None else None
        self.last_error: Optional[str] = None

    async def submit(self) -> BeerOrderRead:
        try:
            command = self.draft.to_command(self.known_beer_ids)
            order = await self.service.create(command)
        except ConsoleError as e:
            # keep the draft so the user can fix it and resubmit
            self.last_error = e.message
            logger.info("Order submission failed: %s", e.message)
            raise

        self.last_error = None
        self.draft.reset()
        logger.info("Created beer order #%s for %s", order.id, command.customer_ref)
        if self.on_submitted is not None:
            await self.on_submitted()
        return order
