"""CreateInvoice Use Case

Creates an invoice for an existing customer. Item amounts / fine gold and the
invoice totals are recomputed here from the submitted inputs.
"""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import List, Tuple
from sqlalchemy.exc import SQLAlchemyError
from libs.result import Result, Return, Error
from goldbill.app.services.unit_of_work import UnitOfWork
from goldbill.app.repositories.customer_repository import CustomerRepository
from goldbill.app.repositories.invoice_repository import InvoiceRepository
from goldbill.app.use_cases.errors import store_failed, validation_failed
from goldbill.domain.calculator import (
    MAX_PIECES,
    MAX_WEIGHT,
    check_limit,
    compute_fine_gold,
    compute_invoice_totals,
    compute_item_amount,
    compute_touch_totals,
    percentage_input,
    quantize_currency,
    quantize_percentage,
    quantize_weight,
    rate_input,
    to_decimal,
    weight_input,
)
from goldbill.domain.errors import ValidationError
from goldbill.domain.invoice import Invoice, InvoiceKind
from goldbill.domain.invoice_item import InvoiceItem
from .dtos import CreateInvoiceCommandDTO, InvoiceItemInputDTO, InvoiceResponseDTO

DEFAULT_DUE_DAYS = 15


class CreateInvoice:
    """
    Use Case: Create an invoice

    Business Rules:
    1. At least one item is required
    2. All items follow the invoice kind (rate or touch)
    3. Inputs are rounded to their stored precision (weights 3 dp,
       percentages, rates and charges 2 dp) before anything is computed
    4. Rate items: amount = weight * purity / 100 * rate;
       subtotal = sum(amount) + making_charges, tax = subtotal * tax% / 100
    5. Touch items: fine_gold = net_weight * touch / 100; totals are plain sums
    6. Customer must exist
    7. Invoice number is generated (INV-<customer_id>-<YYYYMMDD>-<NNNN>)
    8. due_date defaults to today + due_days

    Flow:
    1. Validate items and compute derived values
    2. Load customer
    3. Generate invoice number
    4. Create invoice with items
    5. Commit transaction
    6. Return response
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        customer_repo: CustomerRepository,
        due_days: int = DEFAULT_DUE_DAYS,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.customer_repo = customer_repo
        self.due_days = due_days

    async def execute(self, command: CreateInvoiceCommandDTO) -> Result[InvoiceResponseDTO]:
        """
        Execute invoice creation

        Args:
            command: CreateInvoiceCommandDTO with customer, kind and items

        Returns:
            Result[InvoiceResponseDTO]: Success with invoice, items and customer, or error
        """
        # Step 1: Validate inputs and compute derived values
        if not command.items:
            return Return.err(
                validation_failed(ValidationError({"items": "at least one item is required"}))
            )

        try:
            if command.kind == InvoiceKind.TOUCH:
                invoice, items = self._build_touch_invoice(command)
            else:
                invoice, items = self._build_rate_invoice(command)
        except _ItemValidationError as e:
            return Return.err(validation_failed(e.error, prefix=f"items.{e.index}."))
        except ValidationError as e:
            return Return.err(validation_failed(e))

        try:
            # Step 2: Customer must exist
            customer = await self.customer_repo.get_by_id(command.customer_id)
            if not customer:
                return Return.err(
                    Error(
                        code="CUSTOMER_NOT_FOUND",
                        message=f"Customer with ID {command.customer_id} not found",
                    )
                )

            # Step 3: Generate invoice number
            now = datetime.utcnow()
            invoice.invoice_number = await self.invoice_repo.generate_invoice_number(
                customer.customer_id, now
            )
            invoice.customer_id = customer.id
            invoice.created_at = now
            invoice.due_date = command.due_date or (now.date() + timedelta(days=self.due_days))

            # Step 4: Create invoice with items
            created_invoice = await self.invoice_repo.create(invoice, items)

            # Step 5: Commit transaction
            await self.uow.commit()

            # Step 6: Build response
            return Return.ok(InvoiceResponseDTO.from_entity(created_invoice, items, customer))

        except SQLAlchemyError as e:
            await self.uow.rollback()
            return Return.err(store_failed("create invoice", e))

    def _base_invoice(self, command: CreateInvoiceCommandDTO) -> Invoice:
        return Invoice(
            customer_id=command.customer_id,
            kind=command.kind,
            status=command.status,
            payment_type=command.payment_type,
            payment_details=command.payment_details,
        )

    def _build_rate_invoice(
        self, command: CreateInvoiceCommandDTO
    ) -> Tuple[Invoice, List[InvoiceItem]]:
        items = [
            _with_index(index, _rate_item, item)
            for index, item in enumerate(command.items)
        ]
        totals = compute_invoice_totals(items, command.making_charges, command.tax_percentage)

        invoice = self._base_invoice(command)
        invoice.making_charges = quantize_currency(to_decimal(command.making_charges, "making_charges"))
        invoice.tax_percentage = quantize_percentage(to_decimal(command.tax_percentage, "tax_percentage"))
        invoice.subtotal = totals.subtotal
        invoice.tax_amount = totals.tax_amount
        invoice.total = totals.total
        return invoice, items

    def _build_touch_invoice(
        self, command: CreateInvoiceCommandDTO
    ) -> Tuple[Invoice, List[InvoiceItem]]:
        items = [
            _with_index(index, _touch_item, item)
            for index, item in enumerate(command.items)
        ]
        totals = compute_touch_totals(items)

        invoice = self._base_invoice(command)
        invoice.total_pieces = totals.total_pieces
        invoice.total_net_weight = totals.total_net_weight
        invoice.total_fine_gold = totals.total_fine_gold
        invoice.total_old_balance = totals.total_old_balance
        return invoice, items


class _ItemValidationError(Exception):
    def __init__(self, index: int, error: ValidationError):
        super().__init__(str(error))
        self.index = index
        self.error = error


def _with_index(index: int, build, item: InvoiceItemInputDTO) -> InvoiceItem:
    try:
        return build(item)
    except ValidationError as e:
        raise _ItemValidationError(index, e)


def _rate_item(item: InvoiceItemInputDTO) -> InvoiceItem:
    amount = compute_item_amount(item.weight, item.purity, item.rate)
    return InvoiceItem(
        kind=InvoiceKind.RATE,
        description=item.description or "",
        weight=weight_input(item.weight),
        purity=percentage_input(item.purity),
        rate=rate_input(item.rate),
        amount=amount,
    )


def _touch_item(item: InvoiceItemInputDTO) -> InvoiceItem:
    fine_gold = compute_fine_gold(item.net_weight, item.touch)

    pieces = item.pieces or 0
    if pieces < 0:
        raise ValidationError({"pieces": "must not be negative"})
    if pieces > MAX_PIECES:
        raise ValidationError({"pieces": f"must be at most {MAX_PIECES}"})

    old_balance = None
    if item.old_balance is not None:
        old_balance = to_decimal(item.old_balance, "old_balance")
        if old_balance < Decimal("0"):
            raise ValidationError({"old_balance": "must not be negative"})
        old_balance = check_limit(quantize_weight(old_balance), MAX_WEIGHT, "old_balance")

    return InvoiceItem(
        kind=InvoiceKind.TOUCH,
        item_name=item.item_name or "",
        pieces=pieces,
        net_weight=weight_input(item.net_weight, "net_weight"),
        touch=percentage_input(item.touch, "touch"),
        fine_gold=fine_gold,
        old_balance=old_balance,
    )
