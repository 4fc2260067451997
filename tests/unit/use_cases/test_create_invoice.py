"""Unit tests for CreateInvoice use case"""

import pytest
from datetime import date, timedelta
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from goldbill.app.use_cases.billing.create_invoice import CreateInvoice
from goldbill.app.use_cases.billing.dtos import CreateInvoiceCommandDTO, InvoiceItemInputDTO
from goldbill.domain.customer import Customer
from goldbill.domain.invoice import InvoiceKind, InvoiceStatus


@pytest.fixture
def customer():
    return Customer(customer_id="CU001", name="Rajesh Kumar", phone="+91 98765 43210")


@pytest.fixture
def mock_customer_repo(customer):
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=customer)
    return repo


@pytest.fixture
def mock_invoice_repo():
    repo = MagicMock()
    repo.generate_invoice_number = AsyncMock(return_value="INV-CU001-20240115-4821")
    repo.create = AsyncMock(side_effect=lambda invoice, items: invoice)
    return repo


@pytest.fixture
def use_case(mock_uow, mock_invoice_repo, mock_customer_repo):
    return CreateInvoice(mock_uow, mock_invoice_repo, mock_customer_repo, due_days=15)


def rate_command(customer_id, **overrides):
    values = dict(
        customer_id=customer_id,
        kind=InvoiceKind.RATE,
        items=[
            InvoiceItemInputDTO(
                description="22K bangle",
                weight=Decimal("5"),
                purity=Decimal("92"),
                rate=Decimal("525"),
            )
        ],
        making_charges=Decimal("500"),
        tax_percentage=Decimal("3"),
    )
    values.update(overrides)
    return CreateInvoiceCommandDTO(**values)


@pytest.mark.asyncio
class TestCreateRateInvoice:

    async def test_computes_amounts_and_totals(self, use_case, customer, mock_uow, mock_invoice_repo):
        result = await use_case.execute(rate_command(customer.id))

        assert result.is_ok()
        invoice = result.value
        assert invoice.invoice_number == "INV-CU001-20240115-4821"
        assert invoice.items[0].amount == Decimal("2415.00")
        assert invoice.subtotal == Decimal("2915.00")
        assert invoice.tax_amount == Decimal("87.45")
        assert invoice.total == Decimal("3002.45")
        assert invoice.status == InvoiceStatus.PENDING
        assert invoice.customer.customer_id == "CU001"

        mock_invoice_repo.generate_invoice_number.assert_called_once()
        assert mock_invoice_repo.generate_invoice_number.call_args.args[0] == "CU001"
        mock_uow.commit.assert_called_once()

    async def test_high_rate_item(self, use_case, customer):
        command = rate_command(
            customer.id,
            items=[InvoiceItemInputDTO(weight=Decimal("5"), purity=Decimal("92"), rate=Decimal("5250"))],
            making_charges=Decimal("0"),
            tax_percentage=Decimal("0"),
        )

        result = await use_case.execute(command)

        assert result.value.items[0].amount == Decimal("24150.00")
        assert result.value.total == Decimal("24150.00")

    async def test_items_keep_submission_order(self, use_case, customer, mock_invoice_repo):
        command = rate_command(
            customer.id,
            items=[
                InvoiceItemInputDTO(description="ring", weight=Decimal("2"), purity=Decimal("91.6"), rate=Decimal("6000")),
                InvoiceItemInputDTO(description="chain", weight=Decimal("8"), purity=Decimal("75"), rate=Decimal("6000")),
            ],
        )

        await use_case.execute(command)

        _, items = mock_invoice_repo.create.call_args.args
        assert [item.description for item in items] == ["ring", "chain"]

    async def test_default_due_date(self, use_case, customer):
        result = await use_case.execute(rate_command(customer.id))

        assert result.value.due_date == result.value.created_at.date() + timedelta(days=15)

    async def test_explicit_due_date(self, use_case, customer):
        result = await use_case.execute(rate_command(customer.id, due_date=date(2024, 2, 1)))

        assert result.value.due_date == date(2024, 2, 1)

    async def test_empty_items(self, use_case, customer, mock_invoice_repo):
        result = await use_case.execute(rate_command(customer.id, items=[]))

        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        assert "items" in result.error.details["fields"]
        mock_invoice_repo.create.assert_not_called()

    async def test_invalid_item_names_position(self, use_case, customer):
        command = rate_command(
            customer.id,
            items=[
                InvoiceItemInputDTO(weight=Decimal("5"), purity=Decimal("92"), rate=Decimal("525")),
                InvoiceItemInputDTO(weight=Decimal("5"), purity=Decimal("0"), rate=Decimal("525")),
            ],
        )

        result = await use_case.execute(command)

        assert result.is_err()
        assert "items.1.purity" in result.error.details["fields"]

    async def test_stores_item_inputs_at_column_precision(self, use_case, customer, mock_invoice_repo):
        command = rate_command(
            customer.id,
            items=[InvoiceItemInputDTO(weight=Decimal("1.0005"), purity=Decimal("50"), rate=Decimal("1000.555"))],
            making_charges=Decimal("10.005"),
            tax_percentage=Decimal("2.505"),
        )

        result = await use_case.execute(command)

        invoice, items = mock_invoice_repo.create.call_args.args
        item = items[0]
        assert (item.weight, item.purity, item.rate) == (Decimal("1.001"), Decimal("50.00"), Decimal("1000.56"))
        assert item.amount == (item.weight * item.purity / 100 * item.rate).quantize(Decimal("0.01"))
        assert invoice.making_charges == Decimal("10.01")
        assert invoice.tax_percentage == Decimal("2.51")
        assert invoice.subtotal == item.amount + invoice.making_charges
        assert result.is_ok()

    async def test_amount_too_large_to_store(self, use_case, customer, mock_invoice_repo):
        command = rate_command(
            customer.id,
            items=[InvoiceItemInputDTO(weight=Decimal("9999999"), purity=Decimal("100"), rate=Decimal("9999999999"))],
        )

        result = await use_case.execute(command)

        assert result.is_err()
        assert "items.0.amount" in result.error.details["fields"]
        mock_invoice_repo.create.assert_not_called()

    async def test_customer_not_found(self, use_case, mock_customer_repo, mock_invoice_repo, mock_uow):
        mock_customer_repo.get_by_id = AsyncMock(return_value=None)

        result = await use_case.execute(rate_command("missing"))

        assert result.is_err()
        assert result.error.code == "CUSTOMER_NOT_FOUND"
        mock_invoice_repo.create.assert_not_called()
        mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
class TestCreateTouchInvoice:

    async def test_computes_fine_gold_and_totals(self, use_case, customer):
        command = CreateInvoiceCommandDTO(
            customer_id=customer.id,
            kind=InvoiceKind.TOUCH,
            items=[
                InvoiceItemInputDTO(item_name="Chain", pieces=2, net_weight=Decimal("10.5"), touch=Decimal("91.6")),
                InvoiceItemInputDTO(item_name="Ring", pieces=1, net_weight=Decimal("4.25"), touch=Decimal("92"), old_balance=Decimal("1.5")),
            ],
        )

        result = await use_case.execute(command)

        assert result.is_ok()
        invoice = result.value
        assert [item.fine_gold for item in invoice.items] == [Decimal("9.618"), Decimal("3.910")]
        assert invoice.total_pieces == 3
        assert invoice.total_net_weight == Decimal("14.750")
        assert invoice.total_fine_gold == Decimal("13.528")
        assert invoice.total_old_balance == Decimal("1.500")
        assert invoice.total is None

    async def test_negative_pieces(self, use_case, customer):
        command = CreateInvoiceCommandDTO(
            customer_id=customer.id,
            kind=InvoiceKind.TOUCH,
            items=[InvoiceItemInputDTO(item_name="Chain", pieces=-1, net_weight=Decimal("10"), touch=Decimal("91.6"))],
        )

        result = await use_case.execute(command)

        assert result.is_err()
        assert result.error.details["fields"] == {"items.0.pieces": "must not be negative"}

    async def test_touch_inputs_at_column_precision(self, use_case, customer, mock_invoice_repo):
        command = CreateInvoiceCommandDTO(
            customer_id=customer.id,
            kind=InvoiceKind.TOUCH,
            items=[InvoiceItemInputDTO(item_name="Chain", pieces=1, net_weight=Decimal("10.0005"), touch=Decimal("91.666"))],
        )

        await use_case.execute(command)

        _, items = mock_invoice_repo.create.call_args.args
        item = items[0]
        assert (item.net_weight, item.touch) == (Decimal("10.001"), Decimal("91.67"))
        assert item.fine_gold == (item.net_weight * item.touch / 100).quantize(Decimal("0.001"))
