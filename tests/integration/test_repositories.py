"""Integration tests for the SQLAlchemy repositories"""

import re
import pytest
from datetime import datetime, timedelta
from decimal import Decimal

from goldbill.adapter.repositories import (
    SqlAlchemyCustomerRepository,
    SqlAlchemyGoldCalculationRepository,
    SqlAlchemyInvoiceRepository,
)
from goldbill.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from goldbill.app.use_cases.billing import InitializeSampleData
from goldbill.domain.customer import Customer
from goldbill.domain.gold_calculation import GoldCalculation
from goldbill.domain.invoice import Invoice, InvoiceKind, InvoiceStatus
from goldbill.domain.invoice_item import InvoiceItem


async def seed_sample_customers(db_session):
    result = await InitializeSampleData(
        SqlAlchemyUnitOfWork(db_session), SqlAlchemyCustomerRepository(db_session)
    ).execute()
    assert result.is_ok()
    return result.value


class TestCustomerRepository:

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive_substring(self, db_session):
        await seed_sample_customers(db_session)
        repo = SqlAlchemyCustomerRepository(db_session)

        customers, total = await repo.list(search="kumar")

        assert total == 3
        assert [c.name for c in customers] == ["Manoj Kumar", "Naveen Kumar", "Rajesh Kumar"]

    @pytest.mark.asyncio
    async def test_pagination_and_order(self, db_session):
        await seed_sample_customers(db_session)
        repo = SqlAlchemyCustomerRepository(db_session)

        first_page, total = await repo.list(limit=5)
        second_page, _ = await repo.list(limit=5, offset=5)

        assert total == 50
        names = [c.name for c in first_page + second_page]
        assert names == sorted(names)
        assert len(set(names)) == 10

    @pytest.mark.asyncio
    async def test_search_escapes_wildcards(self, db_session):
        await seed_sample_customers(db_session)
        repo = SqlAlchemyCustomerRepository(db_session)

        customers, total = await repo.list(search="%")

        assert customers == []
        assert total == 0

    @pytest.mark.asyncio
    async def test_lookup_by_business_id(self, db_session):
        await seed_sample_customers(db_session)
        repo = SqlAlchemyCustomerRepository(db_session)

        customer = await repo.get_by_customer_id("CU013")

        assert customer.name == "Manoj Kumar"
        assert (await repo.get_by_id(customer.id)).customer_id == "CU013"
        assert (await repo.get_by_customer_id("CU033")).name == "Naveen Kumar"
        assert (await repo.get_by_customer_id("CU050")).name == "Sapna Aggarwal"
        assert await repo.get_by_customer_id("CU999") is None


class TestGoldCalculationRepository:

    @pytest.mark.asyncio
    async def test_list_newest_first_with_limit(self, db_session):
        repo = SqlAlchemyGoldCalculationRepository(db_session)
        base = datetime(2024, 1, 15, 10, 0, 0)
        for minutes in range(3):
            await repo.create(
                GoldCalculation(
                    weight=Decimal("10"),
                    purity=Decimal("91.6"),
                    pure_gold_weight=Decimal("9.160"),
                    description=f"calc {minutes}",
                    created_at=base + timedelta(minutes=minutes),
                )
            )
        await db_session.commit()

        latest = await repo.list(limit=2)

        assert [c.description for c in latest] == ["calc 2", "calc 1"]
        assert (await repo.get_by_id(latest[0].id)).pure_gold_weight == Decimal("9.160")
        assert await repo.sum_weight() == Decimal("30")


class TestInvoiceRepository:

    @pytest.mark.asyncio
    async def test_invoice_round_trip(self, db_session):
        customer_repo = SqlAlchemyCustomerRepository(db_session)
        customer = await customer_repo.create(
            Customer(customer_id="CU001", name="Rajesh Kumar", phone="1")
        )
        repo = SqlAlchemyInvoiceRepository(db_session)

        number = await repo.generate_invoice_number("CU001", datetime(2024, 1, 15))
        invoice = Invoice(
            invoice_number=number,
            customer_id=customer.id,
            kind=InvoiceKind.RATE,
            status=InvoiceStatus.PAID,
            making_charges=Decimal("500.00"),
            tax_percentage=Decimal("3.00"),
            subtotal=Decimal("2915.00"),
            tax_amount=Decimal("87.45"),
            total=Decimal("3002.45"),
        )
        items = [
            InvoiceItem(kind=InvoiceKind.RATE, description="bangle", weight=Decimal("5"),
                        purity=Decimal("92"), rate=Decimal("525"), amount=Decimal("2415.00")),
            InvoiceItem(kind=InvoiceKind.RATE, description="ring", weight=Decimal("1"),
                        purity=Decimal("50"), rate=Decimal("0.02"), amount=Decimal("0.01")),
        ]
        created = await repo.create(invoice, items)
        await db_session.commit()

        assert re.match(r"^INV-CU001-20240115-\d{4}$", created.invoice_number)

        found_invoice, found_customer = await repo.get_by_id(created.id)
        stored_items = await repo.get_items(created.id)

        assert found_invoice.total == Decimal("3002.45")
        assert found_customer.customer_id == "CU001"
        assert [item.position for item in stored_items] == [0, 1]
        assert [item.description for item in stored_items] == ["bangle", "ring"]
        assert await repo.count_by_status(InvoiceStatus.PAID) == 1
        assert await repo.sum_total_by_status(InvoiceStatus.PAID) == Decimal("3002.45")
        assert await repo.sum_total_by_status(InvoiceStatus.PENDING) == Decimal("0")

    @pytest.mark.asyncio
    async def test_generated_numbers_skip_existing(self, db_session):
        customer = await SqlAlchemyCustomerRepository(db_session).create(
            Customer(customer_id="CU002", name="Priya Sharma", phone="1")
        )
        repo = SqlAlchemyInvoiceRepository(db_session)
        now = datetime(2024, 1, 15)

        first = await repo.generate_invoice_number("CU002", now)
        await repo.create(Invoice(invoice_number=first, customer_id=customer.id), [])
        second = await repo.generate_invoice_number("CU002", now)

        assert first != second

    @pytest.mark.asyncio
    async def test_list_filters(self, db_session):
        customer_repo = SqlAlchemyCustomerRepository(db_session)
        first = await customer_repo.create(Customer(customer_id="CU001", name="A", phone="1"))
        second = await customer_repo.create(Customer(customer_id="CU002", name="B", phone="2"))
        repo = SqlAlchemyInvoiceRepository(db_session)
        base = datetime(2024, 1, 15)
        await repo.create(Invoice(invoice_number="INV-CU001-20240115-0001", customer_id=first.id,
                                  status=InvoiceStatus.PAID, created_at=base), [])
        await repo.create(Invoice(invoice_number="INV-CU001-20240116-0002", customer_id=first.id,
                                  status=InvoiceStatus.PENDING, created_at=base + timedelta(days=1)), [])
        await repo.create(Invoice(invoice_number="INV-CU002-20240117-0003", customer_id=second.id,
                                  status=InvoiceStatus.PAID, created_at=base + timedelta(days=2)), [])
        await db_session.commit()

        rows, total = await repo.list()
        assert total == 3
        assert [invoice.invoice_number[-4:] for invoice, _ in rows] == ["0003", "0002", "0001"]

        rows, total = await repo.list(customer_id=first.id)
        assert total == 2

        rows, total = await repo.list(status=InvoiceStatus.PAID, search="cu002")
        assert total == 1
        assert rows[0][1].customer_id == "CU002"
