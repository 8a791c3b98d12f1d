"""Pytest configuration and shared fixtures for DuoBudget tests.

Pure calculator tests build unsaved rows directly; repository, service and
route tests run against a throwaway SQLite database.
"""

from __future__ import annotations

import tempfile
from contextlib import contextmanager
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path

import pytest
from sqlmodel import Session, SQLModel, create_engine

from duobudget import create_app
from duobudget.config import TestConfig
from duobudget.domain.members import Member

# Import all models to ensure they're registered with SQLModel metadata
from duobudget.models import (
    Expense,
    ExpenseCategory,
    ExpenseFrequency,
    ExpensePaymentStatus,
    ExpenseType,
    Household,
    HouseholdMember,
    HouseholdRole,
    PaymentStatus,
    RecurringOverride,
    Salary,
    Saving,
    User,
)

# =============================================================================
# Pure-core helpers
# =============================================================================


@pytest.fixture
def alex() -> Member:
    return Member(
        user_id="user-alex",
        household_id="hh-1",
        first_name="Alex",
        last_name="Doe",
        role=HouseholdRole.OWNER,
    )


@pytest.fixture
def sam() -> Member:
    return Member(user_id="user-sam", household_id="hh-1", first_name="Sam", last_name="Roe")


@pytest.fixture
def couple(alex, sam) -> list[Member]:
    return [alex, sam]


@pytest.fixture
def make_expense():
    """Build an unsaved Expense with recurring-monthly defaults."""

    counter = {"n": 0}

    def _make(amount, **overrides) -> Expense:
        counter["n"] += 1
        fields = {
            "id": f"exp-{counter['n']}",
            "household_id": "hh-1",
            "created_by_id": "user-alex",
            "name": f"Expense {counter['n']}",
            "amount": Decimal(str(amount)),
            "type": ExpenseType.PERSONAL,
            "category": ExpenseCategory.RECURRING,
            "frequency": ExpenseFrequency.MONTHLY,
            "created_at": datetime(2025, 1, 15, tzinfo=timezone.utc),
        }
        fields.update(overrides)
        return Expense(**fields)

    return _make


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching ``duobudget.infra.database.create_session_factory``."""

    @contextmanager
    def factory():
        session = Session(db_engine, expire_on_commit=False)
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    return factory


@pytest.fixture
def db_session(db_engine):
    session = Session(db_engine, expire_on_commit=False)
    try:
        yield session
        session.commit()
    finally:
        session.close()


def _persist(session: Session, row):
    session.add(row)
    session.commit()
    session.refresh(row)
    return row


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def household(db_session):
    """A persisted two-member household: Alex (owner, joined first) and Sam."""

    hh = _persist(db_session, Household(name="Flat 3B", invite_code="ABC123"))
    alex_user = _persist(db_session, User(email="alex@example.com", first_name="Alex", last_name="Doe"))
    sam_user = _persist(db_session, User(email="sam@example.com", first_name="Sam", last_name="Roe"))
    _persist(
        db_session,
        HouseholdMember(
            user_id=alex_user.id,
            household_id=hh.id,
            role=HouseholdRole.OWNER,
            joined_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
        ),
    )
    _persist(
        db_session,
        HouseholdMember(
            user_id=sam_user.id,
            household_id=hh.id,
            joined_at=datetime(2025, 1, 2, tzinfo=timezone.utc),
        ),
    )
    return {"household": hh, "alex": alex_user, "sam": sam_user}


@pytest.fixture
def expense_factory(db_session, household):
    """Persist expenses for the fixture household (created by Alex unless told otherwise)."""

    def _create(amount, **overrides) -> Expense:
        fields = {
            "household_id": household["household"].id,
            "created_by_id": household["alex"].id,
            "name": "Test expense",
            "amount": Decimal(str(amount)),
            "type": ExpenseType.PERSONAL,
            "category": ExpenseCategory.RECURRING,
            "frequency": ExpenseFrequency.MONTHLY,
        }
        fields.update(overrides)
        return _persist(db_session, Expense(**fields))

    return _create


@pytest.fixture
def salary_factory(db_session, household):
    def _create(user: User, default_amount, current_amount=None, *, month: int, year: int) -> Salary:
        current = default_amount if current_amount is None else current_amount
        return _persist(
            db_session,
            Salary(
                user_id=user.id,
                household_id=household["household"].id,
                default_amount=Decimal(str(default_amount)),
                current_amount=Decimal(str(current)),
                month=month,
                year=year,
            ),
        )

    return _create


@pytest.fixture
def saving_factory(db_session, household):
    def _create(
        user: User,
        amount,
        *,
        month: int,
        year: int,
        is_shared: bool = False,
        reduces_from_salary: bool = True,
    ) -> Saving:
        return _persist(
            db_session,
            Saving(
                user_id=user.id,
                household_id=household["household"].id,
                amount=Decimal(str(amount)),
                month=month,
                year=year,
                is_shared=is_shared,
                reduces_from_salary=reduces_from_salary,
            ),
        )

    return _create


@pytest.fixture
def mark_paid(db_session, household):
    def _mark(expense: Expense, *, month: int, year: int, status: PaymentStatus = PaymentStatus.PAID):
        return _persist(
            db_session,
            ExpensePaymentStatus(
                expense_id=expense.id,
                month=month,
                year=year,
                status=status,
                paid_by_id=household["alex"].id,
                paid_at=datetime(year, month, 5, tzinfo=timezone.utc),
            ),
        )

    return _mark


@pytest.fixture
def skip_month(db_session):
    def _skip(expense: Expense, *, month: int, year: int, skipped: bool = True):
        return _persist(
            db_session,
            RecurringOverride(expense_id=expense.id, month=month, year=year, amount=expense.amount, skipped=skipped),
        )

    return _skip


# =============================================================================
# Application Fixtures
# =============================================================================


@pytest.fixture
def app(tmp_path, monkeypatch):
    monkeypatch.setenv("DUOBUDGET_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("DUOBUDGET_TEST_DATABASE_URL", raising=False)
    app = create_app(config=TestConfig())
    yield app
    app.extensions["duobudget.engine"].dispose()


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def seeded(app):
    """Alex and Sam share a household; Alex fronted a 120 bill in January 2026."""

    with app.extensions["duobudget.session_factory"]() as session:
        household = Household(name="Flat 3B", invite_code="ROUTES1")
        alex = User(email="alex@example.com", first_name="Alex", last_name="Doe")
        sam = User(email="sam@example.com", first_name="Sam", last_name="Roe")
        loner = User(email="solo@example.com", first_name="Solo")
        session.add_all([household, alex, sam, loner])
        session.flush()
        session.add_all(
            [
                HouseholdMember(
                    user_id=alex.id,
                    household_id=household.id,
                    role=HouseholdRole.OWNER,
                    joined_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
                ),
                HouseholdMember(
                    user_id=sam.id,
                    household_id=household.id,
                    joined_at=datetime(2025, 1, 2, tzinfo=timezone.utc),
                ),
                Salary(user_id=alex.id, household_id=household.id, default_amount=Decimal("3000"),
                       current_amount=Decimal("3000"), month=1, year=2026),
                Salary(user_id=sam.id, household_id=household.id, default_amount=Decimal("2500"),
                       current_amount=Decimal("2500"), month=1, year=2026),
                Expense(household_id=household.id, created_by_id=alex.id, name="Rent",
                        amount=Decimal("1400"), type=ExpenseType.SHARED),
                Expense(household_id=household.id, created_by_id=alex.id, name="Internet",
                        amount=Decimal("120"), type=ExpenseType.SHARED, paid_by_user_id=alex.id),
                Saving(user_id=sam.id, household_id=household.id, amount=Decimal("100"),
                       month=12, year=2025),
                Saving(user_id=alex.id, household_id=household.id, amount=Decimal("250"),
                       month=1, year=2026, is_shared=True),
            ]
        )
        return {"alex": alex.id, "sam": sam.id, "loner": loner.id}
