"""Income aggregation per household member."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Sequence

from ..domain.members import Member
from ..models.salary import Salary
from .money import ZERO, money_sum, quantize


@dataclass(slots=True)
class MemberIncome:
    user_id: str
    first_name: str
    last_name: str
    default_salary: Decimal
    current_salary: Decimal


def income_data(
    members: Sequence[Member], salaries: Iterable[Salary], month: int, year: int
) -> list[MemberIncome]:
    """Return default/current salary per member, zero where no record exists.

    ``salaries`` may contain records of other periods; only (month, year) is used.
    """

    salary_map = {
        salary.user_id: salary
        for salary in salaries
        if salary.month == month and salary.year == year
    }

    result: list[MemberIncome] = []
    for member in members:
        salary = salary_map.get(member.user_id)
        result.append(
            MemberIncome(
                user_id=member.user_id,
                first_name=member.first_name,
                last_name=member.last_name,
                default_salary=quantize(salary.default_amount) if salary else ZERO,
                current_salary=quantize(salary.current_amount) if salary else ZERO,
            )
        )
    return result


def total_income(income: Iterable[MemberIncome]) -> tuple[Decimal, Decimal]:
    """Return (total default, total current) household income."""

    rows = list(income)
    return (
        money_sum(row.default_salary for row in rows),
        money_sum(row.current_salary for row in rows),
    )
