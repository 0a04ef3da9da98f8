"""Tests for the Lockstep mock server's in-memory database."""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mock_servers.lockstep_mock.db import InMemoryDB, SearchlightError, paginate, reset_db


@pytest.fixture
def db():
    db = InMemoryDB()
    for name, balance, active in [
        ("Operating Checking", 1200, True),
        ("Payroll Checking", 300, True),
        ("Corporate Card", -450, False),
    ]:
        db.insert(
            "financialInstitutionAccount",
            {"name": name, "balance": balance, "isActive": active, "status": "active" if active else "inactive"},
        )
    return db


class TestCrud:
    def test_insert_assigns_id(self, db):
        record = db.insert("workflowStatus", {"name": "Disputed"})
        assert record["id"]
        assert db.get("workflowStatus", record["id"])["name"] == "Disputed"

    def test_insert_keeps_given_id(self, db):
        db.insert("workflowStatus", {"id": "abc", "name": "Disputed"})
        assert db.get("workflowStatus", "abc") is not None

    def test_update_cannot_change_id(self, db):
        db.insert("workflowStatus", {"id": "abc", "name": "Disputed"})
        updated = db.update("workflowStatus", "abc", {"id": "xyz", "name": "Escalated"})
        assert updated["id"] == "abc"
        assert updated["name"] == "Escalated"

    def test_update_missing(self, db):
        assert db.update("workflowStatus", "missing", {"name": "x"}) is None

    def test_delete(self, db):
        db.insert("workflowStatus", {"id": "abc"})
        assert db.delete("workflowStatus", "abc") is True
        assert db.delete("workflowStatus", "abc") is False


class TestSearch:
    def test_eq_is_case_insensitive(self, db):
        rows = db.search("financialInstitutionAccount", "status eq 'ACTIVE'")
        assert [r["name"] for r in rows] == ["Operating Checking", "Payroll Checking"]

    def test_ne(self, db):
        rows = db.search("financialInstitutionAccount", "status ne 'active'")
        assert [r["name"] for r in rows] == ["Corporate Card"]

    def test_contains_and_startswith(self, db):
        assert len(db.search("financialInstitutionAccount", "name contains 'checking'")) == 2
        assert len(db.search("financialInstitutionAccount", "name startswith 'corp'")) == 1

    def test_boolean_literal(self, db):
        assert len(db.search("financialInstitutionAccount", "isActive eq false")) == 1

    def test_and_joined_conditions(self, db):
        rows = db.search("financialInstitutionAccount", "status eq 'active' AND name startswith 'Payroll'")
        assert [r["name"] for r in rows] == ["Payroll Checking"]

    def test_numeric_order(self, db):
        rows = db.search("financialInstitutionAccount", order="balance desc")
        assert [r["balance"] for r in rows] == [1200, 300, -450]

    def test_decimal_amounts_sort_numerically(self, db):
        db.insert("financialInstitutionAccount", {"name": "Savings", "balance": Decimal("450.25")})
        rows = db.search("financialInstitutionAccount", order="balance desc")
        assert [r["balance"] for r in rows] == [1200, Decimal("450.25"), 300, -450]

    def test_missing_values_sort_last(self, db):
        db.insert("financialInstitutionAccount", {"name": "No Balance"})
        rows = db.search("financialInstitutionAccount", order="balance")
        assert rows[-1]["name"] == "No Balance"

    @pytest.mark.parametrize("expression", ["name like 'x'", "name eq", "'x' eq name"])
    def test_unparseable_filter(self, db, expression):
        with pytest.raises(SearchlightError):
            db.search("financialInstitutionAccount", expression)

    def test_unparseable_order(self, db):
        with pytest.raises(SearchlightError):
            db.search("financialInstitutionAccount", order="name sideways")


class TestPaginate:
    def test_defaults(self):
        page = paginate([{"n": 1}])
        assert page == {"totalCount": 1, "pageSize": 200, "pageNumber": 0, "records": [{"n": 1}]}

    @pytest.mark.parametrize("size,number", [(0, 0), (10_001, 0), (10, -1)])
    def test_out_of_range(self, size, number):
        with pytest.raises(SearchlightError):
            paginate([], size, number)

    @given(
        count=st.integers(min_value=0, max_value=50),
        size=st.integers(min_value=1, max_value=20),
    )
    def test_pages_partition_rows(self, count, size):
        rows = [{"n": i} for i in range(count)]
        collected = []
        for number in range(count // size + 2):
            page = paginate(rows, size, number)
            assert page["totalCount"] == count
            assert len(page["records"]) <= size
            collected.extend(page["records"])
        assert collected == rows


class TestSeedData:
    def test_every_table_seeded(self):
        db = reset_db()
        for table in db.tables:
            assert db.list_all(table), table

    def test_reset_discards_changes(self):
        db = reset_db()
        db.delete("publicCompanyProfile", "acme-holdings")
        assert reset_db().get("publicCompanyProfile", "acme-holdings") is not None
