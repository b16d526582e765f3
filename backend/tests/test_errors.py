from sqlalchemy.exc import IntegrityError

from supplychain.domain.errors import ConstraintViolation, classify_integrity_error


class _PgError(Exception):
    def __init__(self, msg, pgcode):
        super().__init__(msg)
        self.pgcode = pgcode


def _wrap(orig):
    return IntegrityError("INSERT ...", {}, orig)


def test_classify_by_sqlstate():
    assert classify_integrity_error(_wrap(_PgError("x", "23502"))) == "not_null"
    assert classify_integrity_error(_wrap(_PgError("x", "23514"))) == "check"
    assert classify_integrity_error(_wrap(_PgError("x", "23503"))) == "foreign_key"
    assert classify_integrity_error(_wrap(_PgError("x", "23505"))) == "unique"


def test_classify_by_message():
    cases = {
        "NOT NULL constraint failed: inventories.product_id": "not_null",
        "CHECK constraint failed: ck_customers_loyalty_status": "check",
        "FOREIGN KEY constraint failed": "foreign_key",
        "UNIQUE constraint failed: supplier_products.supplier_id": "unique",
        'null value in column "email" of relation "suppliers" violates not-null constraint': "not_null",
        'insert or update on table "products" violates foreign key constraint "products_supplier_id_fkey"': "foreign_key",
        "duplicate key value violates unique constraint \"uq_supplier_products_pair\"": "unique",
        "something odd": "integrity",
    }
    for msg, kind in cases.items():
        assert classify_integrity_error(_wrap(Exception(msg))) == kind, msg


def test_violation_carries_table_and_message():
    v = ConstraintViolation.from_integrity_error(_wrap(Exception("FOREIGN KEY constraint failed")), "products")
    assert v.kind == "foreign_key"
    assert v.table == "products"
    assert "FOREIGN KEY" in v.message
    assert "products" in str(v)
