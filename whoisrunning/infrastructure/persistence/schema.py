"""Table definitions."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Integer,
    MetaData,
    String,
    Table,
    func,
)


metadata = MetaData()

contributions = Table(
    "contributions",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("amount_cents", Integer, nullable=False),
    Column("is_recurring", Boolean, nullable=False, default=False),
    Column("checkout_session_id", String(255), unique=True),
    Column("invoice_id", String(255), unique=True),
    Column("subscription_id", String(255), index=True),
    Column("customer_id", String(255)),
    Column("customer_email", String(320)),
    Column("status", String(20), nullable=False, default="active", index=True),
    Column("created_at", DateTime(timezone=True), server_default=func.now()),
    Column("updated_at", DateTime(timezone=True), server_default=func.now()),
)
