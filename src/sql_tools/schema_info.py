# -*- coding: utf-8 -*-
"""Static schema patterns for common table types (users, products, orders)."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from sql_tools.result import SchemaInfo

SCHEMA_PATTERNS: Mapping[str, SchemaInfo] = MappingProxyType(
    {
        "users": SchemaInfo(
            common_columns=[
                "id",
                "username",
                "email",
                "password_hash",
                "created_at",
                "updated_at",
                "first_name",
                "last_name",
                "is_active",
            ],
            relationships=[
                "users have many orders",
                "users have many posts",
                "users belong to many roles",
            ],
            examples=[
                "SELECT * FROM users WHERE email = 'user@example.com'",
                "SELECT id, username, email FROM users WHERE is_active = true ORDER BY created_at DESC",
                "SELECT COUNT(*) FROM users WHERE created_at > '2024-01-01'",
            ],
        ),
        "products": SchemaInfo(
            common_columns=[
                "id",
                "name",
                "description",
                "price",
                "stock_quantity",
                "category_id",
                "sku",
                "created_at",
                "updated_at",
            ],
            relationships=[
                "products belong to categories",
                "products have many order_items",
                "products have many reviews",
            ],
            examples=[
                "SELECT * FROM products WHERE price < 100 AND stock_quantity > 0",
                "SELECT name, price FROM products WHERE category_id = 5 ORDER BY price ASC",
                "SELECT AVG(price) as avg_price FROM products GROUP BY category_id",
            ],
        ),
        "orders": SchemaInfo(
            common_columns=[
                "id",
                "user_id",
                "total_amount",
                "status",
                "order_date",
                "shipping_address",
                "payment_method",
                "created_at",
            ],
            relationships=[
                "orders belong to users",
                "orders have many order_items",
                "orders have one payment",
            ],
            examples=[
                "SELECT * FROM orders WHERE user_id = 123 ORDER BY order_date DESC",
                "SELECT COUNT(*) as order_count, SUM(total_amount) as total_revenue FROM orders WHERE status = 'completed'",
                "SELECT o.id, u.username FROM orders o JOIN users u ON o.user_id = u.id",
            ],
        ),
    }
)


def get_schema_info(table_type: str) -> SchemaInfo:
    """
    Return the schema pattern for *table_type* (case-insensitive).

    Every call returns a fresh record, so callers may change it freely.
    Unknown table types get a generic record whose example query uses
    *table_type* exactly as given.
    """
    schema = SCHEMA_PATTERNS.get(table_type.lower())
    if schema is not None:
        return schema.model_copy(deep=True)

    return SchemaInfo(
        common_columns=["id", "name", "created_at", "updated_at"],
        relationships=["Depends on your specific database schema"],
        examples=[f"SELECT * FROM {table_type} LIMIT 10"],
    )
