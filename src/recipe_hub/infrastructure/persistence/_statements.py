# src/recipe_hub/infrastructure/persistence/_statements.py
"""
数据库方言特定的 SQL 语句工厂。

将 PostgreSQL 与 SQLite 的 INSERT ... ON CONFLICT DO NOTHING 差异
与仓库层的业务逻辑解耦。
"""
from __future__ import annotations

from typing import Any, Protocol

from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert


class StatementFactory(Protocol):
    """定义了数据库方言特定语句生成器的接口协议。"""

    def create_insert_on_conflict_nothing(
        self,
        model: Any,
        values: dict[str, Any],
        index_elements: list[str],
    ) -> Any:
        """创建一个原子化的 INSERT ... ON CONFLICT ... DO NOTHING 语句。"""
        ...


class PostgresStatementFactory:
    """PostgreSQL 语句工厂实现。"""

    def create_insert_on_conflict_nothing(
        self,
        model: Any,
        values: dict[str, Any],
        index_elements: list[str],
    ) -> Any:
        return pg_insert(model).values(**values).on_conflict_do_nothing(
            index_elements=index_elements
        )


class SQLiteStatementFactory:
    """SQLite 语句工厂实现。"""

    def create_insert_on_conflict_nothing(
        self,
        model: Any,
        values: dict[str, Any],
        index_elements: list[str],
    ) -> Any:
        return sqlite_insert(model).values(**values).on_conflict_do_nothing(
            index_elements=index_elements
        )


def get_statement_factory(dialect_name: str) -> StatementFactory:
    """按方言名（`postgresql` / `sqlite`）选择语句工厂。"""
    if dialect_name == "postgresql":
        return PostgresStatementFactory()
    if dialect_name == "sqlite":
        return SQLiteStatementFactory()
    raise ValueError(f"不支持的数据库方言: {dialect_name}")
