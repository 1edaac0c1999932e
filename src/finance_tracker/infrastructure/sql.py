"""Helpers for building portable SQL statements.

Money and date parameters are bound with explicit SQLAlchemy types so the
same ``text()`` statements run on PostgreSQL and SQLite.
"""

from collections.abc import Iterable

from sqlalchemy import Date, Numeric, bindparam, text
from sqlalchemy.sql.elements import TextClause

MONEY = Numeric(15, 2, asdecimal=True)
QUANTITY = Numeric(15, 6, asdecimal=True)


def typed_text(
    statement: str,
    *,
    money: Iterable[str] = (),
    dates: Iterable[str] = (),
    quantities: Iterable[str] = (),
) -> TextClause:
    """Build a ``text()`` clause with typed bind parameters.

    Args:
        statement: SQL with ``:name`` placeholders.
        money: Placeholders holding monetary Decimals.
        dates: Placeholders holding ``date`` values.
        quantities: Placeholders holding unit counts with six decimals.

    Returns:
        TextClause: Clause ready for ``Connection.execute``.
    """
    params = [bindparam(name, type_=MONEY) for name in money]
    params += [bindparam(name, type_=Date()) for name in dates]
    params += [bindparam(name, type_=QUANTITY) for name in quantities]
    clause = text(statement)
    if params:
        clause = clause.bindparams(*params)
    return clause


__all__ = ["MONEY", "QUANTITY", "typed_text"]
