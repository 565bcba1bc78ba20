import pandas as pd

from .statement import Statement

_COLUMNS = ["title", "category", "days_rented", "amount", "points"]


def to_df(statement: Statement) -> pd.DataFrame:
    rows = [
        {
            "title":       line.title,
            "category":    line.category,
            "days_rented": line.days_rented,
            "amount":      float(line.amount),
            "points":      line.points,
        }
        for line in statement.lines()
    ]
    return pd.DataFrame(rows, columns=_COLUMNS)
