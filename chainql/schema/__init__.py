"""chainQL schema models: Model and StatementKind."""
from chainql.schema.converters import model_from_sqlalchemy, model_from_table
from chainql.schema.model import Model, StatementKind

__all__ = [
    "Model",
    "StatementKind",
    "model_from_sqlalchemy",
    "model_from_table",
]
