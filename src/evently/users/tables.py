import sqlalchemy

from evently.common.tables import BigId, metadata

users = sqlalchemy.Table(
    "users",
    metadata,
    sqlalchemy.Column("id", BigId, primary_key=True),
    sqlalchemy.Column("clerk_id", sqlalchemy.String, nullable=False, unique=True),
    sqlalchemy.Column("email", sqlalchemy.String, nullable=False, unique=True),
    sqlalchemy.Column("username", sqlalchemy.String, unique=True),
    sqlalchemy.Column("first_name", sqlalchemy.String),
    sqlalchemy.Column("last_name", sqlalchemy.String),
    sqlalchemy.Column("photo", sqlalchemy.String, nullable=False),
    sqlalchemy.Column("created_at", sqlalchemy.DateTime(timezone=True), nullable=False),
)
