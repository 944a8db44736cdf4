import sqlalchemy

from evently.common.tables import BigId, metadata

events = sqlalchemy.Table(
    "events",
    metadata,
    sqlalchemy.Column("id", BigId, primary_key=True),
    sqlalchemy.Column("title", sqlalchemy.String, nullable=False),
    sqlalchemy.Column("description", sqlalchemy.Text),
    sqlalchemy.Column("location", sqlalchemy.String),
    sqlalchemy.Column("image_url", sqlalchemy.String, nullable=False),
    sqlalchemy.Column(
        "start_date_time", sqlalchemy.DateTime(timezone=True), nullable=False
    ),
    sqlalchemy.Column(
        "end_date_time", sqlalchemy.DateTime(timezone=True), nullable=False
    ),
    sqlalchemy.Column("price", sqlalchemy.String),
    sqlalchemy.Column("is_free", sqlalchemy.Boolean, nullable=False),
    sqlalchemy.Column("url", sqlalchemy.String),
    sqlalchemy.Column(
        "organizer_id",
        BigId,
        sqlalchemy.ForeignKey("users.id"),
        index=True,
    ),
    sqlalchemy.Column("created_at", sqlalchemy.DateTime(timezone=True), nullable=False),
)
