from pydantic import BaseModel
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel


class Entity(BaseModel):
    """Base entity class whose integer identifier is assigned by the database."""

    id: int | None = PydanticField(
        default=None,
        description="Unique identifier assigned by storage on insert",
    )


class EntityTable(SQLModel, table=False):
    """Base table class with an auto-incrementing integer primary key."""

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Unique identifier for the row",
    )
