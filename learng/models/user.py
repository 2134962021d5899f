"""User database model using SQLModel."""

from datetime import datetime
from typing import cast

from sqlalchemy import DateTime
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String

from learng.utils.helpers import new_id, utc_now


class UserDB(SQLModel, table=True):
    """
    User database model.

    ``password_hash`` stays on the row only; response schemas leave it out.
    """

    __tablename__ = cast("declared_attr[str]", "users")

    id: str = Field(
        default_factory=new_id,
        sa_column=Column(String(36), primary_key=True, nullable=False),
        description="User ID",
    )
    email: str = Field(
        sa_column=Column(String(255), unique=True, nullable=False, index=True),
        description="Email address (unique)",
    )
    password_hash: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Hashed password",
    )
    role: str = Field(
        sa_column=Column(String(20), nullable=False, index=True),
        description="User role (admin, learner)",
    )
    display_name: str = Field(
        default="",
        sa_column=Column(String(200), nullable=False, server_default=""),
        description="Display name",
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )
    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Last update timestamp",
    )
