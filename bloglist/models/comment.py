"""Comment database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast
from uuid import UUID, uuid4

from sqlalchemy import DateTime, ForeignKey, Uuid
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String


class CommentDB(SQLModel, table=True):
    """Anonymous comment attached to a blog; removed with the blog."""

    __tablename__ = cast("declared_attr[str]", "comments")

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Comment ID",
    )

    blog_id: UUID = Field(
        sa_column=Column(
            "blog_id",
            Uuid,
            ForeignKey("blogs.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="Blog ID (foreign key to blogs.id)",
    )

    content: str = Field(
        sa_column=Column(String(2000), nullable=False),
        description="Comment text",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )
