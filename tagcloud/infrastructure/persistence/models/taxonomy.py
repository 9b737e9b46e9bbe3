"""Taxonomy ORM model. One row per (content item, taxonomy, term) association."""

from sqlalchemy import Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from tagcloud.infrastructure.persistence.database import Base


class Taxonomy(Base):
    """Term assigned to a content item. Table: taxonomy.

    contenttype is the content category slug, taxonomytype the taxonomy name
    (e.g. tags), slug the term itself.
    """

    __tablename__ = "taxonomy"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    content_id: Mapped[int] = mapped_column(Integer, nullable=False)
    contenttype: Mapped[str] = mapped_column(String(32), nullable=False)
    taxonomytype: Mapped[str] = mapped_column(String(32), nullable=False)
    slug: Mapped[str] = mapped_column(String(64), nullable=False)
    name: Mapped[str] = mapped_column(String(64), nullable=False, default="")
    sortorder: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        Index("ix_taxonomy_contenttype_taxonomytype", "contenttype", "taxonomytype"),
        Index("ix_taxonomy_content_id", "content_id"),
    )
