from sqlalchemy import Column, Integer, String, Text

from storefront.core.database import Base


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text)
    image = Column(String)

    # Plain column: rows may point at a parent that was never fetched.
    parent_id = Column(Integer, nullable=True, index=True)

    def __repr__(self):
        return f"<Category(id={self.id}, name={self.name}, parent_id={self.parent_id})>"
