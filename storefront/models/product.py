from sqlalchemy import Column, Integer, String, Float, Text, DateTime
from datetime import datetime

from storefront.core.database import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    price = Column(Float, nullable=False, default=0.0)
    image = Column(String)
    description = Column(Text)
    quantity = Column(Integer, default=0)

    categoryid = Column(Integer, index=True)
    supermarketid = Column(Integer, index=True)

    date_added = Column(DateTime, default=datetime.utcnow, index=True)

    def __repr__(self):
        return f"<Product(id={self.id}, name={self.name}, categoryid={self.categoryid})>"
