from sqlalchemy import Column, Integer, String, Float, JSON

from storefront.core.database import Base


class Supermarket(Base):
    __tablename__ = "supermarkets"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    address = Column(String)

    price = Column(String)  # price tier, e.g. "$$"
    delivery_time = Column(String)
    delivery_fee = Column(Float)

    main_image = Column(String)
    gallery_images = Column(JSON, default=list)

    vendor_id = Column(String(36), index=True, nullable=True)

    def __repr__(self):
        return f"<Supermarket(id={self.id}, name={self.name})>"
