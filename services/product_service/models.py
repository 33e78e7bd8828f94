from sqlalchemy import Column, Float, Integer, String

from shared.config.database import Base, UTCDateTime, generate_id, utcnow


class Product(Base):
    __tablename__ = "products"

    id = Column(String(32), primary_key=True, default=generate_id)
    name = Column(String, nullable=False)
    image = Column(String, nullable=True)
    price = Column(Float, nullable=False)
    # No floor: order placement may drive this negative
    stock = Column(Integer, nullable=False, default=0)
    created_at = Column(UTCDateTime(), default=utcnow)
