from sqlalchemy import Column, String, Text, Float, Integer, Boolean, DateTime

from app.database.session import Base

class Product(Base):
    __tablename__ = "products"
    # Never reuse the pk of a deleted row after a reseed
    __table_args__ = {"sqlite_autoincrement": True}

    # Row identity owned by the store; ascending pk is insertion order
    pk = Column(Integer, primary_key=True, autoincrement=True)
    # Identifier from the seed dataset, not guaranteed unique
    id = Column(Integer, index=True)
    title = Column(String)
    description = Column(Text)
    price = Column(Float)
    category = Column(String, index=True)
    date_of_sale = Column(DateTime, index=True)  # naive UTC
    sold = Column(Boolean)

    def __repr__(self):
        return f"<Product(id={self.id}, title='{self.title}', price={self.price})>"
