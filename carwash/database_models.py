from sqlalchemy import Column, Integer, String, Date, ForeignKey, TEXT
from sqlalchemy.orm import relationship
from .database import Base


# 1. Users (the authenticated identity)
class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    full_name = Column(String(255))

    vehicles = relationship("Vehicle", back_populates="owner", cascade="all, delete-orphan")
    bookings = relationship("Booking", back_populates="user", cascade="all, delete-orphan")


# 2. Vehicles owned by a user
class Vehicle(Base):
    __tablename__ = "vehicles"
    id = Column(Integer, primary_key=True, autoincrement=True)
    brand = Column(String(100), nullable=False)
    model = Column(String(100), nullable=False)
    plate_number = Column(String(20), unique=True, nullable=False, index=True)
    vehicle_type = Column(String(50), nullable=False)

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    owner = relationship("User", back_populates="vehicles")
    bookings = relationship("Booking", back_populates="vehicle")


# 3. Service catalogue (price in rupiah)
class Service(Base):
    __tablename__ = "services"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, unique=True)
    description = Column(TEXT)
    price = Column(Integer, nullable=False, default=0)
    duration_minutes = Column(Integer, nullable=False)

    bookings = relationship("Booking", back_populates="service")


# 4. Bookings linking a user, a vehicle and a service to a date/time
class Booking(Base):
    __tablename__ = "bookings"
    id = Column(Integer, primary_key=True, autoincrement=True)
    booking_date = Column(Date, nullable=False, index=True)
    booking_time = Column(String(5), nullable=False)  # "HH:MM"
    status = Column(String(20), nullable=False, default="pending")

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id"), nullable=False)
    service_id = Column(Integer, ForeignKey("services.id"), nullable=False)

    user = relationship("User", back_populates="bookings")
    vehicle = relationship("Vehicle", back_populates="bookings")
    service = relationship("Service", back_populates="bookings")
