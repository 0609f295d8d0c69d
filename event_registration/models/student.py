from sqlalchemy import Column, String, Boolean, DateTime, Float, Text, JSON, Integer, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
import uuid
from ..core.database import Base

class Student(Base):
    __tablename__ = "students"
    
    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    
    # Identity
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    roll_number = Column(String, index=True, nullable=False)
    university_roll_no = Column(String, nullable=False)
    branch = Column(String, nullable=False)
    year = Column(String, nullable=False)
    phone_number = Column(String, nullable=False)
    cgpa = Column(String, nullable=False)
    
    # Events joined, in registration order
    event_name = Column(JSON, nullable=False, default=list)
    
    # Check-in token
    qr_code = Column(String, unique=True, nullable=False, default=lambda: str(uuid.uuid4()))
    
    # Optional profile
    back = Column(Text, nullable=True)
    summary = Column(Text, nullable=True)
    clubs = Column(Text, nullable=True)
    aim = Column(Text, nullable=True)
    believe = Column(Text, nullable=True)
    expect = Column(Text, nullable=True)
    domain = Column(JSON, nullable=True)
    
    # Review and round state
    review = Column(Float, nullable=True, default=None)
    comment = Column(Text, nullable=False, default="")
    round_one_attendance = Column(Boolean, nullable=False, default=False)
    round_two_attendance = Column(Boolean, nullable=False, default=False)
    round_one_qualified = Column(Boolean, nullable=False, default=False)
    round_two_qualified = Column(Boolean, nullable=False, default=False)
    
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    attendance = relationship(
        "AttendanceEntry",
        back_populates="student",
        order_by="AttendanceEntry.date",
        cascade="all, delete-orphan",
    )

    def has_event(self, event_name: str) -> bool:
        return event_name in (self.event_name or [])

    def add_event(self, event_name: str):
        """Append an event, keeping the list free of duplicates"""
        if not self.has_event(event_name):
            # Reassign so the JSON column is flagged as modified
            self.event_name = [*(self.event_name or []), event_name]

    def __repr__(self):
        return f"<Student {self.name} - {self.email}>"


class AttendanceEntry(Base):
    __tablename__ = "student_attendance"
    
    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(String, ForeignKey("students.id"), index=True, nullable=False)
    date = Column(DateTime, nullable=False)
    present = Column(Boolean, nullable=False, default=True)
    
    student = relationship("Student", back_populates="attendance")
