from fastapi import BackgroundTasks
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from typing import Optional
import logging

from ..models.student import Student
from ..models.schemas import StudentRegistration, RegistrationResult
from ..core.config import settings
from .email_service import email_service

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_ERROR = "A student with this email is already registered"
PERSISTENCE_ERROR = "Failed to register student. Please try again."
UNEXPECTED_ERROR = "An unexpected error occurred. Please try again."

class RegistrationService:
    def __init__(self, mailer=email_service):
        self.mailer = mailer
    
    def register_student(self, db: Session, registration: StudentRegistration,
                         background_tasks: Optional[BackgroundTasks] = None) -> RegistrationResult:
        """Create a student, or attach a new event to an existing one

        The confirmation email is queued on background_tasks when given,
        otherwise it is sent before returning.
        """
        event_name = registration.event_name or settings.DEFAULT_EVENT_NAME
        
        try:
            # Check if email already exists
            student = db.query(Student).filter(Student.email == registration.email).first()
            
            if student:
                if not event_name:
                    return RegistrationResult(success=False, error=DUPLICATE_EMAIL_ERROR)
                if student.has_event(event_name):
                    return RegistrationResult(
                        success=False,
                        error=f"{DUPLICATE_EMAIL_ERROR} for {event_name}"
                    )
                
                student.add_event(event_name)
                db.commit()
                db.refresh(student)
                logger.info(f"Student {student.id} joined event: {event_name}")
            else:
                student = self.build_student(registration, event_name)
                db.add(student)
                db.commit()
                db.refresh(student)
                logger.info(f"Student registered: {student.id}")
            
        except IntegrityError as e:
            logger.warning(f"Duplicate registration rejected for {registration.email}: {str(e)}")
            db.rollback()
            return RegistrationResult(success=False, error=DUPLICATE_EMAIL_ERROR)
        except SQLAlchemyError as e:
            logger.error(f"Error registering student: {str(e)}")
            db.rollback()
            return RegistrationResult(success=False, error=PERSISTENCE_ERROR)
        
        if background_tasks is not None:
            background_tasks.add_task(self.send_confirmation, student)
        else:
            self.send_confirmation(student)
        return RegistrationResult(success=True, user_id=student.id)
    
    def build_student(self, registration: StudentRegistration, event_name: Optional[str] = None) -> Student:
        return Student(
            name=registration.name,
            email=registration.email,
            roll_number=registration.roll_number,
            university_roll_no=registration.university_roll_no,
            branch=registration.branch,
            year=registration.year,
            phone_number=registration.phone_number,
            cgpa=registration.cgpa,
            event_name=[event_name] if event_name else [],
        )
    
    def send_confirmation(self, student: Student) -> bool:
        """Send the confirmation email; delivery errors never reach the caller"""
        try:
            return self.mailer.send_registration_email(student)
        except Exception as e:
            logger.error(f"Confirmation email failed for {student.email}: {str(e)}")
            return False
    
    def get_student(self, db: Session, user_id: str) -> Optional[Student]:
        return db.query(Student).filter(Student.id == user_id).first()
    
    def get_student_by_qr_code(self, db: Session, qr_code: str) -> Optional[Student]:
        return db.query(Student).filter(Student.qr_code == qr_code).first()

registration_service = RegistrationService()
