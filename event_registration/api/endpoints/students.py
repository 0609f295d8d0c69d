from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException
from sqlalchemy.orm import Session
from ...core.database import get_db
from ...models.schemas import StudentRegistration, RegistrationResult, StudentResponse
from ...services.registration_service import registration_service

router = APIRouter()

@router.post("/register", response_model=RegistrationResult, response_model_exclude_none=True)
def register_student(
    registration: StudentRegistration,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db)
):
    """Register a student for an event"""
    return registration_service.register_student(db, registration, background_tasks)

@router.get("/check-in/{qr_code}", response_model=StudentResponse)
async def get_student_by_qr_code(qr_code: str, db: Session = Depends(get_db)):
    """Identify a student by check-in token"""
    student = registration_service.get_student_by_qr_code(db, qr_code)
    if not student:
        raise HTTPException(status_code=404, detail="Student not found")
    
    return StudentResponse.model_validate(student)

@router.get("/{user_id}", response_model=StudentResponse)
async def get_student(user_id: str, db: Session = Depends(get_db)):
    """Get student by ID"""
    student = registration_service.get_student(db, user_id)
    if not student:
        raise HTTPException(status_code=404, detail="Student not found")
    
    return StudentResponse.model_validate(student)
