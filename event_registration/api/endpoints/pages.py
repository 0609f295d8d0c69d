from fastapi import APIRouter, BackgroundTasks, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.concurrency import run_in_threadpool
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError
from sqlalchemy.orm import Session
from pathlib import Path
from typing import Optional
from urllib.parse import urlencode
import logging

from ...core.database import get_db
from ...mail import qr_image_url
from ...models.schemas import StudentRegistration, BRANCH_CHOICES, YEAR_CHOICES, field_errors
from ...services.email_service import email_service
from ...services.registration_service import registration_service, UNEXPECTED_ERROR

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parents[2] / "templates"
templates = Jinja2Templates(directory=TEMPLATE_DIR)

FORM_FIELDS = (
    "name", "email", "branch", "year", "phoneNumber",
    "universityRollNo", "rollNumber", "cgpa", "eventName",
)

router = APIRouter()

def render_form(request: Request, values: dict, errors: Optional[dict] = None,
                notification: Optional[dict] = None, status_code: int = 200):
    return templates.TemplateResponse(
        request,
        "student_register.html",
        {
            "values": values,
            "errors": errors or {},
            "notification": notification,
            "branches": BRANCH_CHOICES,
            "years": YEAR_CHOICES,
        },
        status_code=status_code,
    )

@router.get("/student-register", response_class=HTMLResponse)
def registration_page(request: Request, event: Optional[str] = None):
    """Show the registration form"""
    values = {field: "" for field in FORM_FIELDS}
    values["eventName"] = event or ""
    return render_form(request, values)

@router.post("/student-register", response_class=HTMLResponse)
async def submit_registration(
    request: Request,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db)
):
    """Validate the form and register the student"""
    form = await request.form()
    values = {field: str(form.get(field, "")) for field in FORM_FIELDS}
    
    try:
        registration = StudentRegistration.model_validate(values)
    except ValidationError as e:
        return render_form(request, values, errors=field_errors(e), status_code=422)
    
    try:
        result = await run_in_threadpool(
            registration_service.register_student, db, registration, background_tasks
        )
    except Exception as e:
        logger.error(f"Unexpected error during registration: {str(e)}")
        return render_form(
            request,
            values,
            notification={"title": "Registration failed", "description": UNEXPECTED_ERROR},
            status_code=500,
        )
    
    if not result.success:
        return render_form(
            request,
            values,
            notification={
                "title": "Registration failed",
                "description": result.error or "Something went wrong. Please try again.",
            },
            status_code=409,
        )
    
    query = urlencode({"userId": result.user_id, "registered": 1})
    return RedirectResponse(url=f"/student-dashboard?{query}", status_code=303)

@router.get("/student-dashboard", response_class=HTMLResponse)
def student_dashboard(
    request: Request,
    userId: Optional[str] = None,
    registered: bool = False,
    db: Session = Depends(get_db)
):
    """Show a registered student's details and check-in QR code"""
    student = registration_service.get_student(db, userId) if userId else None
    
    context = {"student": student, "registered": registered and student is not None}
    if student:
        context["qr_image"] = qr_image_url(email_service.check_in_url(student.qr_code))
    
    return templates.TemplateResponse(
        request,
        "student_dashboard.html",
        context,
        status_code=404 if userId and not student else 200,
    )

@router.get("/check-in/{qr_code}")
def check_in_link(request: Request, qr_code: str, db: Session = Depends(get_db)):
    """Resolve a scanned QR code to the student's dashboard"""
    student = registration_service.get_student_by_qr_code(db, qr_code)
    if not student:
        return templates.TemplateResponse(
            request, "student_dashboard.html", {"student": None}, status_code=404
        )
    
    return RedirectResponse(url=f"/student-dashboard?{urlencode({'userId': student.id})}", status_code=303)
