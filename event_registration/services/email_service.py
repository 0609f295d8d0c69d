import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
import logging

from ..core.config import settings
from ..mail import registration_template
from ..models.student import Student

logger = logging.getLogger(__name__)

class EmailService:
    """SMTP delivery for registration confirmations"""
    
    def __init__(self, config=settings):
        self.config = config
    
    def check_in_url(self, qr_code: str) -> str:
        """Payload encoded into the student's QR code"""
        return f"{self.config.PUBLIC_BASE_URL.rstrip('/')}/check-in/{qr_code}"
    
    def build_registration_message(self, student: Student) -> MIMEMultipart:
        html = registration_template(
            student.name,
            student.roll_number,
            self.check_in_url(student.qr_code)
        )
        
        message = MIMEMultipart("alternative")
        message["Subject"] = "Registration Successful"
        message["From"] = self.config.EMAIL_FROM
        message["To"] = student.email
        message.attach(MIMEText(html, "html", "utf-8"))
        return message
    
    def send_registration_email(self, student: Student) -> bool:
        """Send the confirmation email, returning whether it was delivered"""
        if not self.config.EMAIL_ENABLED:
            logger.info(f"Email disabled, skipping confirmation for: {student.email}")
            return False
        
        try:
            message = self.build_registration_message(student)
            with smtplib.SMTP(self.config.SMTP_HOST, self.config.SMTP_PORT, timeout=30) as smtp:
                if self.config.SMTP_USE_TLS:
                    smtp.starttls()
                if self.config.SMTP_USERNAME:
                    smtp.login(self.config.SMTP_USERNAME, self.config.SMTP_PASSWORD or "")
                smtp.send_message(message)
            
            logger.info(f"Registration email sent to: {student.email}")
            return True
        except Exception as e:
            logger.error(f"Failed to send registration email to {student.email}: {str(e)}")
            return False

email_service = EmailService()
