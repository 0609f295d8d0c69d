from pydantic_settings import BaseSettings
from typing import Optional

class Settings(BaseSettings):
    # API Settings
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Event Registration API"
    
    # Database - Using SQLite for development
    DATABASE_URL: str = "sqlite:///./event_registration.db"
    
    # Public URL used to build check-in links encoded into QR codes
    PUBLIC_BASE_URL: str = "http://localhost:8000"
    
    # Event attached to registrations that do not name one
    DEFAULT_EVENT_NAME: Optional[str] = None
    
    # Email
    EMAIL_ENABLED: bool = False
    SMTP_HOST: str = "localhost"
    SMTP_PORT: int = 587
    SMTP_USERNAME: Optional[str] = None
    SMTP_PASSWORD: Optional[str] = None
    SMTP_USE_TLS: bool = True
    EMAIL_FROM: str = "Event Management System <no-reply@localhost>"
    
    class Config:
        env_file = ".env"

settings = Settings() 
