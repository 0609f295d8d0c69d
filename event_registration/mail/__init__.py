from .student_registration import registration_template, qr_image_url

__all__ = ["registration_template", "qr_image_url"]
