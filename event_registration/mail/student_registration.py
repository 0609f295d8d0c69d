from html import escape
from urllib.parse import quote

QR_SERVICE_URL = "https://api.qrserver.com/v1/create-qr-code/"
LOGO_URL = "https://res.cloudinary.com/dzk5x7rjz/image/upload/v1744756604/RTU_logo_me4bn1.png"
COMMUNITY_URL = "https://chat.whatsapp.com/CeM1n0ZrxxH7owou3ywUmI?mode=ac_t"
TEAM_NAME = "Team Event Management System, RTU Kota"
QUERY_CONTACT = "9950156755"

def qr_image_url(data: str, size: int = 200) -> str:
    """Build the QR rendering URL for a payload"""
    # Same escaping as JavaScript's encodeURIComponent
    encoded = quote(data, safe="!~*'()")
    return f"{QR_SERVICE_URL}?data={encoded}&size={size}x{size}"

def registration_template(user_name: str, roll_no: str, qr_url: str) -> str:
    """Render the registration confirmation email as HTML"""
    image_url = qr_image_url(qr_url)

    return f"""
    <div style="font-family: Arial, sans-serif; background-color: #f6f9fc; text-align: center;">
      <div style="background: #ffffff; border-radius: 10px; max-width: 500px; margin: auto; padding: 20px; box-shadow: 0 4px 12px rgba(0,0,0,0.1);">
        <img src="{LOGO_URL}" alt="RTU Logo" style="width: 100px; margin-bottom: 15px;" />
        <h2 style="color: #2c3e50; margin-bottom: 5px;">Registration Successful</h2>
        <p style="color: #7f8c8d; margin-bottom: 20px;">{TEAM_NAME}</p>

        <p style="font-size: 16px; color: #2c3e50;">Hello <strong>{escape(user_name)}</strong>,</p>
        <p style="font-size: 14px; color: #555;"><strong>Roll No:</strong> {escape(roll_no)}</p>

        <p style="font-size: 14px; color: #2c3e50; margin-top: 20px;">Please present the QR code below at event check-in:</p>
        <div style="margin: 20px 0;">
          <img src="{image_url}" alt="QR Code" style="width: 180px; height: 180px; border: 1px solid #ddd; border-radius: 8px;" />
        </div>

        <div style="margin: 20px 0;">
          <a href="{COMMUNITY_URL}" target="_blank" style="display: inline-block; padding: 12px 20px; background-color: #25D366; color: white; text-decoration: none; border-radius: 6px; font-size: 14px; font-weight: bold; margin-top: 10px;">
            Join WhatsApp Group
          </a>
        </div>

        <hr style="margin: 30px 0; border: none; border-top: 1px solid #eee;" />

        <p style="font-size: 13px; color: #888;">Thank you for registering!</p>
        <p style="font-size: 13px; font-weight: bold; color: #2c3e50;">{TEAM_NAME}</p>
        <p style="font-size: 13px; font-weight: bold; color: #2c3e50;">For Any Query: {QUERY_CONTACT}</p>
      </div>
    </div>
    """
