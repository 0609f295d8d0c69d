from urllib.parse import quote

from event_registration.mail import registration_template, qr_image_url

def test_template_contains_student_details_and_qr():
    html = registration_template("Asha", "22/201", "https://example.com/qr/abc")
    
    assert "Asha" in html
    assert "22/201" in html
    assert quote("https://example.com/qr/abc", safe="") in html
    assert "https://api.qrserver.com/v1/create-qr-code/?data=https%3A%2F%2Fexample.com%2Fqr%2Fabc&size=200x200" in html

def test_template_is_deterministic():
    first = registration_template("Asha", "22/201", "https://example.com/qr/abc")
    second = registration_template("Asha", "22/201", "https://example.com/qr/abc")
    
    assert first == second

def test_template_escapes_markup():
    html = registration_template("<b>Asha</b>", "22/201", "https://example.com/qr/abc")
    
    assert "<b>Asha</b>" not in html
    assert "&lt;b&gt;Asha&lt;/b&gt;" in html

def test_qr_image_url_matches_encode_uri_component():
    url = qr_image_url("https://example.com/check-in/a b?x=1&y=(2)", size=120)
    
    assert url == (
        "https://api.qrserver.com/v1/create-qr-code/"
        "?data=https%3A%2F%2Fexample.com%2Fcheck-in%2Fa%20b%3Fx%3D1%26y%3D(2)&size=120x120"
    )
