def register(client, payload):
    return client.post("/api/v1/students/register", json=payload)

def test_register_returns_user_id(client, payload, mailer):
    response = register(client, payload)
    
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert set(body) == {"success", "userId"}
    assert mailer.sent == ["asha.verma@gmail.com"]

def test_register_same_email_twice_fails(client, payload):
    register(client, payload)
    
    response = register(client, payload)
    
    assert response.status_code == 200
    assert response.json() == {
        "success": False,
        "error": "A student with this email is already registered",
    }

def test_invalid_payload_is_rejected(client, payload):
    response = register(client, {**payload, "phoneNumber": "12345"})
    
    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail[0]["loc"] == ["body", "phoneNumber"]
    assert "Phone number must be at least 10 digits" in detail[0]["msg"]

def test_get_student(client, payload):
    user_id = register(client, {**payload, "eventName": "Hackathon"}).json()["userId"]
    
    response = client.get(f"/api/v1/students/{user_id}")
    
    assert response.status_code == 200
    student = response.json()
    assert student["id"] == user_id
    assert student["email"] == "asha.verma@gmail.com"
    assert student["rollNumber"] == "22/201"
    assert student["universityRollNo"] == "22EUCCS001"
    assert student["eventName"] == ["Hackathon"]
    assert student["attendance"] == []
    assert student["review"] is None
    assert student["comment"] == ""
    assert student["roundOneQualified"] is False
    assert student["qrCode"]

def test_get_unknown_student(client):
    response = client.get("/api/v1/students/unknown")
    
    assert response.status_code == 404
    assert response.json()["detail"] == "Student not found"

def test_check_in_lookup(client, payload):
    user_id = register(client, payload).json()["userId"]
    qr_code = client.get(f"/api/v1/students/{user_id}").json()["qrCode"]
    
    response = client.get(f"/api/v1/students/check-in/{qr_code}")
    
    assert response.status_code == 200
    assert response.json()["id"] == user_id

def test_check_in_lookup_unknown_token(client):
    response = client.get("/api/v1/students/check-in/not-a-token")
    
    assert response.status_code == 404

def test_health(client):
    response = client.get("/health")
    
    assert response.json() == {"status": "healthy"}

def test_mail_failure_does_not_fail_registration(client, payload, monkeypatch):
    from event_registration.services.registration_service import registration_service
    
    class BrokenMailer:
        def send_registration_email(self, student):
            raise RuntimeError("relay unavailable")
    
    monkeypatch.setattr(registration_service, "mailer", BrokenMailer())
    
    response = register(client, payload)
    
    assert response.status_code == 200
    assert response.json()["success"] is True
    assert client.get(f"/api/v1/students/{response.json()['userId']}").status_code == 200
