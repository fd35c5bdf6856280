"""
Tests for the doctor and patient listings.
"""


def test_listings_are_empty_without_users(client):
    assert client.get("/api/v1/user/doctors").json() == {"success": True, "doctors": []}
    assert client.get("/api/v1/user/patients").json() == {"success": True, "user": []}


def test_listings_split_users_by_role(client, patient_data, doctor_data, uploads):
    client.post("/api/v1/user/patient/register", json=patient_data)
    client.post(
        "/api/v1/user/doctor/addnew",
        data=doctor_data,
        files={"docAvatar": ("avatar.webp", b"RIFFfake", "image/webp")},
    )
    admin = dict(patient_data, email="admin@example.com", phone="03009999999")
    client.post("/api/v1/user/admin/addnew", json=admin)

    doctors = client.get("/api/v1/user/doctors")
    patients = client.get("/api/v1/user/patients")

    assert doctors.status_code == 200
    assert [d["email"] for d in doctors.json()["doctors"]] == ["house@example.com"]
    assert patients.status_code == 200
    assert [p["email"] for p in patients.json()["user"]] == ["ada@example.com"]
    for record in doctors.json()["doctors"] + patients.json()["user"]:
        assert "password" not in record
