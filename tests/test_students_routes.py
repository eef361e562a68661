from fastapi.testclient import TestClient
from starlette.datastructures import FormData
from config import FormOptions
from main import create_app
from routes.students import ROUTES, bind_student

def test_routing_table():
    assert [(method, path) for method, path, _ in ROUTES] == [
        ("GET", "/showStudentForm"),
        ("POST", "/processStudentForm"),
    ]

def test_bind_student_maps_fields_by_name():
    student = bind_student(FormData([("name", "Bob"), ("favoriteLanguage", "Go"), ("age", "20")]))
    assert student.name == "Bob"
    assert student.favoriteLanguage == "Go"
    assert student.country == ""
    assert not hasattr(student, "age")

def test_show_form_renders_options_in_order(client):
    response = client.get("/showStudentForm")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    html = response.text
    assert html.index('value="USA"') < html.index('value="Canada"')
    assert html.index('value="Java"') < html.index('value="Go"')
    assert html.index('value="Linux"') < html.index('value="Windows"')
    assert 'action="/processStudentForm"' in html

def test_show_form_with_no_operating_systems():
    client = TestClient(create_app(FormOptions.from_lists(["USA"], ["Go"], [])))
    response = client.get("/showStudentForm")
    assert response.status_code == 200
    assert 'name="favoriteOperatingSystem"' not in response.text

def test_process_form_echoes_submission(client):
    response = client.post("/processStudentForm", data={"name": "Alice", "country": "Canada"})
    assert response.status_code == 200
    html = response.text
    assert '<span id="name">Alice</span>' in html
    assert '<span id="country">Canada</span>' in html
    assert '<span id="email"></span>' in html
    assert '<span id="favoriteLanguage"></span>' in html

def test_process_form_escapes_html(client):
    response = client.post("/processStudentForm", data={"name": "<b>Eve</b>"})
    assert "&lt;b&gt;Eve&lt;/b&gt;" in response.text

def test_process_form_ignores_unknown_fields(client):
    response = client.post("/processStudentForm", data={"name": "Carol", "age": "20"})
    assert response.status_code == 200
    assert '<span id="name">Carol</span>' in response.text

def test_process_form_rejects_file_in_text_field(client):
    response = client.post(
        "/processStudentForm",
        data={"country": "USA"},
        files={"name": ("name.txt", b"Mallory", "text/plain")},
    )
    assert response.status_code == 400
    assert "name" in response.json()["detail"]

def test_get_on_submission_route_not_allowed(client):
    assert client.get("/processStudentForm").status_code == 405
