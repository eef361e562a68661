# routes/students.py
from fastapi import APIRouter, HTTPException, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from starlette.datastructures import FormData, UploadFile
from models.student import Student
from models.view import ViewResult
from services.student_form import StudentFormHandler
import os
import logging

logger = logging.getLogger(__name__)

TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "templates")
templates = Jinja2Templates(directory=TEMPLATES_DIR)

router = APIRouter(tags=["students"])

def get_form_handler(request: Request) -> StudentFormHandler:
    return request.app.state.form_handler

def bind_student(form: FormData) -> Student:
    """Copy submitted fields onto a Student by name; unknown fields are ignored."""
    values = {}
    for field in Student.field_names():
        if field not in form:
            continue
        value = form.get(field)
        if isinstance(value, UploadFile):
            logger.warning(f"File upload submitted for text field: {field}")
            raise HTTPException(status_code=400, detail=f"Field '{field}' must be text, not a file")
        values[field] = value
    return Student(**values)

def render(request: Request, result: ViewResult) -> HTMLResponse:
    return templates.TemplateResponse(request, f"{result.view_name}.html", dict(result.context))

async def show_student_form(request: Request, handler: StudentFormHandler = Depends(get_form_handler)):
    result = handler.show_form()
    logger.info(f"Rendering view: {result.view_name}")
    return render(request, result)

async def process_student_form(request: Request, handler: StudentFormHandler = Depends(get_form_handler)):
    student = bind_student(await request.form())
    result = handler.process_submission(student)
    logger.info(f"Rendering view: {result.view_name}")
    return render(request, result)

# (method, path, endpoint)
ROUTES = [
    ("GET", "/showStudentForm", show_student_form),
    ("POST", "/processStudentForm", process_student_form),
]

for method, path, endpoint in ROUTES:
    router.add_api_route(path, endpoint, methods=[method], response_class=HTMLResponse)
