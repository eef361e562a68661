# main.py
import sys
import os
import logging
from typing import Optional
from fastapi import FastAPI
from dotenv import load_dotenv
from config import FormOptions, load_form_options
from routes import students
from services.student_form import StudentFormHandler

sys.path.append(os.path.dirname(os.path.abspath(__file__)))
load_dotenv()

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

def create_app(options: Optional[FormOptions] = None) -> FastAPI:
    if options is None:
        options = load_form_options()

    app = FastAPI(title="Student Registration Form")
    app.state.form_handler = StudentFormHandler(options)
    app.include_router(students.router)
    logger.info("Student form routes registered: /showStudentForm, /processStudentForm")
    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "8000")))
