# services/student_form.py
import logging
from config import FormOptions
from models.student import Student
from models.view import ViewResult, view

logger = logging.getLogger(__name__)

STUDENT_FORM_VIEW = "student-form"
STUDENT_CONFIRMATION_VIEW = "student-confirmation"

class StudentFormHandler:
    """Builds the view for each step of the registration form.

    Holds only the read-only option lists, so a single instance is shared by
    all requests.
    """

    def __init__(self, options: FormOptions):
        self.options = options

    def show_form(self) -> ViewResult:
        return view(
            STUDENT_FORM_VIEW,
            student=Student(),
            countries=self.options.get_countries(),
            languages=self.options.get_languages(),
            operatingSystems=self.options.get_operating_systems(),
        )

    def process_submission(self, student: Student) -> ViewResult:
        logger.info(f"Student form submitted by: {student.name!r}")
        return view(STUDENT_CONFIRMATION_VIEW, student=student)
