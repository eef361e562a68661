# models/student.py
from pydantic import BaseModel
from typing import List

class Student(BaseModel):
    name: str = ""
    email: str = ""
    country: str = ""
    favoriteLanguage: str = ""
    favoriteOperatingSystem: str = ""

    @classmethod
    def field_names(cls) -> List[str]:
        return list(cls.model_fields)
