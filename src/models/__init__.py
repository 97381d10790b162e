from .base import Base
from .user import RoleModel, UserModel, UserRoleModel
from .academic_year import AcademicYearModel
from .major import MajorModel
from .class_model import ClassModel
from .subject import SubjectModel
from .student import StudentModel
from .teacher import TeacherModel
from .parent import ParentModel
from .schedule import ScheduleModel
from .violation import ViolationModel, ViolationTypeModel

__all__ = [
    "Base",
    "AcademicYearModel",
    "ClassModel",
    "MajorModel",
    "ParentModel",
    "RoleModel",
    "ScheduleModel",
    "StudentModel",
    "SubjectModel",
    "TeacherModel",
    "UserModel",
    "UserRoleModel",
    "ViolationModel",
    "ViolationTypeModel",
]
