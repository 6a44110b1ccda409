from badgeworks.models.badge import Badge
from badgeworks.models.person import Person
from badgeworks.models.project import Project
from badgeworks.models.award import Award

__all__ = ["Badge", "Person", "Project", "Award"]
