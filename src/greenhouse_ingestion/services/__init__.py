"""Resource services: one request/response cycle per method."""

from .applications import ApplicationService
from .candidates import CandidateService
from .jobs import JobService
from .prospect_pools import ProspectPoolService
from .users import UserService

__all__ = [
    "ApplicationService",
    "CandidateService",
    "JobService",
    "ProspectPoolService",
    "UserService",
]
