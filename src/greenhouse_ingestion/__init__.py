"""greenhouse_ingestion package exports."""

from .auth import BasicCredentials, BearerToken, Credentials
from .client import DEFAULT_BASE_URL, IngestionClient
from .config import (
    ConflictingCredentialsError,
    IngestionConfig,
    MissingCredentialsError,
    create_client_from_env,
    load_env_config,
)
from .errors import (
    APIStatusError,
    ClientError,
    DecodeError,
    EncodeError,
    ErrorKind,
    FieldError,
    IngestionError,
    ServerError,
    TransportError,
    UnexpectedStatusError,
    is_client_error,
    is_server_error,
)
from .logging import LogfmtFormatter, setup_logging
from .models import (
    Address,
    AddressType,
    Application,
    Candidate,
    CurrentUser,
    Email,
    EmailType,
    Job,
    PhoneNumber,
    PhoneNumberType,
    PostApplication,
    PostApplicationResponse,
    PostCandidate,
    PostCandidateResponse,
    ProspectPool,
    ProspectPoolStage,
    SocialMedia,
    Website,
    WebsiteType,
)
from .oauth import authorization_url
from .params import space_delimit, to_csv

__all__ = [
    # Client
    "IngestionClient",
    "DEFAULT_BASE_URL",
    # Auth
    "BearerToken",
    "BasicCredentials",
    "Credentials",
    "authorization_url",
    # Config helpers
    "IngestionConfig",
    "MissingCredentialsError",
    "ConflictingCredentialsError",
    "load_env_config",
    "create_client_from_env",
    # Exceptions
    "ErrorKind",
    "FieldError",
    "IngestionError",
    "EncodeError",
    "TransportError",
    "DecodeError",
    "APIStatusError",
    "ClientError",
    "ServerError",
    "UnexpectedStatusError",
    "is_client_error",
    "is_server_error",
    # Logging
    "LogfmtFormatter",
    "setup_logging",
    # Params
    "to_csv",
    "space_delimit",
    # Models
    "Address",
    "AddressType",
    "Application",
    "Candidate",
    "CurrentUser",
    "Email",
    "EmailType",
    "Job",
    "PhoneNumber",
    "PhoneNumberType",
    "PostApplication",
    "PostApplicationResponse",
    "PostCandidate",
    "PostCandidateResponse",
    "ProspectPool",
    "ProspectPoolStage",
    "SocialMedia",
    "Website",
    "WebsiteType",
]
