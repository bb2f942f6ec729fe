"""
Use cases package.

This package contains the business logic use cases that orchestrate
the application services and repositories.
"""

from .authenticate_profile import AuthenticateProfileRequest, AuthenticateProfileUseCase
from .complete_job import CompleteJobRequest, CompleteJobUseCase
from .create_contract import CreateContractRequest, CreateContractUseCase
from .create_job import CreateJobRequest, CreateJobResult, CreateJobUseCase
from .create_profile import CreateProfileRequest, CreateProfileResult, CreateProfileUseCase
from .get_contract import GetContractUseCase, ListContractsUseCase
from .get_job import GetJobUseCase, ListJobsUseCase
from .get_ledger import GetLedgerUseCase
from .get_profile import GetProfileUseCase, ListProfilesUseCase
from .modify_job import ModifyJobRequest, ModifyJobResult, ModifyJobUseCase
from .modify_profile import ModifyProfileRequest, ModifyProfileUseCase
from .review_job import ReviewJobRequest, ReviewJobUseCase
from .terminate_contract import TerminateContractRequest, TerminateContractUseCase

__all__ = [
    "AuthenticateProfileRequest",
    "AuthenticateProfileUseCase",
    "CompleteJobRequest",
    "CompleteJobUseCase",
    "CreateContractRequest",
    "CreateContractUseCase",
    "CreateJobRequest",
    "CreateJobResult",
    "CreateJobUseCase",
    "CreateProfileRequest",
    "CreateProfileResult",
    "CreateProfileUseCase",
    "GetContractUseCase",
    "GetJobUseCase",
    "GetLedgerUseCase",
    "GetProfileUseCase",
    "ListContractsUseCase",
    "ListJobsUseCase",
    "ListProfilesUseCase",
    "ModifyJobRequest",
    "ModifyJobResult",
    "ModifyJobUseCase",
    "ModifyProfileRequest",
    "ModifyProfileUseCase",
    "ReviewJobRequest",
    "ReviewJobUseCase",
    "TerminateContractRequest",
    "TerminateContractUseCase",
]
