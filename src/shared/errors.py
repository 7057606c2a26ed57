"""
Errors raised by the recommendation service.
"""


class TalentTrekError(Exception):
    """Base class for service-level failures."""


class UserNotFoundError(TalentTrekError):
    def __init__(self, user_id: str):
        super().__init__(f"User not found: {user_id}")
        self.user_id = user_id


class JobNotFoundError(TalentTrekError):
    def __init__(self, job_id: str):
        super().__init__(f"Job not found: {job_id}")
        self.job_id = job_id


class AlreadyAppliedError(TalentTrekError):
    """The user already has an application for this job."""

    def __init__(self, job_id: str, user_id: str):
        super().__init__("Already applied to this job.")
        self.job_id = job_id
        self.user_id = user_id
