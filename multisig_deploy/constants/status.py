from enum import Enum


class ProcessStatus(str, Enum):
    """Status of a wallet deployment run"""

    NOT_STARTED = "not_started"
    LOADING_CONFIG = "loading_config"
    VALIDATING_CONFIG = "validating_config"
    DEPLOYING = "deploying"
    COMPLETED = "completed"
    FAILED = "failed"


class ValidationStatus(str, Enum):
    """Terminal outcome of configuration validation"""

    VALID = "valid"
    REJECTED = "rejected"
