"""Infrastructure modules for the client locator.

Centralized infrastructure components:
- configuration: Settings management (Settings)
- logging: Structured logging (configure_logging, get_module_logger)
- operations: Operation results (OperationResult, OperationStatus)
- clients: External data sources (MaxMindDatabase)
- services: Dependency injection services (SettingsDep, ClientLocatorDep, get_settings)
"""

# Configuration
from infrastructure.configuration import Settings

# Operations
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    # Configuration
    "Settings",
    # Operations
    "OperationResult",
    "OperationStatus",
]
