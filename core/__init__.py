"""
List models and update handlers for the shell views.
"""

from .alert_handler import AlertHandler  # noqa: F401
from .application_list_handler import ApplicationListHandler  # noqa: F401
from .package_list_handler import PackageListHandler  # noqa: F401
from .pincode_prompt_handler import PincodePromptHandler  # noqa: F401
