"""Constants for CRMPro.

This module centralizes default values used throughout the application.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# Plans
DEFAULT_PLAN = "Başlangıç"

# Trial window granted at registration
TRIAL_DAYS = int(os.getenv("TRIAL_DAYS", "14"))

# Required request fields
REGISTER_REQUIRED_FIELDS = ("name", "email", "company")
ENTERPRISE_CONTACT_REQUIRED_FIELDS = ("name", "email", "company", "phone")
