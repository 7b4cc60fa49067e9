"""Application-wide constants.

This module defines constants used throughout the application
to avoid magic numbers and ensure consistency.
"""

# Permission resources
DEVELOPERS_RESOURCE = "Developers"
ADMIN_ACCESS_PERMISSION = "Admin:access"

# String field lengths
MAX_EXTERNAL_ID_LENGTH = 128
MAX_PERMISSION_RESOURCE_LENGTH = 100
MAX_PERMISSION_RESOURCE_ID_LENGTH = 100
MAX_NAME_LENGTH = 255
MAX_EMAIL_LENGTH = 255
MAX_URL_LENGTH = 2048
MAX_TITLE_LENGTH = 255
MAX_LOCATION_LENGTH = 255
MAX_GREETING_LENGTH = 350
MAX_PROFILE_HEADING_LENGTH = 50
MIN_PROFILE_TEXT_LENGTH = 2

# Developer profile defaults
DEFAULT_DEVELOPER_NAME = "Default Developer"
DEFAULT_DEVELOPER_EMAIL = "default@example.com"
DEFAULT_PROJECT_IMAGE_URL = "/default.jpeg"
DEFAULT_GREETING_TITLE = "Welcome!"
DEFAULT_GREETING_MESSAGE = "I'm a software developer with passion for technology."
DEFAULT_MISSION_TITLE = "My Mission"
DEFAULT_MISSION_DESCRIPTION = "To create efficient and scalable software solutions."
DEFAULT_IT_EXPERIENCE_YEARS = 5
DEFAULT_WORK_EXPERIENCE_YEARS = 7

# Skill proficiency range (-1 means "not rated")
MIN_PROFICIENCY_LEVEL = -1
MAX_PROFICIENCY_LEVEL = 100

# Secret key requirements
MIN_SECRET_KEY_LENGTH = 32
DEFAULT_INSECURE_SECRET = "change-me-in-production"
