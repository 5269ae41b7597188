MEMBER_STATUSES = {
    "active": "Active",
    "inactive": "Inactive",
}

NATIONAL_ID_PATTERN = r"^[0-9]{7,8}$"

FULL_NAME_MAX_LENGTH = 200
EMAIL_MAX_LENGTH = 100
PHONE_MIN_LENGTH = 10
PHONE_MAX_LENGTH = 20

# --------------------------------
# USER FACING MESSAGES
# --------------------------------

MSG_REQUIRED_FIELDS = "Please fill in all required fields."
MSG_INVALID_NAME = "Full name must be 200 characters or fewer."
MSG_INVALID_NATIONAL_ID = "Please enter a valid national ID number (7-8 digits only)."
MSG_MISSING_NATIONAL_ID = "Please enter your ID number."
MSG_INVALID_EMAIL = "Please enter a valid email address."
MSG_INVALID_PHONE = "Please enter a valid phone number."

MSG_EMAIL_TAKEN = "This email address is already registered."
MSG_NATIONAL_ID_TAKEN = (
    "This ID number is already registered. Each ID number can only be used once."
)

MSG_DATABASE_ERROR = "Database error occurred. Please try again."
MSG_NOT_REGISTERED = (
    "No membership found for this ID number. You may need to register first."
)
MSG_MEMBER_NOT_FOUND = "Member not found."
MSG_INVALID_MEMBER_ID = "Invalid member ID."
MSG_NO_VALID_IDS = "No valid member IDs provided."

MSG_ADMIN_KEY_REQUIRED = "Administrator credentials are required."
MSG_PERMISSION_DENIED = "You do not have permission to perform this action."
MSG_SECURITY_CHECK_FAILED = "Security check failed."

# --------------------------------
# PUBLIC LIST ORDERING
# --------------------------------

PUBLIC_LIST_ORDER_COLUMNS = ("registered_at", "full_name", "member_number")
PUBLIC_LIST_DEFAULT_LIMIT = 10
