# Description: This file contains constant messages used in the application.
ROOT_MESSAGE = "Main API"
ACCESS_GRANTED_MESSAGE = "Access granted"
INVALID_REQUEST_MESSAGE = "Invalid request data"
