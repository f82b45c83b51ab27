from fastapi import status


class HabitTrackerError(Exception):
    """Base error of the domain layer, translated to an HTTP answer by the app."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(HabitTrackerError):
    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(HabitTrackerError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(HabitTrackerError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(HabitTrackerError):
    status_code = status.HTTP_409_CONFLICT


MissingUserDataException = ValidationError("Missing data")

UserAlreadyExistsException = ConflictError("User already exists")

InvalidCredentialsException = AuthError("Invalid credentials")

InvalidHabitDataException = ValidationError("Invalid habit data")

HabitNotFoundException = NotFoundError("Habit not found")

HabitAlreadyCompletedException = ConflictError("Already completed today")
