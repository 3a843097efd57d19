"""Errors surfaced to the user by the generator actions.

Each error carries a short ``title`` and a ``message`` suitable for showing
directly in the UI.
"""


class QRAppError(Exception):
    title = "Error"
    default_message = "Something went wrong."

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingField(QRAppError):
    default_message = "Please fill all required fields."


class PermissionDenied(QRAppError):
    title = "Permission Denied"
    default_message = "You need to allow storage access to save the QR code."


class WriteFailed(QRAppError):
    default_message = "Unable to save the QR code."


class DispatchFailed(QRAppError):
    default_message = "Unable to open the link."
