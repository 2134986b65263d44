from rest_framework import status
from rest_framework.exceptions import APIException


class LayoutError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid dashboard layout move.'
    default_code = 'invalid_layout_move'


class LayoutSyncError(APIException):
    """Stored positions still disagree with the intended order after retrying."""
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'Dashboard layout could not be saved; the stored layout was kept.'
    default_code = 'layout_out_of_sync'

    def __init__(self, mismatched=None, detail=None, code=None):
        super().__init__(detail=detail, code=code)
        self.mismatched = mismatched or {}
