"""
Service modules for MTN MoMo operations.
"""

from .auth_service import AuthService, get_token
from .collection_service import CollectionService
from .disbursement_service import DisbursementService

__all__ = [
    'AuthService',
    'CollectionService',
    'DisbursementService',
    'get_token',
]
