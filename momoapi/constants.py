"""
Constants and enums for MTN MoMo API operations.
"""

from enum import Enum


class Product(str, Enum):
    """API products with their own credentials and token endpoint."""
    COLLECTIONS = "collections"
    DISBURSEMENTS = "disbursements"


class PartyIdType(str, Enum):
    """Account identifier types accepted for payers and payees."""
    MSISDN = "MSISDN"
    EMAIL = "EMAIL"
    PARTY_CODE = "PARTY_CODE"


class TransactionStatus(str, Enum):
    """Statuses reported by transaction status lookups."""
    PENDING = "PENDING"
    SUCCESSFUL = "SUCCESSFUL"
    FAILED = "FAILED"


# API Endpoints
class APIEndpoints:
    """MoMo API endpoints."""
    COLLECTION_TOKEN = "/collection/token/"
    DISBURSEMENT_TOKEN = "/disbursement/token/"

    # Collection endpoints
    REQUEST_TO_PAY = "/collection/v1_0/requesttopay"
    REQUEST_TO_PAY_STATUS = "/collection/v1_0/requesttopay/{referenceId}"
    REQUEST_TO_WITHDRAW = "/collection/v1_0/requesttowithdraw"
    REQUEST_TO_WITHDRAW_STATUS = "/collection/v1_0/requesttowithdraw/{referenceId}"
    COLLECTION_BALANCE = "/collection/v1_0/account/balance"
    COLLECTION_USER_INFO = "/collection/v1_0/accountholder/{idType}/{id}/basicuserinfo"
    COLLECTION_ACCOUNT_ACTIVE = "/collection/v1_0/accountholder/{idType}/{id}/active"

    # Disbursement endpoints
    TRANSFER = "/disbursement/v1_0/transfer"
    TRANSFER_STATUS = "/disbursement/v1_0/transfer/{referenceId}"
    DEPOSIT = "/disbursement/v1_0/deposit"
    DEPOSIT_STATUS = "/disbursement/v1_0/deposit/{referenceId}"
    DISBURSEMENT_BALANCE = "/disbursement/v1_0/account/balance"
    DISBURSEMENT_USER_INFO = "/disbursement/v1_0/accountholder/{idType}/{id}/basicuserinfo"
    DISBURSEMENT_ACCOUNT_ACTIVE = "/disbursement/v1_0/accountholder/{idType}/{id}/active"


TOKEN_ENDPOINTS = {
    Product.COLLECTIONS: APIEndpoints.COLLECTION_TOKEN,
    Product.DISBURSEMENTS: APIEndpoints.DISBURSEMENT_TOKEN,
}


# Header names
HEADER_AUTHORIZATION = "Authorization"
HEADER_SUBSCRIPTION_KEY = "Ocp-Apim-Subscription-Key"
HEADER_REFERENCE_ID = "X-Reference-Id"
HEADER_TARGET_ENVIRONMENT = "X-Target-Environment"

# Base URLs
API_HOST = "momodeveloper.mtn.com"
SANDBOX_BASE_URL = f"https://sandbox.{API_HOST}"
PRODUCTION_BASE_URL = f"https://{API_HOST}"

# Expected statuses
MUTATION_SUCCESS_STATUS = 202
READ_SUCCESS_STATUS = 200
TOKEN_SUCCESS_STATUS = 200

# Validation settings
MAX_MESSAGE_BYTES = 160
MESSAGE_FIELDS = ("payerMessage", "payeeNote")

# Default settings
SANDBOX_ENVIRONMENT = "sandbox"
DEFAULT_TARGET_ENVIRONMENT = SANDBOX_ENVIRONMENT
DEFAULT_ID_TYPE = PartyIdType.MSISDN.value
DEFAULT_TIMEOUT = 30  # seconds
