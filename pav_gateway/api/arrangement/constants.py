"""
ValidatePaymentArrangement Constants

Status code catalogues, transaction id format and XML namespaces used by
the payment arrangement validation stub.
"""

from enum import Enum

# =============================================================================
# Namespaces
# =============================================================================

PAV_NS = "urn:pav:paymentarrangement:validation:v1"

# =============================================================================
# Transaction Id Format
# =============================================================================

# "3flS" + 32 lowercase hex characters + "h" = 37 characters
TRANSACTION_ID_PREFIX = "3flS"
TRANSACTION_ID_SUFFIX = "h"
TRANSACTION_ID_LENGTH = 37

# =============================================================================
# Identifier Scheme Codes
# =============================================================================

CODE_IBAN = "IBAN"    # International form, 22 characters for GB
CODE_BBAN = "BBAN"    # Domestic account number, 8 digits

# =============================================================================
# Status Codes
# =============================================================================


class AccountStatus(str, Enum):
    """Accounting unit status written into the response."""
    DOMESTIC_RESTRICTED = "DOMESTIC_RESTRICTED"
    DOMESTIC_UNRESTRICTED = "DOMESTIC_UNRESTRICTED"


class SwitchingStatus(str, Enum):
    """Current account switch status of the accounting unit."""
    SWITCHED = "SWITCHED"
    NOT_SWITCHED = "NOT_SWITCHED"


class ModulusCheckStatus(str, Enum):
    """Outcome of the (pre-baked) modulus check."""
    PASS = "PASS"
    FAILED = "FAILED"
