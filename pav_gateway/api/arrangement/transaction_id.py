from uuid import uuid4

from .constants import TRANSACTION_ID_PREFIX, TRANSACTION_ID_SUFFIX


def generate_transaction_id() -> str:
    """Opaque per-response transaction id, e.g. ``3flS<32 hex>h``."""
    return f"{TRANSACTION_ID_PREFIX}{uuid4().hex}{TRANSACTION_ID_SUFFIX}"
