"""
Response Template Mutator

Writes the transaction id and scenario status codes into a parsed response
template. Elements are found by local name only, so the template's
namespace prefixes and bindings do not matter.
"""

from typing import Mapping, Optional
import logging

from lxml import etree

from .errors import PathEvaluationError
from .scenarios import ResponseConfig

logger = logging.getLogger(__name__)


def local_path(*names: str) -> str:
    """Build a namespace-agnostic XPath from element local names."""
    steps = "/".join(f"*[local-name()='{name}']" for name in names)
    return f"//{steps}"


TRANSACTION_ID = "transaction_id"
ACCOUNT_STATUS = "account_status"
SWITCHING_STATUS = "switching_status"
MODULUS_CHECK_STATUS = "modulus_check_status"

TARGET_PATHS: dict[str, str] = {
    TRANSACTION_ID: local_path("ValidatePaymentArrangementResponse", "TransactionId"),
    ACCOUNT_STATUS: local_path("AccountingUnits", "Status", "Code"),
    SWITCHING_STATUS: local_path("SwitchingStatus", "Code"),
    MODULUS_CHECK_STATUS: local_path("ModulusCheckStatus", "Code"),
}


def find_target(document, xpath: str):
    """First element selected by xpath, or None when the template lacks it."""
    try:
        nodes = document.xpath(xpath)
    except etree.XPathError as e:
        raise PathEvaluationError(f"Failed to evaluate {xpath!r}: {e}") from e

    if not isinstance(nodes, list):
        raise PathEvaluationError(f"Expression {xpath!r} does not select elements")
    if not nodes:
        return None

    node = nodes[0]
    # text(), attribute, comment and PI results have no writable element text
    if not isinstance(node, etree._Element) or not isinstance(node.tag, str):
        raise PathEvaluationError(f"Expression {xpath!r} selected a non-element node")
    return node


def _set_text(document, xpath: str, value: str) -> bool:
    node = find_target(document, xpath)
    if node is None:
        logger.debug(f"Template has no node for {xpath}; skipping")
        return False
    node.text = value
    return True


def apply_response_config(
    document,
    config: Optional[ResponseConfig],
    transaction_id: str,
    paths: Mapping[str, str] = TARGET_PATHS,
) -> None:
    """
    Mutate the response document in place.

    The transaction id is always written. Status codes are written only when
    a scenario matched. Targets missing from the template are skipped.

    Raises:
        PathEvaluationError: if a path expression cannot be evaluated
    """
    _set_text(document, paths[TRANSACTION_ID], transaction_id)

    if config is None:
        return

    _set_text(document, paths[ACCOUNT_STATUS], config.account_status.value)
    _set_text(document, paths[SWITCHING_STATUS], config.switching_status.value)
    _set_text(document, paths[MODULUS_CHECK_STATUS], config.modulus_check_status.value)
