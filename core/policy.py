# =============================================================================
# core/policy.py  —  Address-Level Disambiguation Policy
# =============================================================================
#
# Weather is only fetched for a location resolved to municipality level (2)
# or finer.  A prefecture-level match (1) means the user must be asked to
# narrow it down first.
#
# The agent's instructions state this rule in prose; the same rule lives
# here as plain code so the municipality tool can hand the model an explicit
# requiresClarification flag and a ready-made question.
# =============================================================================

from core.models import GeocodeResult

MIN_ADDRESS_LEVEL = 2


def requires_clarification(address_level: int) -> bool:
    """True when the match is coarser than a municipality."""
    return address_level < MIN_ADDRESS_LEVEL


def clarification_question(address: str) -> str:
    """The question to ask when ``address`` is too coarse."""
    return (
        f"Which municipality in {address} would you like the weather for? "
        f"(e.g. a city, ward, town or village)"
    )


def evaluate(result: GeocodeResult) -> dict:
    """Tool-facing payload: the geocode result plus the policy verdict."""
    payload = result.to_dict()
    payload["requiresClarification"] = requires_clarification(result.address_level)
    if payload["requiresClarification"]:
        payload["clarificationQuestion"] = clarification_question(result.address)
    return payload
