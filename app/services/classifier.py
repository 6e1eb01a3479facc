"""
Query classification: decide whether a query looks like a wallet address.
"""

ADDRESS_MIN_LENGTH = 30


def is_address_like(query: str) -> bool:
    """
    Return True when the query looks like a wallet address.

    This is a length heuristic, not a validator: anything of 30+ characters with
    no space and no '?' counts, so a long unbroken phrase is misclassified as an
    address and a malformed address still passes. No base58 or checksum checks.
    """
    return len(query) >= ADDRESS_MIN_LENGTH and " " not in query and "?" not in query
