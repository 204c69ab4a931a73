"""Application constants to avoid magic strings."""


class AccountStatus:
    """Account lifecycle states.

    Accounts are created PENDING and move to ACTIVE exactly once.
    """

    PENDING = "pending"
    ACTIVE = "active"


API_PREFIX = "/api/1.0"
