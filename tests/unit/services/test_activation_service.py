"""Tests for ActivationService."""

import pytest

from userhub.constants import AccountStatus
from userhub.models import User
from userhub.services.activation_service import ActivationService
from userhub.services.exceptions import InvalidTokenError


def test_activates_pending_user(db, add_user):
    pending = add_user(active=False, activation_token="abcdefghijklmnop")

    ActivationService(db).activate("abcdefghijklmnop")

    user = db.query(User).filter(User.id == pending.id).one()
    assert user.status == AccountStatus.ACTIVE
    assert user.activation_token is None


def test_token_works_only_once(db, add_user):
    add_user(active=False, activation_token="abcdefghijklmnop")
    service = ActivationService(db)
    service.activate("abcdefghijklmnop")

    with pytest.raises(InvalidTokenError):
        service.activate("abcdefghijklmnop")


@pytest.mark.parametrize("token", ["", None, "unknown-token"])
def test_invalid_tokens_are_rejected(db, token):
    with pytest.raises(InvalidTokenError):
        ActivationService(db).activate(token)
