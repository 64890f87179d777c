import pytest

from account_api.services.password_service import hash_password, verify_password


def test_hash_is_not_plaintext_and_verifies():
    digest = hash_password("secret1")
    assert digest != "secret1"
    assert verify_password("secret1", digest) is True
    assert verify_password("secret2", digest) is False


def test_each_hash_uses_a_fresh_salt():
    assert hash_password("secret1") != hash_password("secret1")


def test_digest_embeds_cost_factor():
    digest = hash_password("secret1", rounds=10)
    assert digest.startswith("$2b$10$")
    assert verify_password("secret1", digest)


def test_malformed_digest_raises():
    with pytest.raises(ValueError):
        verify_password("secret1", "not-a-bcrypt-digest")
