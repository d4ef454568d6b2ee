import jwt

from jobly.config import settings
from jobly.utils.security import create_token, decode_token, hash_password, verify_password


class TestPasswords:
    def test_round_trip(self):
        stored = hash_password("hunter22")
        assert verify_password(stored, "hunter22")
        assert not verify_password(stored, "hunter23")

    def test_garbage_hash(self):
        assert not verify_password("not-a-hash", "anything")


class TestTokens:
    def test_create_and_decode(self):
        token = create_token({"username": "test", "isAdmin": False})
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
        assert payload["sub"] == "test"
        assert payload["isAdmin"] is False
        assert payload["exp"] > payload["iat"]
        assert decode_token(token) == {"username": "test", "isAdmin": False}

    def test_admin_flag(self):
        token = create_token({"username": "boss", "isAdmin": True})
        assert decode_token(token)["isAdmin"] is True

    def test_wrong_secret(self):
        other_secret = "some-other-secret-that-is-long-enough-0123"
        token = jwt.encode({"sub": "x", "exp": 9999999999}, other_secret, algorithm="HS256")
        assert decode_token(token) is None

    def test_expired(self):
        token = jwt.encode({"sub": "x", "exp": 1}, settings.secret_key, algorithm=settings.jwt_algorithm)
        assert decode_token(token) is None

    def test_garbage(self):
        assert decode_token("not.a.token") is None
