"""Tests for the Credential Verifier and @auth_required."""

import pytest
import jwt as pyjwt
from flask import Flask, jsonify

from bloglist.auth.decorators import auth_required, verify_bearer_token
from bloglist.auth.schemas import Identity, UserSummary
from bloglist.auth.token import generate_access_token
from bloglist.config import Settings
from bloglist.exceptions import AuthenticationError, InvalidIdentity
from bloglist.main import handle_blog_list_error
from bloglist.utils import isodatetime

SECRET = "unit-test-secret"
USER = UserSummary(id="550e8400-e29b-41d4-a716-446655440000", username="testuser")


class TestVerifyBearerToken:

    def test_valid_token_resolves_identity(self):
        header = f"Bearer {generate_access_token(USER, SECRET)}"

        identity = verify_bearer_token(header, SECRET)

        assert identity == Identity(user_id=USER.id, username=USER.username)

    def test_scheme_is_case_insensitive(self):
        header = f"bearer {generate_access_token(USER, SECRET)}"

        assert verify_bearer_token(header, SECRET).user_id == USER.id

    @pytest.mark.parametrize("header", [None, ""])
    def test_missing_header(self, header):
        with pytest.raises(AuthenticationError) as exc_info:
            verify_bearer_token(header, SECRET)

        assert exc_info.value.details["code"] == "missing_auth"

    @pytest.mark.parametrize("header", ["Token abc", "Bearer", "Bearer a b", "Bearer "])
    def test_malformed_header(self, header):
        with pytest.raises(AuthenticationError) as exc_info:
            verify_bearer_token(header, SECRET)

        assert exc_info.value.details["code"] == "invalid_header"

    def test_forged_token(self):
        header = f"Bearer {generate_access_token(USER, 'wrong-secret')}"

        with pytest.raises(AuthenticationError) as exc_info:
            verify_bearer_token(header, SECRET)

        assert exc_info.value.details["code"] == "invalid_token"

    def test_expired_token(self):
        past = isodatetime.now_unix() - 60
        expired = pyjwt.encode({"sub": USER.id, "iat": past - 60, "exp": past}, SECRET, algorithm="HS256")

        with pytest.raises(AuthenticationError) as exc_info:
            verify_bearer_token(f"Bearer {expired}", SECRET)

        assert exc_info.value.details["code"] == "token_expired"

    def test_token_without_subject_is_invalid_identity(self):
        now = isodatetime.now_unix()
        anonymous = pyjwt.encode({"iat": now, "exp": now + 60}, SECRET, algorithm="HS256")

        with pytest.raises(InvalidIdentity):
            verify_bearer_token(f"Bearer {anonymous}", SECRET)

    def test_invalid_identity_is_an_authentication_error(self):
        assert issubclass(InvalidIdentity, AuthenticationError)


@pytest.fixture
def protected_client(tmp_path):
    """Bare Flask app with one @auth_required route."""
    test_app = Flask(__name__)
    test_app.config["TESTING"] = True
    test_app.extensions["bloglist"] = Settings(
        database_path=str(tmp_path / "unused.db"),
        jwt_secret_key=SECRET,
    )
    test_app.register_error_handler(AuthenticationError, handle_blog_list_error)

    @test_app.get("/protected/<item>")
    @auth_required
    def protected(item: str, identity: Identity):
        return jsonify({"item": item, "user_id": identity.user_id})

    return test_app.test_client()


class TestAuthRequired:

    def test_passes_identity_to_view(self, protected_client):
        response = protected_client.get(
            "/protected/thing",
            headers={"Authorization": f"Bearer {generate_access_token(USER, SECRET)}"}
        )

        assert response.status_code == 200
        assert response.get_json() == {"item": "thing", "user_id": USER.id}

    def test_rejects_missing_token(self, protected_client):
        response = protected_client.get("/protected/thing")

        assert response.status_code == 401
        assert response.get_json()["type"] == "AuthenticationError"

    def test_rejects_token_without_identity(self, protected_client):
        now = isodatetime.now_unix()
        anonymous = pyjwt.encode({"iat": now, "exp": now + 60}, SECRET, algorithm="HS256")

        response = protected_client.get(
            "/protected/thing",
            headers={"Authorization": f"Bearer {anonymous}"}
        )

        assert response.status_code == 401
        assert response.get_json()["type"] == "InvalidIdentity"
