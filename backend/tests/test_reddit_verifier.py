import base64

import httpx

from fairdatause.services.reddit_verifier import CredentialsMissing, RedditVerifier, Verified

from conftest import FakeReddit, make_settings


def _verifier(reddit: FakeReddit, **overrides) -> RedditVerifier:
    return RedditVerifier(make_settings(**overrides), transport=httpx.MockTransport(reddit.handler))


def test_existing_user_is_verified():
    reddit = FakeReddit()
    assert _verifier(reddit).verify("testuser") == Verified(True)


def test_token_and_lookup_requests_are_well_formed():
    reddit = FakeReddit()
    _verifier(reddit).verify("austrie")

    token_request, lookup_request = reddit.requests
    expected_auth = base64.b64encode(b"test_id:test_secret").decode("ascii")
    assert token_request.method == "POST"
    assert str(token_request.url) == "https://www.reddit.com/api/v1/access_token"
    assert token_request.headers["Authorization"] == f"Basic {expected_auth}"
    assert token_request.headers["User-Agent"] == "FairDataUse/1.0.0"
    assert token_request.content == b"grant_type=client_credentials"

    assert lookup_request.method == "GET"
    assert str(lookup_request.url) == "https://oauth.reddit.com/user/austrie/about"
    assert lookup_request.headers["Authorization"] == "Bearer test-token"
    assert lookup_request.headers["User-Agent"] == "FairDataUse/1.0.0"


def test_unknown_user_is_not_verified():
    reddit = FakeReddit()
    assert _verifier(reddit).verify("nonexistentuser") == Verified(False)


def test_token_rejection_is_not_verified():
    reddit = FakeReddit()
    reddit.token_status = 401
    assert _verifier(reddit).verify("testuser") == Verified(False)
    assert len(reddit.requests) == 1


def test_token_response_without_token_is_not_verified():
    reddit = FakeReddit()
    reddit.token_payload = {"error": "invalid_grant"}
    assert _verifier(reddit).verify("testuser") == Verified(False)


def test_network_errors_are_not_verified():
    reddit = FakeReddit()
    reddit.error = httpx.ReadTimeout("timed out")
    assert _verifier(reddit).verify("testuser") == Verified(False)

    reddit.error = httpx.ConnectError("connection refused")
    assert _verifier(reddit).verify("testuser") == Verified(False)


def test_missing_credentials_short_circuit():
    reddit = FakeReddit()

    assert _verifier(reddit, reddit_client_id=None, reddit_client_secret=None).verify("testuser") == CredentialsMissing(
        ["REDDIT_CLIENT_ID", "REDDIT_CLIENT_SECRET"]
    )
    assert _verifier(reddit, reddit_client_id="").verify("testuser") == CredentialsMissing(["REDDIT_CLIENT_ID"])
    assert _verifier(reddit, reddit_client_secret=None).verify("testuser") == CredentialsMissing(
        ["REDDIT_CLIENT_SECRET"]
    )
    assert reddit.requests == []


def test_usernames_are_escaped_in_the_lookup_path():
    reddit = FakeReddit()
    assert _verifier(reddit).verify("../admin") == Verified(False)
    assert reddit.requests[1].url.raw_path == b"/user/..%2Fadmin/about"


def test_configured_timeout_reaches_the_http_client():
    with RedditVerifier(make_settings(reddit_timeout_seconds=5.0))._client() as client:
        assert client.timeout == httpx.Timeout(5.0)

    with RedditVerifier(make_settings(reddit_timeout_seconds=2.5))._client() as client:
        assert client.timeout.connect == 2.5
        assert client.timeout.read == 2.5
