import pytest

from gh_update_checker.core.errors import InvalidRepositoryURL
from gh_update_checker.core.repo_url import to_api_url
from gh_update_checker.models import ErrorKind

API = "https://api.github.com/repos/o/r/releases/latest"


def test_web_url():
    assert to_api_url("https://github.com/o/r") == API


def test_git_suffix_stripped():
    assert to_api_url("https://github.com/o/r.git") == API


def test_api_url_passthrough():
    assert to_api_url(API) == API
    # no structural validation for API-host URLs
    assert to_api_url("https://api.github.com/whatever") == "https://api.github.com/whatever"


@pytest.mark.parametrize(
    "ref",
    ["https://github.com/o/r", "https://github.com/o/r.git", "https://github.com/nlohmann/json"],
)
def test_idempotent(ref):
    once = to_api_url(ref)
    assert to_api_url(once) == once


def test_extra_path_segments_ignored():
    assert to_api_url("https://github.com/o/r/tree/main") == API


def test_query_and_fragment_not_part_of_repo():
    assert to_api_url("https://github.com/o/r?tab=readme") == API
    assert to_api_url("https://github.com/o/r.git#main") == API


@pytest.mark.parametrize(
    "ref",
    [
        "https://not-github.example/o/r",
        "http://github.com/o/r",
        "https://github.com/o",
        "github.com/o/r",
        "https://github.com/o/.git",
        "https://github.com/o/?tab=repos",
        "",
    ],
)
def test_invalid(ref):
    with pytest.raises(InvalidRepositoryURL) as excinfo:
        to_api_url(ref)
    assert excinfo.value.kind is ErrorKind.INVALID_REPOSITORY_URL
    assert excinfo.value.url == ref
    assert str(excinfo.value) == f"Invalid GitHub URL: {ref}"


def test_hosts_follow_settings(monkeypatch):
    from gh_update_checker.config.settings import settings

    monkeypatch.setattr(settings, "web_host", "git.example.com")
    monkeypatch.setattr(settings, "api_host", "git.example.com/api/v3")
    assert to_api_url("https://git.example.com/o/r.git") == (
        "https://git.example.com/api/v3/repos/o/r/releases/latest"
    )
    with pytest.raises(InvalidRepositoryURL):
        to_api_url("https://github.com/o/r")
