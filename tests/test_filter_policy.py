"""Unit tests for the extension and hidden-file filter policy."""

import itertools

import pytest

from repo2html.filter_policy import FilterDecision, FilterPolicy, decide, file_extension


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("a.txt", "txt"),
        ("README.TXT", "txt"),
        ("archive.tar.gz", "gz"),
        ("Makefile", ""),
        (".env", "env"),
        ("trailing.", ""),
    ],
)
def test_file_extension(filename, expected):
    assert file_extension(filename) == expected


def test_included_when_whitelisted():
    assert decide("a.txt", "txt", False, ["txt"], []) is FilterDecision.INCLUDED


def test_unlisted_extension_warns():
    """An extension missing from the whitelist is rejected with a warning signal."""
    decision = decide("notes.md", "md", False, ["txt"], [])
    assert decision is FilterDecision.UNLISTED
    assert decision.warns
    assert not decision.included


def test_hidden_file_rejected_silently():
    decision = decide(".env", "env", False, ["env"], [])
    assert decision is FilterDecision.HIDDEN
    assert not decision.warns


def test_hidden_check_precedes_extension_checks():
    # Even an unlisted hidden file produces no warning
    assert decide(".notes.md", "md", False, ["txt"], []) is FilterDecision.HIDDEN


def test_blacklist_checked_before_whitelist():
    decision = decide("a.txt", "txt", False, ["txt"], ["txt"])
    assert decision is FilterDecision.BLACKLISTED
    assert not decision.warns


def test_hidden_file_included_when_allowed():
    assert decide(".env", "env", True, ["env"], []) is FilterDecision.INCLUDED


@pytest.mark.parametrize(
    "include_hidden, whitelisted, blacklisted",
    list(itertools.product([True, False], repeat=3)),
)
def test_hidden_file_inclusion_law(include_hidden, whitelisted, blacklisted):
    """A hidden file is included iff hidden files are allowed, it is not blacklisted and it is whitelisted."""
    whitelist = ["cfg"] if whitelisted else ["txt"]
    blacklist = ["cfg"] if blacklisted else []
    decision = decide(".settings.cfg", "cfg", include_hidden, whitelist, blacklist)
    assert decision.included == (include_hidden and whitelisted and not blacklisted)


class TestFilterPolicy:
    def test_defaults(self):
        policy = FilterPolicy()
        assert policy.extension_whitelist == ["txt"]
        assert policy.extension_blacklist == []
        assert policy.include_hidden_files is False

    def test_extensions_are_normalized(self):
        policy = FilterPolicy(extension_whitelist=[".PY", "Txt"], extension_blacklist=[".LOCK"])
        assert policy.extension_whitelist == ["py", "txt"]
        assert policy.extension_blacklist == ["lock"]

    def test_check_uses_lowercased_extension(self):
        policy = FilterPolicy(extension_whitelist=["txt"])
        assert policy.check("SHOUT.TXT") is FilterDecision.INCLUDED

    def test_check_file_without_extension(self):
        policy = FilterPolicy(extension_whitelist=["txt"])
        assert policy.check("Makefile") is FilterDecision.UNLISTED
        assert FilterPolicy(extension_whitelist=[""]).check("Makefile") is FilterDecision.INCLUDED

    def test_check_hidden(self):
        assert FilterPolicy(extension_whitelist=["env"]).check(".env") is FilterDecision.HIDDEN
        policy = FilterPolicy(extension_whitelist=["env"], include_hidden_files=True)
        assert policy.check(".env") is FilterDecision.INCLUDED
