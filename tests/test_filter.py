import pytest

from restic.filter import BadPatternError, BadStringError, match, match_list

MATCH_TESTS = [
    ("", "", True),
    ("", "foo", True),
    ("", "/x/y/z/foo", True),
    ("*.go", "/foo/bar/test.go", True),
    ("*.c", "/foo/bar/test.go", False),
    ("*", "/foo/bar/test.go", True),
    ("foo*", "/foo/bar/test.go", True),
    ("bar*", "/foo/bar/test.go", True),
    ("/bar*", "/foo/bar/test.go", False),
    ("bar/*", "/foo/bar/test.go", True),
    ("baz/*", "/foo/bar/test.go", False),
    ("bar/test.go", "/foo/bar/test.go", True),
    ("bar/*.go", "/foo/bar/test.go", True),
    ("ba*/*.go", "/foo/bar/test.go", True),
    ("bb*/*.go", "/foo/bar/test.go", False),
    ("test.*", "/foo/bar/test.go", True),
    ("tesT.*", "/foo/bar/test.go", False),
    ("bar/*", "/foo/bar/baz", True),
    ("bar", "/foo/bar", True),
    ("bar", "/foo/bar/baz", True),
    ("bar", "/foo/bar/test.go", True),
    ("/foo/*test.*", "/foo/bar/test.go", False),
    ("/foo/*/test.*", "/foo/bar/test.go", True),
    ("/foo/*/bar/test.*", "/foo/bar/test.go", False),
    ("/*/*/bar/test.*", "/foo/bar/test.go", False),
    ("/*/*/bar/test.*", "/foo/bar/baz/test.go", False),
    ("/*/*/baz/test.*", "/foo/bar/baz/test.go", True),
    ("/*/foo/bar/test.*", "/foo/bar/baz/test.go", False),
    ("/*/foo/bar/test.*", "/foo/bar/baz/test.go", False),
    ("/foo/bar/test.*", "bar/baz/test.go", False),
    ("/x/y/bar/baz/test.*", "bar/baz/test.go", False),
    ("/x/y/bar/baz/test.c", "bar/baz/test.go", False),
    ("baz/test.*", "bar/baz/test.go", True),
    ("baz/tesT.*", "bar/baz/test.go", False),
    ("test.go", "bar/baz/test.go", True),
    ("*.go", "bar/baz/test.go", True),
    ("*.c", "bar/baz/test.go", False),
    ("sdk", "/foo/bar/sdk", True),
    ("sdk", "/foo/bar/sdk/test/sdk_foo.go", True),
    (
        "sdk/*/cpp/*/*vars*.html",
        "/usr/share/doc/libreoffice/sdk/docs/cpp/ref/a00517.html",
        False,
    ),
    ("foo/**/bar/*.go", "/home/user/foo/work/special/project/bar/test.go", True),
    ("foo/**/bar/*.go", "/home/user/foo/bar/test.go", True),
    ("foo/**/bar/*.go", "x/foo/bar/test.go", True),
    ("foo/**/bar/*.go", "foo/bar/test.go", True),
    ("foo/**/bar/*.go", "/home/user/foo/test.c", False),
    ("foo/**/bar/*.go", "bar/foo/main.go", False),
    ("foo/**/bar/*.go", "/foo/bar/main.go", True),
    ("foo/**/bar/*.go", "bar/main.go", False),
    ("foo/**/bar", "/home/user/foo/x/y/bar", True),
    ("foo/**/bar", "/home/user/foo/x/y/bar/main.go", True),
    ("user/**/important*", "/home/user/work/x/y/hidden/x", False),
    ("user/**/hidden*/**/c", "/home/user/work/x/y/hidden/z/a/b/c", True),
    ("c:/foo/*test.*", "c:/foo/bar/test.go", False),
    ("c:/foo/*/test.*", "c:/foo/bar/test.go", True),
    ("c:/foo/*/bar/test.*", "c:/foo/bar/test.go", False),
]


@pytest.mark.parametrize("pattern,path,expected", MATCH_TESTS)
def test_match(pattern, path, expected):
    assert match(pattern, path) is expected


def test_example_match():
    assert match("*.go", "/home/user/file.go") is True


def test_example_match_wildcards():
    assert match("/home/[uU]ser/?.go", "/home/user/F.go") is True


FILTER_LIST_TESTS = [
    (["*.go"], "/foo/bar/test.go", True),
    (["*.c"], "/foo/bar/test.go", False),
    (["*.go", "*.c"], "/foo/bar/test.go", True),
    (["*"], "/foo/bar/test.go", True),
    (["x"], "/foo/bar/test.go", False),
    (["?"], "/foo/bar/test.go", False),
    (["?", "x"], "/foo/bar/x", True),
    (["/*/*/bar/test.*"], "/foo/bar/test.go", False),
    (["/*/*/bar/test.*", "*.go"], "/foo/bar/test.go", True),
]


@pytest.mark.parametrize("patterns,path,expected", FILTER_LIST_TESTS)
def test_match_list(patterns, path, expected):
    assert match_list(patterns, path) is expected


def test_example_match_list():
    assert match_list(["*.c", "*.go"], "/home/user/file.go") is True


def test_match_list_empty():
    assert match_list([], "/foo/bar") is False


def test_empty_string_raises():
    with pytest.raises(BadStringError):
        match("*.go", "")


@pytest.mark.parametrize("pattern", ["[", "a[", "[]", "[^]", "foo\\", "[a-", "[-a]"])
def test_bad_pattern(pattern):
    with pytest.raises(BadPatternError):
        match(pattern, "abc")


def test_bad_pattern_in_list():
    with pytest.raises(BadPatternError):
        match_list(["[", "*"], "abc")


@pytest.mark.parametrize(
    "pattern,path,expected",
    [
        ("[a-c]x", "bx", True),
        ("[a-c]x", "dx", False),
        ("[^a-c]x", "dx", True),
        ("[^a-c]x", "ax", False),
        ("\\*", "*", True),
        ("\\*", "a", False),
        ("a?c", "abc", True),
        ("a?c", "ac", False),
    ],
)
def test_segment_wildcards(pattern, path, expected):
    assert match(pattern, path) is expected