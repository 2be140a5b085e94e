"""End-to-end tests for the ``typename`` and ``identifier`` commands."""

import pytest

from pathident.entrypoints.cli.main import pathident

# pylint: disable=unused-argument

def invoke(runner, *args: str, **kwargs):
    """Invoke the top-level command with `args`."""
    return runner.invoke(pathident, list(args), **kwargs)


def test_typename_from_arguments(runner):
    """Each path argument prints one generated name."""
    result = invoke(
        runner,
        "typename",
        "--root",
        "/sitecore/templates",
        "/sitecore/templates/Foo/bar_baz",
        "/sitecore/templates/Foo",
    )
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert "Foo.BarBaz" in lines
    assert "Foo" in lines


def test_typename_from_stdin(runner):
    """Without arguments, paths are read from stdin and blank lines skipped."""
    result = invoke(runner, "typename", "--root", "/a", input="/a/Foo\n\n/a/Bar/baz\n")
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines.index("Foo") < lines.index("Bar.Baz")


def test_typename_root_from_environment(runner):
    """PATHIDENT_NAMESPACE_ROOT supplies the root when --root is absent."""
    result = invoke(
        runner, "typename", "/a/1abc", env={"PATHIDENT_NAMESPACE_ROOT": "/a"}
    )
    assert result.exit_code == 0, result.output
    assert "_1abc" in result.output.splitlines()


def test_typename_without_root_is_a_usage_error(runner):
    """A missing root explains how to configure one."""
    result = invoke(runner, "typename", "/a/Foo")
    assert result.exit_code == 2
    assert "PATHIDENT_NAMESPACE_ROOT" in result.output


def test_typename_rejects_bare_separator_root(runner):
    """Root '/' fails with exit code 1."""
    result = invoke(runner, "typename", "--root", "/", "/a/Foo")
    assert result.exit_code == 1
    assert "Namespace root cannot be '/'" in result.output


def test_typename_reports_malformed_path(runner):
    """A path with nothing below the root fails with exit code 1."""
    result = invoke(runner, "typename", "--root", "/a", "/a")
    assert result.exit_code == 1
    assert "no path segment below the root" in result.output


def test_typename_show_kind(runner):
    """--show-kind reports which naming branch produced each name."""
    result = invoke(
        runner, "typename", "--root", "/a", "--show-kind", "/a/my_item", "/a/b/c"
    )
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert "my_item\tsingle" in lines
    assert "B.C\tmulti" in lines


@pytest.mark.parametrize(
    ("extra", "expected"),
    [([], "B.A.C"), (["--root-match", "substring"], "B.C")],
)
def test_typename_root_match(runner, extra: list[str], expected: str):
    """--root-match selects prefix or substring root removal."""
    result = invoke(runner, "typename", "--root", "/a", *extra, "/a/b/a/c")
    assert result.exit_code == 0, result.output
    assert expected in result.output.splitlines()


def test_typename_legacy_case(runner):
    """--legacy-case leaves letters after dots untouched."""
    result = invoke(
        runner, "typename", "--root", "/a", "--legacy-case", "/a/Foo/bar_baz"
    )
    assert result.exit_code == 0, result.output
    assert "Foo.barBaz" in result.output.splitlines()


def test_typename_warns_for_paths_outside_root(runner):
    """Paths outside the root are converted whole, with a warning."""
    result = invoke(runner, "typename", "--root", "/a", "/other/Foo")
    assert result.exit_code == 0, result.output
    assert "/other/Foo is not under namespace root /a" in result.output
    assert "Other.Foo" in result.output.splitlines()


def test_quiet_hides_root_warning(runner):
    """-q suppresses the warning but still prints the name."""
    result = invoke(runner, "-q", "typename", "--root", "/a", "/other/Foo")
    assert result.exit_code == 0, result.output
    assert "not under namespace root" not in result.output
    assert "Other.Foo" in result.output.splitlines()


def test_typename_empty_root_from_environment(runner):
    """An empty PATHIDENT_NAMESPACE_ROOT is a valid root."""
    result = invoke(
        runner, "typename", "/Foo/bar", env={"PATHIDENT_NAMESPACE_ROOT": ""}
    )
    assert result.exit_code == 0, result.output
    assert "Foo.Bar" in result.output.splitlines()


def test_typename_stops_at_first_malformed_path(runner):
    """Names before the failing path are printed; later paths are not converted."""
    result = invoke(
        runner, "typename", "--root", "/a", input="/a/Foo\n/a\n/a/Bar\n"
    )
    assert result.exit_code == 1
    lines = result.output.splitlines()
    assert "Foo" in lines
    assert "Bar" not in lines


def test_identifier(runner):
    """Each name argument prints its identifier."""
    result = invoke(runner, "identifier", "lord_flowers", "9lives")
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines.index("LordFlowers") < lines.index("_9lives")


def test_identifier_keeps_digit_guard(runner):
    """An already guarded identifier keeps its underscore."""
    result = invoke(runner, "identifier", "_9lives", " 9lives")
    assert result.exit_code == 0, result.output
    assert result.output.splitlines().count("_9lives") == 2


def test_identifier_rejects_empty_name(runner):
    """An empty name fails with exit code 1."""
    result = invoke(runner, "identifier", "")
    assert result.exit_code == 1
    assert "is empty" in result.output
