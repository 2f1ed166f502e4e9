"""Unit tests for git argument builders."""

from treediff import command
from treediff.models import Commit

ROOT = Commit(sha="a" * 40)
CHILD = Commit(sha="b" * 40, parents=["a" * 40])


class TestRootDiff:
    """Test the empty-tree form."""

    def test_arguments(self) -> None:
        """diff-tree --root with the header prefixes and the commit last."""
        args = command.root_diff(ROOT)

        assert args[0] == "diff-tree"
        assert "--root" in args
        assert "--src-prefix=SRC/" in args
        assert "--dst-prefix=DST/" in args
        assert args[-1] == ROOT.sha

    def test_accepts_plain_sha(self) -> None:
        assert command.root_diff("abc123")[-1] == "abc123"


class TestDiff:
    """Test the parent and range forms."""

    def test_parent_form(self) -> None:
        """Without a second commit the range is parent..commit."""
        args = command.diff(CHILD)

        assert args[0] == "diff"
        assert args[-1] == f"{CHILD.sha}^..{CHILD.sha}"
        assert "--" not in args

    def test_range_form(self) -> None:
        """The second commit is the old side of the range."""
        args = command.diff(CHILD, ROOT)

        assert args[-1] == f"{ROOT.sha}..{CHILD.sha}"

    def test_range_with_path(self) -> None:
        """The pathspec follows a '--' separator."""
        args = command.diff(CHILD, ROOT, "docs/index.md")

        assert args[-3:] == [f"{ROOT.sha}..{CHILD.sha}", "--", "docs/index.md"]

    def test_prefixes_and_flags(self) -> None:
        args = command.diff(CHILD)

        for flag in ("--full-index", "--no-color", "--no-ext-diff", "-M", "--src-prefix=SRC/", "--dst-prefix=DST/"):
            assert flag in args


def test_rev_parents() -> None:
    """Revision lookup keeps the revision before the '--' separator."""
    assert command.rev_parents("HEAD~2") == [
        "rev-list", "--parents", "--max-count=1", "--end-of-options", "HEAD~2", "--",
    ]


def test_rev_parents_dash_revision_follows_end_of_options() -> None:
    """A revision shaped like an option comes after --end-of-options."""
    args = command.rev_parents("--all")

    assert args.index("--end-of-options") < args.index("--all")


def test_render_quotes_arguments() -> None:
    assert command.render(["diff", "--", "my file.txt"]) == "git diff -- 'my file.txt'"
