"""Tests for spec file loading entry points."""

from pathlib import Path
from unittest.mock import patch

import pytest

from specloader import LOGIN_SPEC_FILENAME
from specloader import get_all_spec_files
from specloader import get_all_spec_files_with_login_first
from specloader import get_all_spec_files_with_specified_file
from specloader.exceptions import FilesystemAccessError


@pytest.fixture
def spec_tree(tmp_path):
    """A spec folder with nested specs, a login spec and non-spec files."""
    root = tmp_path / "__specs__"
    (root / "checkout" / "payment").mkdir(parents=True)
    (root / "auth").mkdir()
    (root / "HomeTest.js").touch()
    (root / "README.md").touch()
    (root / "checkout" / "CartTest.js").touch()
    (root / "checkout" / "payment" / "CardTest.JS").touch()
    (root / "checkout" / "payment" / "card.png").touch()
    (root / "auth" / "LoginTest.js").touch()
    (root / "auth" / "users.json").touch()
    return root


class TestGetAllSpecFiles:
    """Tests for get_all_spec_files()."""

    def test_returns_every_spec_file(self, spec_tree):
        """Test that all .js files are found and nothing else."""
        files = get_all_spec_files(spec_tree)

        assert set(files) == {
            spec_tree / "HomeTest.js",
            spec_tree / "checkout" / "CartTest.js",
            spec_tree / "checkout" / "payment" / "CardTest.JS",
            spec_tree / "auth" / "LoginTest.js",
        }
        assert len(files) == 4

    def test_uses_spec_file_predicate(self, tmp_path):
        """Test that get_all_spec_files delegates with is_spec_file."""
        with patch(
            "specloader.operations.load.list_matching_files", return_value=[]
        ) as mock_list:
            get_all_spec_files(tmp_path)

        root, predicate = mock_list.call_args.args
        assert root == tmp_path
        assert predicate("a.js")
        assert not predicate("a.json")

    def test_accepts_string_root(self, spec_tree):
        """Test that a str root works like a Path."""
        assert get_all_spec_files(str(spec_tree)) == get_all_spec_files(spec_tree)

    def test_empty_tree(self, tmp_path):
        """Test that a tree with no spec files gives an empty list."""
        (tmp_path / "empty" / "nested").mkdir(parents=True)

        assert get_all_spec_files(tmp_path / "empty") == []

    def test_missing_root_raises(self, tmp_path):
        """Test that a missing root is an error, not an empty result."""
        with pytest.raises(FilesystemAccessError):
            get_all_spec_files(tmp_path / "missing")


class TestGetAllSpecFilesWithLoginFirst:
    """Tests for get_all_spec_files_with_login_first()."""

    def test_login_spec_is_first(self, spec_tree):
        """Test that LoginTest.js leads and the rest keep traversal order."""
        unordered = get_all_spec_files(spec_tree)
        login = spec_tree / "auth" / "LoginTest.js"

        files = get_all_spec_files_with_login_first(spec_tree)

        assert files[0] == login
        assert files[1:] == [f for f in unordered if f != login]

    def test_without_login_spec_matches_plain_listing(self, spec_tree):
        """Test that the order is unchanged when there is no login spec."""
        (spec_tree / "auth" / "LoginTest.js").unlink()

        assert get_all_spec_files_with_login_first(spec_tree) == get_all_spec_files(
            spec_tree
        )

    def test_all_results_are_js_files(self, spec_tree):
        """Test that the promoted list still contains only spec files."""
        files = get_all_spec_files_with_login_first(spec_tree)

        assert all(f.name.lower().endswith(".js") for f in files)

    def test_uses_login_constant(self, tmp_path):
        """Test that the login variant passes LoginTest.js through."""
        with patch(
            "specloader.operations.load.get_all_spec_files_with_specified_file",
            return_value=[],
        ) as mock_specified:
            get_all_spec_files_with_login_first(tmp_path)

        mock_specified.assert_called_once_with(tmp_path, LOGIN_SPEC_FILENAME)
        assert LOGIN_SPEC_FILENAME == "LoginTest.js"


class TestGetAllSpecFilesWithSpecifiedFile:
    """Tests for get_all_spec_files_with_specified_file()."""

    def test_promotes_given_filename(self, spec_tree):
        """Test promoting a file other than the login spec."""
        files = get_all_spec_files_with_specified_file(spec_tree, "CartTest.js")

        assert files[0] == spec_tree / "checkout" / "CartTest.js"
        assert len(files) == 4

    def test_directory_name_match_promotes_contents(self, spec_tree):
        """Test that substring matching includes directory components."""
        files = get_all_spec_files_with_specified_file(spec_tree, "/checkout/")

        assert set(files[:2]) == {
            spec_tree / "checkout" / "CartTest.js",
            spec_tree / "checkout" / "payment" / "CardTest.JS",
        }

    def test_relative_root_gives_absolute_paths(self, spec_tree, monkeypatch):
        """Test paths are rooted at the working directory."""
        monkeypatch.chdir(spec_tree.parent)

        files = get_all_spec_files_with_specified_file(
            Path(spec_tree.name), LOGIN_SPEC_FILENAME
        )

        assert files[0] == Path.cwd() / spec_tree.name / "auth" / "LoginTest.js"
        assert all(f.is_absolute() for f in files)

    def test_sibling_root_gives_normalized_paths(self, spec_tree, monkeypatch):
        """Test that a "../" root yields paths without ".." segments."""
        work = spec_tree.parent / "work"
        work.mkdir()
        monkeypatch.chdir(work)

        files = get_all_spec_files_with_login_first(f"../{spec_tree.name}")

        assert files[0] == Path.cwd().parent / spec_tree.name / "auth" / "LoginTest.js"
        assert all(".." not in f.parts for f in files)
