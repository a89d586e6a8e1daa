"""
Unit tests for core modules: validators, message assembly, catalog, Config.

Run with:
    pytest tests/test_core.py -v
"""

import pytest

from commit_cli import COMMIT_TYPES, CommitType
from commit_cli.config import Config, load_config
from commit_cli.message import CommitRecord, build_commit_message
from commit_cli.validators import (
    normalize_work_item,
    validate_work_item,
    parse_type_choice,
    description_problems,
    validate_description,
)

TYPE_ORDER = [
    "feat", "fix", "docs", "style", "refactor",
    "perf", "test", "build", "ci", "chore",
]


# ---------------------------------------------------------------------------
# Commit type catalog
# ---------------------------------------------------------------------------

class TestCommitTypes:
    """The fixed, ordered COMMIT_TYPES catalog."""

    def test_order_is_fixed(self):
        assert [ct.code for ct in COMMIT_TYPES] == TYPE_ORDER

    def test_entries_are_immutable_pairs(self):
        assert isinstance(COMMIT_TYPES, tuple)
        assert COMMIT_TYPES[0] == CommitType('feat', 'A new feature')
        with pytest.raises(AttributeError):
            COMMIT_TYPES[0].code = 'feature'

    def test_every_entry_has_description(self):
        assert all(ct.description for ct in COMMIT_TYPES)


# ---------------------------------------------------------------------------
# Work item validation
# ---------------------------------------------------------------------------

class TestWorkItem:
    """normalize_work_item() and validate_work_item()."""

    @pytest.mark.parametrize("work_item", [
        "proj-42",
        "proj-1",
        "proj-1-hotfix",
        "proj-123-a1-b2",
        "proj-0007-v2",
    ])
    def test_accepts(self, work_item):
        assert validate_work_item(work_item, "proj")

    @pytest.mark.parametrize("work_item", [
        "",
        "proj",
        "proj-",
        "proj-abc",
        "proj42",
        "xproj-1",
        "proj-1-",
        "proj-1--a",
        "proj-1-a_b",
        "proj-1 ",
        " proj-1",
        "proj-1\n",
        "other-1",
        "PROJ-42",  # caller must normalize first
    ])
    def test_rejects(self, work_item):
        assert not validate_work_item(work_item, "proj")

    @pytest.mark.parametrize("raw, expected", [
        ("PROJ-42", "proj-42"),
        ("  Proj-42-HotFix  ", "proj-42-hotfix"),
        ("proj-7", "proj-7"),
    ])
    def test_normalize(self, raw, expected):
        assert normalize_work_item(raw) == expected

    @pytest.mark.parametrize("raw", ["PROJ-42", "Proj-42-Fix", "pRoJ-9-a1"])
    def test_case_insensitive_after_normalize(self, raw):
        assert validate_work_item(normalize_work_item(raw), "proj")

    def test_custom_prefix(self):
        assert validate_work_item("bcds-7", "bcds")
        assert validate_work_item("bcds-7", "BCDS")
        assert not validate_work_item("proj-7", "bcds")

    def test_prefix_is_literal(self):
        assert validate_work_item("a.b-1", "a.b")
        assert not validate_work_item("axb-1", "a.b")

    def test_digits_are_ascii_only(self):
        assert not validate_work_item("proj-٣", "proj")


# ---------------------------------------------------------------------------
# Commit type selection
# ---------------------------------------------------------------------------

class TestParseTypeChoice:
    """parse_type_choice() maps 1..N to a 0-based index."""

    @pytest.mark.parametrize("n", range(1, 11))
    def test_in_range(self, n):
        idx = parse_type_choice(str(n))
        assert idx == n - 1
        assert COMMIT_TYPES[idx].code == TYPE_ORDER[n - 1]

    @pytest.mark.parametrize("raw", [
        "0", "11", "-1", "100", "", "abc", "1.5", "one", "1 2",
        "1_0", "٣", "١", "３", "+",
    ])
    def test_rejects(self, raw):
        assert parse_type_choice(raw) is None

    def test_explicit_sign(self):
        assert parse_type_choice("+2") == 1
        assert parse_type_choice("-2") is None

    def test_strips_whitespace(self):
        assert parse_type_choice(" 3 ") == 2

    def test_custom_count(self):
        assert parse_type_choice("3", count=2) is None
        assert parse_type_choice("2", count=2) == 1


# ---------------------------------------------------------------------------
# Short description validation
# ---------------------------------------------------------------------------

class TestDescription:
    """validate_description() and description_problems()."""

    @pytest.mark.parametrize("desc", [
        "Add login flow",
        "Fix (critical) bug, again!",
        "What? Really.",
        "Bump version to 1.2.3",
        "hello world!",
        "a",
        "A" * 72,
    ])
    def test_accepts(self, desc):
        assert validate_description(desc)

    @pytest.mark.parametrize("desc", [
        "",
        "A" * 73,
        "Add émoji support",
        "Use _underscore",
        "colon: not allowed",
        "tabs\there",
        "quote 'x'",
        "slash/path",
    ])
    def test_rejects(self, desc):
        assert not validate_description(desc)

    def test_empty_reason(self):
        assert description_problems("") == ["description is empty"]

    def test_length_reason(self):
        problems = description_problems("A" * 80)
        assert len(problems) == 1
        assert "80 characters (max 72)" in problems[0]

    def test_charset_reason_lists_characters(self):
        problems = description_problems("Fix bug: now_ok")
        assert len(problems) == 1
        assert "':'" in problems[0]
        assert "'_'" in problems[0]

    def test_custom_max_length(self):
        assert validate_description("Short", max_length=5)
        assert not validate_description("Longer", max_length=5)

    @pytest.mark.parametrize("desc, require_capital, expected", [
        ("hello world!", False, True),
        ("hello world!", True, False),
        ("Hello world!", True, True),
        ("1st release", True, False),
        ("(scope) change", True, False),
    ])
    def test_capital_rule(self, desc, require_capital, expected):
        assert validate_description(desc, require_capital=require_capital) is expected

    def test_capital_reason(self):
        problems = description_problems("lowercase", require_capital=True)
        assert problems == ["must start with an uppercase letter"]


# ---------------------------------------------------------------------------
# Message assembly
# ---------------------------------------------------------------------------

class TestBuildCommitMessage:
    """build_commit_message() and CommitRecord.message."""

    def test_subject_only(self):
        assert build_commit_message("feat", "proj-42", "Add login flow") == "feat(proj-42): Add login flow"

    def test_empty_body_adds_nothing(self):
        message = build_commit_message("fix", "proj-1", "Fix crash", "")
        assert message == "fix(proj-1): Fix crash"
        assert not message.endswith("\n")

    def test_body_separated_by_one_blank_line(self):
        message = build_commit_message("fix", "proj-1", "Fix crash", "Null check on save")
        assert message == "fix(proj-1): Fix crash\n\nNull check on save"

    def test_body_preserved_verbatim(self):
        body = "Line one\n  indented\n中文说明"
        message = build_commit_message("docs", "proj-3", "Update guide", body)
        subject, rest = message.split("\n\n", 1)
        assert subject == "docs(proj-3): Update guide"
        assert rest == body

    def test_deterministic(self):
        args = ("perf", "proj-9-cache", "Speed up lookups", "Uses a dict")
        assert build_commit_message(*args) == build_commit_message(*args)

    def test_record_message(self):
        record = CommitRecord(work_item="proj-42", commit_type="feat", description="Add login flow")
        assert record.body == ""
        assert record.message == "feat(proj-42): Add login flow"

    def test_record_is_frozen(self):
        record = CommitRecord("proj-1", "fix", "Fix it")
        with pytest.raises(AttributeError):
            record.description = "Changed"


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

class TestConfig:
    """Config validation and load_config() precedence."""

    def test_defaults(self):
        config = Config()
        assert config.work_item_prefix == "proj"
        assert config.require_capital is False
        assert config.max_description_length == 72
        assert config.max_file_display == 8

    def test_from_dict_ignores_unknown_keys(self):
        config = Config.from_dict({"work_item_prefix": "abc", "provider": "ollama"})
        assert config.work_item_prefix == "abc"
        assert not hasattr(config, "provider")

    def test_prefix_lowercased(self):
        assert Config.from_dict({"work_item_prefix": "BCDS"}).work_item_prefix == "bcds"

    @pytest.mark.parametrize("prefix", ["", "12ab", "a-b", "a.b", "ab cd"])
    def test_invalid_prefix_warns_and_resets(self, prefix, capsys):
        config = Config.from_dict({"work_item_prefix": prefix})
        assert config.work_item_prefix == "proj"
        assert "Invalid work_item_prefix" in capsys.readouterr().err

    def test_invalid_numbers_reset(self):
        config = Config(max_description_length=0, max_file_display="many")
        warnings = config.validate()
        assert len(warnings) == 2
        assert config.max_description_length == 72
        assert config.max_file_display == 8

    def test_to_dict(self):
        assert Config().to_dict() == {
            "work_item_prefix": "proj",
            "require_capital": False,
            "max_description_length": 72,
            "max_file_display": 8,
        }

    def test_load_defaults_without_env(self):
        assert load_config(environ={}) == Config()

    def test_env_overrides(self):
        env = {"CCM_PREFIX": "ABC", "CCM_REQUIRE_CAPITAL": "yes", "CCM_MAX_FILE_DISPLAY": "3"}
        config = load_config(environ=env)
        assert config.work_item_prefix == "abc"
        assert config.require_capital is True
        assert config.max_file_display == 3

    @pytest.mark.parametrize("value, expected", [
        ("1", True), ("true", True), ("ON", True),
        ("0", False), ("no", False), ("off", False),
    ])
    def test_require_capital_env_values(self, value, expected):
        assert load_config(environ={"CCM_REQUIRE_CAPITAL": value}).require_capital is expected

    def test_cli_beats_env(self):
        config = load_config(prefix="cli", require_capital=True,
                             environ={"CCM_PREFIX": "env", "CCM_REQUIRE_CAPITAL": "0"})
        assert config.work_item_prefix == "cli"
        assert config.require_capital is True

    def test_bad_env_number_warns(self, capsys):
        config = load_config(environ={"CCM_MAX_FILE_DISPLAY": "lots"})
        assert config.max_file_display == 8
        assert "max_file_display" in capsys.readouterr().err
