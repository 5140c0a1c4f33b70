"""Tests for git config parsing."""

import pytest

from branch_ticket.core.exceptions import ConfigParseError
from branch_ticket.git.config_parser import parse_git_config, split_key


@pytest.mark.unit
class TestParseGitConfig:
    """Tests for parse_git_config."""

    def test_flat_entries(self, sample_config: str) -> None:
        config = parse_git_config(sample_config)
        assert config.get("remote.origin.url") == "ssh://git@git.acronis.com/team/repo.git"
        assert config.get("remote.origin.fetch") == "+refs/heads/*:refs/remotes/origin/*"
        assert config.get("branch.main.merge") == "refs/heads/main"
        assert config.get("core.bare") == "false"

    def test_missing_key_default(self, sample_config: str) -> None:
        config = parse_git_config(sample_config)
        assert config.get("remote.github.fetch") == ""
        assert "remote.github.fetch" not in config

    def test_subsections(self, sample_config: str) -> None:
        config = parse_git_config(sample_config)
        remotes = config.subsections("remote")
        assert list(remotes) == ["origin", "github"]
        assert remotes["github"] == {"url": "git@github.com:acme/repo.git"}
        assert config.subsections("core") == {}

    def test_branch_name_with_slashes_and_dots(self) -> None:
        config = parse_git_config('[branch "release/1.2"]\n\tremote = origin\n')
        assert config.get("branch.release/1.2.remote") == "origin"
        assert config.subsections("branch") == {"release/1.2": {"remote": "origin"}}

    def test_case_normalization(self) -> None:
        config = parse_git_config('[Remote "Origin"]\n\tURL = https://github.com/a/b\n')
        assert config.get("remote.Origin.url") == "https://github.com/a/b"

    def test_legacy_dotted_header(self) -> None:
        config = parse_git_config("[branch.Main]\n\tremote = origin\n")
        assert config.get("branch.main.remote") == "origin"

    def test_duplicate_sections_last_value_wins(self) -> None:
        text = (
            '[remote "origin"]\n\turl = https://github.com/a/first\n'
            '[remote "origin"]\n\turl = https://github.com/a/second\n'
        )
        config = parse_git_config(text)
        assert config.get("remote.origin.url") == "https://github.com/a/second"
        assert len(config) == 1

    def test_comments_and_quotes(self) -> None:
        text = (
            "# leading comment\n"
            "; another\n"
            "[user]\n"
            '\tname = "Jane \\"JD\\" Doe"\n'
            "\temail = jane@example.com ; inline\n"
        )
        config = parse_git_config(text)
        assert config.get("user.name") == 'Jane "JD" Doe'
        assert config.get("user.email") == "jane@example.com"

    def test_key_without_value_is_true(self) -> None:
        config = parse_git_config("[core]\n\tbare\n")
        assert config.get("core.bare") == "true"

    def test_empty_text(self) -> None:
        config = parse_git_config("")
        assert len(config) == 0
        assert config.subsections("remote") == {}

    def test_key_outside_section(self) -> None:
        with pytest.raises(ConfigParseError) as exc_info:
            parse_git_config("url = https://github.com/a/b\n")
        assert exc_info.value.line == 1
        assert exc_info.value.exit_code == 43

    def test_malformed_line(self) -> None:
        with pytest.raises(ConfigParseError) as exc_info:
            parse_git_config('[remote "origin"]\n\turl = x\n[broken\n')
        assert exc_info.value.line == 3

    def test_invalid_section_header(self) -> None:
        with pytest.raises(ConfigParseError) as exc_info:
            parse_git_config('[remote origin"]\n\turl = x\n')
        assert exc_info.value.line == 1


@pytest.mark.unit
class TestSplitKey:
    def test_with_subsection(self) -> None:
        assert split_key("remote.origin.url") == ("remote", "origin", "url")

    def test_without_subsection(self) -> None:
        assert split_key("core.bare") == ("core", None, "bare")

    def test_dotted_subsection(self) -> None:
        assert split_key("branch.v1.2.merge") == ("branch", "v1.2", "merge")


@pytest.mark.unit
class TestGitValueRules:
    """Indentation, comments and continuations follow git, not INI."""

    def test_indentation_is_ignored(self) -> None:
        text = (
            '[remote "origin"]\n'
            "url = ssh://git@git.acronis.com/team/repo.git\n"
            "\tfetch = +refs/heads/*:refs/remotes/origin/*\n"
            '    [branch "main"]\n'
            "remote = origin\n"
            "\t\t\tmerge = refs/heads/main\n"
        )
        config = parse_git_config(text)
        assert config.get("remote.origin.url") == "ssh://git@git.acronis.com/team/repo.git"
        assert config.get("remote.origin.fetch") == "+refs/heads/*:refs/remotes/origin/*"
        assert config.get("branch.main.remote") == "origin"
        assert config.get("branch.main.merge") == "refs/heads/main"

    def test_comment_chars_inside_quotes_are_kept(self) -> None:
        text = '[user]\n\tname = "a ; b # c"\n\tnick = x"; y" ; comment\n'
        config = parse_git_config(text)
        assert config.get("user.name") == "a ; b # c"
        assert config.get("user.nick") == "x; y"

    def test_comment_without_space(self) -> None:
        config = parse_git_config("[core]\n\teditor = vim#comment\n\tbare ; no value\n")
        assert config.get("core.editor") == "vim"
        assert config.get("core.bare") == "true"

    def test_quoted_trailing_whitespace_is_kept(self) -> None:
        config = parse_git_config('[user]\n\tname = "pad  "   \n')
        assert config.get("user.name") == "pad  "

    def test_backslash_continuation(self) -> None:
        text = (
            '[remote "origin"]\n'
            "\turl = https://github.com/a/\\\n"
            "b\n"
            "\tfetch = +refs/heads/*:refs/remotes/origin/*\n"
        )
        config = parse_git_config(text)
        assert config.get("remote.origin.url") == "https://github.com/a/b"
        assert config.get("remote.origin.fetch") == "+refs/heads/*:refs/remotes/origin/*"

    def test_escaped_backslash_does_not_continue(self) -> None:
        text = '[core]\n\tpath = "C:\\\\"\n\tbare = false\n'
        config = parse_git_config(text)
        assert config.get("core.path") == "C:\\"
        assert config.get("core.bare") == "false"

    def test_line_numbers_survive_continuations(self) -> None:
        text = '[remote "origin"]\n\turl = a\\\nb\\\nc\n[broken\n'
        with pytest.raises(ConfigParseError) as exc_info:
            parse_git_config(text)
        assert exc_info.value.line == 5
