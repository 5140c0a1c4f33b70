"""Git configuration parsing.

Reads ``.git/config`` text into a flat ``section.subsection.key`` mapping
and a two-level ``section -> subsection -> {key: value}`` view.
Supported section headers:

- ``[remote "origin"]`` -> ``remote.origin``
- ``[branch.main]`` (deprecated form, lower-cased) -> ``branch.main``
- ``[core]`` -> ``core``
"""

import configparser
import re

import structlog

from branch_ticket.core.exceptions import ConfigParseError

logger = structlog.get_logger(__name__)

# Nothing in a git config can be named like this, so configparser's
# DEFAULT handling never kicks in.
_NO_DEFAULT_SECTION = "\x00defaults"

_SUBSECTION_HEADER = re.compile(
    r'^(?P<section>[A-Za-z0-9.-]+)\s+"(?P<subsection>(?:[^"\\]|\\.)*)"$'
)
_PLAIN_HEADER = re.compile(r"^[A-Za-z0-9.-]+$")
_KEY = re.compile(r"^[a-z][a-z0-9-]*$")
_COMMENT = re.compile(r"\s*[#;]")

_ESCAPES = {"n": "\n", "t": "\t", "b": "\b", '"': '"', "\\": "\\"}


class GitConfig:
    """Parsed git configuration.

    ``entries`` preserves first-seen order of keys; for keys that occur
    more than once the last value wins.
    """

    def __init__(self, entries: dict[str, str]) -> None:
        self._entries = dict(entries)
        self._sections: dict[str, dict[str, dict[str, str]]] = {}
        for dotted, value in self._entries.items():
            section, subsection, key = split_key(dotted)
            if subsection is None:
                continue
            names = self._sections.setdefault(section, {})
            names.setdefault(subsection, {})[key] = value

    @property
    def entries(self) -> dict[str, str]:
        return dict(self._entries)

    def get(self, key: str, default: str = "") -> str:
        return self._entries.get(key, default)

    def subsections(self, section: str) -> dict[str, dict[str, str]]:
        """Get ``{subsection: {key: value}}`` for a section, e.g. ``remote``."""
        return {
            name: dict(values)
            for name, values in self._sections.get(section.lower(), {}).items()
        }

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def split_key(dotted: str) -> tuple[str, str | None, str]:
    """Split ``section[.subsection].key``.

    The subsection may itself contain dots (``branch.release/1.2.merge``),
    so only the first and last dots are separators.
    """
    section, _, rest = dotted.partition(".")
    if "." not in rest:
        return section, None, rest
    subsection, _, key = rest.rpartition(".")
    return section, subsection, key


def parse_git_config(text: str) -> GitConfig:
    """Parse git configuration text.

    Indentation carries no meaning and a trailing backslash continues a
    value on the next line, as in git itself.

    Raises:
        ConfigParseError: If the text is not valid git config syntax.
    """
    parser = configparser.RawConfigParser(
        delimiters=("=",),
        comment_prefixes=("#", ";"),
        strict=False,
        allow_no_value=True,
        empty_lines_in_values=False,
        default_section=_NO_DEFAULT_SECTION,
        interpolation=None,
    )
    try:
        parser.read_string(_join_lines(text))
    except configparser.MissingSectionHeaderError as e:
        raise ConfigParseError(
            f"Key outside of any section at line {e.lineno}",
            line=e.lineno,
            text=e.line.strip(),
        ) from e
    except configparser.ParsingError as e:
        lineno, line = e.errors[0] if e.errors else (None, "")
        raise ConfigParseError(
            f"Failed to parse git config at line {lineno}",
            line=lineno,
            text=str(line).strip(),
        ) from e
    except configparser.Error as e:
        raise ConfigParseError(f"Failed to parse git config: {e}") from e

    entries: dict[str, str] = {}
    for header in parser.sections():
        prefix = _section_prefix(header, text)
        for key, value in parser.items(header, raw=True):
            if value is None:
                # boolean key, possibly followed by a comment
                key = _COMMENT.split(key, maxsplit=1)[0].rstrip()
            if not _KEY.match(key):
                line = _find_line(text, key)
                raise ConfigParseError(
                    f"Invalid key {key!r} at line {line}",
                    line=line,
                    text=key,
                )
            entries[f"{prefix}.{key}"] = "true" if value is None else _parse_value(value)

    logger.debug("Parsed git config", keys=len(entries))
    return GitConfig(entries)


def _join_lines(text: str) -> str:
    """Join backslash-continued lines and drop indentation.

    A joined line is followed by blank lines so that line numbers reported
    by configparser still match ``text``.
    """
    lines: list[str] = []
    pending = ""
    consumed = 0
    for line in text.splitlines():
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2:
            pending += line[:-1]
            consumed += 1
            continue
        lines.append((pending + line).lstrip())
        lines.extend([""] * consumed)
        pending, consumed = "", 0
    if consumed:
        lines.append(pending.lstrip())
        lines.extend([""] * (consumed - 1))
    return "\n".join(lines)


def _section_prefix(header: str, text: str) -> str:
    header = header.strip()
    match = _SUBSECTION_HEADER.match(header)
    if match:
        subsection = re.sub(r"\\(.)", r"\1", match.group("subsection"))
        return f"{match.group('section').lower()}.{subsection}"
    if _PLAIN_HEADER.match(header):
        return header.lower()
    line = _find_line(text, f"[{header}")
    raise ConfigParseError(
        f"Invalid section header [{header}] at line {line}",
        line=line,
        text=f"[{header}]",
    )


def _find_line(text: str, needle: str) -> int | None:
    for lineno, line in enumerate(text.splitlines(), start=1):
        if line.strip().lower().startswith(needle.lower()):
            return lineno
    return None


def _parse_value(value: str) -> str:
    """Resolve quotes and backslash escapes, dropping a trailing comment.

    ``#`` and ``;`` start a comment only outside double quotes. Trailing
    whitespace is dropped unless it was quoted or escaped.
    """
    result: list[str] = []
    keep = 0
    quoted = False
    chars = iter(value)
    for char in chars:
        if char == '"':
            quoted = not quoted
            keep = len(result)
            continue
        if char == "\\":
            escaped = next(chars, "")
            result.append(_ESCAPES.get(escaped, escaped))
            keep = len(result)
            continue
        if char in "#;" and not quoted:
            break
        result.append(char)
        if quoted:
            keep = len(result)
    return "".join(result[:keep]) + "".join(result[keep:]).rstrip()
