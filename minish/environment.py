"""The shell's own list of environment variables."""

from dataclasses import dataclass

from minish.chars import WHITESPACE

_UNSET_VALUE = " "
_STOP_CHARS = "$\"'"


def _atoi(text):
    """Read a leading decimal integer the way the C library does."""
    text = text.lstrip(WHITESPACE)
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    digits = ""
    for char in text:
        if not char.isdigit():
            break
        digits += char
    return sign * int(digits) if digits else 0


def check_part(text):
    """Return the variable name at the start of ``text``.

    The name ends at a dollar sign or a quote; ``None`` for empty input.
    """
    if not text:
        return None
    for index, char in enumerate(text):
        if char in _STOP_CHARS:
            return text[:index]
    return text


@dataclass
class EnvEntry:
    """One NAME=value pair."""

    name: str
    value: str = _UNSET_VALUE

    @classmethod
    def parse(cls, entry):
        """Build an entry from a ``NAME=value`` string.

        A string without a value after the name gets a single space.
        """
        pieces = [piece for piece in entry.split("=") if piece]
        if not pieces:
            raise ValueError(f"not an environment entry: {entry!r}")
        name = pieces[0]
        if len(pieces) > 1:
            return cls(name, entry[len(name) + 1:])
        return cls(name)

    def __str__(self):
        return f"{self.name}={self.value}"


class Environment:
    """An ordered collection of environment entries."""

    def __init__(self, entries=()):
        self._entries = [self._coerce(entry) for entry in entries]

    @staticmethod
    def _coerce(entry):
        if isinstance(entry, EnvEntry):
            return entry
        return EnvEntry.parse(entry)

    @classmethod
    def from_mapping(cls, mapping):
        """Build an environment from a mapping such as ``os.environ``."""
        return cls(f"{name}={value}" for name, value in mapping.items())

    def _find(self, name):
        return next((entry for entry in self._entries if entry.name == name), None)

    def get(self, name):
        """Return a variable's value, "" when unset, ``None`` for no name."""
        if not name:
            return None
        entry = self._find(name)
        return entry.value if entry is not None else ""

    def update(self, name, value):
        """Change the value of an existing variable; unknown names are ignored."""
        entry = self._find(name)
        if entry is not None:
            entry.value = value

    def add(self, entry):
        """Append a new entry, given as ``NAME=value`` or an ``EnvEntry``."""
        entry = self._coerce(entry)
        self._entries.append(entry)
        return entry

    def remove(self, name):
        """Remove a variable; return whether it was present."""
        entry = self._find(name)
        if entry is None:
            return False
        self._entries.remove(entry)
        return True

    def to_list(self):
        """Return the entries as ``NAME=value`` strings for a child process."""
        return [str(entry) for entry in self._entries]

    def format_env(self):
        """Return the listing printed by the ``env`` builtin."""
        return "".join(f"{entry}\n" for entry in self._entries)

    def increment_shlvl(self):
        """Raise SHLVL by one if it is set; return the new level."""
        level = _atoi(self.get("SHLVL")) + 1
        self.update("SHLVL", str(level))
        return level

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)