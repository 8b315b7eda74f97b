"""
Passphrase Word List
=====================

The bundled list is a small curated vocabulary. It contains repeated
entries ("ember" appears many times, "harbor", "nectar", "onyx" and
others more than once); repeats are kept, so those words are drawn
proportionally more often. A larger Diceware-style list can be supplied
through the ``generator.wordlist_path`` setting.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

_BUNDLED_WORDS: tuple[str, ...] = (
    "river", "apple", "quantum", "velvet", "ember", "noble", "silver", "echo",
    "forest", "glider", "harbor", "ivory", "jungle", "kernel", "lunar", "magnet",
    "nectar", "omega", "prairie", "quartz", "raven", "solar", "tunnel", "utopia",
    "vortex", "willow", "xenon", "yonder", "zenith", "anchor", "brisk", "cinder",
    "dynamo", "ember", "fable", "galaxy", "harvest", "ion", "jovial", "keystone",
    "lagoon", "matrix", "nova", "orbit", "prism", "quiver", "ripple", "saber",
    "thrive", "union", "verge", "wander", "xerox", "yukon", "zephyr", "aurora",
    "binary", "cobalt", "drift", "ember", "fluent", "glyph", "halo", "influx",
    "jigsaw", "krypton", "legend", "mosaic", "nylon", "onyx", "paradox", "quasar",
    "rumble", "sage", "tundra", "uplink", "vector", "wisp", "xylem", "yodel",
    "zebra", "alpine", "blaze", "crimson", "delta", "ember", "fjord", "granite",
    "hazel", "indigo", "jet", "koi", "lilac", "merit", "nimbus", "opal",
    "pixel", "quill", "ranger", "sprout", "topaz", "ultra", "vista", "waltz",
    "xenial", "yarrow", "zen", "apex", "bravo", "cipher", "dawn", "ember",
    "flora", "gamma", "harbor", "ionic", "karma", "lumen", "mirth", "nectar",
    "oxide", "pioneer", "quaint", "ruin", "sable", "throne", "unity", "valor",
    "wander", "xeno", "yule", "zeno", "atlas", "brisket", "cedar", "dynamo",
    "ember", "flame", "glisten", "hexa", "iris", "juno", "khaki", "lotus",
    "mirage", "nebula", "onyx", "pebble", "quartz", "ripple", "sonar", "tango",
    "utah", "vintage", "willow", "xray", "yoga", "zinc", "alpha", "beta",
    "charlie", "delta", "echo", "foxtrot", "golf", "hotel", "india", "juliet",
    "kilo", "lima", "mike", "november", "oscar", "papa", "quebec", "romeo",
    "sierra", "tango", "uniform", "victor", "whiskey", "xray", "yankee", "zulu",
    "amber", "butter", "canyon", "daisy", "ember", "feather", "ginger", "harbor",
    "ivory", "jelly", "kiwi", "lemon", "mango", "nectar", "olive", "pearl",
    "quinoa", "rose", "sage", "thyme", "umber", "violet", "wheat", "xylan",
    "yuzu", "zest", "acorn", "breeze", "cloud", "dune", "ember", "frost",
    "glade", "honey", "island", "jade", "knight", "lantern", "meadow", "north",
    "oasis", "pine", "quiet", "ridge", "stone", "trail", "under", "valley",
    "wind", "xenia", "yacht", "zonal", "axis", "boulder", "comet", "drizzle",
    "ember", "flurry", "geyser", "harvest", "ink", "jasper", "karma", "lodge",
    "mesa", "nectar", "onyx", "prairie", "quiver", "ridge", "summit", "terra",
    "umber", "vista", "wild", "xeno", "yarn", "zebra",
)


class WordList(BaseModel):
    """Ordered, read-only sequence of lowercase words (duplicates allowed)."""

    model_config = ConfigDict(frozen=True)

    words: tuple[str, ...]

    @field_validator("words")
    @classmethod
    def _normalise(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        words = tuple(w.strip().lower() for w in v if w.strip())
        if not words:
            raise ValueError("Word list must contain at least one word")
        return words

    def __len__(self) -> int:
        return len(self.words)

    def __getitem__(self, index: int) -> str:
        return self.words[index]

    def __contains__(self, word: object) -> bool:
        return word in self.words

    @classmethod
    def from_file(cls, path: str | Path) -> WordList:
        """Load one word per line; blank lines and ``#`` comments are skipped."""
        lines = Path(path).read_text(encoding="utf-8").splitlines()
        return cls(words=tuple(
            line for line in lines if line.strip() and not line.lstrip().startswith("#")
        ))


BUNDLED_WORDLIST = WordList(words=_BUNDLED_WORDS)


def load_wordlist(path: str | Path | None = None) -> WordList:
    """The word list at *path*, or the bundled one when *path* is empty."""
    if not path:
        return BUNDLED_WORDLIST
    return WordList.from_file(path)
