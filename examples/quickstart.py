"""localestore Quick Start.

Loads two locale sources from a temporary directory and resolves plural
forms with the default and a French plural scheme.

Python 3.13+.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

from localestore import Localizer

with tempfile.TemporaryDirectory() as tmpdir:
    locale_dir = Path(tmpdir)
    (locale_dir / "en_CA.json").write_text(
        json.dumps({"TEXT_HOME": "Home", "TEXT_APPLE": ["apple", "apples", "applees"]}),
        encoding="utf-8",
    )
    (locale_dir / "fr_CA.json").write_text(
        json.dumps({"TEXT_HOME": "Accueil", "TEXT_APPLE": ["pomme", "pommes"]}),
        encoding="utf-8",
    )

    localizer = Localizer("en_CA")
    summary = localizer.load(locale_dir)
    print(summary)
    # Output: LoadSummary(total=2, ok=2, errors=0)

# Example 1: Simple lookup
print("=" * 50)
print("Example 1: Simple lookup")
print("=" * 50)

print(localizer.resolve("TEXT_HOME"))
# Output: Home

print(localizer.resolve("TEXT_MISSING"))
# Output: TEXT_MISSING

# Example 2: Default plural scheme (plural, singular, plural)
print("\n" + "=" * 50)
print("Example 2: Default plural scheme")
print("=" * 50)

for count in (0, 1, 3):
    print(count, localizer.resolve("TEXT_APPLE", count))
# Output: 0 apples / 1 apple / 3 apples

# Example 3: French treats zero as singular
print("\n" + "=" * 50)
print("Example 3: French plural scheme")
print("=" * 50)

localizer.set_code("fr_CA")
localizer.set_plural_scheme("fr_CA", ["singular", "singular", "plural"])
print(localizer.display_name, localizer.language_code, localizer.country_code)
# Output: français (Canada) fr CA

for count in (0, 1, 5):
    print(count, localizer.resolve("TEXT_APPLE", count))
# Output: 0 pomme / 1 pomme / 5 pommes

# Example 4: The "other" category reads the third form
print("\n" + "=" * 50)
print("Example 4: other category")
print("=" * 50)

localizer.set_code("en_CA")
localizer.set_plural_scheme("en_CA", ["other", "singular", "plural"])
print(localizer.resolve("TEXT_APPLE", 0))
# Output: applees
