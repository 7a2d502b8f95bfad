"""Common literal values used across awesome_readme.

These constants keep default paths, the remote companies URL, and the badge
markup centralized so the CLI, builders, and tests agree on the same values.
Intended for internal use within the awesome_readme package.

Examples
--------
>>> from awesome_readme import _constants
>>> _constants.DEFAULT_MODULES_PATH.name
'modules.yml'
>>> _constants.OFFICIAL_BADGE.endswith("[official]")
True
"""

from pathlib import Path

COMPANIES_URL = (
    "https://raw.githubusercontent.com/moleculerjs/site/master/source/_data/companies.yml"
)
DEFAULT_COMPANIES_PATH = Path("companies.yml")
DEFAULT_MODULES_PATH = Path("modules.yml")
DEFAULT_TEMPLATE_PATH = Path(__file__).parent / "templates" / "readme.md.jinja"
DEFAULT_OUTPUT_PATH = Path("README.generated.md")
DEFAULT_TIMEOUT = 30.0
OFFICIAL_BADGE = "![Official Moleculer Module][official]"
