"""Common literal values used across swatchbook.

These constants keep file names and template roles centralized so the loader,
builder, scaffolding, and tests can import the same values without drifting.
Intended for internal use within the swatchbook package.

Examples
--------
>>> from swatchbook import _constants
>>> _constants.TEMPLATE_NAME.format(role="header")
'_header.html'
>>> _constants.LEGACY_TEMPLATE_NAME.format(role="footer")
'footer.html'
"""

DEFAULT_CONFIG_NAME = "swatchbook_config.yml"
TEMPLATE_NAME = "_{role}.html"
LEGACY_TEMPLATE_NAME = "{role}.html"
TEMPLATE_ROLES = ("header", "footer")
INIT_COMMAND = "swatchbook init"
