"""Application-wide constants for the SVG sprite generator.

Constants are grouped into the following categories:
- SVG Constants: Namespaces and fixed markup emitted into every sprite
- Symbol Constants: Attribute handling when turning icons into symbols
- Icon Rendering Constants: Class names and geometry used by the icon renderer
- CLI Constants: Defaults for the command line tool
"""

# SVG constants
SVG_NAMESPACE = "http://www.w3.org/2000/svg"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'
# Attribution notice for Font Awesome Free, embedded as a comment by default
LICENSE_FREE = """
Font Awesome Free by @fontawesome - https://fontawesome.com
License - https://fontawesome.com/license (Icons: CC BY 4.0, Fonts: SIL OFL 1.1, Code: MIT License)
"""

# Symbol constants
# Attributes copied back onto a stripped <symbol>, in this order
ALLOWED_SYMBOL_ATTRIBUTES = ("viewBox", "aria-labelledby")
# Value recorded for a symbol attribute the rendered icon did not provide
MISSING_ATTRIBUTE_VALUE = "undefined"

# Icon rendering constants
FAMILY_PREFIX = "fa"
REPLACEMENT_CLASS = "svg-inline--fa"
UNITS_PER_EM = 16  # Base size used for fa-w-* width classes and transforms
UNIQUE_ID_SIZE = 12  # Length of generated title ids
UNIQUE_ID_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
HIDDEN_SYMBOL_STYLE = "display: none;"

# CLI constants
DEFAULT_CONFIG_PATH = "sprite.yaml"
DEFAULT_OUTPUT_PATH = "sprite.svg"
LOGGER_NAME = "fa_svg_sprite"
