# src/wcag_auditor/dom/color.py
"""
Color parsing and WCAG colorimetry for inline styles.

Only what can be read from a single `style` attribute is evaluated; there is
no cascade, inheritance or computed style. A color that cannot be parsed
yields None, which callers treat as "cannot assess" rather than a failure.
"""
import re
from typing import Dict, NamedTuple, Optional, Sequence

# CSS Color Module Level 4 named colors
NAMED_COLORS: Dict[str, str] = {
    'aliceblue': '#F0F8FF', 'antiquewhite': '#FAEBD7', 'aqua': '#00FFFF',
    'aquamarine': '#7FFFD4', 'azure': '#F0FFFF', 'beige': '#F5F5DC',
    'bisque': '#FFE4C4', 'black': '#000000', 'blanchedalmond': '#FFEBCD',
    'blue': '#0000FF', 'blueviolet': '#8A2BE2', 'brown': '#A52A2A',
    'burlywood': '#DEB887', 'cadetblue': '#5F9EA0', 'chartreuse': '#7FFF00',
    'chocolate': '#D2691E', 'coral': '#FF7F50', 'cornflowerblue': '#6495ED',
    'cornsilk': '#FFF8DC', 'crimson': '#DC143C', 'cyan': '#00FFFF',
    'darkblue': '#00008B', 'darkcyan': '#008B8B', 'darkgoldenrod': '#B8860B',
    'darkgray': '#A9A9A9', 'darkgreen': '#006400', 'darkgrey': '#A9A9A9',
    'darkkhaki': '#BDB76B', 'darkmagenta': '#8B008B', 'darkolivegreen': '#556B2F',
    'darkorange': '#FF8C00', 'darkorchid': '#9932CC', 'darkred': '#8B0000',
    'darksalmon': '#E9967A', 'darkseagreen': '#8FBC8F', 'darkslateblue': '#483D8B',
    'darkslategray': '#2F4F4F', 'darkslategrey': '#2F4F4F', 'darkturquoise': '#00CED1',
    'darkviolet': '#9400D3', 'deeppink': '#FF1493', 'deepskyblue': '#00BFFF',
    'dimgray': '#696969', 'dimgrey': '#696969', 'dodgerblue': '#1E90FF',
    'firebrick': '#B22222', 'floralwhite': '#FFFAF0', 'forestgreen': '#228B22',
    'fuchsia': '#FF00FF', 'gainsboro': '#DCDCDC', 'ghostwhite': '#F8F8FF',
    'gold': '#FFD700', 'goldenrod': '#DAA520', 'gray': '#808080',
    'green': '#008000', 'greenyellow': '#ADFF2F', 'grey': '#808080',
    'honeydew': '#F0FFF0', 'hotpink': '#FF69B4', 'indianred': '#CD5C5C',
    'indigo': '#4B0082', 'ivory': '#FFFFF0', 'khaki': '#F0E68C',
    'lavender': '#E6E6FA', 'lavenderblush': '#FFF0F5', 'lawngreen': '#7CFC00',
    'lemonchiffon': '#FFFACD', 'lightblue': '#ADD8E6', 'lightcoral': '#F08080',
    'lightcyan': '#E0FFFF', 'lightgoldenrodyellow': '#FAFAD2', 'lightgray': '#D3D3D3',
    'lightgreen': '#90EE90', 'lightgrey': '#D3D3D3', 'lightpink': '#FFB6C1',
    'lightsalmon': '#FFA07A', 'lightseagreen': '#20B2AA', 'lightskyblue': '#87CEFA',
    'lightslategray': '#778899', 'lightslategrey': '#778899', 'lightsteelblue': '#B0C4DE',
    'lightyellow': '#FFFFE0', 'lime': '#00FF00', 'limegreen': '#32CD32',
    'linen': '#FAF0E6', 'magenta': '#FF00FF', 'maroon': '#800000',
    'mediumaquamarine': '#66CDAA', 'mediumblue': '#0000CD', 'mediumorchid': '#BA55D3',
    'mediumpurple': '#9370DB', 'mediumseagreen': '#3CB371', 'mediumslateblue': '#7B68EE',
    'mediumspringgreen': '#00FA9A', 'mediumturquoise': '#48D1CC', 'mediumvioletred': '#C71585',
    'midnightblue': '#191970', 'mintcream': '#F5FFFA', 'mistyrose': '#FFE4E1',
    'moccasin': '#FFE4B5', 'navajowhite': '#FFDEAD', 'navy': '#000080',
    'oldlace': '#FDF5E6', 'olive': '#808000', 'olivedrab': '#6B8E23',
    'orange': '#FFA500', 'orangered': '#FF4500', 'orchid': '#DA70D6',
    'palegoldenrod': '#EEE8AA', 'palegreen': '#98FB98', 'paleturquoise': '#AFEEEE',
    'palevioletred': '#DB7093', 'papayawhip': '#FFEFD5', 'peachpuff': '#FFDAB9',
    'peru': '#CD853F', 'pink': '#FFC0CB', 'plum': '#DDA0DD',
    'powderblue': '#B0E0E6', 'purple': '#800080', 'rebeccapurple': '#663399',
    'red': '#FF0000', 'rosybrown': '#BC8F8F', 'royalblue': '#4169E1',
    'saddlebrown': '#8B4513', 'salmon': '#FA8072', 'sandybrown': '#F4A460',
    'seagreen': '#2E8B57', 'seashell': '#FFF5EE', 'sienna': '#A0522D',
    'silver': '#C0C0C0', 'skyblue': '#87CEEB', 'slateblue': '#6A5ACD',
    'slategray': '#708090', 'slategrey': '#708090', 'snow': '#FFFAFA',
    'springgreen': '#00FF7F', 'steelblue': '#4682B4', 'tan': '#D2B48C',
    'teal': '#008080', 'thistle': '#D8BFD8', 'tomato': '#FF6347',
    'turquoise': '#40E0D0', 'violet': '#EE82EE', 'wheat': '#F5DEB3',
    'white': '#FFFFFF', 'whitesmoke': '#F5F5F5', 'yellow': '#FFFF00',
    'yellowgreen': '#9ACD32',
}

HEX6_PATTERN = re.compile(r'^#([0-9a-f]{6})$', re.IGNORECASE)
HEX3_PATTERN = re.compile(r'^#([0-9a-f]{3})$', re.IGNORECASE)
RGB_PATTERN = re.compile(r'^rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*[\d.]+%?\s*)?\)$', re.IGNORECASE)

# Image layers and custom properties hide the painted color behind the text
UNASSESSABLE_BACKGROUND_PATTERN = re.compile(
    r'\b(?:url|var|image-set|image|element|cross-fade|(?:repeating-)?(?:linear|radial|conic)-gradient)\s*\(',
    re.IGNORECASE
)

# Candidate color tokens inside a `background` shorthand
COLOR_TOKEN_PATTERN = re.compile(r'rgba?\([^)]*\)|#[0-9a-f]+\b|[a-z]+', re.IGNORECASE)

FONT_SIZE_PATTERN = re.compile(r'^([\d.]+)\s*(px|pt|em|rem)\b', re.IGNORECASE)

BOLD_TAGS = {'h1', 'h2', 'h3', 'strong', 'b'}


class RGB(NamedTuple):
    r: int
    g: int
    b: int


def parse_color(color: Optional[str]) -> Optional[RGB]:
    """
    Parses a CSS color string into an RGB triple (0-255).

    Accepts #RRGGBB, #RGB, rgb()/rgba() (alpha ignored) and named colors.
    Returns None for anything else: currentColor, gradients, var() ...
    """
    if not color:
        return None
    color = color.strip().lower()
    color = NAMED_COLORS.get(color, color)

    match = HEX6_PATTERN.match(color)
    if match:
        value = match.group(1)
        return RGB(int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))

    match = HEX3_PATTERN.match(color)
    if match:
        value = match.group(1)
        return RGB(int(value[0] * 2, 16), int(value[1] * 2, 16), int(value[2] * 2, 16))

    match = RGB_PATTERN.match(color)
    if match:
        return RGB(*(min(255, int(channel)) for channel in match.groups()))

    return None


def parse_background_color(value: Optional[str]) -> Optional[RGB]:
    """
    Returns the first token of a `background` shorthand that parses as a color.
    A shorthand with an image, gradient or var() layer yields None.
    """
    if not value or UNASSESSABLE_BACKGROUND_PATTERN.search(value):
        return None
    for token in COLOR_TOKEN_PATTERN.findall(value):
        rgb = parse_color(token)
        if rgb is not None:
            return rgb
    return None


def relative_luminance(rgb: Sequence[int]) -> float:
    """WCAG 2.x relative luminance of an sRGB color, in [0, 1]."""
    channels = []
    for value in rgb[:3]:
        srgb = value / 255
        if srgb <= 0.04045:
            channels.append(srgb / 12.92)
        else:
            channels.append(((srgb + 0.055) / 1.055) ** 2.4)
    return 0.2126 * channels[0] + 0.7152 * channels[1] + 0.0722 * channels[2]


def contrast_ratio(rgb1: Sequence[int], rgb2: Sequence[int]) -> float:
    """Contrast ratio between two colors, from 1.0 to 21.0."""
    l1 = relative_luminance(rgb1)
    l2 = relative_luminance(rgb2)
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def parse_inline_style(style: Optional[str]) -> Dict[str, str]:
    """
    Splits a `style` attribute into {property: value}.
    Property names are lowercased, `!important` is dropped, last declaration wins.
    """
    declarations: Dict[str, str] = {}
    if not style:
        return declarations
    for declaration in style.split(';'):
        if ':' not in declaration:
            continue
        prop, value = declaration.split(':', 1)
        prop = prop.strip().lower()
        value = re.sub(r'!\s*important\s*$', '', value.strip(), flags=re.IGNORECASE).strip()
        if prop and value:
            declarations[prop] = value
    return declarations


def font_size_in_points(value: Optional[str]) -> Optional[float]:
    """
    Converts a font-size to points: px * 0.75, em/rem * 12 (assumes a 16px base).
    Keywords and percentages are not converted.
    """
    if not value:
        return None
    match = FONT_SIZE_PATTERN.match(value.strip())
    if not match:
        return None
    try:
        size = float(match.group(1))
    except ValueError:
        return None
    unit = match.group(2).lower()
    if unit == 'pt':
        return size
    if unit == 'px':
        return size * 0.75
    return size * 12


def is_bold(style: Dict[str, str], tag_name: str) -> bool:
    if (tag_name or '').lower() in BOLD_TAGS:
        return True
    weight = style.get('font-weight', '').strip().lower()
    if weight == 'bold':
        return True
    return weight.isdigit() and int(weight) >= 700


def is_large_text(style: Dict[str, str], tag_name: str) -> bool:
    """
    WCAG large text: at least 18pt, or at least 14pt and bold.
    Without a font-size the text is treated as normal sized.
    """
    size = font_size_in_points(style.get('font-size'))
    if size is None:
        return False
    return size >= 18 or (size >= 14 and is_bold(style, tag_name))
