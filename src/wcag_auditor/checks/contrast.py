# src/wcag_auditor/checks/contrast.py
from html import escape

from ..dom.color import (
    contrast_ratio,
    is_large_text,
    parse_background_color,
    parse_color,
    parse_inline_style,
)
from ..dom.core import get_attr, opening_tag
from ..dom.models import HTMLDocument
from ..model import CheckResult
from .base import BaseChecker

NORMAL_TEXT_RATIO = 4.5
LARGE_TEXT_RATIO = 3.0


class ColorContrastChecker(BaseChecker):
    """
    WCAG 1.4.3 Contrast (Minimum).

    Evaluates every element whose inline style declares both a foreground and
    a background color. Elements missing either color, or using a color that
    cannot be parsed, are skipped: without both there is nothing to assess.
    """
    option_key = "check_contrast"
    criteria = ("1.4.3",)

    def check(self, doc: HTMLDocument) -> CheckResult:
        errors, warnings = [], []

        for element in doc.find_all(style=True):
            style = parse_inline_style(get_attr(element, "style"))

            fg_value = style.get("color")
            bg_value = style.get("background-color")
            if bg_value is not None:
                bg_rgb = parse_color(bg_value)
            else:
                bg_value = style.get("background")
                bg_rgb = parse_background_color(bg_value)

            fg_rgb = parse_color(fg_value)
            if fg_rgb is None or bg_rgb is None:
                continue

            ratio = contrast_ratio(fg_rgb, bg_rgb)
            large = is_large_text(style, element.name)
            required = LARGE_TEXT_RATIO if large else NORMAL_TEXT_RATIO

            if ratio < required:
                text = element.get_text()
                if len(text) > 50:
                    text = text[:50] + "..."
                errors.append(self.error(
                    "1.4.3",
                    "Insufficient color contrast ratio %.2f:1 (required %.1f:1 for %s text). "
                    "Foreground: %s, Background: %s." % (
                        ratio, required, "large" if large else "normal", fg_value, bg_value
                    ),
                    "Increase the contrast between text and background colors to meet WCAG 2.1 AA requirements.",
                    element=opening_tag(element) + escape(text, quote=True),
                    contrast_ratio=round(ratio, 2),
                    required_ratio=required
                ))

        return CheckResult(errors, warnings)
